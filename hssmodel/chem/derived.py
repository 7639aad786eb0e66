"""Quantities derived from a solved :class:`~hssmodel.chem.steady_state.SteadyState`."""

from __future__ import annotations

import numpy as np

from hssmodel.chem import rates
from hssmodel.chem.rates import Reaction
from hssmodel.chem.steady_state import SteadyState
from hssmodel.physics import units


def nox_lifetime(state: SteadyState, effective_rates: bool = False) -> dict[str, float]:
    """Compute NOx lifetimes from a steady state result.

    Parameters
    ----------
    state : SteadyState
        Solved steady state.
    effective_rates : bool, optional
        If True, use the effective rate constants of the analytic model instead of
        ``state.rates``: ``config.k4`` for OH + NO2 and ``2 * config.k2eff - k_HO2NO``
        for RO2 + NO. By default, False.

    Returns
    -------
    dict[str, float]
        Lifetimes in hours, keyed by

        - ``"total"``: overall lifetime
        - ``"hno3"``: lifetime with respect to loss to HNO3
        - ``"ans"``: lifetime with respect to loss to alkyl nitrates

        ``"ans"`` is infinite when the branching ratio is zero.

    Notes
    -----
    Murphy et al. (2006) define ``k2eff`` as the effective rate of NO oxidation by
    peroxy radicals,
    ::

        k2eff = ([HO2] k_HO2NO + sum_i k_RO2NO_i [RO2]_i) / ([HO2] + sum_i [RO2]_i)

    With [HO2] = sum_i [RO2]_i this reduces to ``k_RO2NO = 2 * k2eff - k_HO2NO``,
    which is what ``effective_rates=True`` uses.
    """
    if effective_rates:
        k_OHNO2 = state.config.k4
        k_RO2NO = 2.0 * state.config.k2eff - rates.rate_HO2_NO(state.config.T)
    else:
        k_OHNO2 = state.rates[Reaction.OH_NO2]
        k_RO2NO = state.rates[Reaction.RO2_NO]

    nox = np.float64(state.nox)
    hno3_loss = k_OHNO2 * state.oh * state.no2
    ans_loss = state.branching_ratio * k_RO2NO * state.ro2 * state.no

    with np.errstate(divide="ignore"):
        tau_hno3 = units.seconds_to_hours(nox / np.float64(hno3_loss))
        tau_ans = units.seconds_to_hours(nox / np.float64(ans_loss))
        tau = 1.0 / (1.0 / tau_hno3 + 1.0 / tau_ans)

    return {"total": float(tau), "hno3": float(tau_hno3), "ans": float(tau_ans)}


def ozone_production(state: SteadyState) -> float:
    """Compute the ozone production rate, [:math:`molec \\ cm^{-3} \\ s^{-1}`].

    Every RO2 + NO reaction that does not form an alkyl nitrate and every
    HO2 + NO reaction converts NO to NO2, which photolyzes to make ozone.
    """
    k_RO2NO = state.rates[Reaction.RO2_NO]
    k_HO2NO = state.rates[Reaction.HO2_NO]
    alpha = state.branching_ratio

    return (1.0 - alpha) * k_RO2NO * state.ro2 * state.no + k_HO2NO * state.ho2 * state.no


def nox_loss(state: SteadyState) -> float:
    """Compute the NOx loss rate to HNO3 and alkyl nitrates.

    Returns the rate in [:math:`molec \\ cm^{-3} \\ s^{-1}`].
    """
    k_RO2NO = state.rates[Reaction.RO2_NO]
    k_OHNO2 = state.rates[Reaction.OH_NO2]
    alpha = state.branching_ratio

    return k_OHNO2 * state.no2 * state.oh + alpha * k_RO2NO * state.ro2 * state.no


def ozone_production_efficiency(state: SteadyState) -> float:
    """Compute the ozone production efficiency.

    This is the number of ozone molecules produced per NOx molecule lost,
    ``ozone_production(state) / nox_loss(state)``.
    """
    return ozone_production(state) / nox_loss(state)
