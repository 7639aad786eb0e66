"""Analytic OH model of Murphy et al. (2006).

Assuming that RO2 and HO2 are in steady state with each other and that every
RO2 goes on to produce HO2 (so [RO2] = [HO2]), the HOx budget reduces to a
quadratic in [OH]. The positive root is used both as a model in its own right
and to seed :func:`hssmodel.chem.steady_state.solve`.

References
----------
- Murphy et al. 2006, "The weekend effect within and downwind of Sacramento:
  Part 2. Observational evidence for chemical and dynamical contributions",
  doi:10.5194/acpd-6-11971-2006, Eqs. 3-5
"""

from __future__ import annotations

from typing import Any

import numpy as np

from hssmodel.chem.chem_params import SolverConfig
from hssmodel.chem.exceptions import NumericDomainError, PreconditionViolation
from hssmodel.chem.validation import fraction_guard, positive_guard
from hssmodel.utils.types import ArrayScalarLike


def nox_to_no_and_no2(
    nox: ArrayScalarLike, no2_to_no_ratio: float = 4.0
) -> tuple[ArrayScalarLike, ArrayScalarLike]:
    """Split NOx into NO and NO2 with a fixed NO2:NO ratio.

    Parameters
    ----------
    nox : ArrayScalarLike
        NOx number density, [:math:`molec \\ cm^{-3}`]
    no2_to_no_ratio : float, optional
        Ratio of NO2 to NO. By default, 4.

    Returns
    -------
    tuple[ArrayScalarLike, ArrayScalarLike]
        NO and NO2 number densities.
    """
    positive_guard("no2_to_no_ratio", no2_to_no_ratio)
    if np.any(np.asarray(nox) < 0.0):
        raise PreconditionViolation(f"nox must be non-negative, got {nox}")

    no = nox / (no2_to_no_ratio + 1.0)
    no2 = nox * no2_to_no_ratio / (no2_to_no_ratio + 1.0)
    return no, no2


def initial_oh_estimate(
    no: ArrayScalarLike,
    no2: ArrayScalarLike,
    production_rate: ArrayScalarLike,
    reactivity: ArrayScalarLike,
    branching_ratio: ArrayScalarLike,
    k4: float,
    k2eff: float,
    k5eff: float,
) -> ArrayScalarLike:
    r"""Estimate [OH] from the Murphy et al. quadratic.

    The quadratic ``a [OH]^2 + b [OH] + c = 0`` has coefficients
    ::

        a = 6 * k5eff * (reactivity / (k2eff * no))^2
        b = k4 * no2 + branching_ratio * reactivity
        c = -production_rate

    Parameters
    ----------
    no, no2 : ArrayScalarLike
        NO and NO2 number densities, [:math:`molec \ cm^{-3}`]
    production_rate : ArrayScalarLike
        HOx production rate, [:math:`molec \ cm^{-3} \ s^{-1}`]
    reactivity : ArrayScalarLike
        VOC OH reactivity, [:math:`s^{-1}`]
    branching_ratio : ArrayScalarLike
        RO2 + NO alkyl nitrate branching ratio, [:math:`0 - 1`]
    k4 : float
        OH + NO2 rate constant, [:math:`cm^3 \ molec^{-1} \ s^{-1}`]
    k2eff : float
        Effective RO2 + NO rate constant, [:math:`cm^3 \ molec^{-1} \ s^{-1}`]
    k5eff : float
        Effective peroxy self reaction rate constant, [:math:`cm^3 \ molec^{-1} \ s^{-1}`]

    Returns
    -------
    ArrayScalarLike
        Positive root of the quadratic, [:math:`molec \ cm^{-3}`]

    Raises
    ------
    PreconditionViolation
        If ``no``, ``production_rate``, ``reactivity`` or any rate constant is
        not strictly positive, if ``no2`` is negative, or if ``branching_ratio``
        is outside [0, 1].
    NumericDomainError
        If the discriminant is negative or the root is not finite and positive,
        for example when a vanishing ``no`` overflows ``a``.

    Notes
    -----
    The positive root is evaluated as ``-2c / (b + sqrt(b^2 - 4ac))``. This is
    algebraically identical to ``(-b + sqrt(b^2 - 4ac)) / 2a`` but does not lose
    precision when ``4ac`` is small next to ``b^2`` (high NOx).
    """
    positive_guard("no", no)
    positive_guard("production_rate", production_rate)
    positive_guard("reactivity", reactivity)
    positive_guard("k4", k4)
    positive_guard("k2eff", k2eff)
    positive_guard("k5eff", k5eff)
    fraction_guard("branching_ratio", branching_ratio)
    if np.any(np.asarray(no2) < 0.0):
        raise PreconditionViolation(f"no2 must be non-negative, got {no2}")

    a = 6.0 * k5eff * (reactivity / (k2eff * no)) ** 2
    b = k4 * no2 + branching_ratio * reactivity
    c = -production_rate

    discriminant = b**2 - 4.0 * a * c
    if np.any(np.asarray(discriminant) < 0.0):
        raise NumericDomainError(f"Negative discriminant in OH estimate: {discriminant}")

    oh = -2.0 * c / (b + np.sqrt(discriminant))
    if not np.all(np.isfinite(oh) & (oh > 0.0)):
        raise NumericDomainError(f"OH estimate is not finite and positive: {oh}")
    return oh


def analytic_oh(
    no: ArrayScalarLike,
    no2: ArrayScalarLike,
    production_rate: ArrayScalarLike = 6.25e6,
    reactivity: ArrayScalarLike = 5.8,
    branching_ratio: ArrayScalarLike = 0.04,
    config: SolverConfig | None = None,
) -> ArrayScalarLike:
    """Compute [OH] with the analytic model of Murphy et al. (2006).

    All concentrations are in [:math:`molec \\ cm^{-3}`].

    Parameters
    ----------
    no, no2 : ArrayScalarLike
        NO and NO2 number densities
    production_rate : ArrayScalarLike, optional
        HOx production rate, [:math:`molec \\ cm^{-3} \\ s^{-1}`]. By default, 6.25e6.
    reactivity : ArrayScalarLike, optional
        VOC OH reactivity, [:math:`s^{-1}`]. By default, 5.8.
    branching_ratio : ArrayScalarLike, optional
        RO2 + NO alkyl nitrate branching ratio. By default, 0.04.
    config : SolverConfig | None, optional
        Supplies ``k4``, ``k2eff`` and ``k5eff``. Defaults to :class:`SolverConfig`.

    Returns
    -------
    ArrayScalarLike
        OH number density
    """
    config = config or SolverConfig()
    return initial_oh_estimate(
        no,
        no2,
        production_rate,
        reactivity,
        branching_ratio,
        k4=config.k4,
        k2eff=config.k2eff,
        k5eff=config.k5eff,
    )


def analytic_oh_nox(
    nox: ArrayScalarLike, no2_to_no_ratio: float = 4.0, **kwargs: Any
) -> ArrayScalarLike:
    """Compute [OH] with :func:`analytic_oh` from total NOx.

    Parameters
    ----------
    nox : ArrayScalarLike
        NOx number density, [:math:`molec \\ cm^{-3}`]
    no2_to_no_ratio : float, optional
        Ratio of NO2 to NO. By default, 4.
    **kwargs : Any
        Passed into :func:`analytic_oh`.

    Returns
    -------
    ArrayScalarLike
        OH number density
    """
    no, no2 = nox_to_no_and_no2(nox, no2_to_no_ratio)
    return analytic_oh(no, no2, **kwargs)
