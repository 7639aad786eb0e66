"""Test hssmodel.chem.derived module."""

from __future__ import annotations

import dataclasses

import numpy as np
import pytest

from hssmodel import (
    Reaction,
    SteadyState,
    nox_lifetime,
    nox_loss,
    ozone_production,
    ozone_production_efficiency,
)
from hssmodel.chem import rates


def test_nox_lifetime_scenario(scenario_state: SteadyState) -> None:
    """Lifetimes are positive and combine as a harmonic sum."""
    tau = nox_lifetime(scenario_state)
    assert set(tau) == {"total", "hno3", "ans"}
    assert all(v > 0.0 for v in tau.values())
    assert tau["total"] == pytest.approx((1.0 / tau["hno3"] + 1.0 / tau["ans"]) ** -1, rel=1e-12)
    assert tau["total"] < min(tau["hno3"], tau["ans"])

    # A few hours at 5 ppb NOx
    assert 0.5 < tau["total"] < 24.0


def test_nox_lifetime_hno3_closed_form(scenario_state: SteadyState) -> None:
    """The HNO3 lifetime is NOx over the OH + NO2 loss, in hours."""
    state = scenario_state
    k = state.rates[Reaction.OH_NO2]
    expected = state.nox / (k * state.oh * state.no2 * 3600.0)
    assert nox_lifetime(state)["hno3"] == pytest.approx(expected, rel=1e-12)


def test_nox_lifetime_total_matches_nox_loss(scenario_state: SteadyState) -> None:
    """The total lifetime is the NOx burden over the NOx loss rate."""
    expected = scenario_state.nox / nox_loss(scenario_state) / 3600.0
    assert nox_lifetime(scenario_state)["total"] == pytest.approx(expected, rel=1e-12)


def test_nox_lifetime_without_alkyl_nitrates(scenario_state: SteadyState) -> None:
    """With no alkyl nitrate branching, only HNO3 formation removes NOx."""
    state = dataclasses.replace(scenario_state, branching_ratio=0.0)
    tau = nox_lifetime(state)
    assert np.isinf(tau["ans"])
    assert tau["total"] == pytest.approx(tau["hno3"], rel=1e-12)


def test_nox_lifetime_effective_rates(scenario_state: SteadyState) -> None:
    """Effective rates use k4 and the k2eff-derived RO2 + NO rate."""
    state = scenario_state
    config = state.config
    tau = nox_lifetime(state, effective_rates=True)

    expected_hno3 = state.nox / (config.k4 * state.oh * state.no2 * 3600.0)
    assert tau["hno3"] == pytest.approx(expected_hno3, rel=1e-12)

    k_RO2NO = 2.0 * config.k2eff - rates.rate_HO2_NO(config.T)
    expected_ans = state.nox / (state.branching_ratio * k_RO2NO * state.ro2 * state.no * 3600.0)
    assert tau["ans"] == pytest.approx(expected_ans, rel=1e-12)

    assert tau["hno3"] != pytest.approx(nox_lifetime(state)["hno3"], rel=1e-3)


def test_ozone_production(scenario_state: SteadyState) -> None:
    """Ozone production counts every NO to NO2 conversion by peroxy radicals."""
    state = scenario_state
    k_RO2NO = state.rates[Reaction.RO2_NO]
    k_HO2NO = state.rates[Reaction.HO2_NO]
    expected = (1.0 - state.branching_ratio) * k_RO2NO * state.ro2 * state.no + (
        k_HO2NO * state.ho2 * state.no
    )
    assert ozone_production(state) == pytest.approx(expected, rel=1e-12)
    assert ozone_production(state) > 0.0


def test_nox_loss(scenario_state: SteadyState) -> None:
    """NOx loss sums HNO3 and alkyl nitrate formation."""
    state = scenario_state
    expected = (
        state.rates[Reaction.OH_NO2] * state.no2 * state.oh
        + state.branching_ratio * state.rates[Reaction.RO2_NO] * state.ro2 * state.no
    )
    assert nox_loss(state) == pytest.approx(expected, rel=1e-12)


def test_ozone_production_efficiency(scenario_state: SteadyState) -> None:
    """OPE is the ratio of ozone production to NOx loss."""
    ope = ozone_production_efficiency(scenario_state)
    assert ope == pytest.approx(ozone_production(scenario_state) / nox_loss(scenario_state))
    assert 1.0 < ope < 100.0
