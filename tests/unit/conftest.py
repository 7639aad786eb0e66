"""Shared fixtures for the steady state model tests."""

from __future__ import annotations

import numpy as np
import pytest

from hssmodel import SolverConfig, SteadyState, solve_nox
from hssmodel.physics import constants, units


@pytest.fixture(scope="module")
def rng() -> np.random.Generator:
    """Get random number generator."""
    return np.random.default_rng(12345)


@pytest.fixture(scope="session")
def scenario_config() -> SolverConfig:
    """Configuration at 298 K and surface pressure.

    Scoped for the session.

    Returns
    -------
    SolverConfig
    """
    return SolverConfig.from_pressure(T=298.0, p=constants.p_surface)


@pytest.fixture(scope="session")
def scenario_inputs(scenario_config: SolverConfig) -> dict[str, float]:
    """Inputs of the documented example: 5 ppb NOx, 2.5 ppb/hr P(HOx), 5.8 s^-1 VOCR.

    Returns
    -------
    dict[str, float]
    """
    M = scenario_config.M
    return {
        "nox": units.ppb_to_number_density(5.0, M),
        "production_rate": units.per_hour_to_per_second(units.ppb_to_number_density(2.5, M)),
        "reactivity": 5.8,
        "branching_ratio": 0.04,
    }


@pytest.fixture(scope="session")
def scenario_state(scenario_config: SolverConfig, scenario_inputs: dict[str, float]) -> SteadyState:
    """Solved steady state for the documented example.

    Scoped for the session.

    Returns
    -------
    SteadyState
    """
    return solve_nox(**scenario_inputs, no2_to_no_ratio=4.0, config=scenario_config)
