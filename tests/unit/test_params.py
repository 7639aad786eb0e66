"""Test SolverConfig and ModelParams."""

from __future__ import annotations

import dataclasses

import pytest

from hssmodel import PreconditionViolation, SolverConfig
from hssmodel.core.params import ModelParams
from hssmodel.physics import constants, thermo


def test_defaults() -> None:
    """Defaults match the published parameter set."""
    config = SolverConfig()
    assert config.T == 298.0
    assert config.M == 2e19
    assert config.rh == 0.01
    assert config.k_RO2NO == 8e-12
    assert config.k_RO2HO2 == 8e-12
    assert config.k_RO2RO2 == 6.8e-14
    assert config.k4 == 1.1e-11
    assert config.k2eff == 8e-12
    assert config.k5eff == 5e-12
    assert config.H2O == pytest.approx(2e17)
    assert isinstance(config, ModelParams)


def test_frozen() -> None:
    """Configurations are immutable."""
    config = SolverConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.T = 300.0  # type: ignore[misc]


def test_override_and_replace() -> None:
    """Each field can be overridden on its own."""
    config = SolverConfig(k5eff=4e-12)
    assert config.k5eff == 4e-12
    assert config.k4 == SolverConfig().k4

    warmer = config.replace(T=310.0)
    assert warmer.T == 310.0
    assert warmer.k5eff == 4e-12
    assert config.T == 298.0

    with pytest.raises(PreconditionViolation, match="T must be positive"):
        config.replace(T=-1.0)


@pytest.mark.parametrize(
    ("field", "value", "match"),
    [
        ("T", 0.0, "T must be positive"),
        ("M", -2e19, "M must be positive"),
        ("k_RO2NO", 0.0, "k_RO2NO must be positive"),
        ("k2eff", -8e-12, "k2eff must be positive"),
        ("rh", 1.5, r"rh must be in \[0, 1\]"),
        ("rh", -0.01, r"rh must be in \[0, 1\]"),
        ("k4", float("nan"), "k4 must be finite"),
        ("M", float("inf"), "M must be finite"),
    ],
)
def test_validation(field: str, value: float, match: str) -> None:
    """Invalid fields raise PreconditionViolation."""
    with pytest.raises(PreconditionViolation, match=match):
        SolverConfig(**{field: value})


def test_dry_air_is_allowed() -> None:
    """A zero water mole fraction is valid."""
    assert SolverConfig(rh=0.0).H2O == 0.0


def test_as_dict() -> None:
    """as_dict returns every field."""
    d = SolverConfig(T=280.0).as_dict()
    assert list(d) == [f.name for f in dataclasses.fields(SolverConfig)]
    assert d["T"] == 280.0


def test_from_pressure() -> None:
    """M is computed from the ideal gas law."""
    config = SolverConfig.from_pressure(T=298.0, p=constants.p_surface, rh=0.02)
    assert config.M == thermo.air_number_density(298.0, constants.p_surface)
    assert config.M == pytest.approx(2.46e19, rel=0.01)
    assert config.rh == 0.02

    with pytest.raises(TypeError, match="M"):
        SolverConfig.from_pressure(T=298.0, p=constants.p_surface, M=2e19)

    with pytest.raises(PreconditionViolation):
        SolverConfig.from_pressure(T=298.0, p=0.0)
