"""Test hssmodel.physics.units and hssmodel.physics.thermo modules."""

from __future__ import annotations

import numpy as np
import pytest
import scipy.constants
import xarray as xr

from hssmodel.physics import constants, thermo, units


def test_ppb_number_density(rng: np.random.Generator) -> None:
    """Check ppb conversions agree with the mole fraction definition."""
    M = rng.uniform(5e18, 2.6e19, 1000)
    ppb = rng.uniform(0.0, 100.0, 1000)

    n = units.ppb_to_number_density(ppb, M)
    np.testing.assert_allclose(n, ppb * 1e-9 * M)
    np.testing.assert_allclose(units.number_density_to_ppb(n, M), ppb)


def test_ppt_is_thousandth_of_ppb() -> None:
    """One ppb is a thousand ppt."""
    M = 2e19
    assert units.ppt_to_number_density(1000.0, M) == pytest.approx(
        units.ppb_to_number_density(1.0, M)
    )
    assert units.number_density_to_ppt(M / constants.ppt_reference_density, M) == pytest.approx(1.0)


def test_time_conversions() -> None:
    """Per hour rates and durations in hours."""
    assert units.per_hour_to_per_second(3600.0) == 1.0
    assert units.per_second_to_per_hour(1.0) == 3600.0
    assert units.seconds_to_hours(7200.0) == 2.0


def test_air_number_density() -> None:
    """Surface air at 298 K holds about 2.46e19 molecules per cm^3."""
    M = thermo.air_number_density(298.0, constants.p_surface)
    assert M == pytest.approx(2.46e19, rel=0.01)

    # Agrees with p / (k_B T)
    k_B = scipy.constants.k
    assert M == pytest.approx(constants.p_surface / (k_B * 298.0) * 1e-6, rel=1e-3)


def test_air_number_density_xarray() -> None:
    """Thermodynamic functions pass xarray objects through."""
    p = xr.DataArray([25000.0, 50000.0, 100000.0], dims="level")
    T = xr.DataArray([220.0, 250.0, 290.0], dims="level")
    M = thermo.air_number_density(T, p)
    assert isinstance(M, xr.DataArray)
    assert np.all(np.diff(M.values) > 0.0)


def test_water_number_density() -> None:
    """Water from mole fraction and from specific humidity agree roughly."""
    T = 298.0
    p = constants.p_surface
    M = thermo.air_number_density(T, p)

    q = 0.01
    rh = q * constants.M_d / constants.M_v
    np.testing.assert_allclose(
        thermo.water_number_density_from_q(q, T, p), thermo.water_number_density(rh, M), rtol=1e-12
    )
