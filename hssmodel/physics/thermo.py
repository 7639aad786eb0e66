"""Thermodynamic relationships."""

from __future__ import annotations

from hssmodel.physics import constants
from hssmodel.utils.types import ArrayScalarLike

# -------------------
# Material Properties
# -------------------


def rho_d(T: ArrayScalarLike, p: ArrayScalarLike) -> ArrayScalarLike:
    r"""Calculate air density for (T, p) assuming dry air.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    p : ArrayScalarLike
        Pressure, [:math:`Pa`]

    Returns
    -------
    ArrayScalarLike
        Air density of dry air, [:math:`kg \ m^{-3}`]
    """
    return p / (constants.R_d * T)


# ---------------
# Number Density
# ---------------


def air_number_density(T: ArrayScalarLike, p: ArrayScalarLike) -> ArrayScalarLike:
    r"""Calculate the number density of air from the ideal gas law.

    This is the ``M`` of the kinetic rate expressions.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    p : ArrayScalarLike
        Pressure, [:math:`Pa`]

    Returns
    -------
    ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Examples
    --------
    >>> from hssmodel.physics import thermo
    >>> round(thermo.air_number_density(298.0, 101325.0) / 1e19, 3)
    2.463
    """
    # 1e-6 converts from m^-3 to cm^-3
    return (constants.N_A / constants.M_d) * rho_d(T, p) * 1e-6


def water_number_density(rh: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Calculate the number density of water from its mole fraction.

    Parameters
    ----------
    rh : ArrayScalarLike
        Water vapor mole fraction, [:math:`mol \ mol^{-1}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Number density of water, [:math:`molec \ cm^{-3}`]
    """
    return rh * M


def water_number_density_from_q(
    q: ArrayScalarLike, T: ArrayScalarLike, p: ArrayScalarLike
) -> ArrayScalarLike:
    r"""Calculate the number density of water from specific humidity.

    Parameters
    ----------
    q : ArrayScalarLike
        Specific humidity, [:math:`kg \ kg^{-1}`]
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    p : ArrayScalarLike
        Pressure, [:math:`Pa`]

    Returns
    -------
    ArrayScalarLike
        Number density of water, [:math:`molec \ cm^{-3}`]
    """
    return (q / constants.M_v) * constants.N_A * rho_d(T, p) * 1e-6
