r"""Unit conversion support.

Concentrations are number densities in [:math:`molec \ cm^{-3}`] throughout
:mod:`hssmodel`. The functions here convert to and from mixing ratios and
between per-hour and per-second rates.
"""

from __future__ import annotations

from hssmodel.physics import constants
from hssmodel.utils.types import ArrayScalarLike


def mixing_ratio_to_number_density(x: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a mole fraction to a number density.

    Parameters
    ----------
    x : ArrayScalarLike
        Mole fraction, [:math:`mol \ mol^{-1}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]

    See Also
    --------
    number_density_to_mixing_ratio
    """
    return x * M


def number_density_to_mixing_ratio(n: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a number density to a mole fraction.

    Parameters
    ----------
    n : ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Mole fraction, [:math:`mol \ mol^{-1}`]
    """
    return n / M


def ppb_to_number_density(ppb: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a mixing ratio in parts per billion to a number density.

    Parameters
    ----------
    ppb : ArrayScalarLike
        Mixing ratio, [:math:`ppb`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]
    """
    return mixing_ratio_to_number_density(ppb * constants.ppb, M)


def number_density_to_ppb(n: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a number density to a mixing ratio in parts per billion.

    Parameters
    ----------
    n : ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Mixing ratio, [:math:`ppb`]
    """
    return number_density_to_mixing_ratio(n, M) / constants.ppb


def ppt_to_number_density(ppt: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a mixing ratio in parts per trillion to a number density.

    Parameters
    ----------
    ppt : ArrayScalarLike
        Mixing ratio, [:math:`ppt`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]
    """
    return mixing_ratio_to_number_density(ppt * constants.ppt, M)


def number_density_to_ppt(n: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    r"""Convert a number density to a mixing ratio in parts per trillion.

    Parameters
    ----------
    n : ArrayScalarLike
        Number density, [:math:`molec \ cm^{-3}`]
    M : ArrayScalarLike
        Number density of air, [:math:`molec \ cm^{-3}`]

    Returns
    -------
    ArrayScalarLike
        Mixing ratio, [:math:`ppt`]
    """
    return number_density_to_mixing_ratio(n, M) / constants.ppt


def per_hour_to_per_second(rate: ArrayScalarLike) -> ArrayScalarLike:
    """Convert a rate expressed per hour to a rate per second."""
    return rate / constants.s_per_hour


def per_second_to_per_hour(rate: ArrayScalarLike) -> ArrayScalarLike:
    """Convert a rate expressed per second to a rate per hour."""
    return rate * constants.s_per_hour


def seconds_to_hours(seconds: ArrayScalarLike) -> ArrayScalarLike:
    """Convert a duration from seconds to hours."""
    return seconds / constants.s_per_hour
