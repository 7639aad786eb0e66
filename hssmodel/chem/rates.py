"""Kinetic rate constants needed by the steady state models.

For all rate functions, ``T`` is the temperature in [:math:`K`] and ``M`` the
number density of air in [:math:`molec \\ cm^{-3}`]. Rate functions taking
``H2O`` expect the number density of water, also in [:math:`molec \\ cm^{-3}`].
Returned rate constants are in [:math:`cm^3 \\ molec^{-1} \\ s^{-1}`].

These functions are numpy ufunc compositions, so they accept floats,
:class:`numpy.ndarray`, :class:`pandas.Series` and :class:`xarray.DataArray`.
"""

from __future__ import annotations

import enum
import types
from collections.abc import Mapping

import numpy as np

from hssmodel.chem.chem_params import SolverConfig
from hssmodel.utils.types import ArrayScalarLike

#: Low pressure limit coefficient for OH + NO2 + M -> HNO3 + M
K0_OH_NO2: float = 1.51e-30

#: High pressure limit for OH + NO2 + M -> HNO3 + M
KINF_OH_NO2: float = 2.58e-11

#: Troe broadening factor for OH + NO2 + M -> HNO3 + M
FC_OH_NO2: float = 0.6


class Reaction(enum.StrEnum):
    """Reactions whose rate constants enter the steady state system."""

    RO2_NO = "RO2+NO"
    RO2_HO2 = "RO2+HO2"
    RO2_RO2 = "RO2+RO2"
    HO2_NO = "HO2+NO"
    HO2_HO2 = "HO2+HO2"
    OH_NO2 = "OH+NO2"


def rate_HO2_NO(T: ArrayScalarLike) -> ArrayScalarLike:
    """Rate constant for HO2 + NO -> NO2 + OH.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]

    Returns
    -------
    ArrayScalarLike
        Rate constant

    References
    ----------
    - JPL data evaluation 15
    """
    return 3.5e-12 * np.exp(250.0 / T)


def rate_HO2_HO2(T: ArrayScalarLike, M: ArrayScalarLike, H2O: ArrayScalarLike) -> ArrayScalarLike:
    """Rate constant for the HO2 self reaction, including water vapor enhancement.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]
    M : ArrayScalarLike
        Number density of air
    H2O : ArrayScalarLike
        Number density of water

    Returns
    -------
    ArrayScalarLike
        Rate constant

    References
    ----------
    - JPL data evaluation 15
    """
    k_bimolecular = 3.5e-13 * np.exp(430.0 / T)
    k_termolecular = 1.7e-33 * (M - H2O) * np.exp(1000.0 / T)
    water_enhancement = 1.0 + 1.4e-21 * H2O * np.exp(2200.0 / T)
    return (k_bimolecular + k_termolecular) * water_enhancement


def rate_OH_NO2(T: ArrayScalarLike, M: ArrayScalarLike) -> ArrayScalarLike:
    """Rate constant for OH + NO2 + M -> HNO3 + M in Troe falloff form.

    Parameters
    ----------
    T : ArrayScalarLike
        Temperature, [:math:`K`]. Unused: the limiting rates of this
        evaluation carry no temperature dependence.
    M : ArrayScalarLike
        Number density of air

    Returns
    -------
    ArrayScalarLike
        Rate constant. Always below both ``K0_OH_NO2 * M`` and ``KINF_OH_NO2``.

    References
    ----------
    - Mollner et al. 2010, Science, doi:10.1126/science.1193030
    """
    k0 = K0_OH_NO2 * M
    ratio = k0 / KINF_OH_NO2
    return (k0 / (1.0 + ratio)) * FC_OH_NO2 ** (1.0 / (1.0 + np.log10(ratio) ** 2))


def rate_constants(config: SolverConfig) -> Mapping[Reaction, float]:
    """Collect every rate constant used by the steady state system.

    Parameters
    ----------
    config : SolverConfig
        Temperature, air density, water mole fraction and fixed RO2 rate constants.

    Returns
    -------
    Mapping[Reaction, float]
        Read-only mapping from reaction to rate constant.
    """
    T = config.T
    M = config.M
    rates = {
        Reaction.RO2_NO: config.k_RO2NO,
        Reaction.RO2_HO2: config.k_RO2HO2,
        Reaction.RO2_RO2: config.k_RO2RO2,
        Reaction.HO2_NO: float(rate_HO2_NO(T)),
        Reaction.HO2_HO2: float(rate_HO2_HO2(T, M, config.H2O)),
        Reaction.OH_NO2: float(rate_OH_NO2(T, M)),
    }
    return types.MappingProxyType(rates)
