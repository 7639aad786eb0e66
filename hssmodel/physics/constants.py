"""Physical and chemical constants."""

from __future__ import annotations

# -------
# General
# -------

# NOTE: Use a decimal point for each float-valued constant. This is important for
# converting to numpy arrays.

#: Avogadro constant :math:`[mol^{-1}]`
N_A: float = 6.02214076e23

#: Seconds per hour, used to report lifetimes in hours
s_per_hour: float = 3600.0

# -------------
# Thermodynamic
# -------------

#: Surface pressure, international standard atmosphere :math:`[Pa]`
p_surface: float = 101325.0

#: Molecular mass of dry air :math:`[kg \ mol^{-1}]`
M_d: float = 28.9647e-3

#: Molecular mass of water :math:`[kg \ mol^{-1}]`
M_v: float = 18.0153e-3

#: Gas constant of dry air :math:`[J \ kg^{-1} \ K^{-1}]`
R_d: float = 287.05

# -----------------
# Mixing ratio units
# -----------------

#: Parts per billion, as a mole fraction
ppb: float = 1e-9

#: Parts per trillion, as a mole fraction
ppt: float = 1e-12

#: Mole fraction reciprocal of one ppt. Dividing the air number density by
#: this value gives the number density of one ppt :math:`[molec \ cm^{-3}]`
ppt_reference_density: float = 1e12
