"""Default parameters for the steady state chemistry models.

Used by :func:`hssmodel.chem.steady_state.solve` and :func:`hssmodel.chem.analytic.analytic_oh`.
"""

from __future__ import annotations

import dataclasses
import math
from typing import Any

from hssmodel.chem.exceptions import PreconditionViolation
from hssmodel.core.params import ModelParams
from hssmodel.physics import thermo


@dataclasses.dataclass(frozen=True)
class SolverConfig(ModelParams):
    """Kinetic and environmental parameters for the HOx steady state models.

    Rate constants are in [:math:`cm^3 \\ molec^{-1} \\ s^{-1}`].
    """

    #: Temperature, [:math:`K`]
    T: float = 298.0

    #: Number density of air, [:math:`molec \\ cm^{-3}`]
    M: float = 2e19

    #: Water vapor mole fraction, [:math:`0 - 1`]
    rh: float = 0.01

    #: RO2 + NO rate constant
    k_RO2NO: float = 8e-12

    #: RO2 + HO2 rate constant
    k_RO2HO2: float = 8e-12

    #: RO2 + RO2 self reaction rate constant
    k_RO2RO2: float = 6.8e-14

    #: OH + NO2 -> HNO3 rate constant. Only used by the analytic OH model.
    k4: float = 1.1e-11

    #: Effective rate constant of NO oxidation by peroxy radicals.
    #: Only used by the analytic OH model.
    k2eff: float = 8e-12

    #: Effective rate constant of the RO2 and HO2 self reactions.
    #: Only used by the analytic OH model.
    k5eff: float = 5e-12

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if not math.isfinite(value):
                raise PreconditionViolation(f"{field.name} must be finite, got {value}")
            if field.name == "rh":
                if not 0.0 <= value <= 1.0:
                    raise PreconditionViolation(f"rh must be in [0, 1], got {value}")
            elif value <= 0.0:
                raise PreconditionViolation(f"{field.name} must be positive, got {value}")

    @property
    def H2O(self) -> float:
        """Number density of water, [:math:`molec \\ cm^{-3}`]."""
        return thermo.water_number_density(self.rh, self.M)

    @classmethod
    def from_pressure(cls, T: float, p: float, **params: Any) -> SolverConfig:
        """Construct a configuration with ``M`` computed from the ideal gas law.

        Parameters
        ----------
        T : float
            Temperature, [:math:`K`]
        p : float
            Pressure, [:math:`Pa`]
        **params : Any
            Any other :class:`SolverConfig` field except ``M``.

        Returns
        -------
        SolverConfig
            Configuration at temperature ``T`` and air number density ``M(T, p)``.
        """
        if "M" in params:
            raise TypeError("Cannot pass 'M' to SolverConfig.from_pressure")
        if T <= 0.0 or p <= 0.0:
            raise PreconditionViolation(f"T and p must be positive, got T={T}, p={p}")
        M = thermo.air_number_density(T, p)
        return cls(T=T, M=M, **params)
