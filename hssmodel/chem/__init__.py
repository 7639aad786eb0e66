"""HOx steady state chemistry models."""

from hssmodel.chem.analytic import analytic_oh, analytic_oh_nox, nox_to_no_and_no2
from hssmodel.chem.chem_params import SolverConfig
from hssmodel.chem.derived import (
    nox_lifetime,
    nox_loss,
    ozone_production,
    ozone_production_efficiency,
)
from hssmodel.chem.exceptions import NumericDomainError, PreconditionViolation, SteadyStateError
from hssmodel.chem.rates import Reaction
from hssmodel.chem.steady_state import (
    RootFinder,
    RootResult,
    ScipyRootFinder,
    SolverDiagnostics,
    SteadyState,
    solve,
    solve_nox,
)

__all__ = [
    "NumericDomainError",
    "PreconditionViolation",
    "Reaction",
    "RootFinder",
    "RootResult",
    "ScipyRootFinder",
    "SolverConfig",
    "SolverDiagnostics",
    "SteadyState",
    "SteadyStateError",
    "analytic_oh",
    "analytic_oh_nox",
    "nox_lifetime",
    "nox_loss",
    "nox_to_no_and_no2",
    "ozone_production",
    "ozone_production_efficiency",
    "solve",
    "solve_nox",
]
