"""
``hssmodel`` public API.

Copyright 2019-2026 The hssmodel developers

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from __future__ import annotations

import logging
from importlib import metadata

from hssmodel.chem import (
    NumericDomainError,
    PreconditionViolation,
    Reaction,
    SolverConfig,
    SolverDiagnostics,
    SteadyState,
    analytic_oh,
    analytic_oh_nox,
    nox_lifetime,
    nox_loss,
    ozone_production,
    ozone_production_efficiency,
    solve,
    solve_nox,
)

__version__ = metadata.version("hssmodel")
__license__ = "Apache-2.0"
__url__ = "https://github.com/joshua-laughner/HSSModel"

log = logging.getLogger(__name__)


__all__ = [
    "NumericDomainError",
    "PreconditionViolation",
    "Reaction",
    "SolverConfig",
    "SolverDiagnostics",
    "SteadyState",
    "analytic_oh",
    "analytic_oh_nox",
    "nox_lifetime",
    "nox_loss",
    "ozone_production",
    "ozone_production_efficiency",
    "solve",
    "solve_nox",
]
