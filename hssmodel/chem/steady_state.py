"""HOx steady state solver.

Solve for the [HO2], [RO2] and [OH] at which the production and loss of each
radical balance, given fixed [NO], [NO2], HOx production rate, VOC reactivity
and RO2 + NO branching ratio. The three balances are
::

    [HO2] = k_RO2NO [RO2] [NO] (1 - alpha) / (k_HO2NO [NO] + 2 k_HO2HO2 [HO2] + k_RO2HO2 [RO2])
    [RO2] = VOCR [OH] / (k_RO2NO [NO] + k_RO2HO2 [HO2] + 2 k_RO2RO2 [RO2])
    P(HOx) = k_OHNO2 [OH] [NO2] + alpha k_RO2NO [RO2] [NO] + 2 k_RO2HO2 [RO2] [HO2]
             + 2 k_RO2RO2 [RO2]^2 + 2 k_HO2HO2 [HO2]^2

This is the same reaction system as the analytic model of Murphy et al. (2006)
(see :mod:`hssmodel.chem.analytic`) without the [RO2] = [HO2] assumption.
"""

from __future__ import annotations

import dataclasses
import logging
import types
from collections.abc import Callable, Mapping
from typing import Any, Protocol

import numpy as np
import numpy.typing as npt
import scipy.optimize

from hssmodel.chem import analytic, rates
from hssmodel.chem.chem_params import SolverConfig
from hssmodel.chem.exceptions import NumericDomainError
from hssmodel.chem.rates import Reaction
from hssmodel.chem.validation import fraction_guard, positive_guard
from hssmodel.physics import constants
from hssmodel.utils.types import type_guard

logger = logging.getLogger(__name__)

#: Default iteration budget for the root finder
DEFAULT_MAXITER = 50_000

#: Negative components of a root smaller than this fraction of the largest
#: component are round-off and are set to zero
ROUNDOFF_RTOL = 1e-8

ResidualFunction = Callable[[npt.NDArray[np.float64]], npt.NDArray[np.float64]]

# ------------
# Root finding
# ------------


@dataclasses.dataclass(frozen=True)
class RootResult:
    """Outcome of a multivariate root finder."""

    #: Final iterate
    x: npt.NDArray[np.float64]

    #: True if the root finder reports success
    converged: bool

    #: Number of iterations, or function evaluations for solvers that do not count iterations
    iterations: int

    #: Euclidean norm of the residual at :attr:`x`
    residual_norm: float

    #: Human readable termination message
    message: str = ""


class RootFinder(Protocol):
    """Strategy for finding a root of a vector valued function."""

    def __call__(
        self,
        fun: ResidualFunction,
        x0: npt.NDArray[np.float64],
        jac: ResidualFunction | None = None,
    ) -> RootResult:
        """Find ``x`` such that ``fun(x) == 0`` starting from ``x0``."""


class ScipyRootFinder:
    """Root finder backed by :func:`scipy.optimize.root`.

    Parameters
    ----------
    method : str, optional
        One of ``"hybr"`` (MINPACK modified Powell hybrid trust region) or ``"lm"``
        (MINPACK Levenberg-Marquardt). By default, ``"hybr"``.
    maxiter : int, optional
        Iteration budget. For ``"hybr"`` this bounds the number of function
        evaluations. By default, :attr:`DEFAULT_MAXITER`.
    tol : float | None, optional
        Passed into :func:`scipy.optimize.root`. If None, the scipy default is used.
    """

    #: Name of the iteration budget option for each supported method
    _maxiter_option = types.MappingProxyType({"hybr": "maxfev", "lm": "maxiter"})

    def __init__(
        self, method: str = "hybr", maxiter: int = DEFAULT_MAXITER, tol: float | None = None
    ) -> None:
        if method not in self._maxiter_option:
            raise ValueError(
                f"Unsupported method '{method}'. Use one of {list(self._maxiter_option)}."
            )
        if maxiter < 1:
            raise ValueError(f"maxiter must be a positive integer, got {maxiter}")

        self.method = method
        self.maxiter = maxiter
        self.tol = tol

    def __repr__(self) -> str:
        return f"{type(self).__name__}(method={self.method!r}, maxiter={self.maxiter})"

    def __call__(
        self,
        fun: ResidualFunction,
        x0: npt.NDArray[np.float64],
        jac: ResidualFunction | None = None,
    ) -> RootResult:
        options = {self._maxiter_option[self.method]: self.maxiter}
        sol = scipy.optimize.root(
            fun,
            x0,
            jac=jac if jac is not None else False,
            method=self.method,
            tol=self.tol,
            options=options,
        )

        x = np.asarray(sol.x, dtype=float)
        residuals = np.asarray(sol.fun, dtype=float)
        finite = bool(np.all(np.isfinite(x)) and np.all(np.isfinite(residuals)))

        # MINPACK methods report the number of function evaluations, not iterations
        iterations = getattr(sol, "nit", None) or sol.nfev
        return RootResult(
            x=x,
            converged=bool(sol.success) and finite,
            iterations=int(iterations),
            residual_norm=float(np.linalg.norm(residuals)),
            message=str(sol.message),
        )


# ---------------
# Residual system
# ---------------


def steady_state_residuals(
    x: npt.NDArray[np.float64],
    no: float,
    no2: float,
    production_rate: float,
    reactivity: float,
    branching_ratio: float,
    rate_map: Mapping[Reaction, float],
) -> npt.NDArray[np.float64]:
    """Evaluate the three steady state balances at ``x = ([HO2], [RO2], [OH])``.

    Any consistent set of units may be used: the solver calls this function in
    rescaled units, while tests call it in [:math:`molec \\ cm^{-3}`].

    Returns
    -------
    npt.NDArray[np.float64]
        HO2 balance, RO2 balance and total HOx balance. All zero at a steady state.
    """
    ho2, ro2, oh = x
    alpha = branching_ratio

    k_RO2NO = rate_map[Reaction.RO2_NO]
    k_RO2HO2 = rate_map[Reaction.RO2_HO2]
    k_RO2RO2 = rate_map[Reaction.RO2_RO2]
    k_HO2NO = rate_map[Reaction.HO2_NO]
    k_HO2HO2 = rate_map[Reaction.HO2_HO2]
    k_OHNO2 = rate_map[Reaction.OH_NO2]

    ho2_loss = k_HO2NO * no + 2.0 * k_HO2HO2 * ho2 + k_RO2HO2 * ro2
    ro2_loss = k_RO2NO * no + k_RO2HO2 * ho2 + 2.0 * k_RO2RO2 * ro2

    return np.array(
        [
            (k_RO2NO * ro2 * no * (1.0 - alpha)) / ho2_loss - ho2,
            (reactivity * oh) / ro2_loss - ro2,
            k_OHNO2 * oh * no2
            + alpha * k_RO2NO * ro2 * no
            + 2.0 * k_RO2HO2 * ro2 * ho2
            + 2.0 * k_RO2RO2 * ro2**2
            + 2.0 * k_HO2HO2 * ho2**2
            - production_rate,
        ]
    )


def steady_state_jacobian(
    x: npt.NDArray[np.float64],
    no: float,
    no2: float,
    production_rate: float,
    reactivity: float,
    branching_ratio: float,
    rate_map: Mapping[Reaction, float],
) -> npt.NDArray[np.float64]:
    """Jacobian of :func:`steady_state_residuals` with respect to ``x``.

    Row ``i``, column ``j`` holds the derivative of balance ``i`` with respect to
    ``x[j]``. The ``production_rate`` argument is unused and kept so both
    functions share a signature.
    """
    ho2, ro2, oh = x
    alpha = branching_ratio

    k_RO2NO = rate_map[Reaction.RO2_NO]
    k_RO2HO2 = rate_map[Reaction.RO2_HO2]
    k_RO2RO2 = rate_map[Reaction.RO2_RO2]
    k_HO2NO = rate_map[Reaction.HO2_NO]
    k_HO2HO2 = rate_map[Reaction.HO2_HO2]
    k_OHNO2 = rate_map[Reaction.OH_NO2]

    ho2_loss = k_HO2NO * no + 2.0 * k_HO2HO2 * ho2 + k_RO2HO2 * ro2
    ro2_loss = k_RO2NO * no + k_RO2HO2 * ho2 + 2.0 * k_RO2RO2 * ro2
    ho2_prod = k_RO2NO * ro2 * no * (1.0 - alpha)
    ro2_prod = reactivity * oh

    return np.array(
        [
            [
                -2.0 * k_HO2HO2 * ho2_prod / ho2_loss**2 - 1.0,
                k_RO2NO * no * (1.0 - alpha) / ho2_loss - k_RO2HO2 * ho2_prod / ho2_loss**2,
                0.0,
            ],
            [
                -k_RO2HO2 * ro2_prod / ro2_loss**2,
                -2.0 * k_RO2RO2 * ro2_prod / ro2_loss**2 - 1.0,
                reactivity / ro2_loss,
            ],
            [
                2.0 * k_RO2HO2 * ro2 + 4.0 * k_HO2HO2 * ho2,
                alpha * k_RO2NO * no + 2.0 * k_RO2HO2 * ho2 + 4.0 * k_RO2RO2 * ro2,
                k_OHNO2 * no2,
            ],
        ]
    )


# ------
# Result
# ------


@dataclasses.dataclass(frozen=True)
class SolverDiagnostics:
    """Convergence diagnostics reported by the root finder."""

    #: Iterations (or function evaluations) used
    iterations: int

    #: True if the root finder reached its tolerance within the iteration budget
    converged: bool

    #: Residual norm at the solution, in the solver's rescaled units
    residual_norm: float

    #: Termination message of the root finder
    message: str = ""


@dataclasses.dataclass(frozen=True)
class SteadyState:
    """Steady state radical concentrations and the inputs that produced them.

    Concentrations are in [:math:`molec \\ cm^{-3}`].
    """

    #: NO number density, as supplied
    no: float

    #: NO2 number density, as supplied
    no2: float

    #: Solved OH number density
    oh: float

    #: Solved HO2 number density
    ho2: float

    #: Solved RO2 number density
    ro2: float

    #: VOC OH reactivity, [:math:`s^{-1}`]
    reactivity: float

    #: HOx production rate, [:math:`molec \\ cm^{-3} \\ s^{-1}`]
    production_rate: float

    #: RO2 + NO alkyl nitrate branching ratio
    branching_ratio: float

    #: Rate constants used, in [:math:`cm^3 \\ molec^{-1} \\ s^{-1}`]
    rates: Mapping[Reaction, float]

    #: Configuration used
    config: SolverConfig

    #: Root finder diagnostics
    diagnostics: SolverDiagnostics

    @property
    def nox(self) -> float:
        """NO + NO2 number density."""
        return self.no + self.no2

    @property
    def hox(self) -> float:
        """OH + HO2 + RO2 number density."""
        return self.oh + self.ho2 + self.ro2

    @property
    def converged(self) -> bool:
        """Shortcut for ``diagnostics.converged``."""
        return self.diagnostics.converged

    @property
    def is_physical(self) -> bool:
        """True if every solved concentration is finite and non-negative."""
        solved = np.array([self.oh, self.ho2, self.ro2])
        return bool(np.all(np.isfinite(solved)) and np.all(solved >= 0.0))

    def as_dict(self) -> dict[str, Any]:
        """Flatten into a dictionary of scalars.

        Rate constants are keyed as ``"k_<reaction>"`` and config fields and
        diagnostics keep their own names. Useful for building a
        :class:`pandas.DataFrame` from many results.
        """
        out: dict[str, Any] = {
            "no": self.no,
            "no2": self.no2,
            "oh": self.oh,
            "ho2": self.ho2,
            "ro2": self.ro2,
            "reactivity": self.reactivity,
            "production_rate": self.production_rate,
            "branching_ratio": self.branching_ratio,
        }
        out.update({f"k_{reaction.value}": k for reaction, k in self.rates.items()})
        out.update(self.config.as_dict())
        out.update(dataclasses.asdict(self.diagnostics))
        return out


# ------
# Solver
# ------


def _clip_roundoff(x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Set negative components at round-off level relative to ``max(|x|)`` to zero.

    With ``branching_ratio == 1`` the exact HO2 root is zero and the root finder
    lands on either side of it.
    """
    x = np.array(x, dtype=float)
    if not np.all(np.isfinite(x)):
        return x
    roundoff = (x < 0.0) & (np.abs(x) <= ROUNDOFF_RTOL * np.max(np.abs(x)))
    x[roundoff] = 0.0
    return x


def _rescale_rates(rate_map: Mapping[Reaction, float], unit_scale: float) -> dict[Reaction, float]:
    scaled = {reaction: k * unit_scale for reaction, k in rate_map.items()}
    if not all(np.isfinite(k) and k > 0.0 for k in scaled.values()):
        raise NumericDomainError(f"Rescaled rate constants must be finite and positive: {scaled}")
    return scaled


def solve(
    no: float,
    no2: float,
    production_rate: float,
    reactivity: float,
    branching_ratio: float,
    config: SolverConfig | None = None,
    root_finder: RootFinder | None = None,
) -> SteadyState:
    """Solve for steady state [OH], [HO2] and [RO2].

    All concentrations are in [:math:`molec \\ cm^{-3}`].

    Parameters
    ----------
    no : float
        NO number density
    no2 : float
        NO2 number density
    production_rate : float
        HOx production rate, [:math:`molec \\ cm^{-3} \\ s^{-1}`]
    reactivity : float
        VOC OH reactivity, [:math:`s^{-1}`]
    branching_ratio : float
        Fraction of RO2 + NO reactions producing alkyl nitrates, [:math:`0 - 1`]
    config : SolverConfig | None, optional
        Kinetic and environmental parameters. Defaults to :class:`SolverConfig`.
    root_finder : RootFinder | None, optional
        Root finding strategy. Defaults to :class:`ScipyRootFinder`.

    Returns
    -------
    SteadyState
        Solved concentrations. If the root finder does not converge the result is
        still returned, with ``diagnostics.converged`` set to False.

    Raises
    ------
    PreconditionViolation
        If a concentration, ``production_rate`` or ``reactivity`` is not strictly
        positive, or ``branching_ratio`` is outside [0, 1].
    NumericDomainError
        If the initial guess or the rescaled rate constants are not finite.

    Notes
    -----
    Number densities near 1e10 and rate constants near 1e-12 make for a poorly
    conditioned system. Before solving, concentrations are divided and rate
    constants multiplied by the number density of one ppt, ``M / 1e12``. The
    solution is converted back before it is returned.
    """
    config = type_guard(
        config or SolverConfig(), SolverConfig, "config must be a SolverConfig instance"
    )
    root_finder = root_finder or ScipyRootFinder()

    positive_guard("no", no)
    positive_guard("no2", no2)
    positive_guard("production_rate", production_rate)
    positive_guard("reactivity", reactivity)
    fraction_guard("branching_ratio", branching_ratio)

    rate_map = rates.rate_constants(config)
    k_RO2NO = rate_map[Reaction.RO2_NO]

    # Initial guess in molec/cm^3. RO2 is assumed in steady state with HO2.
    oh_guess = analytic.initial_oh_estimate(
        no,
        no2,
        production_rate,
        reactivity,
        branching_ratio,
        k4=config.k4,
        k2eff=config.k2eff,
        k5eff=config.k5eff,
    )
    ro2_guess = oh_guess * reactivity / (k_RO2NO * no)
    x_initial = np.array([ro2_guess, ro2_guess, oh_guess], dtype=float)

    # Convert from molec/cm^3 to ppt to improve numeric stability
    unit_scale = config.M / constants.ppt_reference_density
    scaled_rates = _rescale_rates(rate_map, unit_scale)
    args = (
        no / unit_scale,
        no2 / unit_scale,
        production_rate / unit_scale,
        reactivity,
        branching_ratio,
        scaled_rates,
    )
    x0 = x_initial / unit_scale
    if not np.all(np.isfinite(x0)):
        raise NumericDomainError(f"Initial guess is not finite: {x_initial}")

    logger.debug("Solve steady state with unit scale %s and initial guess %s", unit_scale, x0)

    def fun(x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return steady_state_residuals(x, *args)

    def jac(x: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
        return steady_state_jacobian(x, *args)

    result = root_finder(fun, x0, jac)
    diagnostics = SolverDiagnostics(
        iterations=result.iterations,
        converged=result.converged,
        residual_norm=result.residual_norm,
        message=result.message,
    )
    logger.debug("Root finder finished: %s", diagnostics)

    ho2, ro2, oh = (float(v) for v in _clip_roundoff(result.x) * unit_scale)
    state = SteadyState(
        no=no,
        no2=no2,
        oh=oh,
        ho2=ho2,
        ro2=ro2,
        reactivity=reactivity,
        production_rate=production_rate,
        branching_ratio=branching_ratio,
        rates=rate_map,
        config=config,
        diagnostics=diagnostics,
    )

    if not diagnostics.converged:
        logger.warning(
            "Steady state solver did not converge after %s iterations (residual norm %s): %s",
            diagnostics.iterations,
            diagnostics.residual_norm,
            diagnostics.message,
        )
    elif not state.is_physical:
        logger.warning(
            "Steady state solver converged to a non-physical root: OH=%s, HO2=%s, RO2=%s",
            oh,
            ho2,
            ro2,
        )

    return state


def solve_nox(
    nox: float,
    production_rate: float,
    reactivity: float,
    branching_ratio: float,
    no2_to_no_ratio: float = 4.0,
    config: SolverConfig | None = None,
    root_finder: RootFinder | None = None,
) -> SteadyState:
    """Solve for steady state radicals from total NOx.

    NOx is split into NO and NO2 with :func:`hssmodel.chem.analytic.nox_to_no_and_no2`,
    then passed to :func:`solve`.

    Parameters
    ----------
    nox : float
        NOx number density, [:math:`molec \\ cm^{-3}`]
    production_rate : float
        HOx production rate, [:math:`molec \\ cm^{-3} \\ s^{-1}`]
    reactivity : float
        VOC OH reactivity, [:math:`s^{-1}`]
    branching_ratio : float
        RO2 + NO alkyl nitrate branching ratio, [:math:`0 - 1`]
    no2_to_no_ratio : float, optional
        Ratio of NO2 to NO. By default, 4.
    config : SolverConfig | None, optional
        Passed into :func:`solve`.
    root_finder : RootFinder | None, optional
        Passed into :func:`solve`.

    Returns
    -------
    SteadyState
        See :func:`solve`.
    """
    no, no2 = analytic.nox_to_no_and_no2(nox, no2_to_no_ratio)
    return solve(
        no,
        no2,
        production_rate,
        reactivity,
        branching_ratio,
        config=config,
        root_finder=root_finder,
    )
