"""Input guards for the steady state models."""

from __future__ import annotations

import numpy as np

from hssmodel.chem.exceptions import PreconditionViolation
from hssmodel.utils.types import ArrayScalarLike


def positive_guard(name: str, value: ArrayScalarLike) -> ArrayScalarLike:
    """Ensure every entry of ``value`` is finite and strictly positive.

    Parameters
    ----------
    name : str
        Name of the quantity, used in the error message.
    value : ArrayScalarLike
        Scalar or array to check.

    Returns
    -------
    ArrayScalarLike
        The input ``value``, unchanged.

    Raises
    ------
    PreconditionViolation
        If any entry of ``value`` is non-positive, infinite or NaN.
    """
    arr = np.asarray(value, dtype=float)
    if not np.all(np.isfinite(arr) & (arr > 0.0)):
        raise PreconditionViolation(f"{name} must be finite and positive, got {value}")
    return value


def fraction_guard(name: str, value: ArrayScalarLike) -> ArrayScalarLike:
    """Ensure every entry of ``value`` lies in the closed interval [0, 1].

    Raises
    ------
    PreconditionViolation
        If any entry of ``value`` lies outside [0, 1] or is NaN.
    """
    arr = np.asarray(value, dtype=float)
    if not np.all((arr >= 0.0) & (arr <= 1.0)):
        raise PreconditionViolation(f"{name} must be in [0, 1], got {value}")
    return value
