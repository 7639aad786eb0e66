"""Type aliases and type checking helpers."""

from __future__ import annotations

from typing import Any, Type, TypeVar, Union

import numpy as np
import pandas as pd
import xarray as xr

#: Array like input (np.ndarray, xr.DataArray, pd.Series, np.float64, float)
ArrayScalarLike = TypeVar(
    "ArrayScalarLike",
    np.ndarray,
    xr.DataArray,
    pd.Series,
    np.float64,
    float,
    Union[np.ndarray, float],
    Union[xr.DataArray, np.ndarray],
)

_Object = TypeVar("_Object")


def type_guard(
    obj: Any,
    type_: Type[_Object] | tuple[Type[_Object], ...],
    error_message: str | None = None,
) -> _Object:
    """Ensure ``obj`` is an instance of ``type_``.

    Parameters
    ----------
    obj : Any
        Object to check
    type_ : Type[_Object] | tuple[Type[_Object], ...]
        Expected type or tuple of types
    error_message : str | None, optional
        Message of the raised error. A generic message is used if None.

    Returns
    -------
    _Object
        ``obj``, unchanged

    Raises
    ------
    ValueError
        If ``obj`` is not an instance of ``type_``
    """
    if not isinstance(obj, type_):
        raise ValueError(error_message or f"Object must be of type {type_}")

    return obj
