"""Model parameter data structures."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, fields
from typing import Any, TypeVar

_Params = TypeVar("_Params", bound="ModelParams")


@dataclass(frozen=True)
class ModelParams:
    """Class for constructing immutable model parameters.

    Implementing classes must still use the ``@dataclass(frozen=True)`` operator.
    """

    def as_dict(self) -> dict[str, Any]:
        """Convert object to dictionary.

        We use this method instead of  `dataclasses.asdict`
        to use a shallow/unrecursive copy.
        This will return values as Any instead of dict.

        Returns
        -------
        dict[str, Any]
            Dictionary version of self.
        """
        return {(name := field.name): getattr(self, name) for field in fields(self)}

    def replace(self: _Params, **changes: Any) -> _Params:
        """Return a copy of the parameters with ``changes`` applied.

        Parameters
        ----------
        **changes : Any
            Field values to override.

        Returns
        -------
        ModelParams
            New instance of the same class. Validation in ``__post_init__`` runs again.
        """
        return dataclasses.replace(self, **changes)
