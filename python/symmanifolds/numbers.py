"""Number systems (coefficient fields) manifolds are defined over."""

import enum
from typing import Any

import numpy as np

from .exceptions import InvalidParameterError


class Field(enum.Enum):
    """Coefficient field of matrix entries, ℝ or ℂ."""

    REAL = "real"
    COMPLEX = "complex"

    @property
    def real_dimension(self) -> int:
        """Number of real degrees of freedom of one scalar of the field."""
        return 1 if self is Field.REAL else 2

    @property
    def symbol(self) -> str:
        return "ℝ" if self is Field.REAL else "ℂ"

    @property
    def dtype(self) -> np.dtype:
        """Default numpy dtype for arrays over this field."""
        return np.dtype(np.float64) if self is Field.REAL else np.dtype(np.complex128)

    def __str__(self) -> str:
        return self.symbol

    @classmethod
    def parse(cls, value: Any) -> 'Field':
        """Turn a field given as enum, string or Python type into a :class:`Field`.

        Raises:
            InvalidParameterError: If ``value`` names no known field
        """
        if isinstance(value, cls):
            return value
        if value is float:
            return cls.REAL
        if value is complex:
            return cls.COMPLEX
        if isinstance(value, str):
            key = value.strip().lower()
            if key in ("real", "r", "ℝ"):
                return cls.REAL
            if key in ("complex", "c", "ℂ"):
                return cls.COMPLEX
        raise InvalidParameterError(
            f"Unknown field {value!r}",
            parameter='field',
            value=value,
            valid_range=[f.value for f in cls]
        )


REAL = Field.REAL
COMPLEX = Field.COMPLEX

__all__ = ['Field', 'REAL', 'COMPLEX']
