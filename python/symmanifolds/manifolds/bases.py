"""Basis specifiers for tangent spaces and the cached basis they resolve to."""

from dataclasses import dataclass, field
from typing import Optional, List

import numpy as np

from ..numbers import Field


class AbstractBasis:
    """Marker base class for tangent space basis specifiers."""


@dataclass(frozen=True)
class DefaultOrthonormalBasis(AbstractBasis):
    """The manifold's own orthonormal basis, with real coefficients by default."""

    field: Field = Field.REAL


@dataclass(frozen=True)
class DiagonalizingOrthonormalBasis(AbstractBasis):
    """An orthonormal basis diagonalizing the curvature operator along ``frame_direction``.

    Args:
        frame_direction: Tangent vector the curvature is evaluated along
        field: Field of the coefficients
    """

    frame_direction: Optional[np.ndarray] = field(default=None, compare=False)
    field: Field = Field.REAL


@dataclass
class CachedBasis(AbstractBasis):
    """A basis whose vectors have been computed.

    Attributes:
        basis: The specifier that produced this basis
        vectors: Basis tangent vectors, one per manifold dimension
        eigenvalues: Curvature eigenvalues per vector (diagonalizing bases only)
    """

    basis: AbstractBasis
    vectors: List[np.ndarray]
    eigenvalues: Optional[np.ndarray] = None

    def __len__(self) -> int:
        return len(self.vectors)

    def __iter__(self):
        return iter(self.vectors)

    def __getitem__(self, index):
        return self.vectors[index]


__all__ = [
    'AbstractBasis',
    'DefaultOrthonormalBasis',
    'DiagonalizingOrthonormalBasis',
    'CachedBasis',
]
