"""Manifold implementations."""

from .base import Manifold, EmbeddedSubmanifold
from .bases import (
    AbstractBasis,
    DefaultOrthonormalBasis,
    DiagonalizingOrthonormalBasis,
    CachedBasis,
)
from .euclidean import Euclidean
from .symmetric import SymmetricMatrices

__all__ = [
    'Manifold',
    'EmbeddedSubmanifold',
    'AbstractBasis',
    'DefaultOrthonormalBasis',
    'DiagonalizingOrthonormalBasis',
    'CachedBasis',
    'Euclidean',
    'SymmetricMatrices',
]
