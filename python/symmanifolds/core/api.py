"""Function-style API over manifold objects.

Each function takes the manifold as its first argument and forwards to the
corresponding method, so generic code can be written against
``check_point(M, p)``, ``project(M, p)``, ``project(M, p, X)`` and so on
without caring which manifold it is handed.

Example:
    >>> import numpy as np
    >>> from symmanifolds import SymmetricMatrices, manifold_dimension, check_point
    >>> M = SymmetricMatrices(3, "complex")
    >>> manifold_dimension(M)
    9
    >>> check_point(M, np.eye(3)) is None
    True
"""

from typing import Optional

from ..exceptions import ManifoldValidationError
from ..manifolds.base import Manifold
from ..manifolds.bases import AbstractBasis, CachedBasis
from ..types import Point, TangentVector, Coordinates, Scalar


def check_point(M: Manifold, p: Point, atol: Optional[float] = None,
                rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
    """Return the reason ``p`` is not a point of ``M``, or None."""
    return M.check_point(p, atol=atol, rtol=rtol)


def check_vector(M: Manifold, p: Point, X: TangentVector, atol: Optional[float] = None,
                 rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
    """Return the reason ``X`` is not tangent to ``M`` at ``p``, or None."""
    return M.check_vector(p, X, atol=atol, rtol=rtol)


def is_point(M: Manifold, p: Point, raise_error: bool = False, **tolerances) -> bool:
    return M.is_point(p, raise_error=raise_error, **tolerances)


def is_vector(M: Manifold, p: Point, X: TangentVector, raise_error: bool = False,
              **kwargs) -> bool:
    return M.is_vector(p, X, raise_error=raise_error, **kwargs)


def embed(M: Manifold, p: Point, X: Optional[TangentVector] = None):
    """Represent ``p`` (or ``X`` at ``p``) in the embedding of ``M``."""
    return M.embed(p, X)


def get_embedding(M: Manifold) -> Manifold:
    return M.get_embedding()


def manifold_dimension(M: Manifold) -> int:
    return M.manifold_dimension()


def is_flat(M: Manifold) -> bool:
    return M.is_flat()


def project(M: Manifold, p: Point, X: Optional[TangentVector] = None, out=None):
    """Project ``p`` onto ``M``, or with ``X`` given, ``X`` onto the tangent space at ``p``."""
    if X is None:
        return M.project(p, out=out)
    return M.project_tangent(p, X, out=out)


def get_basis(M: Manifold, p: Point, basis: Optional[AbstractBasis] = None) -> CachedBasis:
    return M.get_basis(p, basis)


def get_coordinates(M: Manifold, p: Point, X: TangentVector,
                    basis: Optional[AbstractBasis] = None, out=None) -> Coordinates:
    return M.get_coordinates(p, X, basis, out=out)


def get_vector(M: Manifold, p: Point, c: Coordinates,
               basis: Optional[AbstractBasis] = None, out=None) -> TangentVector:
    return M.get_vector(p, c, basis, out=out)


def inner(M: Manifold, p: Point, X: TangentVector, Y: TangentVector) -> Scalar:
    return M.inner(p, X, Y)


def describe(M: Manifold) -> str:
    return M.describe()
