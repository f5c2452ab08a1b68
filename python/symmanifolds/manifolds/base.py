"""Generic manifold interface and the embedded-submanifold capability.

Concrete manifolds implement the abstract methods of :class:`Manifold`; every
other operation (validity predicates, basis dispatch, norms, distances,
transports, sampling) has a generic default written in terms of them.
Manifolds that live inside a larger flat space derive from
:class:`EmbeddedSubmanifold` instead and inherit embedding-based defaults for
the metric and the exponential and logarithmic maps.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, Union

import numpy as np

from ..core.config import get_config
from ..core.logging import get_logger
from ..exceptions import ManifoldValidationError, expect_shape
from ..numbers import Field
from ..types import Point, TangentVector, Coordinates, Scalar
from .bases import (
    AbstractBasis,
    CachedBasis,
    DefaultOrthonormalBasis,
    DiagonalizingOrthonormalBasis,
)

logger = get_logger(__name__)

RandomState = Union[None, int, np.random.Generator]


def is_approx_zero(value: float, atol: float, rtol: float) -> bool:
    """Whether ``value`` equals zero within ``max(atol, rtol * |value|)``.

    Non-finite values are never approximately zero.
    """
    if not np.isfinite(value):
        return False
    value = abs(value)
    return bool(value <= max(atol, rtol * value))


def write_into(out: Optional[np.ndarray], result: np.ndarray, operation: str) -> np.ndarray:
    """Store ``result`` in the caller's buffer ``out`` if one was given.

    Raises:
        DimensionMismatchError: If ``out`` has the wrong shape
        TypeError: If ``result`` cannot be stored in ``out`` without changing
            its kind (float into int, complex into real)
    """
    if out is None:
        return result
    expect_shape(out, result.shape, operation, name='out')
    np.copyto(out, result, casting='same_kind')
    return out


def default_rng(rng: RandomState = None) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    if rng is None:
        rng = get_config().random_seed
    return np.random.default_rng(rng)


class Manifold(ABC):
    """Abstract base class for manifolds of arrays over ℝ or ℂ."""

    @property
    @abstractmethod
    def field(self) -> Field:
        """Field the entries of points and tangent vectors belong to."""

    @property
    @abstractmethod
    def representation_size(self) -> Tuple[int, ...]:
        """Shape of the arrays representing points and tangent vectors."""

    @abstractmethod
    def manifold_dimension(self) -> int:
        """Real dimension of the manifold."""

    @property
    def dim(self) -> int:
        return self.manifold_dimension()

    @abstractmethod
    def describe(self) -> str:
        """Human readable label of the manifold."""

    def __repr__(self) -> str:
        return self.describe()

    def get_embedding(self) -> 'Manifold':
        return self

    def embed(self, p: Point, X: Optional[TangentVector] = None):
        """Represent ``p`` (or the tangent vector ``X`` at ``p``) in the embedding."""
        return p if X is None else X

    # ------------------------------------------------------------------
    # Validity checks
    # ------------------------------------------------------------------

    @abstractmethod
    def check_point(self, p: Point, atol: Optional[float] = None,
                    rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        """Return an error describing why ``p`` is not a point, or None."""

    @abstractmethod
    def check_vector(self, p: Point, X: TangentVector, atol: Optional[float] = None,
                     rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        """Return an error describing why ``X`` is not tangent at ``p``, or None."""

    def check_size(self, p: Point, X: Optional[TangentVector] = None
                   ) -> Optional[ManifoldValidationError]:
        """Check arrays have the manifold's representation size."""
        expected = tuple(self.representation_size)
        for name, array in (('point', p), ('vector', X)):
            if array is None:
                continue
            shape = np.shape(array)
            if shape != expected:
                return ManifoldValidationError(
                    f"The {name} has size {shape} on {self}, expected {expected}.",
                    point_info=f"shape {shape}",
                    manifold_name=self.describe(),
                    validation_type=name
                )
        return None

    def _validate_point(self, p, atol, rtol):
        return self.check_size(p) or self.check_point(p, atol=atol, rtol=rtol)

    def _validate_vector(self, p, X, atol, rtol):
        return self.check_size(p, X) or self.check_vector(p, X, atol=atol, rtol=rtol)

    def is_point(self, p: Point, raise_error: bool = False,
                 atol: Optional[float] = None, rtol: Optional[float] = None) -> bool:
        """Whether ``p`` is a valid point, optionally raising the validation error.

        Args:
            p: Candidate point
            raise_error: Raise the :class:`ManifoldValidationError` instead of
                returning False
            atol: Absolute tolerance (configuration default if None)
            rtol: Relative tolerance (configuration default if None)
        """
        error = self._validate_point(np.asarray(p), atol, rtol)
        if error is None:
            return True
        logger.debug("is_point failed on %s: %s", self, error)
        if raise_error:
            raise error
        return False

    def is_vector(self, p: Point, X: TangentVector, raise_error: bool = False,
                  check_base_point: bool = False, atol: Optional[float] = None,
                  rtol: Optional[float] = None) -> bool:
        """Whether ``X`` is a tangent vector at ``p``.

        With ``check_base_point`` the base point is validated first.
        """
        p = np.asarray(p)
        error = None
        if check_base_point:
            error = self._validate_point(p, atol, rtol)
        if error is None:
            error = self._validate_vector(p, np.asarray(X), atol, rtol)
        if error is None:
            return True
        logger.debug("is_vector failed on %s: %s", self, error)
        if raise_error:
            raise error
        return False

    # ------------------------------------------------------------------
    # Projections
    # ------------------------------------------------------------------

    @abstractmethod
    def project(self, p: Point, out: Optional[Point] = None) -> Point:
        """Project an ambient array onto the manifold."""

    @abstractmethod
    def project_tangent(self, p: Point, X: TangentVector,
                        out: Optional[TangentVector] = None) -> TangentVector:
        """Project an ambient array onto the tangent space at ``p``."""

    # ------------------------------------------------------------------
    # Metric and flat geometry
    # ------------------------------------------------------------------

    def is_flat(self) -> bool:
        return False

    @abstractmethod
    def zero_vector(self, p: Point) -> TangentVector:
        """Zero tangent vector at ``p``."""

    @abstractmethod
    def inner(self, p: Point, X: TangentVector, Y: TangentVector) -> Scalar:
        """Riemannian inner product of two tangent vectors at ``p``."""

    @abstractmethod
    def exp(self, p: Point, X: TangentVector) -> Point:
        """Exponential map."""

    @abstractmethod
    def log(self, p: Point, q: Point) -> TangentVector:
        """Logarithmic map, inverse of :meth:`exp`."""

    def norm(self, p: Point, X: TangentVector) -> Scalar:
        return float(np.sqrt(max(self.inner(p, X, X), 0.0)))

    def distance(self, p: Point, q: Point) -> Scalar:
        return self.norm(p, self.log(p, q))

    def retract(self, p: Point, X: TangentVector) -> Point:
        return self.exp(p, X)

    def inverse_retract(self, p: Point, q: Point) -> TangentVector:
        return self.log(p, q)

    def injectivity_radius(self) -> float:
        if self.is_flat():
            return float('inf')
        raise NotImplementedError(f"injectivity_radius is not implemented for {self}")

    def parallel_transport_to(self, p: Point, X: TangentVector, q: Point) -> TangentVector:
        """Parallel transport ``X`` from ``p`` to ``q``; the identity on flat manifolds."""
        if self.is_flat():
            return np.array(X, copy=True)
        raise NotImplementedError(f"parallel_transport_to is not implemented for {self}")

    def vector_transport_to(self, p: Point, X: TangentVector, q: Point) -> TangentVector:
        return self.parallel_transport_to(p, X, q)

    # ------------------------------------------------------------------
    # Bases and coordinates
    # ------------------------------------------------------------------

    @abstractmethod
    def get_coordinates_orthonormal(self, p: Point, X: TangentVector,
                                    out: Optional[Coordinates] = None) -> Coordinates:
        """Coefficients of ``X`` in the default orthonormal basis at ``p``."""

    @abstractmethod
    def get_vector_orthonormal(self, p: Point, c: Coordinates,
                               out: Optional[TangentVector] = None) -> TangentVector:
        """Tangent vector at ``p`` with coefficients ``c`` in the default orthonormal basis."""

    def get_basis_diagonalizing(self, p: Point,
                                basis: DiagonalizingOrthonormalBasis) -> CachedBasis:
        raise NotImplementedError(f"No diagonalizing basis is known for {self}")

    def get_basis(self, p: Point, basis: Optional[AbstractBasis] = None) -> CachedBasis:
        """Resolve ``basis`` into explicit basis vectors at ``p``.

        Args:
            p: Base point
            basis: Basis specifier, the default orthonormal basis if None

        Returns:
            A :class:`CachedBasis` with ``manifold_dimension()`` vectors
        """
        if basis is None or isinstance(basis, DefaultOrthonormalBasis):
            dim = self.manifold_dimension()
            vectors = []
            for k in range(dim):
                c = np.zeros(dim)
                c[k] = 1.0
                vectors.append(self.get_vector_orthonormal(p, c))
            return CachedBasis(basis or DefaultOrthonormalBasis(), vectors)
        if isinstance(basis, DiagonalizingOrthonormalBasis):
            return self.get_basis_diagonalizing(p, basis)
        if isinstance(basis, CachedBasis):
            return basis
        raise TypeError(f"Unsupported basis {basis!r}")

    def get_coordinates(self, p: Point, X: TangentVector,
                        basis: Optional[AbstractBasis] = None,
                        out: Optional[Coordinates] = None) -> Coordinates:
        """Coefficients of ``X`` with respect to ``basis`` at ``p``."""
        if basis is None or isinstance(basis, DefaultOrthonormalBasis):
            return self.get_coordinates_orthonormal(p, X, out=out)
        cached = self.get_basis(p, basis)
        coords = np.array([self.inner(p, v, X) for v in cached.vectors], dtype=np.float64)
        expect_shape(coords, (self.manifold_dimension(),), 'get_coordinates', name='basis')
        return write_into(out, coords, 'get_coordinates')

    def get_vector(self, p: Point, c: Coordinates,
                   basis: Optional[AbstractBasis] = None,
                   out: Optional[TangentVector] = None) -> TangentVector:
        """Tangent vector at ``p`` with coefficients ``c`` with respect to ``basis``."""
        if basis is None or isinstance(basis, DefaultOrthonormalBasis):
            return self.get_vector_orthonormal(p, c, out=out)
        cached = self.get_basis(p, basis)
        c = np.asarray(c)
        expect_shape(c, (len(cached),), 'get_vector', name='coordinates')
        X = self.zero_vector(p)
        for ck, v in zip(c, cached.vectors):
            X = X + ck * v
        return write_into(out, X, 'get_vector')

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def _gaussian(self, rng: np.random.Generator, sigma: float) -> np.ndarray:
        dtype = np.dtype(get_config().default_dtype)
        shape = tuple(self.representation_size)
        sample = rng.standard_normal(shape).astype(dtype)
        if self.field is Field.COMPLEX:
            sample = sample + 1j * rng.standard_normal(shape).astype(dtype)
        return sigma * sample

    def random_point(self, rng: RandomState = None, sigma: float = 1.0) -> Point:
        """Random point from an ambient Gaussian projected onto the manifold."""
        return self.project(self._gaussian(default_rng(rng), sigma))

    def random_tangent(self, p: Point, rng: RandomState = None,
                       sigma: float = 1.0) -> TangentVector:
        """Random tangent vector at ``p`` from a projected ambient Gaussian."""
        return self.project_tangent(p, self._gaussian(default_rng(rng), sigma))


class EmbeddedSubmanifold(Manifold):
    """A manifold isometrically embedded in the manifold :meth:`get_embedding` returns.

    Points and tangent vectors are stored as arrays of the embedding, the
    metric is inherited from it, and validity is checked on the embedding
    first and then against the submanifold's own constraints.
    """

    @abstractmethod
    def get_embedding(self) -> Manifold:
        """The ambient manifold this one is embedded in."""

    @property
    def representation_size(self) -> Tuple[int, ...]:
        return self.get_embedding().representation_size

    def _validate_point(self, p, atol, rtol):
        embedding = self.get_embedding()
        error = embedding._validate_point(self.embed(p), atol, rtol)
        return error or self.check_point(p, atol=atol, rtol=rtol)

    def _validate_vector(self, p, X, atol, rtol):
        embedding = self.get_embedding()
        error = embedding._validate_vector(self.embed(p), self.embed(p, X), atol, rtol)
        return error or self.check_vector(p, X, atol=atol, rtol=rtol)

    def zero_vector(self, p: Point) -> TangentVector:
        return self.get_embedding().zero_vector(self.embed(p))

    def inner(self, p: Point, X: TangentVector, Y: TangentVector) -> Scalar:
        return self.get_embedding().inner(self.embed(p), self.embed(p, X), self.embed(p, Y))

    def exp(self, p: Point, X: TangentVector) -> Point:
        return self.get_embedding().exp(self.embed(p), self.embed(p, X))

    def log(self, p: Point, q: Point) -> TangentVector:
        return self.get_embedding().log(self.embed(p), self.embed(q))
