"""Flat Euclidean space of real or complex arrays of a fixed shape."""

from typing import Optional, Tuple

import numpy as np

from ..core.logging import get_logger
from ..decorators import validate_arrays
from ..exceptions import ManifoldValidationError, InvalidParameterError, expect_shape
from ..numbers import Field
from ..types import Point, TangentVector, Coordinates, Scalar
from .base import Manifold, write_into

logger = get_logger(__name__)


class Euclidean(Manifold):
    """The vector space 𝔽^(n1 × n2 × ...) with the Frobenius inner product.

    Used as the ambient space of embedded manifolds. Real dimension is the
    number of entries times the real dimension of the field.

    Args:
        *shape: Array shape of points
        field: ``Field.REAL`` or ``Field.COMPLEX`` (or anything ``Field.parse`` accepts)
    """

    def __init__(self, *shape: int, field=Field.REAL):
        if not shape or any(not isinstance(s, (int, np.integer)) or s < 1 for s in shape):
            raise InvalidParameterError(
                f"Euclidean shape must be positive integers, got {shape}",
                parameter='shape',
                value=shape,
                valid_range='>= 1'
            )
        self._shape = tuple(int(s) for s in shape)
        self._field = Field.parse(field)

    @property
    def field(self) -> Field:
        return self._field

    @property
    def representation_size(self) -> Tuple[int, ...]:
        return self._shape

    def manifold_dimension(self) -> int:
        return int(np.prod(self._shape)) * self._field.real_dimension

    def describe(self) -> str:
        sizes = ", ".join(str(s) for s in self._shape)
        return f"Euclidean({sizes}; field={self._field})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Euclidean):
            return NotImplemented
        return self._shape == other._shape and self._field is other._field

    def __hash__(self) -> int:
        return hash((Euclidean, self._shape, self._field))

    def is_flat(self) -> bool:
        return True

    def _check_field(self, array, kind: str) -> Optional[ManifoldValidationError]:
        if self._field is Field.REAL and np.iscomplexobj(array) and np.any(np.imag(array) != 0):
            return ManifoldValidationError(
                f"The {kind} {array} is not real-valued, as required on {self}.",
                point_info=repr(array),
                manifold_name=self.describe(),
                validation_type=kind
            )
        return None

    def check_point(self, p: Point, atol: Optional[float] = None,
                    rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        p = np.asarray(p)
        return self.check_size(p) or self._check_field(p, 'point')

    def check_vector(self, p: Point, X: TangentVector, atol: Optional[float] = None,
                     rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        X = np.asarray(X)
        return self.check_size(np.asarray(p), X) or self._check_field(X, 'vector')

    @validate_arrays('p')
    def project(self, p: Point, out: Optional[Point] = None) -> Point:
        return write_into(out, np.array(p, copy=True), 'project')

    @validate_arrays('p', 'X')
    def project_tangent(self, p: Point, X: TangentVector,
                        out: Optional[TangentVector] = None) -> TangentVector:
        return write_into(out, np.array(X, copy=True), 'project_tangent')

    def zero_vector(self, p: Point) -> TangentVector:
        dtype = self._field.dtype
        if p is not None:
            dtype = np.result_type(np.asarray(p).dtype, dtype)
        return np.zeros(self._shape, dtype=dtype)

    def inner(self, p: Point, X: TangentVector, Y: TangentVector) -> Scalar:
        return float(np.real(np.vdot(X, Y)))

    def exp(self, p: Point, X: TangentVector) -> Point:
        return np.asarray(p) + np.asarray(X)

    def log(self, p: Point, q: Point) -> TangentVector:
        return np.asarray(q) - np.asarray(p)

    def distance(self, p: Point, q: Point) -> Scalar:
        return float(np.linalg.norm(np.asarray(q) - np.asarray(p)))

    def get_coordinates_orthonormal(self, p: Point, X: TangentVector,
                                    out: Optional[Coordinates] = None) -> Coordinates:
        X = np.asarray(X)
        expect_shape(X, self._shape, 'get_coordinates_orthonormal', name='vector')
        flat = X.ravel()
        if self._field is Field.REAL:
            coords = np.real(flat).astype(np.float64)
        else:
            coords = np.column_stack([flat.real, flat.imag]).ravel()
        return write_into(out, coords, 'get_coordinates_orthonormal')

    def get_vector_orthonormal(self, p: Point, c: Coordinates,
                               out: Optional[TangentVector] = None) -> TangentVector:
        c = np.asarray(c)
        expect_shape(c, (self.manifold_dimension(),), 'get_vector_orthonormal',
                     name='coordinates')
        if self._field is Field.REAL:
            X = c.astype(np.float64).reshape(self._shape)
        else:
            pairs = c.reshape(-1, 2)
            X = (pairs[:, 0] + 1j * pairs[:, 1]).reshape(self._shape)
        return write_into(out, X, 'get_vector_orthonormal')
