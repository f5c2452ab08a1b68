r"""The manifold of symmetric (or Hermitian) matrices.

.. math::

    \operatorname{Sym}(n) = \{ p \in 𝔽^{n \times n} \mid p^{\mathrm{H}} = p \},
    \qquad 𝔽 \in \{ℝ, ℂ\},

where :math:`\cdot^{\mathrm{H}}` is the conjugate transpose. Matrices are
stored as full ``n × n`` arrays, so in the complex case the diagonal of a
valid point is real. The manifold is a linear subspace of the Euclidean space
of all ``n × n`` matrices and therefore flat.
"""

from typing import Optional

import numpy as np

from ..core.config import get_config
from ..core.logging import get_logger
from ..decorators import validate_arrays
from ..exceptions import ManifoldValidationError, InvalidParameterError, expect_shape
from ..numbers import Field
from ..types import Point, TangentVector, Coordinates
from .base import EmbeddedSubmanifold, is_approx_zero, write_into
from .bases import CachedBasis, DiagonalizingOrthonormalBasis
from .euclidean import Euclidean

logger = get_logger(__name__)


class SymmetricMatrices(EmbeddedSubmanifold):
    """Real symmetric or complex Hermitian ``n × n`` matrices.

    Args:
        n: Matrix size, at least 1
        field: ``Field.REAL`` (symmetric) or ``Field.COMPLEX`` (Hermitian),
            or anything ``Field.parse`` accepts

    Raises:
        InvalidParameterError: If ``n`` is not a positive integer or the field
            is unknown

    Example:
        >>> M = SymmetricMatrices(2)
        >>> M.manifold_dimension()
        3
        >>> M.get_coordinates(None, [[1.0, 2.0], [2.0, 3.0]])
        array([1.        , 2.82842712, 3.        ])
    """

    def __init__(self, n: int, field=Field.REAL):
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
            raise InvalidParameterError(
                f"Matrix size must be a positive integer, got {n!r}",
                parameter='n',
                value=n,
                valid_range='>= 1'
            )
        self._n = int(n)
        self._field = Field.parse(field)
        logger.debug("Created %s", self)

    @property
    def n(self) -> int:
        return self._n

    @property
    def field(self) -> Field:
        return self._field

    def describe(self) -> str:
        return f"SymmetricMatrices({self._n}, {self._field})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, SymmetricMatrices):
            return NotImplemented
        return self._n == other._n and self._field is other._field

    def __hash__(self) -> int:
        return hash((SymmetricMatrices, self._n, self._field))

    def get_embedding(self) -> Euclidean:
        return Euclidean(self._n, self._n, field=self._field)

    def manifold_dimension(self) -> int:
        r"""Real dimension of the manifold.

        .. math::

            \dim \operatorname{Sym}(n, ℝ) = \frac{n(n+1)}{2}, \qquad
            \dim \operatorname{Sym}(n, ℂ) = 2\frac{n(n+1)}{2} - n = n^2,

        where the :math:`-n` accounts for the vanishing imaginary part of the
        diagonal of a Hermitian matrix.
        """
        n = self._n
        return (n * (n + 1) // 2) * self._field.real_dimension - (n if self._field is Field.COMPLEX else 0)

    def is_flat(self) -> bool:
        return True

    def _asymmetry(self, a, kind: str, atol, rtol, message
                   ) -> Optional[ManifoldValidationError]:
        a = np.asarray(a)
        if a.shape != (self._n, self._n):
            return ManifoldValidationError(
                f"The {kind} has size {a.shape} on {self}, expected {(self._n, self._n)}.",
                point_info=f"shape {a.shape}",
                manifold_name=self.describe(),
                validation_type=kind
            )
        atol, rtol = get_config().tolerances(atol, rtol)
        value = float(np.linalg.norm(a - a.conj().T))
        if is_approx_zero(value, atol, rtol):
            return None
        logger.debug("%s on %s is not symmetric, ||a - a^H|| = %.3e", kind, self, value)
        return ManifoldValidationError(
            message(a),
            value=value,
            point_info=repr(a),
            manifold_name=self.describe(),
            validation_type=kind
        )

    def check_point(self, p: Point, atol: Optional[float] = None,
                    rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        """Check that ``p`` equals its conjugate transpose.

        The Frobenius norm of ``p - p^H`` has to vanish up to ``atol``/``rtol``.

        Returns:
            None for a valid point, otherwise a :class:`ManifoldValidationError`
            whose ``value`` is the observed norm
        """
        return self._asymmetry(
            p, 'point', atol, rtol,
            lambda a: f"The point {a} does not lie on {self}, since it is not symmetric."
        )

    def check_vector(self, p: Point, X: TangentVector, atol: Optional[float] = None,
                     rtol: Optional[float] = None) -> Optional[ManifoldValidationError]:
        """Check that ``X`` equals its conjugate transpose.

        Every tangent space is the space of symmetric matrices itself, so the
        base point ``p`` does not enter the check.
        """
        return self._asymmetry(
            X, 'vector', atol, rtol,
            lambda a: f"The vector {a} is not a tangent vector to {p} on {self}, "
                      "since it is not symmetric."
        )

    @validate_arrays('p')
    def project(self, p: Point, out: Optional[Point] = None) -> Point:
        r"""Project ``p`` onto the manifold, :math:`\frac{1}{2}(p + p^{\mathrm{H}})`."""
        return write_into(out, (p + p.conj().T) / 2, 'project')

    @validate_arrays('p', 'X')
    def project_tangent(self, p: Point, X: TangentVector,
                        out: Optional[TangentVector] = None) -> TangentVector:
        r"""Project ``X`` onto the tangent space, :math:`\frac{1}{2}(X + X^{\mathrm{T}})`.

        Unlike :meth:`project` this uses the plain transpose, so for the
        complex field the result is complex symmetric rather than Hermitian.
        """
        return write_into(out, (X + X.T) / 2, 'project_tangent')

    def get_basis_diagonalizing(self, p: Point,
                                basis: DiagonalizingOrthonormalBasis) -> CachedBasis:
        """Default orthonormal basis, with zero curvature along every direction."""
        vectors = self.get_basis(p).vectors
        dtype = np.asarray(p).dtype if p is not None else np.dtype(np.float64)
        if not np.issubdtype(dtype, np.inexact):
            dtype = np.dtype(np.float64)
        eigenvalues = np.zeros(self.manifold_dimension(), dtype=np.finfo(dtype).dtype)
        return CachedBasis(basis, vectors, eigenvalues)

    def _triangle(self):
        # upper triangle (i <= j) in row-major order
        rows, cols = np.triu_indices(self._n)
        return rows, cols, rows != cols

    def get_coordinates_orthonormal(self, p: Point, X: TangentVector,
                                    out: Optional[Coordinates] = None) -> Coordinates:
        """Coefficients of ``X`` in the orthonormal basis of symmetric matrices.

        Entries of the upper triangle are read row by row; off-diagonal
        entries are scaled by ``sqrt(2)``. For the complex field every
        off-diagonal entry contributes its real and then its imaginary part,
        while diagonal entries only contribute their real part. On the real
        field any imaginary part of ``X`` is dropped.

        Raises:
            DimensionMismatchError: If ``X`` is not ``n × n`` or ``out`` does
                not have length ``manifold_dimension()``
        """
        X = np.asarray(X)
        n = self._n
        dim = self.manifold_dimension()
        expect_shape(X, (n, n), 'get_coordinates_orthonormal', name='vector')
        if out is not None:
            expect_shape(out, (dim,), 'get_coordinates_orthonormal', name='out')
        rows, cols, offdiag = self._triangle()
        scale = np.where(offdiag, np.sqrt(2), 1.0)

        if self._field is Field.REAL:
            coords = np.real(X[rows, cols]) * scale
        else:
            entries = X[rows, cols]
            pairs = np.column_stack([entries.real * scale, entries.imag * scale])
            # diagonal entries have no imaginary coordinate
            keep = np.column_stack([np.ones_like(offdiag), offdiag])
            coords = pairs.ravel()[keep.ravel()]

        expect_shape(coords, (dim,), 'get_coordinates_orthonormal', name='coordinates')
        return write_into(out, coords, 'get_coordinates_orthonormal')

    def get_vector_orthonormal(self, p: Point, c: Coordinates,
                               out: Optional[TangentVector] = None) -> TangentVector:
        """Symmetric (Hermitian) matrix with coefficients ``c``; inverse of
        :meth:`get_coordinates_orthonormal`.

        For the complex field the entry below the diagonal is the complex
        conjugate of the one above, and the result is always a complex array.

        Raises:
            DimensionMismatchError: If ``c`` does not have length
                ``manifold_dimension()`` or ``out`` is not ``n × n``
        """
        c = np.asarray(c)
        n = self._n
        dim = self.manifold_dimension()
        expect_shape(c, (dim,), 'get_vector_orthonormal', name='coordinates')
        if out is not None:
            expect_shape(out, (n, n), 'get_vector_orthonormal', name='out')
        rows, cols, offdiag = self._triangle()
        scale = np.where(offdiag, 1 / np.sqrt(2), 1.0)

        if self._field is Field.REAL:
            values = c * scale
            X = np.zeros((n, n), dtype=np.result_type(c.dtype, np.float64))
            X[rows, cols] = values
            X[cols, rows] = values
        else:
            widths = np.where(offdiag, 2, 1)
            start = np.cumsum(widths) - widths
            real = c[start]
            imag = np.where(offdiag, c[start + offdiag], 0)
            values = (real + 1j * imag) * scale
            X = np.zeros((n, n), dtype=np.result_type(c.dtype, np.complex128))
            X[cols, rows] = values.conj()
            X[rows, cols] = values

        return write_into(out, X, 'get_vector_orthonormal')
