"""
Tests against hand-computed reference values.

Coordinates follow the row-major upper triangle; off-diagonal entries carry a
factor sqrt(2) and, for Hermitian matrices, contribute their real part
followed by their imaginary part.
"""

import numpy as np
import numpy.testing as npt
import pytest

from conftest import TOLERANCES
from symmanifolds import Field, SymmetricMatrices

SQRT2 = np.sqrt(2)


class TestDimensionReferenceValues:
    """Dimension table n(n+1)/2 (real) and n^2 (complex)."""

    @pytest.mark.parametrize("n", range(1, 13))
    def test_real_dimension(self, n):
        assert SymmetricMatrices(n).manifold_dimension() == n * (n + 1) // 2

    @pytest.mark.parametrize("n", range(1, 13))
    def test_complex_dimension(self, n):
        assert SymmetricMatrices(n, Field.COMPLEX).manifold_dimension() == n * n


class TestCoordinateReferenceValues:
    """Coordinates of fixed matrices."""

    def test_real_3x3(self):
        M = SymmetricMatrices(3)
        X = np.array([[2.0, -1.0, 0.5],
                      [-1.0, 0.0, 4.0],
                      [0.5, 4.0, -3.0]])
        expected = [2.0, -SQRT2, 0.5 * SQRT2, 0.0, 4.0 * SQRT2, -3.0]
        npt.assert_allclose(M.get_coordinates(None, X), expected, rtol=TOLERANCES['strict'])
        npt.assert_allclose(M.get_vector(None, expected), X, atol=TOLERANCES['strict'])

    def test_complex_3x3(self):
        M = SymmetricMatrices(3, Field.COMPLEX)
        X = np.array([[1.0, 1.0 + 2.0j, -3.0j],
                      [1.0 - 2.0j, 5.0, 0.5],
                      [3.0j, 0.5, -2.0]])
        expected = [1.0,
                    SQRT2, 2.0 * SQRT2,
                    0.0, -3.0 * SQRT2,
                    5.0,
                    0.5 * SQRT2, 0.0,
                    -2.0]
        c = M.get_coordinates(None, X)
        assert c.shape == (9,)
        npt.assert_allclose(c, expected, atol=TOLERANCES['strict'])
        npt.assert_allclose(M.get_vector(None, expected), X, atol=TOLERANCES['strict'])

    def test_identity(self):
        for field in (Field.REAL, Field.COMPLEX):
            M = SymmetricMatrices(4, field)
            c = M.get_coordinates(None, np.eye(4))
            assert c.sum() == pytest.approx(4.0)
            assert np.count_nonzero(c) == 4

    def test_unit_basis_vectors(self):
        M = SymmetricMatrices(2, Field.COMPLEX)
        vectors = M.get_basis(np.eye(2)).vectors
        h = 1 / SQRT2
        npt.assert_allclose(vectors[0], [[1, 0], [0, 0]])
        npt.assert_allclose(vectors[1], [[0, h], [h, 0]])
        npt.assert_allclose(vectors[2], [[0, 1j * h], [-1j * h, 0]])
        npt.assert_allclose(vectors[3], [[0, 0], [0, 1]])
