"""Tests for the manifold self-validation utility."""

import numpy as np
import pytest

import symmanifolds as sm


class _BrokenScaling(sm.SymmetricMatrices):
    """Reconstructs off-diagonal entries without the 1/sqrt(2) factor."""

    def get_vector_orthonormal(self, p, c, out=None):
        X = super().get_vector_orthonormal(p, c)
        off = ~np.eye(self.n, dtype=bool)
        X[off] *= np.sqrt(2)
        return X


class TestValidateManifold:

    @pytest.mark.parametrize("manifold", [
        sm.SymmetricMatrices(1),
        sm.SymmetricMatrices(4),
        sm.SymmetricMatrices(3, sm.COMPLEX),
        sm.Euclidean(2, 3),
        sm.Euclidean(2, 2, field=sm.COMPLEX),
    ], ids=repr)
    def test_valid_manifolds_pass(self, manifold):
        results = sm.validate_manifold(manifold, n_random_tests=3, seed=0, verbose=False)
        assert results['passed'], results
        assert 'flat_retraction' in results['tests']

    def test_broken_coordinates_fail(self):
        results = sm.validate_manifold(_BrokenScaling(3), n_random_tests=2, seed=0,
                                       verbose=False)
        assert not results['passed']
        assert not results['tests']['coordinates']['passed']
        assert not results['tests']['basis']['passed']

    def test_invalid_test_points_reported(self):
        M = sm.SymmetricMatrices(2)
        results = sm.validate_manifold(M, test_points=[np.array([[0.0, 1.0], [0.0, 0.0]])],
                                       seed=0, verbose=False)
        assert not results['tests']['points_on_manifold']['passed']

    def test_no_test_points(self):
        results = sm.validate_manifold(sm.SymmetricMatrices(2), test_points=[], verbose=False)
        assert not results['passed']
        assert results['errors']

    def test_verbose_report(self, capsys):
        sm.validate_manifold(sm.SymmetricMatrices(2), n_random_tests=1, seed=0, verbose=True)
        assert "PASSED" in capsys.readouterr().out
