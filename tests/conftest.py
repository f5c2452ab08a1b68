"""
pytest configuration and shared fixtures for symmanifolds tests.

This module provides common fixtures, utilities, and configuration
for all test modules in the symmanifolds test suite.
"""

import numpy as np
import pytest

import symmanifolds
from symmanifolds import Field, SymmetricMatrices


# ============================================================================
# Test Configuration
# ============================================================================

# Tolerances for different types of tests
TOLERANCES = {
    'strict': 1e-12,
    'default': 1e-10,
    'relaxed': 1e-8,
    'numerical': 1e-6,
}

FIELDS = [Field.REAL, Field.COMPLEX]


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clean_config():
    """Restore the default configuration after every test."""
    yield
    symmanifolds.reset_config()


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(42)


@pytest.fixture
def symmetric_factory():
    """Factory fixture for creating SymmetricMatrices manifolds."""
    def _create(n: int, field=Field.REAL):
        return SymmetricMatrices(n, field)
    return _create


@pytest.fixture
def random_symmetric_matrix(rng):
    """Generate random symmetric (real) or Hermitian (complex) matrices.

    The result is exactly symmetric: it is built as ``(A + A^H) / 2``.
    """
    def _create_matrix(n: int, field=Field.REAL, scale: float = 1.0):
        A = rng.standard_normal((n, n))
        if Field.parse(field) is Field.COMPLEX:
            A = A + 1j * rng.standard_normal((n, n))
        return scale * (A + A.conj().T) / 2
    return _create_matrix


@pytest.fixture
def random_square_matrix(rng):
    """Generate random, generally asymmetric, square matrices."""
    def _create_matrix(n: int, field=Field.REAL):
        A = rng.standard_normal((n, n))
        if Field.parse(field) is Field.COMPLEX:
            A = A + 1j * rng.standard_normal((n, n))
        return A
    return _create_matrix


@pytest.fixture
def assert_helpers():
    """Helper functions for common assertions."""
    class AssertHelpers:
        @staticmethod
        def assert_is_hermitian(A: np.ndarray, tol: float = 0.0):
            """Assert that A equals its conjugate transpose."""
            deviation = np.linalg.norm(A - A.conj().T)
            assert deviation <= tol, f"Matrix not Hermitian: ||A - A^H|| = {deviation}"

        @staticmethod
        def assert_is_orthonormal(M, p, vectors, tol: float = TOLERANCES['default']):
            """Assert that tangent vectors are orthonormal in the metric of M."""
            gram = np.array([[M.inner(p, u, v) for v in vectors] for u in vectors])
            deviation = np.linalg.norm(gram - np.eye(len(vectors)))
            assert deviation < tol, f"Basis not orthonormal: ||G - I|| = {deviation}"

    return AssertHelpers()


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "numerical: marks numerical accuracy tests")
    config.addinivalue_line("markers", "manifold: marks manifold-specific tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test names."""
    for item in items:
        if "numerical" in item.nodeid:
            item.add_marker(pytest.mark.numerical)
        if "manifolds" in item.nodeid:
            item.add_marker(pytest.mark.manifold)
