"""Validation utilities checking a manifold implementation against its own contract."""

import numpy as np
from typing import Optional, Dict, Any, List

from .core.logging import get_logger, log_function_call
from .manifolds.base import default_rng

logger = get_logger(__name__)


@log_function_call(include_time=True)
def validate_manifold(manifold,
                      test_points: Optional[List[np.ndarray]] = None,
                      n_random_tests: int = 10,
                      tolerance: float = 1e-10,
                      seed: Optional[int] = None,
                      verbose: bool = True) -> Dict[str, Any]:
    """Comprehensive manifold validation.

    Args:
        manifold: Manifold to validate
        test_points: Specific points to test (optional)
        n_random_tests: Number of random points to draw when none are given
        tolerance: Numerical tolerance for tests
        seed: Seed for the random points and vectors
        verbose: Whether to print validation results

    Returns:
        Dictionary with validation results
    """
    rng = default_rng(seed)
    results = {
        'passed': True,
        'tests': {},
        'errors': []
    }

    if test_points is None:
        test_points = [manifold.random_point(rng) for _ in range(n_random_tests)]

    if not test_points:
        results['errors'].append("No test points available")
        results['passed'] = False
        return results

    checks = [
        ('points_on_manifold', _test_points_on_manifold),
        ('projection_idempotent', _test_projection_idempotent),
        ('tangent_space', _test_tangent_space_properties),
        ('coordinates', _test_coordinate_round_trip),
        ('basis', _test_basis_orthonormal),
    ]
    if manifold.is_flat():
        checks.append(('flat_retraction', _test_flat_retraction))

    for name, check in checks:
        results['tests'][name] = check(manifold, test_points, tolerance, rng, verbose)
        if not results['tests'][name]['passed']:
            results['passed'] = False

    if verbose:
        print(f"\nManifold validation of {manifold}: "
              f"{'PASSED' if results['passed'] else 'FAILED'}")
        if results['errors']:
            print("Errors encountered:")
            for error in results['errors']:
                print(f"  - {error}")

    return results


def _test_points_on_manifold(manifold, test_points: List[np.ndarray],
                             tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test that the given points are actually on the manifold."""
    test_result = {'passed': True, 'failures': []}

    for i, point in enumerate(test_points):
        error = manifold.check_point(point, atol=tolerance)
        if error is not None:
            test_result['passed'] = False
            test_result['failures'].append(f"Point {i} not on manifold: {error.message}")

    if verbose and test_result['failures']:
        print(f"Points on manifold test: {len(test_result['failures'])} failures")

    return test_result


def _test_projection_idempotent(manifold, test_points: List[np.ndarray],
                                tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test that projection is idempotent and lands on the manifold: P(P(x)) = P(x)."""
    test_result = {'passed': True, 'failures': []}

    for i, point in enumerate(test_points):
        ambient = point + manifold._gaussian(rng, 1.0)
        projected_once = manifold.project(ambient)
        projected_twice = manifold.project(projected_once)

        error = np.linalg.norm(projected_once - projected_twice)
        if error > tolerance:
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: projection not idempotent, error = {error:.2e}"
            )
        if not manifold.is_point(projected_once, atol=tolerance):
            test_result['passed'] = False
            test_result['failures'].append(f"Point {i}: projection not on manifold")

    if verbose and test_result['failures']:
        print(f"Projection idempotency test: {len(test_result['failures'])} failures")

    return test_result


def _test_tangent_space_properties(manifold, test_points: List[np.ndarray],
                                   tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test that tangent projection is idempotent and random tangents are valid."""
    test_result = {'passed': True, 'failures': []}

    for i, point in enumerate(test_points):
        ambient_vector = manifold._gaussian(rng, 1.0)
        tangent_vector = manifold.project_tangent(point, ambient_vector)

        tangent_twice = manifold.project_tangent(point, tangent_vector)
        error = np.linalg.norm(tangent_vector - tangent_twice)
        if error > tolerance:
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: tangent projection not idempotent, error = {error:.2e}"
            )

        random_tangent = manifold.random_tangent(point, rng)
        if manifold.field.real_dimension == 1 and not manifold.is_vector(
                point, random_tangent, atol=tolerance):
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: projected vector not in tangent space"
            )

    if verbose and test_result['failures']:
        print(f"Tangent space test: {len(test_result['failures'])} failures")

    return test_result


def _test_coordinate_round_trip(manifold, test_points: List[np.ndarray],
                                tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test get_vector(get_coordinates(X)) = X and the coordinate count."""
    test_result = {'passed': True, 'failures': []}
    dim = manifold.manifold_dimension()

    for i, point in enumerate(test_points):
        coords = rng.standard_normal(dim)
        X = manifold.get_vector(point, coords)
        if not manifold.is_vector(point, X, atol=tolerance):
            test_result['passed'] = False
            test_result['failures'].append(f"Point {i}: reconstructed vector not tangent")

        round_trip = manifold.get_coordinates(point, X)
        if round_trip.shape != (dim,):
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: got {round_trip.shape[0]} coordinates, expected {dim}"
            )
            continue
        error = np.linalg.norm(round_trip - coords)
        if error > tolerance:
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: coordinate round trip error = {error:.2e}"
            )

        # coordinates of an orthonormal basis are an isometry
        norm_error = abs(manifold.norm(point, X) - np.linalg.norm(coords))
        if norm_error > tolerance * max(1.0, np.linalg.norm(coords)):
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: coordinates not isometric, error = {norm_error:.2e}"
            )

    if verbose and test_result['failures']:
        print(f"Coordinate test: {len(test_result['failures'])} failures")

    return test_result


def _test_basis_orthonormal(manifold, test_points: List[np.ndarray],
                            tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test that the default basis has Gram matrix equal to the identity."""
    test_result = {'passed': True, 'failures': []}
    point = test_points[0]
    basis = manifold.get_basis(point)

    gram = np.array([[manifold.inner(point, u, v) for v in basis] for u in basis])
    error = np.linalg.norm(gram - np.eye(len(basis))) if len(basis) else 0.0
    if len(basis) != manifold.manifold_dimension() or error > tolerance:
        test_result['passed'] = False
        test_result['failures'].append(
            f"Basis of {len(basis)} vectors not orthonormal, error = {error:.2e}"
        )

    if verbose and test_result['failures']:
        print(f"Basis test: {len(test_result['failures'])} failures")

    return test_result


def _test_flat_retraction(manifold, test_points: List[np.ndarray],
                          tolerance: float, rng, verbose: bool) -> Dict[str, Any]:
    """Test R(x, 0) = x, log(x, R(x, v)) = v and trivial transport on flat manifolds."""
    test_result = {'passed': True, 'failures': []}

    for i, point in enumerate(test_points):
        zero_vector = manifold.zero_vector(point)
        error = np.linalg.norm(manifold.retract(point, zero_vector) - point)
        if error > tolerance:
            test_result['passed'] = False
            test_result['failures'].append(f"Point {i}: R(x,0) != x, error = {error:.2e}")

        tangent_vector = manifold.get_vector(
            point, rng.standard_normal(manifold.manifold_dimension()))
        other = manifold.retract(point, tangent_vector)
        error = np.linalg.norm(manifold.inverse_retract(point, other) - tangent_vector)
        if error > tolerance * max(1.0, np.linalg.norm(tangent_vector)):
            test_result['passed'] = False
            test_result['failures'].append(
                f"Point {i}: inverse retraction mismatch, error = {error:.2e}"
            )

        transported = manifold.parallel_transport_to(point, tangent_vector, other)
        if not np.allclose(transported, tangent_vector, atol=tolerance):
            test_result['passed'] = False
            test_result['failures'].append(f"Point {i}: transport is not the identity")

    if verbose and test_result['failures']:
        print(f"Flat retraction test: {len(test_result['failures'])} failures")

    logger.debug("Flat retraction test on %s: %d failures",
                 manifold, len(test_result['failures']))
    return test_result
