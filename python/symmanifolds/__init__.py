"""symmanifolds: the manifold of symmetric and Hermitian matrices.

This package represents Sym(n, 𝔽), the real symmetric (𝔽 = ℝ) or complex
Hermitian (𝔽 = ℂ) ``n × n`` matrices, as a flat Riemannian manifold embedded
in the Euclidean space of all ``n × n`` matrices, and provides the operations
needed for differential-geometric computations on it.

Key Features
============
- **Validity checks**: symmetry of points and tangent vectors up to a
  configurable absolute/relative tolerance, reported as errors, not raised
- **Projections**: onto the manifold and onto tangent spaces
- **Orthonormal coordinates**: conversion between tangent vectors and
  coefficient vectors of length ``manifold_dimension``, for both fields
- **Bases**: default and curvature-diagonalizing orthonormal bases
- **Flat geometry**: inner product, exponential/logarithmic maps, distance
  and parallel transport inherited from the embedding

Quick Start
===========
>>> import numpy as np
>>> import symmanifolds as sm

>>> M = sm.SymmetricMatrices(2)
>>> p = np.array([[1.0, 2.0], [2.0, 3.0]])
>>> M.check_point(p) is None
True
>>> M.manifold_dimension()
3
>>> M.get_coordinates(p, p)
array([1.        , 2.82842712, 3.        ])

# Hermitian matrices have n^2 real degrees of freedom
>>> H = sm.SymmetricMatrices(3, sm.COMPLEX)
>>> H.manifold_dimension()
9

# Validity checks return the error instead of raising it
>>> error = M.check_point(np.array([[1.0, 2.0], [0.0, 3.0]]))
>>> round(error.value, 6)
2.828427

# Function-style API
>>> sm.project(M, np.array([[1.0, 2.0], [0.0, 3.0]]))
array([[1., 1.],
       [1., 3.]])
"""

from .numbers import Field, REAL, COMPLEX

from .manifolds import (
    Manifold,
    EmbeddedSubmanifold,
    Euclidean,
    SymmetricMatrices,
    AbstractBasis,
    DefaultOrthonormalBasis,
    DiagonalizingOrthonormalBasis,
    CachedBasis,
)

from .core.api import (
    check_point,
    check_vector,
    is_point,
    is_vector,
    embed,
    get_embedding,
    manifold_dimension,
    is_flat,
    project,
    get_basis,
    get_coordinates,
    get_vector,
    inner,
    describe,
)

from .core import (
    get_config, set_config, reset_config, config_context, get_logger, set_log_level,
)

from .exceptions import (
    SymManifoldsError,
    ManifoldValidationError,
    DimensionMismatchError,
    ConfigurationError,
    InvalidParameterError,
)

from .validation import validate_manifold

__version__ = "0.1.0"

__all__ = [
    # Fields
    "Field",
    "REAL",
    "COMPLEX",

    # Manifolds and bases
    "Manifold",
    "EmbeddedSubmanifold",
    "Euclidean",
    "SymmetricMatrices",
    "AbstractBasis",
    "DefaultOrthonormalBasis",
    "DiagonalizingOrthonormalBasis",
    "CachedBasis",

    # Function-style API
    "check_point",
    "check_vector",
    "is_point",
    "is_vector",
    "embed",
    "get_embedding",
    "manifold_dimension",
    "is_flat",
    "project",
    "get_basis",
    "get_coordinates",
    "get_vector",
    "inner",
    "describe",

    # Configuration and logging
    "get_config",
    "set_config",
    "reset_config",
    "config_context",
    "get_logger",
    "set_log_level",

    # Exceptions
    "SymManifoldsError",
    "ManifoldValidationError",
    "DimensionMismatchError",
    "ConfigurationError",
    "InvalidParameterError",

    # Validation
    "validate_manifold",
]
