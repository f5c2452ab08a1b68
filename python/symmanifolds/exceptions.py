"""Custom exceptions for symmanifolds.

Two kinds of failure are distinguished. A point or tangent vector that
violates the manifold constraints is reported through a
:class:`ManifoldValidationError`, which validity checks *return* so that the
caller decides what to do with it. Passing buffers of the wrong size to the
coordinate routines is a programming error and raises
:class:`DimensionMismatchError` immediately.
"""

from typing import Optional, Dict, Any


class SymManifoldsError(Exception):
    """Base exception for all symmanifolds errors.

    This is the root of the exception hierarchy. All other symmanifolds
    exceptions inherit from this class.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ManifoldValidationError(SymManifoldsError):
    """A point or vector fails manifold validation.

    Indicates that a point is not on the manifold or a vector is not in the
    tangent space. Recoverable: validity checks return it instead of raising.

    Attributes:
        value: The observed violation (e.g. the asymmetry norm), if any
        point_info: Description of the offending point or vector
        manifold_name: Display name of the manifold
        validation_type: Type of validation that failed ('point' or 'vector')
    """

    def __init__(self, message: str, value: Optional[float] = None,
                 point_info: Optional[str] = None,
                 manifold_name: Optional[str] = None,
                 validation_type: str = 'point'):
        details = {
            'value': value,
            'point_info': point_info,
            'manifold_name': manifold_name,
            'validation_type': validation_type
        }
        super().__init__(message, details)
        self.value = value
        self.point_info = point_info
        self.manifold_name = manifold_name
        self.validation_type = validation_type


class DimensionMismatchError(SymManifoldsError, AssertionError):
    """Raised when array dimensions don't match expected values.

    A broken precondition of the coordinate and projection routines, not a
    condition to recover from, hence also an ``AssertionError``.

    Attributes:
        expected: Expected shape
        got: Actual shape received
        operation: Operation being performed
    """

    def __init__(self, message: str, expected: Optional[tuple] = None,
                 got: Optional[tuple] = None, operation: Optional[str] = None):
        details = {
            'expected': expected,
            'got': got,
            'operation': operation
        }
        super().__init__(message, details)
        self.expected = expected
        self.got = got
        self.operation = operation


class ConfigurationError(SymManifoldsError, ValueError):
    """Raised when there's an error in configuration.

    Attributes:
        parameter: Configuration parameter that caused the error
        value: Invalid value provided
        valid_range: Valid range or options for the parameter
    """

    def __init__(self, message: str, parameter: Optional[str] = None,
                 value: Any = None, valid_range: Any = None):
        details = {
            'parameter': parameter,
            'value': value,
            'valid_range': valid_range
        }
        super().__init__(message, details)
        self.parameter = parameter
        self.value = value
        self.valid_range = valid_range


class InvalidParameterError(ConfigurationError):
    """Raised when a manifold is constructed with invalid parameters."""


def expect_shape(array, expected: tuple, operation: str, name: str = 'array') -> None:
    """Raise :class:`DimensionMismatchError` unless ``array.shape == expected``."""
    got = tuple(array.shape)
    if got != tuple(expected):
        raise DimensionMismatchError(
            f"{operation}: expected {name} of shape {tuple(expected)}, got {got}",
            expected=tuple(expected),
            got=got,
            operation=operation
        )


__all__ = [
    'SymManifoldsError',
    'ManifoldValidationError',
    'DimensionMismatchError',
    'ConfigurationError',
    'InvalidParameterError',
    'expect_shape',
]
