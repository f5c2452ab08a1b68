"""Decorators for manifold methods taking array arguments."""

import functools
import inspect

import numpy as np

from .core.config import get_config
from .exceptions import expect_shape


def validate_arrays(*array_args, check_shape: bool = True):
    """Decorator to convert and validate numpy array arguments of a manifold method.

    Named arguments are converted with ``np.asarray``, keeping complex entries.
    When ``check_shape`` is set and input validation is enabled in the
    configuration, each array must have the manifold's ``representation_size``.

    Args:
        *array_args: Names of arguments that should be numpy arrays
        check_shape: Whether to compare shapes against ``self.representation_size``
    """
    def decorator(func):
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            bound_args = sig.bind(self, *args, **kwargs)
            bound_args.apply_defaults()
            validate = check_shape and get_config().validate_inputs

            for arg_name in array_args:
                value = bound_args.arguments.get(arg_name)
                if value is None:
                    continue
                if not isinstance(value, np.ndarray):
                    value = np.asarray(value)
                    if not np.issubdtype(value.dtype, np.inexact):
                        value = value.astype(np.float64)
                    bound_args.arguments[arg_name] = value
                if validate:
                    expect_shape(value, self.representation_size,
                                 func.__name__, name=arg_name)

            return func(*bound_args.args, **bound_args.kwargs)
        return wrapper
    return decorator
