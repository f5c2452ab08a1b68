"""Logging setup for symmanifolds.

Every module logs through a ``symmanifolds.*`` logger with its own stdout
handler. Level and format come from the active configuration when the logger
is first requested; :func:`set_log_level` updates the configuration and every
logger handed out so far.
"""

import logging
import sys
import functools
import time
from typing import Optional, Callable, Any, Dict, Union
from .config import get_config, set_config

_PREFIX = "symmanifolds"
_loggers: Dict[str, logging.Logger] = {}


def _qualified(name: str) -> str:
    if name == _PREFIX or name.startswith(_PREFIX + "."):
        return name
    return f"{_PREFIX}.{name}"


def get_logger(name: str) -> logging.Logger:
    """Return the package logger for ``name``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Building orthonormal basis")
    """
    full_name = _qualified(name)
    logger = _loggers.get(full_name)
    if logger is not None:
        return logger

    logger = logging.getLogger(full_name)
    if not logger.handlers:
        config = get_config()
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(config.log_format))
        logger.addHandler(handler)
        logger.setLevel(config.log_level)
        logger.propagate = False

    _loggers[full_name] = logger
    return logger


def set_log_level(level: Union[str, int]) -> None:
    """Set the level in the configuration and on all existing package loggers."""
    if isinstance(level, int):
        level = logging.getLevelName(level)
    set_config(log_level=level)
    for logger in _loggers.values():
        logger.setLevel(level)


def _describe_args(args, kwargs) -> str:
    # Arrays are summarised by shape and dtype, everything else by repr
    def short(value):
        shape = getattr(value, 'shape', None)
        if shape is not None and getattr(value, 'dtype', None) is not None:
            return f"<{value.dtype}{list(shape)}>"
        return repr(value)

    parts = [short(a) for a in args]
    parts.extend(f"{k}={short(v)}" for k, v in kwargs.items())
    return ", ".join(parts)


def log_function_call(
    logger: Optional[logging.Logger] = None,
    level: int = logging.DEBUG,
    include_args: bool = False,
    include_time: bool = True
) -> Callable:
    """Decorator logging entry, exit and failures of a function.

    Args:
        logger: Logger to use, the logger of the function's module if None
        level: Level for the entry and exit messages
        include_args: Log arguments, arrays summarised as ``<dtype[shape]>``
        include_time: Append the elapsed time to the exit message

    Failures are logged at ERROR and re-raised unchanged.

    Example:
        >>> @log_function_call(include_time=True)
        ... def check_all(M, points):
        ...     return [M.is_point(p) for p in points]
    """
    def decorator(func: Callable) -> Callable:
        log = logger if logger is not None else get_logger(func.__module__)

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            if include_args:
                log.log(level, "Calling %s(%s)", func.__name__, _describe_args(args, kwargs))
            else:
                log.log(level, "Calling %s", func.__name__)

            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                log.error("%s failed after %.3fs: %s: %s",
                          func.__name__, time.perf_counter() - start, type(e).__name__, e)
                raise

            if include_time:
                log.log(level, "%s completed in %.3fs",
                        func.__name__, time.perf_counter() - start)
            else:
                log.log(level, "%s completed", func.__name__)
            return result

        return wrapper
    return decorator
