"""Configuration management for symmanifolds."""

from dataclasses import dataclass
from typing import Optional, Dict, Any, Tuple
import os
import threading

import numpy as np

from ..exceptions import ConfigurationError


@dataclass
class SymManifoldsConfig:
    """Global configuration for symmanifolds.

    Settings can be modified at runtime and affect global behavior. The
    tolerances are the defaults used by validity checks whenever the caller
    does not pass ``atol``/``rtol`` explicitly.

    Attributes:
        atol: Absolute tolerance for validity checks
        rtol: Relative tolerance for validity checks (None selects
            ``sqrt(eps)`` when ``atol`` is zero and 0 otherwise)
        validate_inputs: Whether to validate shapes of array arguments
        default_dtype: Real data type for sampled points ('float32' or 'float64')
        random_seed: Random seed for reproducibility (None for no seed)
        log_level: Logging level ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
        log_format: Format string for log messages
    """

    # Numerical settings
    atol: float = 0.0
    rtol: Optional[float] = None
    default_dtype: str = "float64"

    # Validation settings
    validate_inputs: bool = True

    # Random settings
    random_seed: Optional[int] = None

    # Logging settings
    log_level: str = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def from_env(cls) -> 'SymManifoldsConfig':
        """Create configuration from environment variables.

        Environment variables:
            SYMMANIFOLDS_ATOL: Absolute tolerance
            SYMMANIFOLDS_RTOL: Relative tolerance
            SYMMANIFOLDS_DTYPE: Default real data type
            SYMMANIFOLDS_VALIDATE_INPUTS: Enable argument shape validation
            SYMMANIFOLDS_LOG_LEVEL: Logging level
            SYMMANIFOLDS_RANDOM_SEED: Random seed
        """
        def parse_bool(value: str) -> bool:
            return value.lower() in ('true', '1', 'yes', 'on')

        def parse_int(value: str) -> Optional[int]:
            return int(value) if value else None

        def parse_float(value: str) -> Optional[float]:
            return float(value) if value else None

        return cls(
            atol=parse_float(os.getenv('SYMMANIFOLDS_ATOL', '')) or 0.0,
            rtol=parse_float(os.getenv('SYMMANIFOLDS_RTOL', '')),
            default_dtype=os.getenv('SYMMANIFOLDS_DTYPE', 'float64'),
            validate_inputs=parse_bool(os.getenv('SYMMANIFOLDS_VALIDATE_INPUTS', 'true')),
            random_seed=parse_int(os.getenv('SYMMANIFOLDS_RANDOM_SEED', '')),
            log_level=os.getenv('SYMMANIFOLDS_LOG_LEVEL', 'WARNING'),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            k: v for k, v in self.__dict__.items()
            if not k.startswith('_')
        }

    def update(self, **kwargs) -> None:
        """Update configuration with keyword arguments."""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)
            else:
                raise ConfigurationError(
                    f"Unknown configuration option: {key}",
                    parameter=key,
                    value=value,
                    valid_range=sorted(self.to_dict())
                )

    def tolerances(self, atol: Optional[float] = None,
                   rtol: Optional[float] = None) -> Tuple[float, float]:
        """Resolve the effective ``(atol, rtol)`` pair.

        Explicit arguments win over the configured values. A missing relative
        tolerance defaults to ``sqrt(eps)`` if the absolute one is zero.
        """
        atol = self.atol if atol is None else atol
        if rtol is None:
            rtol = self.rtol
        if rtol is None:
            rtol = float(np.sqrt(np.finfo(np.float64).eps)) if atol == 0 else 0.0
        if atol < 0 or rtol < 0:
            raise ConfigurationError(
                f"Tolerances must be non-negative, got atol={atol}, rtol={rtol}",
                parameter='atol' if atol < 0 else 'rtol',
                value=atol if atol < 0 else rtol,
                valid_range='>= 0'
            )
        return float(atol), float(rtol)


# Thread-local storage for context managers
_config_stack = threading.local()

# Global configuration instance
_global_config = SymManifoldsConfig.from_env()


def get_config() -> SymManifoldsConfig:
    """Get the current configuration.

    Returns the context-local configuration if in a context manager,
    otherwise returns the global configuration.
    """
    stack = getattr(_config_stack, 'stack', None)
    if stack:
        return stack[-1]
    return _global_config


def set_config(**kwargs) -> None:
    """Update global configuration.

    Args:
        **kwargs: Configuration options to update

    Example:
        >>> set_config(atol=1e-12, log_level='DEBUG')
    """
    _global_config.update(**kwargs)


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _global_config
    _global_config = SymManifoldsConfig()


class config_context:
    """Context manager for temporary configuration changes.

    Example:
        >>> with config_context(atol=1e-8):
        ...     # Looser validity checks here
        ...     M.is_point(p)
        >>> # Original configuration restored
    """

    def __init__(self, **kwargs):
        self.kwargs = kwargs

    def __enter__(self):
        if not hasattr(_config_stack, 'stack'):
            _config_stack.stack = []

        current = get_config()
        new_config = SymManifoldsConfig(**current.to_dict())
        new_config.update(**self.kwargs)

        _config_stack.stack.append(new_config)
        return new_config

    def __exit__(self, exc_type, exc_val, exc_tb):
        _config_stack.stack.pop()
