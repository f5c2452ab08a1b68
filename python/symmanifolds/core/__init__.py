"""Core functionality for symmanifolds."""

from .config import get_config, set_config, reset_config, SymManifoldsConfig, config_context
from .logging import get_logger, set_log_level, log_function_call

__all__ = [
    'get_config',
    'set_config',
    'reset_config',
    'SymManifoldsConfig',
    'config_context',
    'get_logger',
    'set_log_level',
    'log_function_call',
]
