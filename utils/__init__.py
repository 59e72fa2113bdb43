"""
Utility modules for Duck Pond.
"""
from .logging_config import get_logger, LoggerFactory, LogContext, StructuredFormatter
from .exceptions import DuckPondError, ConfigurationError, PatternError

__all__ = [
    'get_logger',
    'LoggerFactory',
    'LogContext',
    'StructuredFormatter',
    'DuckPondError',
    'ConfigurationError',
    'PatternError',
]
