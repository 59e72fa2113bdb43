"""
Exception hierarchy for Duck Pond.
"""
from typing import Any, Dict, Optional


class DuckPondError(Exception):
    """Base exception for all Duck Pond errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'details': self.details
        }


class ConfigurationError(DuckPondError):
    """Raised when configuration is invalid."""
    pass


class PatternError(DuckPondError):
    """Raised when a pattern object is wired incorrectly."""
    pass
