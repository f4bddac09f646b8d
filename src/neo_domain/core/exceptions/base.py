"""Base exceptions for neo-domain.

All kernel exceptions inherit from NeoDomainError and carry an error code
and a details mapping, the same structure the platform's service layers
render into API error bodies.
"""

from typing import Any, Dict, Optional


class NeoDomainError(Exception):
    """Base exception for all neo-domain errors."""

    default_message = "Domain error"

    def __init__(
        self,
        message: Optional[str] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        message = message if message is not None else self.default_message
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def create_error_response(exception: NeoDomainError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The neo-domain exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
