"""Exceptions module for neo-domain."""

from .base import NeoDomainError, create_error_response
from .domain import DomainRuleViolation, InvalidBindingState

__all__ = [
    # Base
    "NeoDomainError",
    "create_error_response",

    # Domain
    "DomainRuleViolation",
    "InvalidBindingState",
]
