"""Domain exceptions for neo-domain.

InvalidBindingState is raised by the kernel itself when a write-once
tenant/owner binding is contradicted. DomainRuleViolation is raised by
business code built on the kernel. Neither derives from the other.
"""

from typing import Any, Dict, Optional

from .base import NeoDomainError
from ...config.constants import ErrorCodes


class DomainRuleViolation(NeoDomainError):
    """Raised by business logic when a domain rule is broken.

    Can be created with no message, with a message, or with a message and the
    underlying exception that caused it. The cause is chained as
    ``__cause__`` so tracebacks show it without ``raise ... from``.
    """

    default_message = "Domain rule violated"

    def __init__(
        self,
        message: Optional[str] = None,
        cause: Optional[BaseException] = None,
        *,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_code=error_code or ErrorCodes.DOMAIN_RULE_VIOLATION,
            details=details,
        )
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class InvalidBindingState(NeoDomainError):
    """Raised when a bound write-once field is set to a different value.

    Always a programming error upstream (an entity being re-homed to another
    tenant or owner). Not retryable.
    """

    default_message = "Binding cannot be changed once set"

    def __init__(
        self,
        message: Optional[str] = None,
        field_name: Optional[str] = None,
        current_value: Any = None,
        attempted_value: Any = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        enhanced_details = dict(details or {})
        if field_name:
            enhanced_details["field"] = field_name
        if current_value is not None:
            enhanced_details["current_value"] = str(current_value)
        if attempted_value is not None:
            enhanced_details["attempted_value"] = str(attempted_value)

        super().__init__(
            message=message,
            error_code=ErrorCodes.INVALID_BINDING_STATE,
            details=enhanced_details,
        )
        self.field_name = field_name
        self.current_value = current_value
        self.attempted_value = attempted_value
