"""Core module for neo-domain.

Base entities, domain events, write-once value objects, protocols and
exceptions.
"""

from .exceptions import *
from .value_objects import *
from .events import *
from .protocols import *
from .entities import *

__all__ = [
    # Exceptions
    "NeoDomainError",
    "DomainRuleViolation",
    "InvalidBindingState",
    "create_error_response",

    # Value Objects
    "Identifier",
    "is_empty_identifier",
    "identifiers_equal",
    "Unset",
    "UNSET",
    "Bound",
    "BindingState",
    "WriteOnce",

    # Events
    "DomainEvent",

    # Protocols
    "Clock",
    "HasDomainEvents",
    "DomainEventPublisher",

    # Entities
    "DomainEventBuffer",
    "Entity",
    "TenantBinding",
    "TenantScopedEntity",
    "AggregateRoot",
    "is_aggregate_root",
]
