"""Neo-Domain - domain-modeling kernel for the NeoMultiTenant platform.

Base entities with stable identity and audit timestamps, per-aggregate
domain event buffers, write-once tenant/owner binding and the domain
exception hierarchy shared by every service.
"""

from .__version__ import __version__

# Initialize logging configuration on import
from .config import get_settings, setup_logging
if get_settings().configure_logging:
    setup_logging()

from .config import DomainSettings, reset_settings

from .core.exceptions import (
    NeoDomainError,
    DomainRuleViolation,
    InvalidBindingState,
    create_error_response,
)

from .core.value_objects import (
    Unset,
    UNSET,
    Bound,
    WriteOnce,
    is_empty_identifier,
)

from .core.events import DomainEvent

from .core.protocols import (
    Clock,
    HasDomainEvents,
    DomainEventPublisher,
)

from .core.entities import (
    DomainEventBuffer,
    Entity,
    TenantScopedEntity,
    AggregateRoot,
    is_aggregate_root,
)

from .utils import SystemClock, ManualClock

__all__ = [
    "__version__",

    # Configuration
    "DomainSettings",
    "get_settings",
    "reset_settings",
    "setup_logging",

    # Exceptions
    "NeoDomainError",
    "DomainRuleViolation",
    "InvalidBindingState",
    "create_error_response",

    # Value Objects
    "Unset",
    "UNSET",
    "Bound",
    "WriteOnce",
    "is_empty_identifier",

    # Events
    "DomainEvent",

    # Protocols
    "Clock",
    "HasDomainEvents",
    "DomainEventPublisher",

    # Entities
    "DomainEventBuffer",
    "Entity",
    "TenantScopedEntity",
    "AggregateRoot",
    "is_aggregate_root",

    # Clocks
    "SystemClock",
    "ManualClock",
]
