"""Base entities for neo-domain."""

from .event_buffer import DomainEventBuffer
from .entity import Entity
from .tenant_binding import TenantBinding
from .tenant_scoped_entity import TenantScopedEntity
from .aggregate_root import AggregateRoot, is_aggregate_root

__all__ = [
    "DomainEventBuffer",
    "Entity",
    "TenantBinding",
    "TenantScopedEntity",
    "AggregateRoot",
    "is_aggregate_root",
]
