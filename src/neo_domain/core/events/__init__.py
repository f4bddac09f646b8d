"""Domain events for neo-domain."""

from .domain_event import DomainEvent

__all__ = [
    "DomainEvent",
]
