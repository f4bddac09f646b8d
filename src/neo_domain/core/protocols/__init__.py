"""Protocols for neo-domain collaborators."""

from .clock import Clock
from .events import HasDomainEvents, DomainEventPublisher

__all__ = [
    "Clock",
    "HasDomainEvents",
    "DomainEventPublisher",
]
