"""Domain event protocols for neo-domain.

Contracts for the collaborators around the kernel's event buffer. The
kernel implements HasDomainEvents; publishers live in service code.
"""

from typing import Protocol, Tuple, runtime_checkable

from ..events import DomainEvent


@runtime_checkable
class HasDomainEvents(Protocol):
    """Anything that accumulates domain events for later dispatch."""

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Snapshot of events registered so far, in registration order."""
        ...

    def clear_domain_events(self) -> None:
        """Drop all accumulated events."""
        ...


@runtime_checkable
class DomainEventPublisher(Protocol):
    """Publishes domain events to a transport.

    Expected usage by a unit of work: read ``domain_events``, publish each
    one, call ``clear_domain_events()`` only after every publish succeeded,
    then commit.
    """

    def publish(self, event: DomainEvent) -> None:
        """Publish a single event."""
        ...
