"""Domain event buffer for neo-domain entities.

Every entity owns one buffer. Events are appended in registration order,
read back as immutable tuple snapshots and only ever removed all at once.
"""

import logging
from typing import Iterator, List, Tuple

from ..events import DomainEvent

logger = logging.getLogger(__name__)


class DomainEventBuffer:
    """Append-only, drainable sequence of domain events."""

    __slots__ = ("_events",)

    def __init__(self):
        self._events: List[DomainEvent] = []

    def register(self, event: DomainEvent) -> None:
        """Append ``event`` after every event registered so far."""
        self._events.append(event)

    @property
    def events(self) -> Tuple[DomainEvent, ...]:
        """Snapshot of the buffered events in registration order."""
        return tuple(self._events)

    def clear(self) -> int:
        """Drop all buffered events.

        Safe to call on an empty buffer.

        Returns:
            Number of events dropped
        """
        count = len(self._events)
        if count:
            self._events.clear()
            logger.debug(f"Cleared {count} domain event(s)")
        return count

    def __len__(self) -> int:
        return len(self._events)

    def __bool__(self) -> bool:
        return bool(self._events)

    def __iter__(self) -> Iterator[DomainEvent]:
        return iter(self.events)

    def __repr__(self) -> str:
        return f"DomainEventBuffer(size={len(self._events)})"
