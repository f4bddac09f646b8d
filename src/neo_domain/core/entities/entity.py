"""Base entity for neo-domain.

Entity carries identity, audit timestamps and a domain event buffer. Event
operations are delegated to an owned DomainEventBuffer rather than
inherited.

Identity:
    ``id`` is the internal storage key. The kernel only reserves it; the
    persistence layer assigns it on first save, and ``None`` means the
    entity has not been persisted yet. ``external_id`` is a UUID string
    assigned at construction, never reassigned, and is the only identifier
    that should leave the service.

Timestamps:
    ``created_at`` and ``updated_at`` start equal. ``touch()`` moves
    ``updated_at`` forward to the clock's current instant and never moves it
    backwards, even if the clock does.
"""

from datetime import datetime
from typing import Any, Optional, Tuple, Union
from uuid import UUID

from ..events import DomainEvent
from ..protocols import Clock
from .event_buffer import DomainEventBuffer
from ...utils import ensure_utc, generate_external_id, system_clock


class Entity:
    """Base class for persisted business entities.

    Args:
        id: Internal storage key, if the entity is being rehydrated
        external_id: External identifier to keep instead of generating one
        clock: Source of the current instant, defaults to the system UTC clock
    """

    def __init__(
        self,
        *,
        id: Optional[Any] = None,
        external_id: Optional[Union[str, UUID]] = None,
        clock: Optional[Clock] = None,
    ):
        self._clock: Clock = clock or system_clock
        self._events = DomainEventBuffer()

        if external_id is None:
            external_id = generate_external_id()
        elif isinstance(external_id, UUID):
            external_id = str(external_id)
        if not isinstance(external_id, str) or not external_id.strip():
            raise ValueError("External ID must be a non-empty string or UUID")
        self._external_id: str = external_id

        self.id = id

        now = self._now()
        self._created_at: datetime = now
        self._updated_at: datetime = now

    # Identity

    @property
    def external_id(self) -> str:
        return self._external_id

    @property
    def is_persisted(self) -> bool:
        """True once the persistence layer has assigned ``id``."""
        return self.id is not None

    # Audit timestamps

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def touch(self) -> None:
        """Refresh ``updated_at`` to the current instant, forward only."""
        now = self._now()
        if now > self._updated_at:
            self._updated_at = now

    def _now(self) -> datetime:
        return ensure_utc(self._clock.now())

    # Domain events

    def register_domain_event(self, event: DomainEvent) -> None:
        """Queue ``event`` for dispatch after the current unit of work."""
        self._events.register(event)

    @property
    def domain_events(self) -> Tuple[DomainEvent, ...]:
        """Events registered since the last clear, oldest first."""
        return self._events.events

    def clear_domain_events(self) -> None:
        """Drop all queued events. Call after they have been published."""
        self._events.clear()

    # Identity equality

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._external_id == other._external_id

    def __hash__(self) -> int:
        return hash((type(self), self._external_id))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r}, external_id={self._external_id!r})"
