"""Domain event base record for neo-domain.

Concrete events are frozen dataclasses that subclass DomainEvent and add
their own payload fields::

    @dataclass(frozen=True)
    class InvoiceIssued(DomainEvent):
        invoice_external_id: str
        amount_cents: int

The base contributes only ``occurred_at``. It is keyword-only, so subclasses
may declare required positional fields, and it is captured when the event
object is built, not when it is registered on an entity.
"""

from dataclasses import dataclass, field
from datetime import datetime

from ...utils import utc_now, ensure_utc


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Immutable record of something that happened in the domain."""

    occurred_at: datetime = field(default_factory=utc_now)

    def __post_init__(self):
        if type(self) is DomainEvent:
            raise TypeError("DomainEvent is abstract; define a subclass with the event payload")
        object.__setattr__(self, "occurred_at", ensure_utc(self.occurred_at))

    @property
    def event_name(self) -> str:
        """Concrete event class name, used for routing and logs."""
        return type(self).__name__
