"""Clock implementations for neo-domain.

Entities read the current instant through a clock object so that
timestamp behaviour can be driven deterministically in tests.
"""

from datetime import datetime, timedelta
from typing import Optional

from .timezone import utc_now, ensure_utc


class SystemClock:
    """Clock backed by the system UTC time."""

    def now(self) -> datetime:
        return utc_now()

    def __repr__(self) -> str:
        return "SystemClock()"


class ManualClock:
    """Clock that only moves when told to.

    Useful for tests that assert on ``created_at``/``updated_at`` ordering.
    Moving the clock backwards is allowed so callers can exercise
    forward-only timestamp guarantees.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = ensure_utc(start) if start is not None else utc_now()

    def now(self) -> datetime:
        return self._now

    def advance(self, delta: Optional[timedelta] = None, **kwargs) -> datetime:
        """Move the clock by ``delta`` (or ``timedelta(**kwargs)``) and return the new instant."""
        self._now = self._now + (delta if delta is not None else timedelta(**kwargs))
        return self._now

    def set(self, instant: datetime) -> None:
        """Jump to an absolute instant."""
        self._now = ensure_utc(instant)

    def __repr__(self) -> str:
        return f"ManualClock(now={self._now.isoformat()})"


# Default clock instance
system_clock = SystemClock()
