"""Clock protocol for neo-domain."""

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current instant for entity audit timestamps."""

    def now(self) -> datetime:
        """Return the current UTC-aware instant."""
        ...
