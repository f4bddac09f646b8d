"""Utilities module for neo-domain.

Identifier generation, UTC helpers and clocks used by the kernel.
"""

from .uuid import (
    NIL_UUID,
    generate_uuid_v7,
    generate_uuid_v4,
    is_valid_uuid,
    is_nil_uuid,
    UUIDGenerator,
    get_default_generator,
    generate_external_id,
)
from .timezone import utc_now, ensure_utc
from .clock import SystemClock, ManualClock, system_clock

__all__ = [
    # UUID Generation
    "NIL_UUID",
    "generate_uuid_v7",
    "generate_uuid_v4",
    "is_valid_uuid",
    "is_nil_uuid",
    "UUIDGenerator",
    "get_default_generator",
    "generate_external_id",

    # Timezone Utilities
    "utc_now",
    "ensure_utc",

    # Clocks
    "SystemClock",
    "ManualClock",
    "system_clock",
]
