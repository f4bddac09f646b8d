"""UUID utilities for neo-domain.

External identifiers are UUID strings. UUIDv7 is the default because its
leading timestamp keeps identifiers roughly creation-ordered.
"""

import uuid
import time
from typing import Optional, Union

from ..config.constants import DefaultValues


NIL_UUID = uuid.UUID(int=0)


def generate_uuid_v7() -> str:
    """
    Generate a UUIDv7 with time-based ordering.

    Returns:
        String representation of UUIDv7
    """
    # 48-bit millisecond timestamp followed by 80 random bits
    timestamp_ms = int(time.time() * 1000)
    timestamp_bytes = timestamp_ms.to_bytes(6, byteorder='big')
    random_bytes = uuid.uuid4().bytes[6:]
    uuid_bytes = timestamp_bytes + random_bytes

    # Version 7 in the high nibble of byte 6, RFC 4122 variant in byte 8
    uuid_bytes = uuid_bytes[:6] + bytes([(uuid_bytes[6] & 0x0f) | 0x70]) + uuid_bytes[7:]
    uuid_bytes = uuid_bytes[:8] + bytes([(uuid_bytes[8] & 0x3f) | 0x80]) + uuid_bytes[9:]

    return str(uuid.UUID(bytes=uuid_bytes))


def generate_uuid_v4() -> str:
    """
    Generate a standard UUIDv4 (random).

    Returns:
        String representation of UUIDv4
    """
    return str(uuid.uuid4())


def is_valid_uuid(uuid_str: str, version: Optional[int] = None) -> bool:
    """
    Check if string is a valid UUID.

    Args:
        uuid_str: String to validate
        version: Optional specific version to check (4, 7, etc.)

    Returns:
        True if valid UUID, False otherwise
    """
    try:
        uuid_obj = uuid.UUID(uuid_str)
    except (ValueError, TypeError, AttributeError):
        return False

    if version is not None:
        return uuid_obj.version == version
    return True


def is_nil_uuid(value: Union[str, uuid.UUID]) -> bool:
    """Check if value is the all-zero UUID."""
    if isinstance(value, uuid.UUID):
        return value == NIL_UUID
    return isinstance(value, str) and is_valid_uuid(value) and uuid.UUID(value) == NIL_UUID


class UUIDGenerator:
    """UUID generator with configurable defaults."""

    def __init__(self, default_version: int = DefaultValues.EXTERNAL_ID_VERSION):
        """
        Initialize UUID generator.

        Args:
            default_version: Default UUID version to generate (4 or 7)
        """
        if default_version not in DefaultValues.SUPPORTED_UUID_VERSIONS:
            raise ValueError(f"UUID version must be one of {DefaultValues.SUPPORTED_UUID_VERSIONS}")

        self.default_version = default_version

    def generate(self) -> str:
        """Generate UUID using default version."""
        if self.default_version == 7:
            return generate_uuid_v7()
        return generate_uuid_v4()

    def __call__(self) -> str:
        return self.generate()


def get_default_generator() -> UUIDGenerator:
    """Build a generator for the configured external id version."""
    from ..config.settings import get_settings

    return UUIDGenerator(default_version=get_settings().external_id_version)


def generate_external_id() -> str:
    """Generate a new entity external identifier."""
    return get_default_generator().generate()
