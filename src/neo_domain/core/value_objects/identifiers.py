"""Identifier helpers for neo-domain.

Tenant and owner identifiers are opaque to the kernel: any hashable value
compared with ``==``, except that a UUID and its string form are the same
identifier. A small set of values count as "empty" and never bind an unset
field.
"""

from typing import Any, Hashable, Optional, TypeVar
from uuid import UUID

from ...utils import is_nil_uuid, is_valid_uuid

# Opaque identifier accepted by tenant/owner setters
Identifier = Hashable
IdentifierT = TypeVar("IdentifierT", bound=Hashable)


def is_empty_identifier(value: Any) -> bool:
    """Check whether ``value`` is the unset sentinel.

    ``None``, blank strings and the nil UUID (in either UUID or string form)
    are all empty.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip() or is_nil_uuid(value)
    if isinstance(value, UUID):
        return is_nil_uuid(value)
    return False


def _as_uuid(value: Any) -> Optional[UUID]:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str) and is_valid_uuid(value):
        return UUID(value)
    return None


def identifiers_equal(left: Any, right: Any) -> bool:
    """Compare two identifiers, treating a UUID and its string form as equal."""
    left_uuid, right_uuid = _as_uuid(left), _as_uuid(right)
    if left_uuid is not None and right_uuid is not None:
        return left_uuid == right_uuid
    return left == right
