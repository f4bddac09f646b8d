"""Value objects for neo-domain."""

from .identifiers import Identifier, identifiers_equal, is_empty_identifier
from .write_once import Unset, UNSET, Bound, BindingState, WriteOnce

__all__ = [
    # Identifiers
    "Identifier",
    "is_empty_identifier",
    "identifiers_equal",

    # Write-once state
    "Unset",
    "UNSET",
    "Bound",
    "BindingState",
    "WriteOnce",
]
