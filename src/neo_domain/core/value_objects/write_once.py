"""Write-once field state for neo-domain.

A field is either ``Unset`` or ``Bound(value)``. Binding a non-empty value
moves it from Unset to Bound, and binding an empty value while Unset does
nothing. Once bound, re-binding the same value is a no-op and binding
anything else, empty values included, raises InvalidBindingState. Nothing
moves a field back to Unset.
"""

import logging
from dataclasses import dataclass
from typing import Generic, Optional, Union

from .identifiers import IdentifierT, identifiers_equal, is_empty_identifier
from ..exceptions import InvalidBindingState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unset:
    """State of a write-once field that has never been bound."""

    def __repr__(self) -> str:
        return "Unset"


UNSET = Unset()


@dataclass(frozen=True)
class Bound(Generic[IdentifierT]):
    """State of a write-once field bound to ``value``."""

    value: IdentifierT


BindingState = Union[Unset, Bound]


class WriteOnce(Generic[IdentifierT]):
    """A single write-once identifier slot.

    Args:
        name: Field name used in error messages and logs
    """

    __slots__ = ("_name", "_state")

    def __init__(self, name: str):
        self._name = name
        self._state: BindingState = UNSET

    @property
    def name(self) -> str:
        return self._name

    @property
    def state(self) -> BindingState:
        return self._state

    @property
    def is_bound(self) -> bool:
        return isinstance(self._state, Bound)

    @property
    def value(self) -> Optional[IdentifierT]:
        """Bound value, or None while unset."""
        if isinstance(self._state, Bound):
            return self._state.value
        return None

    def bind(self, value: Optional[IdentifierT]) -> bool:
        """Bind the field to ``value``.

        Returns:
            True if this call moved the field from Unset to Bound, False if it
            was a no-op (empty value while unset, or the bound value again).

        Raises:
            InvalidBindingState: The field is bound and ``value`` is anything
                else, empty values included.
        """
        if isinstance(self._state, Bound):
            if identifiers_equal(self._state.value, value):
                return False
            logger.warning(
                f"Rejected rebinding of {self._name}: bound to {self._state.value}, got {value}"
            )
            raise InvalidBindingState(
                f"{self._name} cannot be changed once set",
                field_name=self._name,
                current_value=self._state.value,
                attempted_value=value,
            )

        if is_empty_identifier(value):
            return False

        self._state = Bound(value)
        logger.debug(f"Bound {self._name} to {value}")
        return True

    def __repr__(self) -> str:
        return f"WriteOnce(name={self._name!r}, state={self._state!r})"
