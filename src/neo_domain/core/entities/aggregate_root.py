"""Aggregate root marker for neo-domain.

Mix AggregateRoot into an entity to declare it a consistency boundary:
the unit whose domain events are collected, dispatched and cleared
together after a unit of work succeeds. The kernel does not enforce it.
"""

from typing import Any


class AggregateRoot:
    """Marker for aggregate roots. No state, no behavior."""

    __slots__ = ()


def is_aggregate_root(obj: Any) -> bool:
    """Check whether ``obj`` (an instance or a class) is tagged as an aggregate root."""
    if isinstance(obj, type):
        return issubclass(obj, AggregateRoot)
    return isinstance(obj, AggregateRoot)
