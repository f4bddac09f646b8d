"""Tenant-scoped base entity for neo-domain.

Entities that belong to a tenant and an owning user. Both identifiers are
write-once: they may be attached after construction (typically right after
the request context is resolved, before the first save) but once set they
cannot be changed. Setting the same value again is allowed and does
nothing. An empty value (None, blank string, nil UUID) is a no-op while the
field is unset and is rejected like any other value once it is bound.
A UUID and its canonical string form count as the same identifier.

The user and tenant identifiers passed in are assumed to be already
authenticated and authorised by the caller.
"""

from typing import Hashable, Optional

from .entity import Entity
from .tenant_binding import TenantBinding


class TenantScopedEntity(Entity):
    """Entity bound to one tenant and one owning user."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._binding = TenantBinding()

    @property
    def tenant_id(self) -> Optional[Hashable]:
        """Bound tenant identifier, None until set."""
        return self._binding.tenant_id

    @property
    def owner_id(self) -> Optional[Hashable]:
        """Bound owning user identifier, None until set."""
        return self._binding.owner_id

    @property
    def is_tenant_bound(self) -> bool:
        return self._binding.tenant.is_bound

    @property
    def is_owner_bound(self) -> bool:
        return self._binding.owner.is_bound

    def set_tenant(self, tenant_id: Optional[Hashable]) -> None:
        """Bind the entity to ``tenant_id``.

        Raises:
            InvalidBindingState: A tenant is already bound and ``tenant_id``
                is not it (empty values included). A UUID and its string
                form are treated as equal.
        """
        self._binding.tenant.bind(tenant_id)

    def set_user(self, user_id: Optional[Hashable]) -> None:
        """Bind the entity to its owning user ``user_id``.

        Raises:
            InvalidBindingState: An owner is already bound and ``user_id``
                is not it (empty values included). A UUID and its string
                form are treated as equal.
        """
        self._binding.owner.bind(user_id)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, external_id={self.external_id!r}, "
            f"tenant_id={self.tenant_id!r}, owner_id={self.owner_id!r})"
        )
