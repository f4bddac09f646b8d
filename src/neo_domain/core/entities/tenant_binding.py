"""Tenant and owner binding for tenant-scoped entities."""

from typing import Hashable, Optional

from ..value_objects import WriteOnce
from ...config.constants import BindingFields


class TenantBinding:
    """Pair of independent write-once slots: owning user and tenant."""

    __slots__ = ("owner", "tenant")

    def __init__(self):
        self.owner: WriteOnce = WriteOnce(BindingFields.OWNER_ID)
        self.tenant: WriteOnce = WriteOnce(BindingFields.TENANT_ID)

    @property
    def owner_id(self) -> Optional[Hashable]:
        return self.owner.value

    @property
    def tenant_id(self) -> Optional[Hashable]:
        return self.tenant.value

    def __repr__(self) -> str:
        return f"TenantBinding(owner_id={self.owner_id!r}, tenant_id={self.tenant_id!r})"
