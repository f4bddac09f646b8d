"""Constants for neo-domain.

Error codes and field names shared by the kernel's entities and
exceptions. Values are stable; persistence and API layers may match on them.
"""

from typing import Final


class ErrorCodes:
    """Error codes carried by neo-domain exceptions."""

    DOMAIN_RULE_VIOLATION: Final[str] = "DOMAIN_RULE_VIOLATION"
    INVALID_BINDING_STATE: Final[str] = "INVALID_BINDING_STATE"


class BindingFields:
    """Names of the write-once fields on tenant-scoped entities."""

    TENANT_ID: Final[str] = "tenant_id"
    OWNER_ID: Final[str] = "owner_id"


class DefaultValues:
    """Default values for kernel settings."""

    EXTERNAL_ID_VERSION: Final[int] = 7
    SUPPORTED_UUID_VERSIONS: Final[tuple] = (4, 7)
    ENV_PREFIX: Final[str] = "NEO_DOMAIN_"
