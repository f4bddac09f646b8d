"""Settings for neo-domain.

Environment-driven configuration loaded through pydantic-settings.
Every field can be overridden with a ``NEO_DOMAIN_`` prefixed variable
or a ``.env`` file.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DefaultValues


class DomainSettings(BaseSettings):
    """Kernel settings."""

    model_config = SettingsConfigDict(
        env_prefix=DefaultValues.ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # UUID version used when generating entity external identifiers
    external_id_version: int = Field(default=DefaultValues.EXTERNAL_ID_VERSION)

    # Configure stdlib logging when the package is imported
    configure_logging: bool = Field(default=True)

    @field_validator("external_id_version")
    @classmethod
    def validate_external_id_version(cls, value: int) -> int:
        if value not in DefaultValues.SUPPORTED_UUID_VERSIONS:
            raise ValueError(
                f"external_id_version must be one of {DefaultValues.SUPPORTED_UUID_VERSIONS}, got {value}"
            )
        return value


@lru_cache()
def get_settings() -> DomainSettings:
    """Get cached kernel settings."""
    return DomainSettings()


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
