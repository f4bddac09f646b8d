"""Configuration module for neo-domain.

Settings, constants and logging configuration.
"""

from .constants import ErrorCodes, BindingFields, DefaultValues
from .settings import DomainSettings, get_settings, reset_settings
from .logging_config import (
    setup_logging,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
)

__all__ = [
    # Constants
    "ErrorCodes",
    "BindingFields",
    "DefaultValues",

    # Settings
    "DomainSettings",
    "get_settings",
    "reset_settings",

    # Logging configuration
    "setup_logging",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
]
