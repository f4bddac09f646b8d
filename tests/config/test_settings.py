"""Tests for DomainSettings."""

import pytest
from pydantic import ValidationError

from neo_domain.config import DomainSettings, get_settings, reset_settings


class TestDomainSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("NEO_DOMAIN_EXTERNAL_ID_VERSION", raising=False)
        monkeypatch.delenv("NEO_DOMAIN_CONFIGURE_LOGGING", raising=False)

        settings = DomainSettings(_env_file=None)

        assert settings.external_id_version == 7
        assert settings.configure_logging is True

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("NEO_DOMAIN_EXTERNAL_ID_VERSION", "4")
        monkeypatch.setenv("NEO_DOMAIN_CONFIGURE_LOGGING", "false")

        settings = DomainSettings(_env_file=None)

        assert settings.external_id_version == 4
        assert settings.configure_logging is False

    def test_unsupported_uuid_version_rejected(self):
        with pytest.raises(ValidationError):
            DomainSettings(_env_file=None, external_id_version=5)

    def test_get_settings_is_cached_until_reset(self, monkeypatch):
        monkeypatch.setenv("NEO_DOMAIN_EXTERNAL_ID_VERSION", "7")
        first = get_settings()

        monkeypatch.setenv("NEO_DOMAIN_EXTERNAL_ID_VERSION", "4")
        assert get_settings() is first
        assert get_settings().external_id_version == 7

        reset_settings()
        assert get_settings().external_id_version == 4
