"""Pytest configuration and fixtures for neo-domain tests."""

import pytest
from datetime import datetime, timezone
from uuid import uuid4

from neo_domain.config import reset_settings
from neo_domain.utils import ManualClock


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make every test read settings from its own environment."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def start_instant():
    """Fixed starting instant for manual clocks."""
    return datetime(2024, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock(start_instant):
    """Manual clock starting at ``start_instant``."""
    return ManualClock(start_instant)


@pytest.fixture
def tenant_id():
    """Sample tenant ID for testing."""
    return uuid4()


@pytest.fixture
def other_tenant_id():
    """A second tenant ID, distinct from ``tenant_id``."""
    return uuid4()


@pytest.fixture
def user_id():
    """Sample user ID for testing."""
    return uuid4()


@pytest.fixture
def other_user_id():
    """A second user ID, distinct from ``user_id``."""
    return uuid4()
