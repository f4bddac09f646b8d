"""Tests for identifier generation and clocks."""

import pytest
from datetime import datetime, timedelta, timezone
from uuid import UUID

from neo_domain.config import DefaultValues
from neo_domain.utils import (
    NIL_UUID,
    ManualClock,
    SystemClock,
    UUIDGenerator,
    ensure_utc,
    generate_external_id,
    generate_uuid_v4,
    generate_uuid_v7,
    is_nil_uuid,
    is_valid_uuid,
)


class TestUUIDGeneration:
    """Tests for UUID helpers."""

    def test_uuid_v7_version_and_variant(self):
        value = UUID(generate_uuid_v7())

        assert value.version == 7
        assert value.variant == "specified in RFC 4122"

    def test_uuid_v7_timestamp_prefix_is_current(self):
        before_ms = int(datetime.now(timezone.utc).timestamp() * 1000)
        value = UUID(generate_uuid_v7())
        after_ms = int(datetime.now(timezone.utc).timestamp() * 1000)

        prefix_ms = int.from_bytes(value.bytes[:6], byteorder="big")
        assert before_ms - 1 <= prefix_ms <= after_ms + 1

    def test_uuid_v4(self):
        assert UUID(generate_uuid_v4()).version == 4

    def test_generator_versions(self):
        assert is_valid_uuid(UUIDGenerator(4)(), version=4)
        assert is_valid_uuid(UUIDGenerator(7).generate(), version=7)

    def test_generator_rejects_other_versions(self):
        with pytest.raises(ValueError):
            UUIDGenerator(default_version=1)

    def test_generator_default_follows_constants(self):
        assert UUIDGenerator().default_version == DefaultValues.EXTERNAL_ID_VERSION
        for version in DefaultValues.SUPPORTED_UUID_VERSIONS:
            assert is_valid_uuid(UUIDGenerator(version).generate(), version=version)

    def test_generate_external_id_default(self):
        assert is_valid_uuid(generate_external_id(), version=7)

    @pytest.mark.parametrize("value", ["nope", "", None, 12])
    def test_invalid_uuid_strings(self, value):
        assert is_valid_uuid(value) is False

    def test_nil_uuid(self):
        assert is_nil_uuid(NIL_UUID) is True
        assert is_nil_uuid(str(NIL_UUID)) is True
        assert is_nil_uuid(generate_uuid_v4()) is False
        assert is_nil_uuid("not-a-uuid") is False


class TestClocks:
    """Tests for clock implementations."""

    def test_system_clock_is_utc(self):
        now = SystemClock().now()

        assert now.utcoffset() == timedelta(0)

    def test_manual_clock_advance_and_set(self, start_instant):
        clock = ManualClock(start_instant)

        assert clock.now() == start_instant
        assert clock.advance(timedelta(minutes=2)) == start_instant + timedelta(minutes=2)
        assert clock.advance(seconds=-30) == start_instant + timedelta(seconds=90)

        clock.set(datetime(2030, 1, 1))
        assert clock.now() == datetime(2030, 1, 1, tzinfo=timezone.utc)

    def test_manual_clock_does_not_move_on_its_own(self, start_instant):
        clock = ManualClock(start_instant)

        assert clock.now() == clock.now() == start_instant

    def test_ensure_utc(self):
        naive = datetime(2024, 1, 1, 0, 0)
        eastern = datetime(2024, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=-5)))

        assert ensure_utc(naive).tzinfo == timezone.utc
        assert ensure_utc(eastern) == datetime(2024, 1, 1, 5, 0, tzinfo=timezone.utc)
