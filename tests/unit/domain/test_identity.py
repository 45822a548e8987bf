"""Tests for identity and timestamp helpers."""

from datetime import datetime, timedelta, timezone

from app.domain.value_objects.identity import (
    EPOCH,
    UNKNOWN_ACTOR_ID,
    ensure_utc,
    is_unknown_actor,
    parse_timestamp,
)


def test_epoch_is_aware_unix_zero():
    assert EPOCH == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_unknown_actor_sentinel():
    assert is_unknown_actor(UNKNOWN_ACTOR_ID) is True
    assert is_unknown_actor("") is True
    assert is_unknown_actor(None) is True
    assert is_unknown_actor("u1") is False


def test_ensure_utc_naive_becomes_utc():
    naive = datetime(2025, 1, 1, 12, 0)
    assert ensure_utc(naive).tzinfo == timezone.utc
    assert ensure_utc(naive).hour == 12


def test_ensure_utc_keeps_aware():
    plus_five = timezone(timedelta(hours=5))
    aware = datetime(2025, 1, 1, 12, 0, tzinfo=plus_five)
    assert ensure_utc(aware) is aware


def test_parse_timestamp_iso_with_z():
    parsed = parse_timestamp("2025-03-01T09:00:00Z")
    assert parsed == datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_parse_timestamp_iso_with_offset():
    parsed = parse_timestamp("2025-03-01T14:00:00+05:00")
    assert parsed == datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_parse_timestamp_datetime_passthrough():
    value = datetime(2025, 3, 1, 9, 0)
    assert parse_timestamp(value) == datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)


def test_parse_timestamp_falls_back_to_default():
    default = datetime(2025, 1, 1, tzinfo=timezone.utc)
    assert parse_timestamp("not a date", default=default) == default
    assert parse_timestamp(None, default=default) == default
    assert parse_timestamp("   ", default=default) == default
    assert parse_timestamp(12345, default=default) == default
