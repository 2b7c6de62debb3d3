"""Tests for NS timestamp helpers."""

from datetime import UTC, datetime, timedelta, timezone

from ns_departures.domain.time_utils import (
    calculate_delay_minutes,
    format_datetime_for_api,
    parse_ns_datetime,
)

CEST = timezone(timedelta(hours=2))


def test_parse_ns_datetime_with_compact_offset() -> None:
    """Given an NS timestamp with +0200 offset, when parsing, then an aware datetime results."""
    parsed = parse_ns_datetime("2024-05-01T10:30:00+0200")

    assert parsed == datetime(2024, 5, 1, 10, 30, tzinfo=CEST)


def test_parse_ns_datetime_accepts_iso_with_z() -> None:
    """Given an ISO timestamp ending in Z, when parsing, then it is read as UTC."""
    assert parse_ns_datetime("2024-05-01T08:30:00Z") == datetime(2024, 5, 1, 8, 30, tzinfo=UTC)


def test_parse_ns_datetime_without_offset_is_dutch_local_time() -> None:
    """Given a timestamp without offset, when parsing, then it is aware and compares with UTC times."""
    parsed = parse_ns_datetime("2024-05-01T10:30:00")

    assert parsed is not None
    assert parsed.tzinfo is not None
    assert parsed == datetime(2024, 5, 1, 10, 30, tzinfo=CEST)
    assert parsed < datetime(2024, 5, 1, 9, 0, tzinfo=UTC)


def test_parse_ns_datetime_returns_none_for_garbage() -> None:
    """Given empty or invalid input, when parsing, then None is returned."""
    assert parse_ns_datetime(None) is None
    assert parse_ns_datetime("") is None
    assert parse_ns_datetime("tomorrow") is None


def test_format_datetime_for_api() -> None:
    """Given an aware datetime, when formatting for the API, then the compact offset is used."""
    moment = datetime(2024, 5, 1, 10, 29, tzinfo=CEST)

    assert format_datetime_for_api(moment) == "2024-05-01T10:29:00+0200"


def test_delay_is_rounded_to_nearest_minute() -> None:
    """Given 90 and 89 seconds of delay, when calculating, then 2 and 1 minutes result."""
    planned = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    assert calculate_delay_minutes(planned, planned + timedelta(seconds=90)) == 2
    assert calculate_delay_minutes(planned, planned + timedelta(seconds=89)) == 1
    assert calculate_delay_minutes(planned, planned + timedelta(minutes=2, seconds=30)) == 3


def test_early_or_missing_times_give_no_delay() -> None:
    """Given early departures or missing times, when calculating, then the delay is 0."""
    planned = datetime(2024, 5, 1, 10, 0, tzinfo=UTC)

    assert calculate_delay_minutes(planned, planned - timedelta(minutes=1)) == 0
    assert calculate_delay_minutes(planned, None) == 0
    assert calculate_delay_minutes(None, planned) == 0
