"""Helpers for the timestamp formats used by the NS APIs."""

from datetime import datetime
from zoneinfo import ZoneInfo

NS_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S%z"
NS_TIMEZONE = ZoneInfo("Europe/Amsterdam")


def parse_ns_datetime(value: str | None) -> datetime | None:
    """Parse an NS timestamp such as ``2024-05-01T10:30:00+0200``.

    Timestamps without an offset are taken as Dutch local time. Returns None
    for empty or unparseable values.
    """
    if not value:
        return None

    try:
        return datetime.strptime(value, NS_DATETIME_FORMAT)
    except ValueError:
        pass

    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=NS_TIMEZONE)
    return parsed


def format_datetime_for_api(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS+ZZZZ`` for NS API query parameters.

    Naive datetimes are interpreted in the local timezone.
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    return moment.strftime(NS_DATETIME_FORMAT)


def calculate_delay_minutes(planned: datetime | None, actual: datetime | None) -> int:
    """Calculate the delay in whole minutes between planned and actual times.

    Only positive delays are reported; anything else yields 0.
    """
    if planned is None or actual is None:
        return 0

    diff_seconds = (actual - planned).total_seconds()
    if diff_seconds <= 0:
        return 0
    return int(diff_seconds / 60 + 0.5)
