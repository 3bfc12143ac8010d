"""Timestamp parsing and formatting. Stored timestamps are naive UTC."""

from datetime import date, datetime, time, timezone
from typing import Optional

START_OF_DAY = time(0, 0, 0, 0)
END_OF_DAY = time(23, 59, 59, 999000)


def to_utc_naive(value: datetime) -> datetime:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision so stored values match what the API returns."""
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def utcnow_millis() -> datetime:
    return truncate_to_millis(datetime.utcnow())


def parse_date_only(text: str) -> Optional[date]:
    """Return the calendar date for ``YYYY-MM-DD`` input, None for anything else."""
    if len(text) != 10:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def parse_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp at millisecond precision; a bare date means midnight UTC."""
    text = value.strip()
    day = parse_date_only(text)
    if day is not None:
        return datetime.combine(day, START_OF_DAY)
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return truncate_to_millis(to_utc_naive(datetime.fromisoformat(text)))


def parse_range_boundary(value: str, end: bool = False) -> datetime:
    """
    Parse a list-filter boundary.

    A date without a time covers the whole calendar day: the start boundary
    becomes 00:00:00.000 and the end boundary 23:59:59.999.
    """
    day = parse_date_only(value.strip())
    if day is not None:
        return datetime.combine(day, END_OF_DAY if end else START_OF_DAY)
    return parse_datetime(value)


def isoformat_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return to_utc_naive(value).isoformat(timespec="milliseconds") + "Z"
