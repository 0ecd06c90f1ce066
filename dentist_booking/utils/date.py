"""
Date and time utilities for booking dates and filter bounds.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union
import pytz
from dateparser import parse as parse_date


def to_iso_utc(value: Union[datetime, str]) -> str:
    """
    Format a datetime the way the backend stores booking dates.

    Args:
        value: Aware or naive (treated as UTC) datetime, or an ISO string

    Returns:
        ISO-8601 UTC string with milliseconds, e.g. ``2025-06-01T10:00:00.000Z``
    """
    if isinstance(value, str):
        value = parse_iso(value)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_iso(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing ``Z``."""
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class DateParser:
    """Day boundaries, user date input and display formatting in one timezone."""

    def __init__(self, timezone_name: str = "UTC"):
        self.tz = pytz.timezone(timezone_name)

    def parse_date_input(self, value: Union[str, date, None]) -> Optional[date]:
        """
        Parse a date typed into a filter field ("2025-06-01", "1 June 2025", "today").

        Returns:
            The calendar date, or None when the input is empty or unparseable
        """
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        text = value.strip()
        if not text:
            return None

        parsed = parse_date(
            text,
            languages=["en"],
            settings={"TIMEZONE": self.tz.zone, "RETURN_AS_TIMEZONE_AWARE": False},
        )
        return parsed.date() if parsed else None

    def start_of_day(self, day: date) -> datetime:
        """00:00:00.000 of ``day`` in the configured timezone."""
        return self.tz.localize(datetime.combine(day, time(0, 0, 0)))

    def end_of_day(self, day: date) -> datetime:
        """23:59:59.999 of ``day`` in the configured timezone."""
        return self.tz.localize(datetime.combine(day, time(23, 59, 59, 999000)))

    def format_for_display(self, value: datetime) -> str:
        """Format like ``01 Jun 2025, 10:00:00`` in the configured timezone."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(self.tz).strftime("%d %b %Y, %H:%M:%S")
