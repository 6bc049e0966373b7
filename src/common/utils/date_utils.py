"""Utility functions for date manipulation."""

from datetime import date, datetime

import pytz


def now_in_timezone(tz_name: str = "UTC") -> datetime:
    """Returns the current time as an aware datetime in the named timezone."""
    return datetime.now(pytz.timezone(tz_name))


def utc_now() -> datetime:
    """Returns the current UTC time as an aware datetime."""
    return datetime.now(pytz.utc)


def to_iso(value: date | datetime) -> str:
    """Formats a date or datetime as an ISO-8601 string."""
    return value.isoformat()


def parse_iso_datetime(dt_str: str) -> datetime:
    """Parses an ISO datetime string; naive values are taken as UTC."""
    # Handle both Z and +00:00 for UTC
    dt_obj = datetime.fromisoformat(dt_str.replace("Z", "+00:00"))
    if dt_obj.tzinfo is None:
        dt_obj = pytz.utc.localize(dt_obj)
    return dt_obj


def parse_iso_date(date_str: str) -> date:
    """Parses an ISO date string, accepting a full datetime string too."""
    if "T" in date_str:
        return parse_iso_datetime(date_str).date()
    return date.fromisoformat(date_str)


def format_timestamp(dt: datetime) -> str:
    """Formats a datetime for human-readable output."""
    return dt.strftime("%Y-%m-%d %H:%M:%S")
