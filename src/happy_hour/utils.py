"""Date and time helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime

from dateutil import parser as date_parser
from zoneinfo import ZoneInfo

logger = logging.getLogger(__name__)

WEEKDAY_NAMES = {
    0: "Monday",
    1: "Tuesday",
    2: "Wednesday",
    3: "Thursday",
    4: "Friday",
    5: "Saturday",
    6: "Sunday",
}


def get_zone(timezone_name: str) -> ZoneInfo:
    """Return a ZoneInfo instance, defaulting to UTC on failure."""
    try:
        return ZoneInfo(timezone_name)
    except Exception:  # pragma: no cover - fallback
        logger.warning("Unknown timezone %s, falling back to UTC", timezone_name)
        return ZoneInfo("UTC")


def now_in_timezone(timezone_name: str) -> datetime:
    """Current datetime in the configured timezone."""
    zone = get_zone(timezone_name)
    return datetime.now(tz=zone)


def parse_datetime(text: str) -> datetime:
    """Parse a caller-supplied date or date/time string.

    Raises ``ValueError`` when the text cannot be understood.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise ValueError("empty date")
    try:
        return date_parser.parse(cleaned)
    except (ValueError, OverflowError) as exc:
        raise ValueError(f"unparseable date '{cleaned}'") from exc


def day_name(value: date) -> str:
    """English weekday name, independent of the process locale."""
    return WEEKDAY_NAMES[value.weekday()]


def describe_minutes(minutes: int) -> str:
    return f"{minutes} minutes"
