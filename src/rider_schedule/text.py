"""Normalizers turning raw API strings into display values.

The show API renders some fields as HTML fragments (e.g. '<a href="...">Jane Doe</a>'),
and dates/times as ISO-like strings. Everything here is pure.
"""

import re
from datetime import datetime

from dateutil import parser as date_parser

from src.rider_schedule.errors import DateParseError

_TAG_TEXT_RE = re.compile(r">([^<]+)<")
_TAG_DIGITS_RE = re.compile(r">([0-9]+)<")

# datetime.weekday() index -> English name (strftime("%A") follows the locale)
_WEEKDAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Shows run Friday to Sunday; other days keep their English name
FRENCH_DAYS: dict[str, str] = {
    "Friday": "Vendredi",
    "Saturday": "Samedi",
    "Sunday": "Dimanche",
}

RING_ALIASES: dict[str, str] = {
    "Combine Obstacle": "Combiné",
}


def extract_rider_name(raw: str) -> str:
    """Return the text between the first '>' and the following '<', or raw unchanged."""
    match = _TAG_TEXT_RE.search(raw)
    return match.group(1) if match else raw


def extract_class_number(raw: str) -> str:
    """Return the digits wrapped as '>412<' in raw, or raw unchanged."""
    match = _TAG_DIGITS_RE.search(raw)
    return match.group(1) if match else raw


def parse_datetime(value: str) -> datetime:
    """Parse a date or timestamp string.

    Aware timestamps are converted to local time; naive ones are taken as local.

    Raises:
        DateParseError: If value is empty or not a recognizable date.
    """
    text = (value or "").strip()
    if not text:
        raise DateParseError("empty date/time value")
    try:
        parsed = date_parser.isoparse(text)
    except ValueError:
        try:
            parsed = date_parser.parse(text)
        except (ValueError, OverflowError) as exc:
            raise DateParseError(f"unparseable date/time {value!r}") from exc
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone()
        except (OverflowError, ValueError) as exc:
            raise DateParseError(f"date/time out of range {value!r}") from exc
    return parsed


def get_french_day(date_like: str) -> str:
    """Weekday name of date_like, in French for Friday to Sunday.

    Raises:
        DateParseError: If date_like is not a recognizable date.
    """
    english = _WEEKDAYS[parse_datetime(date_like).weekday()]
    return FRENCH_DAYS.get(english, english)


def format_time(datetime_like: str) -> str:
    """Render a timestamp as 24-hour local "HH:MM".

    Raises:
        DateParseError: If datetime_like is not a recognizable timestamp.
    """
    return parse_datetime(datetime_like).strftime("%H:%M")


def normalize_ring_name(name: str) -> str:
    return RING_ALIASES.get(name, name)
