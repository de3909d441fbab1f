"""Wall-clock arithmetic on naive ``"HH:MM"`` strings and ``YYYY-MM-DD`` dates."""

import re
from datetime import date
from typing import Literal

from trainerbook.scheduling.errors import InvalidMinutes, MalformedDate, MalformedTime

DayOfWeek = Literal[
    "monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"
]

# Index matches date.weekday(): 0=Monday, 6=Sunday
DAYS_OF_WEEK: tuple[DayOfWeek, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)

_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})")
_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def time_to_minutes(value: str) -> int:
    """Convert ``"HH:MM"`` to minutes since midnight."""
    match = _TIME_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise MalformedTime(f"Malformed time {value!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise MalformedTime(f"Time out of range: {value!r}")
    return hours * 60 + minutes


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to zero-padded ``"HH:MM"``."""
    if minutes < 0:
        raise InvalidMinutes(f"Minutes must be non-negative, got {minutes}")
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def parse_date(value: str) -> date:
    match = _DATE_RE.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise MalformedDate(f"Malformed date {value!r}, expected YYYY-MM-DD")
    try:
        return date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
    except ValueError as e:
        raise MalformedDate(f"Invalid calendar date {value!r}: {e}") from None


def day_of_week_of(value: str) -> DayOfWeek:
    """Lowercase English weekday of a ``YYYY-MM-DD`` date.

    Uses the proleptic Gregorian calendar of ``datetime.date``; no locale is
    consulted, so the result only depends on the input string.
    """
    return DAYS_OF_WEEK[parse_date(value).weekday()]
