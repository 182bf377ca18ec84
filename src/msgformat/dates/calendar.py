"""Calendar arithmetic used by the skeleton expander.

Pure functions over ``date``/``datetime`` values: truncation to the start of
a period, day-of-year, day distances, milliseconds since midnight, weekday
index relative to a configurable first day, and zero padding.

Plain ``date`` values are treated as midnight of that day.

Python 3.13+. Zero external dependencies.
"""

import math
from datetime import date, datetime, timedelta
from typing import Literal

__all__ = [
    "as_datetime",
    "day_of_week",
    "day_of_year",
    "distance_in_days",
    "milliseconds_in_day",
    "pad",
    "start_of",
]

type Unit = Literal["year", "month", "day", "hour", "minute", "second"]

# Fields reset when truncating to a unit, coarsest first.
_FIELDS: tuple[tuple[str, int], ...] = (
    ("month", 1),
    ("day", 1),
    ("hour", 0),
    ("minute", 0),
    ("second", 0),
    ("microsecond", 0),
)
_FIRST_RESET: dict[str, int] = {
    "year": 0,
    "month": 1,
    "day": 2,
    "hour": 3,
    "minute": 4,
    "second": 5,
}

_SECONDS_PER_DAY = 86400


def as_datetime(value: date) -> datetime:
    """Return value as a datetime (dates become midnight, tz-naive)."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def start_of(value: date, unit: Unit) -> datetime:
    """Truncate value to the start of the given unit.

    Example:
        >>> start_of(datetime(2014, 3, 9, 10, 30), "month")
        datetime.datetime(2014, 3, 1, 0, 0)
    """
    try:
        first = _FIRST_RESET[unit]
    except KeyError:
        msg = f"Unknown calendar unit '{unit}'"
        raise ValueError(msg) from None
    return as_datetime(value).replace(**dict(_FIELDS[first:]))


def distance_in_days(start: date, end: date) -> float:
    """Signed distance from start to end in (fractional) days."""
    delta = as_datetime(end) - as_datetime(start)
    return delta.total_seconds() / _SECONDS_PER_DAY


def day_of_year(value: date) -> int:
    """Zero-based day of the year (January 1st is 0)."""
    return math.floor(distance_in_days(start_of(value, "year"), value))


def milliseconds_in_day(value: date) -> float:
    """Milliseconds elapsed since midnight, with microsecond precision."""
    value = as_datetime(value)
    return (value - start_of(value, "day")) / timedelta(milliseconds=1)


def day_of_week(value: date, first_day: int) -> int:
    """Weekday index counted from first_day (0=Sunday .. 6=Saturday).

    Example:
        >>> day_of_week(date(2014, 3, 9), 1)  # Sunday, weeks start on Monday
        6
    """
    sunday_based = value.isoweekday() % 7
    return (sunday_based - first_day + 7) % 7


def pad(value: object, count: int, right: bool = False) -> str:
    """Zero-pad str(value) to at least count characters.

    Example:
        >>> pad(7, 2)
        '07'
        >>> pad("5", 3, right=True)
        '500'
    """
    text = str(value)
    return text.ljust(count, "0") if right else text.rjust(count, "0")
