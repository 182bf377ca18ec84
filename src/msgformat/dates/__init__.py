"""Date skeleton expansion and the calendar arithmetic it relies on.

Python 3.13+.
"""

from .calendar import (
    day_of_week,
    day_of_year,
    distance_in_days,
    milliseconds_in_day,
    pad,
    start_of,
)
from .skeleton import compile_skeleton, tokenize_skeleton

__all__ = [
    "compile_skeleton",
    "day_of_week",
    "day_of_year",
    "distance_in_days",
    "milliseconds_in_day",
    "pad",
    "start_of",
    "tokenize_skeleton",
]
