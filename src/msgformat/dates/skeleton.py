"""CLDR date skeleton expansion.

Compiles a skeleton such as ``"yMMMd"`` or ``"EEEE, h:mm"`` into a function
that renders a date. The skeleton is split into runs of one repeated field
letter, quoted literals and single literal characters. Each field run maps
to a calendar component; its length selects the rendering (numeric width,
abbreviated, wide or narrow name).

Field letters:
    G era            y year           Y week-year      M/L month
    w week of year   W week of month  d day            D day of year
    F weekday in month               e/c local weekday E weekday name
    h 1-12  H 0-23  K 0-11  k 1-24   m minute  s second
    S fraction of second             A milliseconds in day

``Z`` aliases to ``x``/``O``/``X`` depending on length; ``j`` (locale hour
cycle) and any other letter render as literal text. Numeric fields are not
padded except ``d`` (padded to its length); ``yy`` keeps the last two
digits without padding.

Expansion never raises for an unknown field; it renders best-effort text.

Python 3.13+. Uses Babel (through LocaleContext) for names.
"""

import logging
import math
import re
from collections.abc import Callable
from datetime import date, timedelta

from msgformat.dates.calendar import (
    as_datetime,
    day_of_week,
    day_of_year,
    milliseconds_in_day,
    pad,
    start_of,
)
from msgformat.runtime.locale_context import LocaleContext, NameWidth

__all__ = ["compile_skeleton", "tokenize_skeleton"]

logger = logging.getLogger(__name__)

type DateRenderer = Callable[[date], str]

# Field run | quoted literal ('' escapes a quote) | lone '' | any character
_TOKEN_RE = re.compile(r"([a-zA-Z])\1*|'(?:[^']|'')+'|''|.", re.DOTALL)

# Monday, per the ISO 8601 week used by week-based fields.
_MONDAY = 1
# Minimum days of a partial first week for it to count as week 1.
_MIN_DAYS_IN_FIRST_WEEK = 4


def tokenize_skeleton(skeleton: str) -> tuple[str, ...]:
    """Split a skeleton into field runs and literal tokens.

    Example:
        >>> tokenize_skeleton("yMMMd")
        ('y', 'MMM', 'd')
        >>> tokenize_skeleton("h 'o''clock'")
        ('h', ' ', "'o''clock'")
    """
    return tuple(match.group(0) for match in _TOKEN_RE.finditer(skeleton))


def compile_skeleton(skeleton: str, locale: str | LocaleContext = "en") -> DateRenderer:
    """Compile a skeleton into a ``(date) -> str`` renderer.

    Args:
        skeleton: CLDR skeleton string
        locale: Locale code or LocaleContext used for era/month/weekday names

    Returns:
        Function rendering a date or datetime

    Example:
        >>> render = compile_skeleton("yMMMd", "en")
        >>> render(date(2014, 3, 9))
        '2014Mar9'
    """
    context = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
    tokens = tokenize_skeleton(skeleton)
    logger.debug("Compiled skeleton %r into %d token(s)", skeleton, len(tokens))

    def render(value: date) -> str:
        return "".join(_render_token(token, value, context) for token in tokens)

    return render


def _render_token(token: str, value: date, locale: LocaleContext) -> str:
    char = token[0]
    length = len(token)

    # j (locale preferred hour cycle) is not negotiated; it renders literally.

    if char == "Z":
        if length < 4:
            char, length = "x", 4
        elif length < 5:
            char, length = "O", 4
        else:
            char, length = "X", 5

    moment = as_datetime(value)

    match char:
        case "G":
            return locale.era_name(moment, "abbreviated" if length < 4 else "wide")
        case "y":
            return _year(moment.year, length)
        case "Y":
            return _year(_week_year(moment), length)
        case "M" | "L":
            context = "stand-alone" if char == "L" else "format"
            match length:
                case 3:
                    return locale.month_name(moment, "abbreviated", context)
                case 4:
                    return locale.month_name(moment, "wide", context)
                case 5:
                    return locale.month_name(moment, "narrow", context)
                case _:
                    return str(moment.month)
        case "w":
            return str(_week_number(day_of_year(moment), start_of(moment, "year")))
        case "W":
            return str(_week_number(moment.day, start_of(moment, "month")))
        case "d":
            return pad(moment.day, length)
        case "D":
            return str(day_of_year(moment) + 1)
        case "F":
            return str(moment.day // 7 + 1)
        case "e" | "c" if length <= 2:
            return str(day_of_week(moment, _MONDAY) + 1)
        case "e" | "c" | "E":
            context = "stand-alone" if char == "c" else "format"
            return locale.weekday_name(moment, _weekday_width(length), context)
        case "h":
            return str(moment.hour % 12 or 12)
        case "H":
            return str(moment.hour)
        case "K":
            return str(moment.hour % 12)
        case "k":
            return str(moment.hour or 24)
        case "m":
            return str(moment.minute)
        case "s":
            return str(moment.second)
        case "S":
            return _scaled(moment.microsecond // 1000, length)
        case "A":
            return _scaled(math.floor(milliseconds_in_day(moment)), length)
        case ":":
            return ":"
        case "'":
            return _quoted_literal(token)
        case _:
            return token


def _year(year: int, length: int) -> str:
    """Full year, or its last two digits for ``yy`` (2005 -> "5")."""
    if length == 2:
        return str(year % 100)
    return str(year)


def _week_year(moment: date) -> int:
    # Year of (date + 7 - weekday(date) - 1 - 4) days
    shift = 7 - day_of_week(moment, _MONDAY) - 1 - _MIN_DAYS_IN_FIRST_WEEK
    try:
        return (moment + timedelta(days=shift)).year
    except OverflowError:
        return moment.year


def _week_number(day: int, period_start: date) -> int:
    """Week number from period_start for w (0-based day) or W (day of month)."""
    first_weekday = day_of_week(period_start, _MONDAY)
    partial_first_week = 7 - first_weekday < _MIN_DAYS_IN_FIRST_WEEK
    return math.ceil((day + first_weekday) / 7) - (1 if partial_first_week else 0)


def _weekday_width(length: int) -> NameWidth:
    if length < 3:
        return "abbreviated"
    if length == 4:
        return "wide"
    return "narrow"


def _quoted_literal(token: str) -> str:
    # A bare '' is a literal quote; otherwise strip the quotes and unescape ''
    if len(token) <= 2:
        return "'"
    return token[1:-1].replace("''", "'")


def _scaled(milliseconds: int, length: int) -> str:
    """Whole milliseconds scaled to length digits, rounded half up."""
    return str(math.floor(milliseconds * 10 ** (length - 3) + 0.5))
