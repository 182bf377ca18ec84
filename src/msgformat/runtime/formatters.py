"""Formatter variants produced by the message compiler.

A compiled pattern is a tuple of literal strings and the formatter objects
defined here. The set is closed; ``Formatter`` is the union of all variants
and the renderer dispatches on the concrete type:

    StringFormat      {name}
    NumberFormat      {n, number, style}
    DateTimeFormat    {d, date, style} / {t, time, style}
    SkeletonFormat    {d, date, ::skeleton}
    PluralOffsetText  text containing # inside a plural option
    PluralFormat      {n, plural, ...} / {n, selectordinal, ...}
    SelectFormat      {g, select, ...}

Formatters close over configuration only, never over argument values, so a
compiled pattern can be rendered any number of times from any thread.
Callables are excluded from equality: compiling the same tree twice yields
equal patterns.

Python 3.13+.
"""

import math
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Literal

from msgformat.constants import OTHER_SELECTOR
from msgformat.diagnostics import ErrorTemplate, FormattingError, MissingOtherOptionError
from msgformat.runtime.formats import DateTimeOptions, NumberOptions
from msgformat.runtime.locale_context import LocaleContext

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Value formatters
    "StringFormat",
    "NumberFormat",
    "DateTimeFormat",
    "SkeletonFormat",
    "PluralOffsetText",
    # Selection formatters
    "PluralFormat",
    "SelectFormat",
    # Type aliases
    "CompiledPattern",
    "Formatter",
    "SelectionFormat",
    "ValueFormat",
    # Helpers
    "has_unescaped_hash",
    "unescape_hash",
]

type Number = int | float | Decimal

# A '#' not preceded by a backslash
_UNESCAPED_HASH = re.compile(r"(?<!\\)#")
_ESCAPED_HASH = "\\#"


def has_unescaped_hash(text: str) -> bool:
    """True if text contains a '#' that is not escaped as '\\#'."""
    return _UNESCAPED_HASH.search(text) is not None


def unescape_hash(text: str) -> str:
    """Turn every escaped '\\#' into a literal '#'."""
    return text.replace(_ESCAPED_HASH, "#")


def _as_number(value: object, argument_id: str) -> Number:
    """Coerce a plural argument to a finite number for offset arithmetic."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value):
        return value
    if isinstance(value, Decimal) and value.is_finite():
        return value
    if isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            pass
        else:
            if number.is_finite():
                return int(number) if number == number.to_integral_value() else number
    # NaN and infinities have no plural category
    raise FormattingError(
        ErrorTemplate.not_a_number(value, argument_id), fallback_value=str(value)
    )


def _exact_selector(value: Number) -> str:
    """``=N`` selector for a value; integral floats/Decimals drop the fraction."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, Decimal) and value.is_finite() and value == value.to_integral_value():
        value = int(value)
    return f"={value}"


# ============================================================================
# VALUE FORMATTERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class StringFormat:
    """Plain ``{id}`` argument."""

    id: str

    def format(self, value: object) -> str:
        """Empty string for falsy values (None, "", 0, False), else str(value)."""
        if not value:
            return ""
        return value if isinstance(value, str) else str(value)


@dataclass(frozen=True, slots=True)
class NumberFormat:
    """``{id, number, style}`` bound to resolved number options."""

    id: str
    options: NumberOptions
    locale: LocaleContext

    def format(self, value: Number) -> str:
        """Delegate to the locale number formatting service."""
        return self.locale.format_number(value, self.options)


@dataclass(frozen=True, slots=True)
class DateTimeFormat:
    """``{id, date, style}`` or ``{id, time, style}`` bound to resolved options."""

    id: str
    kind: Literal["date", "time"]
    options: DateTimeOptions
    locale: LocaleContext

    def format(self, value: date | str) -> str:
        """Delegate to the locale date or time formatting service."""
        if self.kind == "time":
            return self.locale.format_time(value, self.options)
        return self.locale.format_date(value, self.options)


@dataclass(frozen=True, slots=True)
class SkeletonFormat:
    """``{id, date, ::skeleton}`` rendered by a compiled skeleton."""

    id: str
    skeleton: str
    render: Callable[[date], str] = field(compare=False, repr=False)

    def format(self, value: date) -> str:
        """Render the date through the compiled skeleton."""
        if not isinstance(value, date):
            raise FormattingError(
                ErrorTemplate.formatting_failed(
                    "Skeleton", value, f"expected date, got {type(value).__name__}"
                ),
                fallback_value=str(value),
            )
        return self.render(value)


@dataclass(frozen=True, slots=True)
class PluralOffsetText:
    """Literal text inside a plural option whose ``#`` shows ``value - offset``.

    Example:
        Within ``{n, plural, offset:1 other {# others}}``, the text
        ``"# others"`` renders as ``"2 others"`` for n=3.
    """

    id: str
    offset: int
    number_format: Callable[[Number], str] = field(compare=False, repr=False)
    text: str

    def format(self, value: object) -> str:
        """Substitute every unescaped '#' with the formatted number."""
        number = self.number_format(_as_number(value, self.id) - self.offset)
        substituted = _UNESCAPED_HASH.sub(lambda _match: number, self.text)
        return unescape_hash(substituted)


# ============================================================================
# SELECTION FORMATTERS
# ============================================================================


@dataclass(frozen=True, slots=True)
class PluralFormat:
    """``{id, plural, ...}`` choosing a compiled sub-pattern for a number.

    Attributes:
        id: Argument identifier
        ordinal: Use ordinal categories (``selectordinal``)
        offset: Subtracted before category selection
        options: Selector to compiled sub-pattern
        plural_fn: ``(value, ordinal) -> category`` selector
    """

    id: str
    ordinal: bool
    offset: int
    options: Mapping[str, "CompiledPattern"]
    plural_fn: Callable[[Number, bool], str] = field(compare=False, repr=False)

    def get_option(self, value: object) -> "CompiledPattern":
        """Select the sub-pattern: ``=value``, then category, then ``other``.

        Raises:
            FormattingError: If value is not numeric
            MissingOtherOptionError: If no option matches and ``other`` is absent
        """
        number = _as_number(value, self.id)
        option = self.options.get(_exact_selector(number))
        if option is None:
            option = self.options.get(self.plural_fn(number - self.offset, self.ordinal))
        if option is None:
            option = self.options.get(OTHER_SELECTOR)
        if option is None:
            raise MissingOtherOptionError(ErrorTemplate.missing_other_option(self.id))
        return option


@dataclass(frozen=True, slots=True)
class SelectFormat:
    """``{id, select, ...}`` choosing a compiled sub-pattern by exact key."""

    id: str
    options: Mapping[str, "CompiledPattern"]

    def get_option(self, value: object) -> "CompiledPattern":
        """Select the sub-pattern matching str(value), else ``other``.

        None never matches a key. Booleans match ``true``/``false``.

        Raises:
            MissingOtherOptionError: If no option matches and ``other`` is absent
        """
        option = None
        if value is not None:
            key = str(value).lower() if isinstance(value, bool) else str(value)
            option = self.options.get(key)
        if option is None:
            option = self.options.get(OTHER_SELECTOR)
        if option is None:
            raise MissingOtherOptionError(ErrorTemplate.missing_other_option(self.id))
        return option


# ============================================================================
# TYPE ALIASES
# ============================================================================

type ValueFormat = (
    StringFormat | NumberFormat | DateTimeFormat | SkeletonFormat | PluralOffsetText
)

type SelectionFormat = PluralFormat | SelectFormat

type Formatter = ValueFormat | SelectionFormat

type CompiledPattern = tuple[str | Formatter, ...]
