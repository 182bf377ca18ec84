"""Named format styles for number, date and time arguments.

A message refers to styles by name (``{price, number, currency}``,
``{when, date, long}``). Formats maps those names to the option objects the
locale formatting service understands. Defaults mirror ICU MessageFormat;
applications layer their own styles on top with Formats.merge().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Literal

from msgformat.constants import DEFAULT_CURRENCY

__all__ = [
    "DEFAULT_FORMATS",
    "DateTimeOptions",
    "Formats",
    "NumberOptions",
]

type NumberStyle = Literal["decimal", "percent", "currency"]
type DateTimeStyle = Literal["short", "medium", "long", "full"]

_DATETIME_STYLES: frozenset[str] = frozenset({"short", "medium", "long", "full"})


@dataclass(frozen=True, slots=True)
class NumberOptions:
    """Options for locale-aware number formatting.

    Attributes:
        style: "decimal", "percent" or "currency"
        currency: ISO 4217 code, required for the currency style
        currency_display: "symbol", "code" or "name"
        minimum_fraction_digits: Minimum decimal places (decimal style)
        maximum_fraction_digits: Maximum decimal places (decimal style)
        use_grouping: Use the locale's grouping separator (decimal style)
        pattern: CLDR number pattern, overrides the other options

    Example:
        >>> NumberOptions(style="currency", currency="EUR").currency_display
        'symbol'
    """

    style: NumberStyle = "decimal"
    currency: str | None = None
    currency_display: Literal["symbol", "code", "name"] = "symbol"
    minimum_fraction_digits: int = 0
    maximum_fraction_digits: int = 3
    use_grouping: bool = True
    pattern: str | None = None

    def __post_init__(self) -> None:
        """Validate option combinations.

        Raises:
            ValueError: If the style is unknown, fraction digits are negative or
                inverted, or a currency style has no currency code.
        """
        if self.style not in ("decimal", "percent", "currency"):
            msg = f"Unknown number style '{self.style}'"
            raise ValueError(msg)
        if self.minimum_fraction_digits < 0 or self.maximum_fraction_digits < 0:
            msg = "fraction digits must be non-negative"
            raise ValueError(msg)
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            msg = (
                f"minimum_fraction_digits ({self.minimum_fraction_digits}) exceeds "
                f"maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ValueError(msg)
        if self.style == "currency" and not self.currency:
            msg = "currency style requires a currency code"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class DateTimeOptions:
    """Options for locale-aware date or time formatting.

    Attributes:
        style: CLDR length ("short", "medium", "long", "full")
        pattern: CLDR date pattern (e.g. "yyyy-MM-dd"), overrides style
    """

    style: DateTimeStyle = "medium"
    pattern: str | None = None

    def __post_init__(self) -> None:
        """Validate style name.

        Raises:
            ValueError: If the style is not a CLDR length
        """
        if self.style not in _DATETIME_STYLES:
            msg = f"Unknown date/time style '{self.style}'"
            raise ValueError(msg)


def _frozen[V](entries: Mapping[str, V]) -> Mapping[str, V]:
    return MappingProxyType(dict(entries))


@dataclass(frozen=True, slots=True)
class Formats:
    """Style name to option mappings for each argument kind.

    Instances are immutable; merge() returns a new instance.

    Example:
        >>> formats = DEFAULT_FORMATS.merge(
        ...     number={"eur": NumberOptions(style="currency", currency="EUR")},
        ... )
        >>> formats.number["eur"].currency
        'EUR'
        >>> formats.number["percent"].style
        'percent'
    """

    number: Mapping[str, NumberOptions] = field(default_factory=lambda: _frozen({}))
    date: Mapping[str, DateTimeOptions] = field(default_factory=lambda: _frozen({}))
    time: Mapping[str, DateTimeOptions] = field(default_factory=lambda: _frozen({}))

    def __post_init__(self) -> None:
        """Freeze the mappings so shared instances cannot be mutated."""
        object.__setattr__(self, "number", _frozen(self.number))
        object.__setattr__(self, "date", _frozen(self.date))
        object.__setattr__(self, "time", _frozen(self.time))

    def merge(
        self,
        *,
        number: Mapping[str, NumberOptions] | None = None,
        date: Mapping[str, DateTimeOptions] | None = None,
        time: Mapping[str, DateTimeOptions] | None = None,
    ) -> Formats:
        """Return a copy with the given styles layered over the current ones."""
        return replace(
            self,
            number={**self.number, **(number or {})},
            date={**self.date, **(date or {})},
            time={**self.time, **(time or {})},
        )


DEFAULT_FORMATS: Formats = Formats(
    number={
        "integer": NumberOptions(maximum_fraction_digits=0),
        "percent": NumberOptions(style="percent"),
        "currency": NumberOptions(style="currency", currency=DEFAULT_CURRENCY),
    },
    date={style: DateTimeOptions(style=style) for style in ("short", "medium", "long", "full")},
    time={style: DateTimeOptions(style=style) for style in ("short", "medium", "long", "full")},
)
