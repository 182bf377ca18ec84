"""Message syntax tree node definitions.

Node shapes follow the ICU MessageFormat parser output: a message pattern is
an ordered sequence of literal text and argument placeholders, and plural and
select arguments carry nested message patterns keyed by selector.

Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import TypeIs

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Pattern structure
    "MessagePattern",
    "TextElement",
    "ArgumentElement",
    # Format specs
    "NumberFormatSpec",
    "DateFormatSpec",
    "TimeFormatSpec",
    "PluralFormatSpec",
    "SelectFormatSpec",
    "OptionalPattern",
    # Type aliases
    "PatternElement",
    "FormatSpec",
]


# ============================================================================
# PATTERN STRUCTURE
# ============================================================================


@dataclass(frozen=True, slots=True)
class MessagePattern:
    """Root node: one translatable message.

    Example:
        "Hello {name}!" ->
        MessagePattern(elements=(
            TextElement("Hello "),
            ArgumentElement("name"),
            TextElement("!"),
        ))
    """

    elements: tuple["PatternElement", ...]

    @staticmethod
    def guard(node: object) -> TypeIs["MessagePattern"]:
        """Type guard for MessagePattern (used for root validation)."""
        return isinstance(node, MessagePattern)


@dataclass(frozen=True, slots=True)
class TextElement:
    """Literal text. A backslash-escaped ``\\#`` is a literal ``#``."""

    value: str

    @staticmethod
    def guard(node: object) -> TypeIs["TextElement"]:
        """Type guard for TextElement."""
        return isinstance(node, TextElement)


@dataclass(frozen=True, slots=True)
class ArgumentElement:
    """Argument placeholder with optional format spec.

    Examples:
        {name}                      -> ArgumentElement("name")
        {price, number, currency}   -> ArgumentElement("price", NumberFormatSpec("currency"))
        {n, plural, other {# items}} -> ArgumentElement("n", PluralFormatSpec(...))
    """

    id: str
    format: "FormatSpec | None" = None

    @staticmethod
    def guard(node: object) -> TypeIs["ArgumentElement"]:
        """Type guard for ArgumentElement."""
        return isinstance(node, ArgumentElement)


# ============================================================================
# FORMAT SPECS
# ============================================================================


@dataclass(frozen=True, slots=True)
class NumberFormatSpec:
    """``{id, number}`` or ``{id, number, style}``."""

    style: str | None = None


@dataclass(frozen=True, slots=True)
class DateFormatSpec:
    """``{id, date, style}`` or ``{id, date, ::skeleton}``.

    A non-None skeleton takes precedence over style.
    """

    style: str | None = None
    skeleton: str | None = None


@dataclass(frozen=True, slots=True)
class TimeFormatSpec:
    """``{id, time}`` or ``{id, time, style}``."""

    style: str | None = None


@dataclass(frozen=True, slots=True)
class OptionalPattern:
    """One selector and its nested sub-pattern.

    Selectors are literal values (``=0``), plural categories (``one``),
    arbitrary select keys, or ``other``.
    """

    selector: str
    value: MessagePattern


@dataclass(frozen=True, slots=True)
class PluralFormatSpec:
    """``{id, plural, offset:N =0 {...} one {...} other {...}}``.

    Attributes:
        options: Selector/sub-pattern pairs in source order
        ordinal: True for ``selectordinal``
        offset: Subtracted from the value before category selection and ``#``
    """

    options: tuple[OptionalPattern, ...]
    ordinal: bool = False
    offset: int = 0


@dataclass(frozen=True, slots=True)
class SelectFormatSpec:
    """``{id, select, male {...} female {...} other {...}}``."""

    options: tuple[OptionalPattern, ...]


# ============================================================================
# TYPE ALIASES
# ============================================================================

type PatternElement = TextElement | ArgumentElement

type FormatSpec = (
    NumberFormatSpec | DateFormatSpec | TimeFormatSpec | PluralFormatSpec | SelectFormatSpec
)
