"""Locale context for thread-safe, compiler-scoped formatting.

This module is the locale formatting service the compiler and the skeleton
expander call into. Uses Babel for CLDR-compliant number, date and time
formatting and for era, month and weekday names.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from functools import partial
from threading import RLock
from typing import ClassVar, Literal

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import numbers as babel_numbers

from msgformat.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE
from msgformat.diagnostics import ErrorTemplate, FormattingError
from msgformat.locale_utils import get_babel_locale, normalize_locale
from msgformat.runtime.formats import DateTimeOptions, NumberOptions

__all__ = ["LocaleContext", "NameWidth"]

logger = logging.getLogger(__name__)

type NameWidth = Literal["abbreviated", "wide", "narrow", "short"]
type NameContext = Literal["format", "stand-alone"]

_DEFAULT_NUMBER = NumberOptions()
_DEFAULT_DATETIME = DateTimeOptions()


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Use LocaleContext.create() to construct instances; it validates the
    locale and reuses cached instances.

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5)
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5)
        '1.234,5'

        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable. Cache operations are protected by RLock.
    """

    # OrderedDict provides LRU semantics with O(1) operations
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and falls back to en_US.
        This method always succeeds - use create_or_raise() for strict validation.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV', 'de-DE')

        Returns:
            LocaleContext instance. For unknown/invalid locales, uses en_US
            while preserving the original locale_code for debugging.
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = get_babel_locale(cache_key)
        except UnknownLocaleError as e:
            logger.warning(
                "Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True
        except ValueError as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s",
                locale_code,
                e,
                DEFAULT_LOCALE,
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check: another thread may have created the same entry
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except ValueError as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Pre-validated Babel Locale object for this context."""
        return self._babel_locale

    # ------------------------------------------------------------------
    # Numbers
    # ------------------------------------------------------------------

    def format_number(
        self, value: int | float | Decimal, options: NumberOptions | None = None
    ) -> str:
        """Format number with locale-specific separators.

        Args:
            value: Number to format
            options: Style options (default: decimal, up to 3 fraction digits)

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If Babel rejects the value or options

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_number(0.25, NumberOptions(style="percent"))
            '25%'
            >>> ctx.format_number(3, NumberOptions(style="currency", currency="EUR"))
            '€3.00'
        """
        opts = options or _DEFAULT_NUMBER
        try:
            match opts.style:
                case "percent":
                    return str(
                        babel_numbers.format_percent(
                            value, format=opts.pattern, locale=self.babel_locale
                        )
                    )
                case "currency":
                    return self._format_currency(value, opts)
                case _:
                    return self._format_decimal(value, opts)
        except (ValueError, TypeError, InvalidOperation, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Number", value, str(e)),
                fallback_value=str(value),
            ) from e

    def number_formatter(
        self, options: NumberOptions | None = None
    ) -> Callable[[int | float | Decimal], str]:
        """Bind options into a reusable ``(number) -> str`` callable."""
        return partial(self.format_number, options=options)

    def _format_decimal(self, value: int | float | Decimal, opts: NumberOptions) -> str:
        if opts.pattern is not None:
            return str(
                babel_numbers.format_decimal(value, format=opts.pattern, locale=self.babel_locale)
            )

        # '#,##0' = integer with grouping, '#,##0.0##' = 1-3 decimal places
        integer_part = "#,##0" if opts.use_grouping else "0"
        if opts.maximum_fraction_digits == 0:
            value = round(value)
            format_pattern = integer_part
        else:
            required = "0" * opts.minimum_fraction_digits
            optional = "#" * (opts.maximum_fraction_digits - opts.minimum_fraction_digits)
            format_pattern = f"{integer_part}.{required}{optional}"

        return str(
            babel_numbers.format_decimal(value, format=format_pattern, locale=self.babel_locale)
        )

    def _format_currency(self, value: int | float | Decimal, opts: NumberOptions) -> str:
        currency = opts.currency or ""
        if opts.pattern is not None:
            return str(
                babel_numbers.format_currency(
                    value, currency, format=opts.pattern, locale=self.babel_locale
                )
            )
        if opts.currency_display == "name":
            return str(
                babel_numbers.format_currency(
                    value, currency, locale=self.babel_locale, format_type="name"
                )
            )
        if opts.currency_display == "code":
            standard = self.babel_locale.currency_formats.get("standard")
            raw_pattern = getattr(standard, "pattern", "")
            # Single U+00A4 = symbol, double U+00A4 U+00A4 = ISO code per CLDR
            if "\xa4" in raw_pattern:
                return str(
                    babel_numbers.format_currency(
                        value,
                        currency,
                        format=raw_pattern.replace("\xa4", "\xa4\xa4"),
                        locale=self.babel_locale,
                    )
                )
            logger.debug("Currency pattern for locale %s lacks placeholder", self.locale_code)
        return str(babel_numbers.format_currency(value, currency, locale=self.babel_locale))

    # ------------------------------------------------------------------
    # Dates and times
    # ------------------------------------------------------------------

    def format_date(
        self, value: date | datetime | str, options: DateTimeOptions | None = None
    ) -> str:
        """Format the date part of a value.

        Args:
            value: date, datetime or ISO 8601 string
            options: CLDR length or pattern (default: medium)

        Raises:
            FormattingError: If the value is not a date or Babel fails

        Example:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_date(date(2014, 3, 9), DateTimeOptions(style="long"))
            'March 9, 2014'
        """
        opts = options or _DEFAULT_DATETIME
        dt_value = _coerce_datetime(value, "Date")
        try:
            return str(
                babel_dates.format_date(
                    dt_value, format=opts.pattern or opts.style, locale=self.babel_locale
                )
            )
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Date", dt_value, str(e)),
                fallback_value=dt_value.isoformat(),
            ) from e

    def format_time(
        self, value: datetime | time | str, options: DateTimeOptions | None = None
    ) -> str:
        """Format the time part of a value.

        Raises:
            FormattingError: If the value is not a time or Babel fails
        """
        opts = options or _DEFAULT_DATETIME
        dt_value = value if isinstance(value, time) else _coerce_datetime(value, "Time")
        try:
            return str(
                babel_dates.format_time(
                    dt_value, format=opts.pattern or opts.style, locale=self.babel_locale
                )
            )
        except (ValueError, OverflowError, AttributeError, KeyError) as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed("Time", dt_value, str(e)),
                fallback_value=dt_value.isoformat(),
            ) from e

    # ------------------------------------------------------------------
    # Calendar names (used by the skeleton expander)
    # ------------------------------------------------------------------

    def era_name(self, value: date, width: NameWidth) -> str:
        """Era name for the value's year ("AD", "Anno Domini", "A")."""
        names = babel_dates.get_era_names(width, locale=self.babel_locale)
        # Python dates start at year 1, always in the Common Era
        return str(names[1])

    def month_name(self, value: date, width: NameWidth, context: NameContext = "format") -> str:
        """Month name of the value ("Mar", "March", "M")."""
        names = babel_dates.get_month_names(width, context, locale=self.babel_locale)
        return str(names[value.month])

    def weekday_name(self, value: date, width: NameWidth, context: NameContext = "format") -> str:
        """Weekday name of the value ("Sun", "Sunday", "S")."""
        # Babel keys weekdays 0=Monday..6=Sunday, same as date.weekday()
        names = babel_dates.get_day_names(width, context, locale=self.babel_locale)
        return str(names[value.weekday()])


def _coerce_datetime(value: object, kind: str) -> date | datetime:
    """Accept date/datetime values and ISO 8601 strings."""
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as e:
            raise FormattingError(
                ErrorTemplate.formatting_failed(kind, value, "not ISO 8601 format"),
                fallback_value=value,
            ) from e
    raise FormattingError(
        ErrorTemplate.formatting_failed(kind, value, f"unsupported type {type(value).__name__}"),
        fallback_value=str(value),
    )
