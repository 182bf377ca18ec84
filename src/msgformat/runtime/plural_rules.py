"""CLDR plural rules implementation using Babel.

Provides plural category selection (cardinal and ordinal) for all locales
using Babel's CLDR data. This is the default category selector handed to
PluralFormat; callers may inject their own.

Python 3.13+. Depends on Babel for CLDR data.

Reference: https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html
"""

from collections.abc import Callable
from decimal import Decimal
from functools import partial

from babel.core import UnknownLocaleError

from msgformat.locale_utils import get_babel_locale

__all__ = ["PluralFn", "plural_fn_for", "select_plural_category"]

type PluralFn = Callable[[int | float | Decimal, bool], str]


def select_plural_category(
    n: int | float | Decimal, locale: str, ordinal: bool = False
) -> str:
    """Select CLDR plural category for number using Babel's CLDR data.

    Args:
        n: Number to categorize (already offset-adjusted)
        locale: Locale code (e.g., "lv_LV", "en_US", "ar-SA")
        ordinal: Use ordinal rules ("1st", "2nd") instead of cardinal rules

    Returns:
        Plural category: "zero", "one", "two", "few", "many", or "other"

    Examples:
        >>> select_plural_category(1, "en_US")
        'one'
        >>> select_plural_category(5, "ru_RU")
        'many'
        >>> select_plural_category(2, "en_US", ordinal=True)
        'two'
        >>> select_plural_category(3, "en_US", ordinal=True)
        'few'

    If locale parsing fails, falls back to a simple one/other rule
    (and "other" for ordinals).
    """
    try:
        locale_obj = get_babel_locale(locale)
    except (UnknownLocaleError, ValueError):
        if ordinal:
            return "other"
        return "one" if abs(n) == 1 else "other"

    rule = locale_obj.ordinal_form if ordinal else locale_obj.plural_form
    return rule(n)


def plural_fn_for(locale: str) -> PluralFn:
    """Bind a locale into a ``(value, ordinal) -> category`` selector."""
    return partial(_select_for_locale, locale)


def _select_for_locale(locale: str, value: int | float | Decimal, ordinal: bool) -> str:
    return select_plural_category(value, locale, ordinal)
