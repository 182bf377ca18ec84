"""Locale code handling shared by LocaleContext and the plural rules.

Messages name locales the way ICU does (BCP 47, ``pt-BR``); Babel wants
POSIX identifiers (``pt_BR``). Environment-style codes such as
``de_DE.UTF-8@euro`` are accepted too, minus their encoding and modifier.

Python 3.13+.
"""

import functools
import re

from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]

# Encoding (".UTF-8") and modifier ("@euro") suffixes of POSIX locale names
_POSIX_SUFFIX = re.compile(r"[.@].*$")


def normalize_locale(locale_code: str) -> str:
    """POSIX form of a locale code, used as the cache key for lookups.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
        >>> normalize_locale(" de_DE.UTF-8@euro ")
        'de_DE'
    """
    return _POSIX_SUFFIX.sub("", locale_code.strip()).replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Parsed Babel Locale for a code, cached per distinct code.

    Raises:
        babel.core.UnknownLocaleError: If CLDR has no data for the locale
        ValueError: If the code is not a locale identifier
    """
    return Locale.parse(normalize_locale(locale_code))
