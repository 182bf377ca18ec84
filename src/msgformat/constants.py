"""Shared constants for msgformat.

This module provides centralized configuration constants used across
the syntax, dates and runtime packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for nested plural/select options
- Cache limits: Memory bounds for locale caching
- Fallback strings: Readable output for render-time failures

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CURRENCY",
    # Selectors
    "OTHER_SELECTOR",
    # Fallback strings
    "FALLBACK_MISSING_ARGUMENT",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting of plural/select option sub-patterns.
# Used by: compiler (options recursion), loader (tree conversion).
# 100 levels of nested selection is almost certainly malformed input.
MAX_DEPTH: int = 100

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when an unknown locale code is supplied.
DEFAULT_LOCALE: str = "en_US"

# Currency used by the default "currency" number style.
DEFAULT_CURRENCY: str = "USD"

# ============================================================================
# SELECTORS
# ============================================================================

# Mandatory fallback selector of every plural/select options mapping.
OTHER_SELECTOR: str = "other"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Template pattern - use .format(id=...)
FALLBACK_MISSING_ARGUMENT: str = "{{{id}}}"  # e.g., {count}
