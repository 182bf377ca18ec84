"""Tests for plural_rules.py - CLDR plural category selection using Babel.

Property-Based Testing Strategy:
    Uses Hypothesis to verify that every selected category is a CLDR category
    across locale families.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgformat.runtime.plural_rules import plural_fn_for, select_plural_category

# ============================================================================
# Hypothesis Strategies
# ============================================================================

LOCALE_CODES = st.sampled_from(
    ["en", "en_US", "lv_LV", "de", "pl", "ru_RU", "ar", "fr", "ja", "cy", "ga", "zz_ZZ"]
)

CLDR_CATEGORIES = frozenset({"zero", "one", "two", "few", "many", "other"})


# ============================================================================
# Cardinal Rules
# ============================================================================


class TestCardinalRules:
    """Test cardinal category selection."""

    @pytest.mark.parametrize(
        ("n", "locale", "expected"),
        [
            (1, "en_US", "one"),
            (2, "en_US", "other"),
            (0, "en_US", "other"),
            (5, "ru_RU", "many"),
            (2, "ru_RU", "few"),
            (0, "lv_LV", "zero"),
            (0, "ar", "zero"),
            (2, "ar", "two"),
            (1, "ja", "other"),
        ],
    )
    def test_known_categories(self, n: int, locale: str, expected: str) -> None:
        """Categories follow CLDR data."""
        assert select_plural_category(n, locale) == expected

    def test_bcp47_locale_code(self) -> None:
        """Hyphenated locale codes are accepted."""
        assert select_plural_category(1, "en-US") == "one"

    def test_decimal_fraction(self) -> None:
        """Fractional English values are 'other'."""
        assert select_plural_category(Decimal("1.5"), "en") == "other"

    @given(st.integers(min_value=0, max_value=10**6), LOCALE_CODES)
    def test_always_cldr_category(self, n: int, locale: str) -> None:
        """Every result is one of the six CLDR categories."""
        assert select_plural_category(n, locale) in CLDR_CATEGORIES


# ============================================================================
# Ordinal Rules
# ============================================================================


class TestOrdinalRules:
    """Test ordinal category selection (selectordinal)."""

    @pytest.mark.parametrize(
        ("n", "expected"),
        [(1, "one"), (2, "two"), (3, "few"), (4, "other"), (11, "other"), (21, "one")],
    )
    def test_english_ordinals(self, n: int, expected: str) -> None:
        """1st, 2nd, 3rd, 4th, 11th, 21st."""
        assert select_plural_category(n, "en", ordinal=True) == expected


# ============================================================================
# Unknown Locales
# ============================================================================


class TestUnknownLocale:
    """Test the simple fallback rule for unknown locales."""

    def test_cardinal_fallback(self) -> None:
        """Unknown locales use a one/other rule."""
        assert select_plural_category(1, "zz_ZZ") == "one"
        assert select_plural_category(2, "zz_ZZ") == "other"

    def test_ordinal_fallback(self) -> None:
        """Unknown locales have only 'other' ordinals."""
        assert select_plural_category(1, "zz_ZZ", ordinal=True) == "other"


# ============================================================================
# Bound Selector
# ============================================================================


class TestPluralFnFor:
    """Test plural_fn_for() binding."""

    def test_binds_locale(self) -> None:
        """The bound selector takes (value, ordinal)."""
        select = plural_fn_for("en")
        assert select(1, False) == "one"
        assert select(2, True) == "two"

    def test_bound_selector_for_other_locale(self) -> None:
        """Each binding keeps its own locale."""
        assert plural_fn_for("ru")(5, False) == "many"
