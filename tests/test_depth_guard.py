"""Tests for core/depth_guard.py.

Tests DepthGuard.nested() levels and depth_clamp().

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgformat.constants import MAX_DEPTH
from msgformat.core.depth_guard import DepthGuard, depth_clamp
from msgformat.diagnostics import DepthLimitExceededError, DiagnosticCode, InvalidStructureError

# ============================================================================
# Construction
# ============================================================================


class TestDepthGuardConstruction:
    """Test DepthGuard construction and defaults."""

    def test_default_construction(self) -> None:
        """DepthGuard starts at depth 0 with MAX_DEPTH levels available."""
        guard = DepthGuard()

        assert guard.max_depth == MAX_DEPTH
        assert guard.depth == 0
        assert guard.remaining == MAX_DEPTH

    def test_custom_max_depth(self) -> None:
        assert DepthGuard(max_depth=5).max_depth == 5

    def test_oversized_limit_is_clamped(self) -> None:
        """Limits the interpreter stack cannot walk are lowered."""
        limit = sys.getrecursionlimit()
        guard = DepthGuard(max_depth=limit * 10)

        assert guard.max_depth == depth_clamp(limit * 10)
        assert guard.max_depth < limit


# ============================================================================
# Nested levels
# ============================================================================


class TestDepthGuardNested:
    """Test entering and leaving option levels."""

    def test_levels_track_depth(self) -> None:
        """Each nested() level increments depth; leaving restores it."""
        guard = DepthGuard(max_depth=10)

        with guard.nested("$") as outer:
            assert outer == 1
            with guard.nested("$.options[other]") as inner:
                assert inner == 2
                assert guard.remaining == 8

        assert guard.depth == 0

    def test_raises_past_limit(self) -> None:
        """Entering beyond max_depth raises with the offending path."""
        guard = DepthGuard(max_depth=2)

        with guard.nested(), guard.nested():
            with pytest.raises(DepthLimitExceededError) as exc_info:
                with guard.nested("$.elements[0].options[other]"):
                    pass

        error = exc_info.value
        assert isinstance(error, InvalidStructureError)
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.MAX_DEPTH_EXCEEDED
        assert error.diagnostic.tree_path == "$.elements[0].options[other]"
        assert "(2)" in str(error)

    def test_failed_entry_leaves_depth_unchanged(self) -> None:
        guard = DepthGuard(max_depth=1)

        with guard.nested():
            with pytest.raises(DepthLimitExceededError), guard.nested():
                pass
            assert guard.depth == 1

        assert guard.depth == 0

    def test_depth_restored_when_body_raises(self) -> None:
        guard = DepthGuard(max_depth=10)
        msg = "boom"

        with pytest.raises(RuntimeError), guard.nested():
            raise RuntimeError(msg)

        assert guard.depth == 0

    @given(st.integers(min_value=1, max_value=50))
    def test_exactly_max_depth_levels_fit(self, max_depth: int) -> None:
        """max_depth levels can be entered; one more cannot."""
        guard = DepthGuard(max_depth=max_depth)

        def descend(levels: int) -> None:
            if levels:
                with guard.nested():
                    descend(levels - 1)

        descend(max_depth)
        with pytest.raises(DepthLimitExceededError):
            descend(max_depth + 1)
        assert guard.depth == 0


# ============================================================================
# depth_clamp
# ============================================================================


class TestDepthClamp:
    """Test depth_clamp() against the interpreter recursion limit."""

    def test_small_depth_unchanged(self) -> None:
        assert depth_clamp(10) == 10

    def test_large_depth_clamped_with_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Oversized depths are lowered and a warning is logged."""
        with caplog.at_level(logging.WARNING, logger="msgformat.core.depth_guard"):
            result = depth_clamp(sys.getrecursionlimit() * 10)

        assert result < sys.getrecursionlimit()
        assert "exceeds what recursion limit" in caplog.text

    @given(st.integers(min_value=0, max_value=10_000))
    def test_clamp_never_increases(self, requested: int) -> None:
        assert depth_clamp(requested) <= requested
