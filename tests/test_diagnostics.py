"""Tests for diagnostics: codes, structured messages, templates and exceptions."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from msgformat.diagnostics import (
    DepthLimitExceededError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    FormattingError,
    InvalidStructureError,
    MessageFormatError,
    MessageRenderError,
    MissingArgumentError,
    MissingOtherOptionError,
)

# ============================================================================
# Diagnostic formatting
# ============================================================================


class TestDiagnosticFormat:
    """Test Diagnostic.format_error() output."""

    def test_full_diagnostic(self) -> None:
        """All optional parts appear on their own lines."""
        diagnostic = ErrorTemplate.missing_other_option("count", "$.elements[0]")

        assert diagnostic.format_error() == (
            "error[MISSING_OTHER_OPTION]: Argument 'count' has no 'other' option\n"
            "  --> $.elements[0]\n"
            "  = argument: count\n"
            "  = help: Add an 'other {...}' option"
        )

    def test_minimal_diagnostic(self) -> None:
        """Only the header line without optional parts."""
        diagnostic = Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message="boom")
        assert diagnostic.format_error() == "error[FORMATTING_FAILED]: boom"

    def test_str_is_message(self) -> None:
        """str() returns the plain message."""
        assert str(ErrorTemplate.argument_not_provided("n")) == "A value must be provided for: n"

    def test_control_characters_escaped(self) -> None:
        """Newlines in user data cannot split a diagnostic."""
        diagnostic = ErrorTemplate.argument_not_provided("a\nb")
        assert "\n" not in diagnostic.format_error().splitlines()[0]
        assert "a\\nb" in diagnostic.format_error()

    @given(st.text())
    def test_header_is_one_line(self, argument_id: str) -> None:
        """The first line always carries the code."""
        formatted = ErrorTemplate.argument_not_provided(argument_id).format_error()
        assert formatted.startswith("error[ARGUMENT_NOT_PROVIDED]: ")


# ============================================================================
# Templates
# ============================================================================


class TestErrorTemplates:
    """Test that templates select codes and carry context."""

    @pytest.mark.parametrize(
        ("diagnostic", "code"),
        [
            (ErrorTemplate.invalid_root("dict"), DiagnosticCode.INVALID_ROOT),
            (ErrorTemplate.unknown_element("foo"), DiagnosticCode.UNKNOWN_ELEMENT),
            (ErrorTemplate.unknown_format("foo", "n"), DiagnosticCode.UNKNOWN_FORMAT),
            (ErrorTemplate.missing_other_option("n"), DiagnosticCode.MISSING_OTHER_OPTION),
            (ErrorTemplate.malformed_node("bad"), DiagnosticCode.MALFORMED_NODE),
            (ErrorTemplate.max_depth_exceeded(3), DiagnosticCode.MAX_DEPTH_EXCEEDED),
            (ErrorTemplate.argument_not_provided("n"), DiagnosticCode.ARGUMENT_NOT_PROVIDED),
            (ErrorTemplate.formatting_failed("Number", 1, "x"), DiagnosticCode.FORMATTING_FAILED),
            (ErrorTemplate.not_a_number("abc"), DiagnosticCode.NOT_A_NUMBER),
        ],
    )
    def test_codes(self, diagnostic: Diagnostic, code: DiagnosticCode) -> None:
        """Each template uses its own code."""
        assert diagnostic.code == code

    def test_invalid_root_mentions_found_type(self) -> None:
        """The offending type is named."""
        assert "got list" in ErrorTemplate.invalid_root("list").message

    def test_unknown_format_carries_argument(self) -> None:
        """Argument id and path are kept."""
        diagnostic = ErrorTemplate.unknown_format("bogus", "n", "$.elements[2]")
        assert diagnostic.argument_id == "n"
        assert diagnostic.tree_path == "$.elements[2]"

    def test_formatting_failed_message(self) -> None:
        """Kind, value and reason appear in the message."""
        message = ErrorTemplate.formatting_failed("Date", "x", "not ISO 8601 format").message
        assert message == "Date formatting failed for 'x': not ISO 8601 format"


# ============================================================================
# Exceptions
# ============================================================================


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        """Structure and render errors share the MessageFormatError root."""
        assert issubclass(MissingOtherOptionError, InvalidStructureError)
        assert issubclass(DepthLimitExceededError, InvalidStructureError)
        assert issubclass(InvalidStructureError, MessageFormatError)
        assert issubclass(MissingArgumentError, MessageRenderError)
        assert issubclass(FormattingError, MessageRenderError)
        assert issubclass(MessageRenderError, MessageFormatError)

    def test_plain_message(self) -> None:
        """A string message has no diagnostic."""
        error = MessageFormatError("plain")
        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message(self) -> None:
        """A Diagnostic is kept and formatted into the message."""
        diagnostic = ErrorTemplate.invalid_root("dict", "$")
        error = InvalidStructureError(diagnostic)
        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[INVALID_ROOT]")

    def test_render_error_fallback(self) -> None:
        """Render errors carry a fallback value."""
        error = MissingArgumentError(ErrorTemplate.argument_not_provided("n"), fallback_value="{n}")
        assert error.fallback_value == "{n}"
