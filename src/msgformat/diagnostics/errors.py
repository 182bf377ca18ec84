"""Exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class MessageFormatError(Exception):
    """Base exception for all msgformat errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize MessageFormatError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidStructureError(MessageFormatError):
    """Syntax tree does not have the expected shape.

    Raised by the compiler and the tree loader when the root is not a
    message pattern or when an element or format type is unknown.
    Terminal: no partial compiled pattern is produced.
    """


class MissingOtherOptionError(InvalidStructureError):
    """Plural or select options lack the mandatory 'other' selector."""


class DepthLimitExceededError(InvalidStructureError):
    """Nested plural/select options exceed the configured depth limit."""


class MessageRenderError(MessageFormatError):
    """Error raised while rendering a compiled pattern.

    Attributes:
        fallback_value: String to use in output in place of the failed part
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize MessageRenderError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when rendering fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value


class MissingArgumentError(MessageRenderError):
    """No value was supplied for an argument referenced by the pattern."""


class FormattingError(MessageRenderError):
    """Locale-aware number or date formatting failed.

    The renderer collects this error and writes ``fallback_value`` to the
    output, so callers still receive readable text.
    """
