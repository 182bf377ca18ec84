"""Diagnostic system for message compilation and rendering errors.

Provides structured error diagnostics with codes, tree paths and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DepthLimitExceededError,
    FormattingError,
    InvalidStructureError,
    MessageFormatError,
    MessageRenderError,
    MissingArgumentError,
    MissingOtherOptionError,
)
from .templates import ErrorTemplate

__all__ = [
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormattingError",
    "InvalidStructureError",
    "MessageFormatError",
    "MessageRenderError",
    "MissingArgumentError",
    "MissingOtherOptionError",
]
