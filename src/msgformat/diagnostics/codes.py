"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Structure errors (malformed syntax trees)
        2000-2999: Render errors (argument values at format time)
    """

    # Structure errors (1000-1999)
    INVALID_ROOT = 1001
    UNKNOWN_ELEMENT = 1002
    UNKNOWN_FORMAT = 1003
    MISSING_OTHER_OPTION = 1004
    MALFORMED_NODE = 1005
    MAX_DEPTH_EXCEEDED = 1006

    # Render errors (2000-2999)
    ARGUMENT_NOT_PROVIDED = 2001
    FORMATTING_FAILED = 2002
    NOT_A_NUMBER = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        tree_path: Location of the offending node in the syntax tree
            (e.g. ``elements[1].options[one]``)
        argument_id: Message argument involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    tree_path: str | None = None
    argument_id: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[MISSING_OTHER_OPTION]: Argument 'count' has no 'other' option
              --> elements[0]
              = argument: count
              = help: Add an 'other {...}' option

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {_escape(self.message)}"]
        if self.tree_path:
            lines.append(f"  --> {_escape(self.tree_path)}")
        if self.argument_id:
            lines.append(f"  = argument: {_escape(self.argument_id)}")
        if self.hint:
            lines.append(f"  = help: {_escape(self.hint)}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    """Escape control characters so one diagnostic stays one log record."""
    return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
