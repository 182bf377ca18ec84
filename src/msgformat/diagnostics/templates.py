"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def invalid_root(found: str, tree_path: str | None = None) -> Diagnostic:
        """Root (or option value) is not a message pattern.

        Args:
            found: Type name of the node that was found instead
            tree_path: Location of the node in the tree

        Returns:
            Diagnostic for INVALID_ROOT
        """
        msg = f"Message tree is not of type 'messageFormatPattern' (got {found})"
        return Diagnostic(
            code=DiagnosticCode.INVALID_ROOT,
            message=msg,
            hint="Pass the MessagePattern produced by the message parser",
            tree_path=tree_path,
        )

    @staticmethod
    def unknown_element(found: str, tree_path: str | None = None) -> Diagnostic:
        """Pattern element has an unrecognized type."""
        msg = f"Message element does not have a valid type (got {found})"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_ELEMENT,
            message=msg,
            hint="Elements must be text or argument elements",
            tree_path=tree_path,
        )

    @staticmethod
    def unknown_format(
        found: str, argument_id: str, tree_path: str | None = None
    ) -> Diagnostic:
        """Argument format spec has an unrecognized type."""
        msg = f"Message element does not have a valid format type (got {found})"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_FORMAT,
            message=msg,
            hint="Use number, date, time, plural or select",
            tree_path=tree_path,
            argument_id=argument_id,
        )

    @staticmethod
    def missing_other_option(argument_id: str, tree_path: str | None = None) -> Diagnostic:
        """Plural/select options lack an 'other' entry.

        Args:
            argument_id: Argument whose options are incomplete
            tree_path: Location of the argument in the tree

        Returns:
            Diagnostic for MISSING_OTHER_OPTION
        """
        msg = f"Argument '{argument_id}' has no 'other' option"
        return Diagnostic(
            code=DiagnosticCode.MISSING_OTHER_OPTION,
            message=msg,
            hint="Add an 'other {...}' option",
            tree_path=tree_path,
            argument_id=argument_id,
        )

    @staticmethod
    def malformed_node(detail: str, tree_path: str | None = None) -> Diagnostic:
        """Loader input is missing keys or has wrong value types."""
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_NODE,
            message=f"Malformed message tree node: {detail}",
            tree_path=tree_path,
        )

    @staticmethod
    def max_depth_exceeded(max_depth: int, tree_path: str | None = None) -> Diagnostic:
        """Nested options exceed the depth limit."""
        msg = f"Maximum option nesting depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the nested plural/select structure",
            tree_path=tree_path,
        )

    @staticmethod
    def argument_not_provided(argument_id: str) -> Diagnostic:
        """Render call did not supply a value for an argument.

        Args:
            argument_id: The missing argument identifier

        Returns:
            Diagnostic for ARGUMENT_NOT_PROVIDED
        """
        msg = f"A value must be provided for: {argument_id}"
        return Diagnostic(
            code=DiagnosticCode.ARGUMENT_NOT_PROVIDED,
            message=msg,
            hint=f"Pass '{argument_id}' in the arguments mapping",
            argument_id=argument_id,
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, reason: str) -> Diagnostic:
        """Locale formatting of a value failed."""
        msg = f"{kind} formatting failed for '{value}': {reason}"
        return Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message=msg)

    @staticmethod
    def not_a_number(value: object, argument_id: str | None = None) -> Diagnostic:
        """Plural arithmetic received a non-numeric or non-finite value."""
        msg = f"Expected a number, got {type(value).__name__} '{value}'"
        return Diagnostic(
            code=DiagnosticCode.NOT_A_NUMBER,
            message=msg,
            hint="Plural arguments must be finite int, float, Decimal or numeric strings",
            argument_id=argument_id,
        )
