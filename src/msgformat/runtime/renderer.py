"""Compiled pattern renderer.

Turns a compiled pattern plus an argument mapping into text. Rendering never
raises for bad arguments: a missing argument renders as ``{id}``, a value a
formatter rejects renders as the error's fallback value, and every such
problem is collected and returned next to the text.

Python 3.13+. Zero external dependencies beyond the formatters it drives.
"""

import logging
from collections.abc import Mapping

from msgformat.constants import FALLBACK_MISSING_ARGUMENT
from msgformat.diagnostics import ErrorTemplate, MessageRenderError, MissingArgumentError
from msgformat.runtime.formatters import CompiledPattern, PluralFormat, SelectFormat

__all__ = ["render"]

logger = logging.getLogger(__name__)


def render(
    pattern: CompiledPattern, args: Mapping[str, object] | None = None
) -> tuple[str, tuple[MessageRenderError, ...]]:
    """Render a compiled pattern.

    Args:
        pattern: Output of MessageCompiler.compile()
        args: Argument values keyed by argument id

    Returns:
        Tuple of (text, errors). Errors are in the order they occurred.

    Raises:
        MissingOtherOptionError: If a hand-built selection formatter has no
            matching option and no ``other`` option

    Example:
        >>> from msgformat.runtime.formatters import StringFormat
        >>> render(("Hi ", StringFormat("name")), {"name": "Ann"})
        ('Hi Ann', ())
        >>> render(("Hi ", StringFormat("name")), {})[0]
        'Hi {name}'
    """
    errors: list[MessageRenderError] = []
    text = _render_parts(pattern, args or {}, errors)
    if errors:
        logger.debug("Rendered message with %d error(s)", len(errors))
    return text, tuple(errors)


def _render_parts(
    pattern: CompiledPattern, args: Mapping[str, object], errors: list[MessageRenderError]
) -> str:
    parts: list[str] = []
    for part in pattern:
        if isinstance(part, str):
            parts.append(part)
            continue

        if part.id not in args:
            error = MissingArgumentError(
                ErrorTemplate.argument_not_provided(part.id),
                fallback_value=FALLBACK_MISSING_ARGUMENT.format(id=part.id),
            )
            errors.append(error)
            parts.append(error.fallback_value)
            continue

        value = args[part.id]
        try:
            match part:
                case PluralFormat() | SelectFormat():
                    parts.append(_render_parts(part.get_option(value), args, errors))
                case _:
                    parts.append(part.format(value))  # type: ignore[arg-type]
        except MessageRenderError as e:
            errors.append(e)
            parts.append(e.fallback_value)
    return "".join(parts)
