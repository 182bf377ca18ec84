"""MessageFormat - compile once, format many times.

Convenience facade over MessageCompiler and render(). Accepts either a
MessagePattern or the raw object tree emitted by an ICU MessageFormat parser.

Python 3.13+. Uses Babel (through LocaleContext) for locale data.
"""

import logging
from collections.abc import Mapping

from msgformat.constants import DEFAULT_LOCALE, MAX_DEPTH
from msgformat.diagnostics import MessageRenderError
from msgformat.runtime.compiler import MessageCompiler
from msgformat.runtime.formats import Formats
from msgformat.runtime.formatters import CompiledPattern
from msgformat.runtime.locale_context import LocaleContext
from msgformat.runtime.plural_rules import PluralFn
from msgformat.runtime.renderer import render
from msgformat.syntax import MessagePattern, load_tree

__all__ = ["MessageFormat"]

logger = logging.getLogger(__name__)


class MessageFormat:
    """A compiled, locale-bound message.

    Compilation happens once in the constructor; format() may then be called
    any number of times, from any thread.

    Examples:
        >>> tree = {"type": "messageFormatPattern", "elements": [
        ...     {"type": "messageTextElement", "value": "Hello, "},
        ...     {"type": "argumentElement", "id": "name"},
        ... ]}
        >>> MessageFormat(tree, "en-US").format({"name": "Ann"})
        ('Hello, Ann', ())

        >>> text, errors = MessageFormat(tree, "en-US").format({})
        >>> text
        'Hello, {name}'
        >>> type(errors[0]).__name__
        'MissingArgumentError'
    """

    __slots__ = ("_compiler", "_pattern", "_strict")

    def __init__(
        self,
        message: MessagePattern | Mapping[str, object],
        locale: str | LocaleContext = DEFAULT_LOCALE,
        /,
        *,
        formats: Formats | None = None,
        plural_fn: PluralFn | None = None,
        strict: bool = False,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Compile a message.

        Args:
            message: MessagePattern, or the parser's object tree
            locale: Locale code or LocaleContext
            formats: Named styles (default: DEFAULT_FORMATS)
            plural_fn: ``(value, ordinal) -> category`` selector
            strict: Raise the first render error instead of returning it
            max_depth: Maximum nesting of plural/select options

        Raises:
            InvalidStructureError: If the message tree is malformed
            MissingOtherOptionError: If plural/select options lack 'other'
            DepthLimitExceededError: If options nest deeper than max_depth
        """
        tree = message if MessagePattern.guard(message) else load_tree(message, max_depth=max_depth)
        self._compiler = MessageCompiler(locale, formats, plural_fn, max_depth=max_depth)
        self._pattern = self._compiler.compile(tree)
        self._strict = strict

        logger.info(
            "MessageFormat compiled for locale: %s (%d part(s), strict=%s)",
            self._compiler.locale.locale_code,
            len(self._pattern),
            strict,
        )

    @property
    def pattern(self) -> CompiledPattern:
        """Compiled pattern (immutable)."""
        return self._pattern

    @property
    def locale(self) -> str:
        """Locale code this message was compiled for."""
        return self._compiler.locale.locale_code

    @property
    def strict(self) -> bool:
        """Whether format() raises on the first error."""
        return self._strict

    def resolved_options(self) -> dict[str, str]:
        """Options actually in effect.

        ``locale`` is the Babel locale used for formatting, which differs from
        the requested code when an unknown locale fell back to the default.
        """
        return {"locale": str(self._compiler.locale.babel_locale)}

    def format(
        self, args: Mapping[str, object] | None = None
    ) -> tuple[str, tuple[MessageRenderError, ...]]:
        """Render the message with the given arguments.

        Args:
            args: Argument values keyed by argument id

        Returns:
            Tuple of (text, errors)

        Raises:
            MessageRenderError: In strict mode, the first error encountered
        """
        text, errors = render(self._pattern, args)
        if errors:
            logger.warning("Message rendering errors: %d error(s)", len(errors))
            for err in errors:
                logger.debug("  - %s: %s", type(err).__name__, err)
            if self._strict:
                raise errors[0]
        return text, errors

    def __repr__(self) -> str:
        """Return string representation for debugging.

        Example:
            >>> MessageFormat({"type": "messageFormatPattern", "elements": []}, "lv_LV")
            MessageFormat(locale='lv_LV', parts=0)
        """
        return f"MessageFormat(locale={self.locale!r}, parts={len(self._pattern)})"
