"""Message pattern compiler - converts syntax trees to compiled patterns.

Walks a MessagePattern and produces a tuple of literal strings and formatter
objects. Plural and select options are compiled recursively.

``#`` handling:
    Text inside a plural option that contains an unescaped ``#`` becomes a
    PluralOffsetText bound to the innermost enclosing plural argument. A
    select option resets the enclosing plural, so ``#`` inside a select
    nested in a plural stays literal text.

Thread Safety:
    Compilation state (enclosing plural, number formatter, depth guard) is
    passed explicitly via _Scope. Nothing is stored on the compiler between
    calls, so one MessageCompiler may compile from many threads at once.

Python 3.13+. Indirect dependency: Babel (via LocaleContext and plural_rules).
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, replace
from decimal import Decimal
from types import MappingProxyType

from msgformat.constants import DEFAULT_LOCALE, MAX_DEPTH, OTHER_SELECTOR
from msgformat.core.depth_guard import DepthGuard
from msgformat.dates.skeleton import compile_skeleton
from msgformat.diagnostics import ErrorTemplate, InvalidStructureError, MissingOtherOptionError
from msgformat.runtime.formats import DEFAULT_FORMATS, DateTimeOptions, Formats, NumberOptions
from msgformat.runtime.formatters import (
    CompiledPattern,
    DateTimeFormat,
    Formatter,
    NumberFormat,
    PluralFormat,
    PluralOffsetText,
    SelectFormat,
    SkeletonFormat,
    StringFormat,
    has_unescaped_hash,
    unescape_hash,
)
from msgformat.runtime.locale_context import LocaleContext
from msgformat.runtime.plural_rules import PluralFn, plural_fn_for
from msgformat.syntax import (
    ArgumentElement,
    DateFormatSpec,
    MessagePattern,
    NumberFormatSpec,
    OptionalPattern,
    PluralFormatSpec,
    SelectFormatSpec,
    TextElement,
    TimeFormatSpec,
)

__all__ = ["MessageCompiler"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Scope:
    """Per-call compilation state, threaded through the recursion.

    Attributes:
        plural_id: Argument id of the innermost enclosing plural, or None
        plural_offset: Offset of that plural
        number_format: Number formatter shared by every PluralOffsetText of
            one top-level compile() call
        guard: Depth guard of this compile() call
        path: Location of the current node, for diagnostics
    """

    plural_id: str | None
    plural_offset: int
    number_format: Callable[[int | float | Decimal], str]
    guard: DepthGuard
    path: str = "$"

    def at(self, path: str) -> "_Scope":
        """Same scope at another tree location."""
        return replace(self, path=path)

    def for_plural(self, element: ArgumentElement, spec: PluralFormatSpec) -> "_Scope":
        """Scope for the options of a plural argument: ``#`` refers to it."""
        return replace(self, plural_id=element.id, plural_offset=spec.offset)

    def for_select(self) -> "_Scope":
        """Scope for the options of a select argument: ``#`` is literal."""
        return replace(self, plural_id=None, plural_offset=0)


class MessageCompiler:
    """Compiles message syntax trees into reusable compiled patterns.

    Example:
        >>> from msgformat.syntax import ArgumentElement, MessagePattern, TextElement
        >>> compiler = MessageCompiler("en")
        >>> compiler.compile(MessagePattern((TextElement("Hi "), ArgumentElement("name"))))
        ('Hi ', StringFormat(id='name'))
    """

    __slots__ = ("_formats", "_locale", "_max_depth", "_plural_fn")

    def __init__(
        self,
        locale: str | LocaleContext = DEFAULT_LOCALE,
        formats: Formats | None = None,
        plural_fn: PluralFn | None = None,
        *,
        max_depth: int = MAX_DEPTH,
    ) -> None:
        """Initialize compiler.

        Args:
            locale: Locale code or LocaleContext for number/date formatting
            formats: Named styles (default: DEFAULT_FORMATS)
            plural_fn: ``(value, ordinal) -> category`` selector
                (default: Babel CLDR rules for the locale)
            max_depth: Maximum nesting of plural/select options
        """
        self._locale = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)
        self._formats = formats if formats is not None else DEFAULT_FORMATS
        self._plural_fn = (
            plural_fn if plural_fn is not None else plural_fn_for(str(self._locale.babel_locale))
        )
        self._max_depth = max_depth

    @property
    def locale(self) -> LocaleContext:
        """Locale used by compiled formatters."""
        return self._locale

    @property
    def formats(self) -> Formats:
        """Named styles used to resolve ``{id, number, style}`` and friends."""
        return self._formats

    def compile(self, tree: MessagePattern) -> CompiledPattern:
        """Compile a message syntax tree.

        Args:
            tree: Root MessagePattern

        Returns:
            Tuple of literal strings and formatter objects

        Raises:
            InvalidStructureError: If the root is not a MessagePattern, or an
                element or format spec has an unknown type
            MissingOtherOptionError: If plural/select options lack 'other'
            DepthLimitExceededError: If options nest deeper than max_depth
        """
        scope = _Scope(
            plural_id=None,
            plural_offset=0,
            number_format=self._locale.number_formatter(),
            guard=DepthGuard(max_depth=self._max_depth),
        )
        pattern = self._compile_pattern(tree, scope)
        logger.debug("Compiled message into %d part(s)", len(pattern))
        return pattern

    def _compile_pattern(self, node: object, scope: _Scope) -> CompiledPattern:
        if not MessagePattern.guard(node):
            raise InvalidStructureError(
                ErrorTemplate.invalid_root(type(node).__name__, scope.path)
            )

        parts: list[str | Formatter] = []
        for index, element in enumerate(node.elements):
            element_scope = scope.at(f"{scope.path}.elements[{index}]")
            match element:
                case TextElement(value=text):
                    parts.append(self._compile_text(text, element_scope))
                case ArgumentElement():
                    parts.append(self._compile_argument(element, element_scope))
                case _:
                    raise InvalidStructureError(
                        ErrorTemplate.unknown_element(type(element).__name__, element_scope.path)
                    )
        return tuple(parts)

    def _compile_text(self, text: str, scope: _Scope) -> str | PluralOffsetText:
        if scope.plural_id is not None and has_unescaped_hash(text):
            return PluralOffsetText(
                id=scope.plural_id,
                offset=scope.plural_offset,
                number_format=scope.number_format,
                text=text,
            )
        return unescape_hash(text)

    def _compile_argument(self, element: ArgumentElement, scope: _Scope) -> Formatter:
        arg_id = element.id
        match element.format:
            case None:
                return StringFormat(id=arg_id)
            case NumberFormatSpec(style=style):
                options = self._resolve_style(self._formats.number, style, "number", NumberOptions)
                return NumberFormat(id=arg_id, options=options, locale=self._locale)
            case DateFormatSpec(skeleton=str() as skeleton):
                return SkeletonFormat(
                    id=arg_id, skeleton=skeleton, render=compile_skeleton(skeleton, self._locale)
                )
            case DateFormatSpec(style=style):
                options = self._resolve_style(self._formats.date, style, "date", DateTimeOptions)
                return DateTimeFormat(id=arg_id, kind="date", options=options, locale=self._locale)
            case TimeFormatSpec(style=style):
                options = self._resolve_style(self._formats.time, style, "time", DateTimeOptions)
                return DateTimeFormat(id=arg_id, kind="time", options=options, locale=self._locale)
            case PluralFormatSpec() as spec:
                return PluralFormat(
                    id=arg_id,
                    ordinal=spec.ordinal,
                    offset=spec.offset,
                    options=self._compile_options(
                        arg_id, spec.options, scope.for_plural(element, spec)
                    ),
                    plural_fn=self._plural_fn,
                )
            case SelectFormatSpec() as spec:
                return SelectFormat(
                    id=arg_id,
                    options=self._compile_options(arg_id, spec.options, scope.for_select()),
                )
            case other:
                raise InvalidStructureError(
                    ErrorTemplate.unknown_format(type(other).__name__, arg_id, scope.path)
                )

    def _compile_options(
        self, arg_id: str, options: Sequence[OptionalPattern], scope: _Scope
    ) -> Mapping[str, CompiledPattern]:
        if not any(option.selector == OTHER_SELECTOR for option in options):
            raise MissingOtherOptionError(ErrorTemplate.missing_other_option(arg_id, scope.path))

        compiled: dict[str, CompiledPattern] = {}
        with scope.guard.nested(scope.path):
            for option in options:
                option_scope = scope.at(f"{scope.path}.options[{option.selector}]")
                compiled[option.selector] = self._compile_pattern(option.value, option_scope)
        return MappingProxyType(compiled)

    @staticmethod
    def _resolve_style[T](
        styles: Mapping[str, T], style: str | None, kind: str, default: Callable[[], T]
    ) -> T:
        """Look up a named style; unknown names fall back to the kind's defaults."""
        if style is None:
            return default()
        options = styles.get(style)
        if options is None:
            logger.warning("Unknown %s style '%s'; using default options", kind, style)
            return default()
        return options
