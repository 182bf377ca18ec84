"""Message runtime package.

Provides the pattern compiler, formatter variants, the renderer and the
MessageFormat facade. Depends on the syntax package for tree nodes and on
the dates package for skeleton expansion.

Python 3.13+.
"""

# Import order matters: dates.skeleton imports runtime.locale_context, and
# runtime.compiler imports dates.skeleton.
from .formats import DEFAULT_FORMATS, DateTimeOptions, Formats, NumberOptions
from .locale_context import LocaleContext
from .plural_rules import PluralFn, plural_fn_for, select_plural_category
from .formatters import (  # noqa: I001
    CompiledPattern,
    DateTimeFormat,
    Formatter,
    NumberFormat,
    PluralFormat,
    PluralOffsetText,
    SelectFormat,
    SkeletonFormat,
    StringFormat,
)
from .compiler import MessageCompiler
from .renderer import render
from .message import MessageFormat

__all__ = [
    "DEFAULT_FORMATS",
    "CompiledPattern",
    "DateTimeFormat",
    "DateTimeOptions",
    "Formats",
    "Formatter",
    "LocaleContext",
    "MessageCompiler",
    "MessageFormat",
    "NumberFormat",
    "NumberOptions",
    "PluralFn",
    "PluralFormat",
    "PluralOffsetText",
    "SelectFormat",
    "SkeletonFormat",
    "StringFormat",
    "plural_fn_for",
    "render",
    "select_plural_category",
]
