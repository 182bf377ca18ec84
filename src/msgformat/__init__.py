"""msgformat - ICU MessageFormat compiler and renderer with CLDR locale data.

Compiles the syntax tree produced by an ICU MessageFormat parser into an
immutable sequence of literal strings and formatter objects, then renders it
against argument values. Plural selection, number, date and time formatting
use Babel's CLDR data.

Public API:
    MessageFormat - Compile a message once, format it many times
    MessageCompiler - Syntax tree to compiled pattern
    render - Compiled pattern plus arguments to text
    load_tree / load_json - Parser output to syntax tree
    compile_skeleton - CLDR date skeleton to renderer
    Formats, NumberOptions, DateTimeOptions - Named style configuration

Exceptions:
    MessageFormatError - Base exception class
    InvalidStructureError - Malformed syntax trees
    MissingOtherOptionError - Plural/select options without 'other'
    DepthLimitExceededError - Options nested too deeply
    MessageRenderError - Collected render-time errors (missing argument, formatting)

Submodules:
    msgformat.syntax - Tree node types and the parser-output loader
    msgformat.runtime - Compiler, formatters, renderer, locale formatting
    msgformat.dates - Skeleton expansion and calendar arithmetic
    msgformat.diagnostics - Error types and structured diagnostics
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    DepthLimitExceededError,
    FormattingError,
    InvalidStructureError,
    MessageFormatError,
    MessageRenderError,
    MissingArgumentError,
    MissingOtherOptionError,
)

# runtime must be imported before dates (see msgformat.runtime)
from .runtime import (  # noqa: I001
    DEFAULT_FORMATS,
    DateTimeOptions,
    Formats,
    LocaleContext,
    MessageCompiler,
    MessageFormat,
    NumberOptions,
    render,
    select_plural_category,
)
from .dates import compile_skeleton
from .syntax import MessagePattern, load_json, load_tree

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("msgformat")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_FORMATS",
    "DateTimeOptions",
    "DepthLimitExceededError",
    "FormattingError",
    "Formats",
    "InvalidStructureError",
    "LocaleContext",
    "MessageCompiler",
    "MessageFormat",
    "MessageFormatError",
    "MessagePattern",
    "MessageRenderError",
    "MissingArgumentError",
    "MissingOtherOptionError",
    "NumberOptions",
    "__version__",
    "compile_skeleton",
    "load_json",
    "load_tree",
    "render",
    "select_plural_category",
]
