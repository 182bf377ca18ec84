"""Message syntax tree: node types and the parser-output loader.

Python 3.13+. Zero external dependencies.
"""

from .ast import (
    ArgumentElement,
    DateFormatSpec,
    FormatSpec,
    MessagePattern,
    NumberFormatSpec,
    OptionalPattern,
    PatternElement,
    PluralFormatSpec,
    SelectFormatSpec,
    TextElement,
    TimeFormatSpec,
)
from .loader import load_json, load_tree

__all__ = [
    "ArgumentElement",
    "DateFormatSpec",
    "FormatSpec",
    "MessagePattern",
    "NumberFormatSpec",
    "OptionalPattern",
    "PatternElement",
    "PluralFormatSpec",
    "SelectFormatSpec",
    "TextElement",
    "TimeFormatSpec",
    "load_json",
    "load_tree",
]
