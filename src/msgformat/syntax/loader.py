"""Convert ICU MessageFormat parser output into syntax tree nodes.

Message parsers emit a JSON object tree tagged with ``type`` fields:

    {"type": "messageFormatPattern", "elements": [
        {"type": "messageTextElement", "value": "You have "},
        {"type": "argumentElement", "id": "n", "format": {
            "type": "pluralFormat", "ordinal": false, "offset": 0,
            "options": [
                {"type": "optionalFormatPattern", "selector": "one",
                 "value": {"type": "messageFormatPattern", "elements": [...]}},
                ...]}}]}

This module maps that shape onto the frozen dataclasses in
``msgformat.syntax.ast``. Unknown tags and missing keys raise
InvalidStructureError with the path of the offending node.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Mapping

from msgformat.constants import MAX_DEPTH
from msgformat.core.depth_guard import DepthGuard
from msgformat.diagnostics import ErrorTemplate, InvalidStructureError

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

__all__ = ["load_json", "load_tree"]

_PATTERN_TYPE = "messageFormatPattern"
_SKELETON_STYLE = "skeleton"


def load_json(source: str, *, max_depth: int = MAX_DEPTH) -> MessagePattern:
    """Parse JSON text produced by a message parser into a MessagePattern.

    Raises:
        InvalidStructureError: If the text is not valid JSON or the tree is malformed
    """
    try:
        data = json.loads(source)
    except json.JSONDecodeError as e:
        raise InvalidStructureError(
            ErrorTemplate.malformed_node(f"invalid JSON: {e.msg}")
        ) from e
    return load_tree(data, max_depth=max_depth)


def load_tree(data: object, *, max_depth: int = MAX_DEPTH) -> MessagePattern:
    """Convert a parser object tree into a MessagePattern.

    Args:
        data: Mapping with ``type == "messageFormatPattern"``
        max_depth: Maximum nesting of plural/select options

    Returns:
        Equivalent MessagePattern

    Raises:
        InvalidStructureError: If a node tag is unknown or a key is missing
        DepthLimitExceededError: If options nest deeper than max_depth

    Example:
        >>> load_tree({"type": "messageFormatPattern",
        ...            "elements": [{"type": "messageTextElement", "value": "hi"}]})
        MessagePattern(elements=(TextElement(value='hi'),))
    """
    return _load_pattern(data, "$", DepthGuard(max_depth=max_depth))


def _load_pattern(data: object, path: str, guard: DepthGuard) -> MessagePattern:
    if not isinstance(data, Mapping) or data.get("type") != _PATTERN_TYPE:
        found = data.get("type") if isinstance(data, Mapping) else type(data).__name__
        raise InvalidStructureError(ErrorTemplate.invalid_root(str(found), path))
    elements = _require(data, "elements", list, path)
    return MessagePattern(
        elements=tuple(
            _load_element(element, f"{path}.elements[{index}]", guard)
            for index, element in enumerate(elements)
        )
    )


def _load_element(data: object, path: str, guard: DepthGuard) -> PatternElement:
    if not isinstance(data, Mapping):
        raise InvalidStructureError(ErrorTemplate.unknown_element(type(data).__name__, path))

    match data.get("type"):
        case "messageTextElement":
            return TextElement(value=_require(data, "value", str, path))
        case "argumentElement":
            arg_id = _require(data, "id", str, path)
            fmt = data.get("format")
            if fmt is None:
                return ArgumentElement(id=arg_id)
            return ArgumentElement(id=arg_id, format=_load_format(fmt, arg_id, path, guard))
        case other:
            raise InvalidStructureError(ErrorTemplate.unknown_element(str(other), path))


def _load_format(data: object, arg_id: str, path: str, guard: DepthGuard) -> FormatSpec:
    if not isinstance(data, Mapping):
        raise InvalidStructureError(
            ErrorTemplate.unknown_format(type(data).__name__, arg_id, path)
        )

    path = f"{path}.format"
    match data.get("type"):
        case "numberFormat":
            return NumberFormatSpec(style=_optional_str(data, "style", path))
        case "dateFormat":
            style = _optional_str(data, "style", path)
            if style == _SKELETON_STYLE:
                return DateFormatSpec(skeleton=_require(data, "skeleton", str, path))
            return DateFormatSpec(style=style)
        case "timeFormat":
            return TimeFormatSpec(style=_optional_str(data, "style", path))
        case "pluralFormat":
            offset = data.get("offset", 0)
            if isinstance(offset, bool) or not isinstance(offset, int):
                raise InvalidStructureError(
                    ErrorTemplate.malformed_node("'offset' must be an integer", path)
                )
            return PluralFormatSpec(
                options=_load_options(data, path, guard),
                ordinal=bool(data.get("ordinal", False)),
                offset=offset,
            )
        case "selectFormat":
            return SelectFormatSpec(options=_load_options(data, path, guard))
        case other:
            raise InvalidStructureError(ErrorTemplate.unknown_format(str(other), arg_id, path))


def _load_options(
    data: Mapping[str, object], path: str, guard: DepthGuard
) -> tuple[OptionalPattern, ...]:
    options: list[OptionalPattern] = []
    with guard.nested(path):
        for index, option in enumerate(_require(data, "options", list, path)):
            options.append(_load_option(option, f"{path}.options[{index}]", guard))
    return tuple(options)


def _load_option(option: object, path: str, guard: DepthGuard) -> OptionalPattern:
    if not isinstance(option, Mapping):
        raise InvalidStructureError(ErrorTemplate.malformed_node("option must be an object", path))
    selector = _require(option, "selector", str, path)
    return OptionalPattern(
        selector=selector,
        value=_load_pattern(option.get("value"), f"{path}.value", guard),
    )


def _require[T](data: Mapping[str, object], key: str, kind: type[T], path: str) -> T:
    value = data.get(key)
    if not isinstance(value, kind):
        detail = f"'{key}' must be {kind.__name__}, got {type(value).__name__}"
        raise InvalidStructureError(ErrorTemplate.malformed_node(detail, path))
    return value


def _optional_str(data: Mapping[str, object], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        detail = f"'{key}' must be str, got {type(value).__name__}"
        raise InvalidStructureError(ErrorTemplate.malformed_node(detail, path))
    return value
