"""Hypothesis strategies for generating message syntax trees.

Provides strategies for property-based testing of the compiler and renderer:
well-formed trees (every plural/select has an 'other' option) and matching
argument mappings.
"""

from __future__ import annotations

import string
from datetime import date

from hypothesis import strategies as st
from hypothesis.strategies import composite

from msgformat.syntax import (
    ArgumentElement,
    DateFormatSpec,
    MessagePattern,
    NumberFormatSpec,
    OptionalPattern,
    PluralFormatSpec,
    SelectFormatSpec,
    TextElement,
)

# Small id pool so nested arguments collide with outer ones
ARGUMENT_IDS = ["n", "m", "g", "name"]

PLURAL_SELECTORS = ["=0", "=1", "zero", "one", "two", "few", "many"]
SELECT_SELECTORS = ["a", "b", "male", "female", "true"]


@composite
def message_text(draw: st.DrawFn) -> str:
    """Text that may contain '#', escaped '\\#' and quotes."""
    return draw(st.text(alphabet=string.ascii_letters + " #\\'{}", max_size=12))


def _options(
    selectors: list[str], children: st.SearchStrategy[MessagePattern]
) -> st.SearchStrategy[tuple[OptionalPattern, ...]]:
    """Unique selectors plus a trailing 'other' option."""

    @composite
    def build(draw: st.DrawFn) -> tuple[OptionalPattern, ...]:
        chosen = draw(st.lists(st.sampled_from(selectors), unique=True, max_size=3))
        options = [OptionalPattern(selector, draw(children)) for selector in chosen]
        options.append(OptionalPattern("other", draw(children)))
        return tuple(options)

    return build()


def _elements(
    children: st.SearchStrategy[MessagePattern],
) -> st.SearchStrategy[TextElement | ArgumentElement]:
    ids = st.sampled_from(["n", "m"])
    return st.one_of(
        message_text().map(TextElement),
        st.sampled_from(ARGUMENT_IDS).map(ArgumentElement),
        ids.map(lambda arg_id: ArgumentElement(arg_id, NumberFormatSpec())),
        st.just(ArgumentElement("d", DateFormatSpec(skeleton="yMMMd"))),
        st.builds(
            ArgumentElement,
            ids,
            st.builds(
                PluralFormatSpec,
                _options(PLURAL_SELECTORS, children),
                st.booleans(),
                st.integers(min_value=0, max_value=3),
            ),
        ),
        st.builds(
            ArgumentElement,
            st.just("g"),
            st.builds(SelectFormatSpec, _options(SELECT_SELECTORS, children)),
        ),
    )


def message_patterns(max_leaves: int = 20) -> st.SearchStrategy[MessagePattern]:
    """Well-formed message patterns with nested plural/select options."""
    return st.recursive(
        st.lists(message_text().map(TextElement), max_size=3).map(
            lambda elements: MessagePattern(tuple(elements))
        ),
        lambda children: st.lists(_elements(children), max_size=4).map(
            lambda elements: MessagePattern(tuple(elements))
        ),
        max_leaves=max_leaves,
    )


@composite
def message_arguments(draw: st.DrawFn) -> dict[str, object]:
    """Argument mappings covering every id the trees above use."""
    return {
        "n": draw(st.integers(min_value=-5, max_value=10_000)),
        "m": draw(st.integers(min_value=0, max_value=3)),
        "g": draw(st.sampled_from([*SELECT_SELECTORS, "unknown", None, True])),
        "name": draw(st.text(max_size=8)),
        "d": draw(st.dates(min_value=date(1900, 1, 1), max_value=date(2100, 12, 31))),
    }
