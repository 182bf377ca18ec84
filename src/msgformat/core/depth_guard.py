"""Option nesting limits for the loader and the compiler.

Both walk plural/select options recursively. A DepthGuard counts the option
levels of one load_tree() or compile() call and refuses to descend past its
limit, reporting the tree path of the options that went too deep.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from msgformat.constants import MAX_DEPTH
from msgformat.diagnostics import DepthLimitExceededError, ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)

# Python frames one option level costs (pattern -> element -> format -> options).
_FRAMES_PER_LEVEL: int = 6

# Frames left for the caller and for Babel calls made while compiling.
_RESERVED_FRAMES: int = 50


@dataclass(slots=True)
class DepthGuard:
    """Option level counter for one tree walk.

    Example:
        >>> guard = DepthGuard(max_depth=1)
        >>> with guard.nested("$.elements[0]"):
        ...     guard.depth
        1
        >>> guard.depth
        0

    Not shared between calls: the compiler and the loader create one per walk.
    """

    max_depth: int = MAX_DEPTH
    _depth: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    @property
    def depth(self) -> int:
        """Option levels currently entered."""
        return self._depth

    @property
    def remaining(self) -> int:
        """Option levels that may still be entered."""
        return self.max_depth - self._depth

    @contextmanager
    def nested(self, tree_path: str | None = None) -> Iterator[int]:
        """Enter one level of options located at tree_path.

        Yields:
            The depth inside the level (1 for top-level options)

        Raises:
            DepthLimitExceededError: If max_depth levels are already entered.
                The depth is left unchanged.
        """
        if self._depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(self.max_depth, tree_path)
            )
        self._depth += 1
        try:
            yield self._depth
        finally:
            self._depth -= 1


def depth_clamp(requested_depth: int) -> int:
    """Largest option depth the interpreter stack can walk, up to requested_depth.

    Logs a warning when the request is lowered.
    """
    limit = sys.getrecursionlimit()
    usable = (limit - _RESERVED_FRAMES) // _FRAMES_PER_LEVEL
    if requested_depth <= usable:
        return requested_depth
    logger.warning(
        "Option depth %d exceeds what recursion limit %d allows; using %d",
        requested_depth,
        limit,
        usable,
    )
    return usable
