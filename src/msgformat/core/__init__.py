"""Core utilities shared across syntax and runtime layers.

Exports:
    DepthGuard: Option nesting counter for tree walks
    depth_clamp: Depth limit bounded by the interpreter stack

Python 3.13+.
"""

from .depth_guard import DepthGuard, depth_clamp

__all__ = ["DepthGuard", "depth_clamp"]
