"""Nesting limits for recursive parsing.

Template rule bodies and rich-text tags nest, and both parsers recurse once
per level. A DepthGuard counts levels for one parse; entering one level too
many raises DepthLimitExceededError, which the parsers turn into literal text.

Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from zerointl.constants import MAX_DEPTH
from zerointl.diagnostics import ErrorTemplate, IntlResolutionError

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)

# Interpreter frames consumed per nesting level (parse + body parse + resolve)
_FRAMES_PER_LEVEL = 4


class DepthLimitExceededError(IntlResolutionError):
    """A parse entered more nesting levels than its guard allows."""


@dataclass(slots=True)
class DepthGuard:
    """Per-parse nesting counter used as a context manager.

    Example:
        >>> guard = DepthGuard(max_depth=1)
        >>> with guard:
        ...     guard.is_exceeded()
        True

    Attributes:
        max_depth: Levels allowed, clamped to what the interpreter stack allows
        current_depth: Levels currently entered
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        # Check first: __exit__ does not run when __enter__ raises
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.nesting_depth_exceeded(self.max_depth))
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1

    @property
    def depth(self) -> int:
        """Alias of current_depth."""
        return self.current_depth

    def is_exceeded(self) -> bool:
        """True when entering one more level would raise."""
        return self.current_depth >= self.max_depth


def depth_clamp(requested_depth: int, reserve_frames: int = 50) -> int:
    """Largest usable depth not above requested_depth.

    Args:
        requested_depth: Desired limit
        reserve_frames: Frames kept free for callers (default: 50)

    Returns:
        requested_depth, or the stack-safe maximum when that is smaller
    """
    recursion_limit = sys.getrecursionlimit()
    ceiling = (recursion_limit - reserve_frames) // _FRAMES_PER_LEVEL
    if requested_depth <= ceiling:
        return requested_depth
    logger.warning(
        "Clamping nesting depth %d to %d (recursion limit %d)",
        requested_depth,
        ceiling,
        recursion_limit,
    )
    return ceiling
