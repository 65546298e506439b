"""Depth limiting for recursion protection.

Provides reusable depth tracking to prevent stack overflow from deeply
nested objects and arrays such as ``[[[[ ... ]]]]``.

Thread-safe: uses explicit state, no thread-local storage. Each scan
creates its own guard.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from jsonscan.constants import FRAMES_PER_LEVEL, MAX_DEPTH, RESERVED_FRAMES
from jsonscan.diagnostics import ErrorTemplate, JsonScanError

__all__ = ["DepthGuard", "DepthLimitExceededError", "depth_clamp"]

logger = logging.getLogger(__name__)


class DepthLimitExceededError(JsonScanError):
    """Raised when maximum nesting depth is exceeded.

    This error indicates either:
    - Adversarial input designed to cause stack overflow
    - Machine-generated documents with unusually deep nesting

    The scanner converts it to ScanOutcome.DEPTH_EXCEEDED; only check()
    lets it reach the caller.
    """


@dataclass(slots=True)
class DepthGuard:
    """Context manager for tracking and limiting recursion depth.

    Usage in a grammar rule:
        with context.guard:
            cursor = scan_value(cursor, context)

    Mutability Note:
        Intentionally mutable (not frozen=True) to enable stateful depth
        tracking via context manager protocol. The current_depth field is
        incremented/decremented on __enter__/__exit__.

    Thread Safety:
        Uses explicit instance state, fully reentrant.
        Each scan maintains its own DepthGuard instance.

    Attributes:
        max_depth: Maximum allowed depth (default: MAX_DEPTH)
        current_depth: Current recursion depth
    """

    max_depth: int = MAX_DEPTH
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Clamp max_depth against Python recursion limit."""
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Enter guarded section, increment depth.

        Validates depth limit BEFORE incrementing. Since __exit__ is not
        called when __enter__ raises, incrementing first would leave
        current_depth permanently elevated.
        """
        self.check()
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Exit guarded section, decrement depth."""
        self.current_depth -= 1

    def check(self) -> None:
        """Explicitly check depth and raise if exceeded.

        Raises:
            DepthLimitExceededError: If depth limit exceeded
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(ErrorTemplate.depth_exceeded(self.max_depth))


def depth_clamp(
    requested_depth: int,
    reserve_frames: int = RESERVED_FRAMES,
    frames_per_level: int = FRAMES_PER_LEVEL,
) -> int:
    """Clamp requested depth against Python recursion limit.

    Each nesting level costs ``frames_per_level`` interpreter frames (the
    value rule plus the object or array rule), so the safe depth is the
    recursion limit minus the reserve, divided by that cost. Logs a
    warning if clamping occurs.

    Args:
        requested_depth: Desired maximum depth
        reserve_frames: Stack frames to reserve for the caller (default: 250)
        frames_per_level: Interpreter frames consumed per nesting level

    Returns:
        Safe depth value, clamped if necessary

    Example:
        >>> import sys
        >>> depth_clamp(100)  # OK, within the default limit
        100
        >>> limit = sys.getrecursionlimit()
        >>> depth_clamp(limit * 10) == (limit - 250) // 2  # Clamped
        True
    """
    max_safe_depth = max(1, (sys.getrecursionlimit() - reserve_frames) // frames_per_level)
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested depth %d exceeds Python recursion limit (%d). "
            "Clamping to %d to prevent RecursionError. "
            "Consider increasing sys.setrecursionlimit() if needed.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
