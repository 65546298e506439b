"""Scanner configuration.

Provides a single frozen dataclass that encapsulates all scanner
parameters, shared by JsonScanner and the command-line wrapper.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from jsonscan.constants import MAX_DEPTH, MAX_SOURCE_SIZE
from jsonscan.enums import WhitespaceMode

__all__ = ["ScanConfig"]


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable configuration for JsonScanner.

    All fields have sensible defaults; constructing ``ScanConfig()`` with
    no arguments produces the strict RFC 8259 behaviour (object or array
    at the top level only).

    Attributes:
        max_depth: Maximum nesting depth of objects and arrays (default: 100).
            Clamped against the interpreter recursion limit once, when a
            JsonScanner is created (see JsonScanner.max_depth).
        max_source_size: Maximum input size in bytes (default: 64 MB).
            0 disables the check.
        whitespace: Which bytes count as insignificant whitespace
            (default: WhitespaceMode.STANDARD, i.e. space, tab, LF, CR).
        allow_trailing_data: Accept bytes after a complete top-level value
            (default: False). Trailing whitespace is always accepted.

    Example:
        >>> from jsonscan import JsonScanner, ScanConfig, WhitespaceMode
        >>> config = ScanConfig(max_depth=32, whitespace=WhitespaceMode.SPACE_ONLY)
        >>> scanner = JsonScanner(config)
        >>> scanner.is_valid(b'{"a": [1, 2]}')
        True
        >>> scanner.is_valid(b'{\\n}')
        False
    """

    max_depth: int = MAX_DEPTH
    max_source_size: int = MAX_SOURCE_SIZE
    whitespace: WhitespaceMode = WhitespaceMode.STANDARD
    allow_trailing_data: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is not positive or max_source_size
                is negative.
        """
        if self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
        if self.max_source_size < 0:
            msg = "max_source_size must be >= 0 (0 disables the limit)"
            raise ValueError(msg)
        # Accept plain strings ("standard", "space-only") from callers and the CLI
        object.__setattr__(self, "whitespace", WhitespaceMode(self.whitespace))
