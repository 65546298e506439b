"""Enumerations for jsonscan type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum

from jsonscan.constants import SPACE_ONLY_WHITESPACE, STANDARD_WHITESPACE


class ScanOutcome(StrEnum):
    """Result of validating one buffer.

    StrEnum provides automatic string conversion: str(ScanOutcome.VALID) == "valid"
    """

    VALID = "valid"
    """Buffer is a well-formed document."""

    INVALID = "invalid"
    """Buffer violates the grammar (any structural, literal, number or string error)."""

    DEPTH_EXCEEDED = "depth_exceeded"
    """Nesting exceeded the configured maximum depth before the grammar was decided."""

    TOO_LARGE = "too_large"
    """Buffer exceeded the configured maximum source size and was not scanned."""


class WhitespaceMode(StrEnum):
    """Set of bytes skipped as insignificant whitespace.

    StrEnum provides automatic string conversion: str(WhitespaceMode.STANDARD) == "standard"
    """

    STANDARD = "standard"
    """RFC 8259 whitespace: space, tab, line feed, carriage return."""

    SPACE_ONLY = "space-only"
    """Plain space (U+0020) only. Tab, LF and CR are rejected as stray bytes."""

    @property
    def byte_set(self) -> frozenset[int]:
        """Byte values skipped under this mode."""
        if self is WhitespaceMode.SPACE_ONLY:
            return SPACE_ONLY_WHITESPACE
        return STANDARD_WHITESPACE


__all__ = [
    "ScanOutcome",
    "WhitespaceMode",
]
