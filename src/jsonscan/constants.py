"""Shared constants for jsonscan.

This module provides centralized configuration constants used across
syntax and core packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Depth limits: Recursion protection for the scanner
- Input limits: DoS prevention via size constraints
- Byte classes: Grammar character sets (RFC 8259)

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Depth limits
    "MAX_DEPTH",
    "FRAMES_PER_LEVEL",
    "RESERVED_FRAMES",
    # Input limits
    "MAX_SOURCE_SIZE",
    # Byte classes
    "ASCII_DIGITS",
    "HEX_DIGITS",
    "SPACE_ONLY_WHITESPACE",
    "STANDARD_WHITESPACE",
    "SIMPLE_ESCAPES",
]

# ============================================================================
# DEPTH LIMITS
# ============================================================================

# Maximum nesting depth of objects and arrays.
# Every "{" or "[" enters one level. Real-world documents rarely exceed 20
# levels; 100 is almost certainly adversarial or machine-generated input.
MAX_DEPTH: int = 100

# Python frames consumed per nesting level (value rule -> object/array rule).
FRAMES_PER_LEVEL: int = 2

# Stack frames kept free for the entry point and caller when clamping
# a requested depth against sys.getrecursionlimit().
RESERVED_FRAMES: int = 250

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in bytes (64 MB). 0 disables the check.
MAX_SOURCE_SIZE: int = 64 * 1024 * 1024

# ============================================================================
# BYTE CLASSES
# ============================================================================

ASCII_DIGITS: frozenset[int] = frozenset(b"0123456789")

HEX_DIGITS: frozenset[int] = frozenset(b"0123456789abcdefABCDEF")

# RFC 8259: ws = *( %x20 / %x09 / %x0A / %x0D )
STANDARD_WHITESPACE: frozenset[int] = frozenset(b" \t\n\r")

# Legacy behaviour: plain space (U+0020) only.
SPACE_ONLY_WHITESPACE: frozenset[int] = frozenset(b" ")

# Single-byte escapes accepted after a backslash (\u is handled separately).
SIMPLE_ESCAPES: frozenset[int] = frozenset(b'"\\/bfnrt')
