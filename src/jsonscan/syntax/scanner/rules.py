"""Structural grammar rules for the JSON scanner.

This module provides the mutually recursive rules of the grammar:

    value  ::= object | array | string | number | "true" | "false" | "null"
    object ::= "{" ws ( string ws ":" ws value ws ( "," ws string ws ":" ws value ws )* )? "}"
    array  ::= "[" ws ( value ws ( "," ws value ws )* )? "]"

All three are co-located in a single module to avoid circular imports
between interdependent rules.

Lookahead:
    The value rule dispatches on the lead byte without consuming it.
    ``{``, ``[`` and ``"`` select a rule directly; ``t``/``f``/``n`` select
    a literal; ``-`` and digits select the number rule.

Security:
    Every object and array enters the context's DepthGuard, so input like
    ``[[[[ ... ]]]]`` raises DepthLimitExceededError at the configured depth
    instead of exhausting the interpreter stack.
"""

from dataclasses import dataclass, field

from jsonscan.constants import MAX_DEPTH, STANDARD_WHITESPACE
from jsonscan.core.depth_guard import DepthGuard
from jsonscan.syntax.cursor import Cursor
from jsonscan.syntax.scanner.primitives import (
    FALSE_LITERAL,
    NULL_LITERAL,
    TRUE_LITERAL,
    scan_literal,
    scan_number,
    scan_string,
)
from jsonscan.syntax.scanner.whitespace import skip_whitespace

__all__ = ["ScanContext", "scan_array", "scan_object", "scan_value"]

_OBJECT_OPEN: int = ord("{")
_OBJECT_CLOSE: int = ord("}")
_ARRAY_OPEN: int = ord("[")
_ARRAY_CLOSE: int = ord("]")
_QUOTE: int = ord('"')
_COLON: int = ord(":")
_COMMA: int = ord(",")
_NUMBER_START: frozenset[int] = frozenset(b"-0123456789")

_LITERALS: dict[int, bytes] = {
    TRUE_LITERAL[0]: TRUE_LITERAL,
    FALSE_LITERAL[0]: FALSE_LITERAL,
    NULL_LITERAL[0]: NULL_LITERAL,
}


@dataclass(slots=True)
class ScanContext:
    """Explicit per-scan state threaded through every structural rule.

    Replaces global state with explicit parameter passing for:
    - Thread safety (one context per scan call)
    - Easier testing (rules can be called directly with a fresh context)
    - Clear dependency flow

    Attributes:
        guard: Depth guard for this scan; entered by object and array rules
        whitespace: Byte values skipped between tokens
    """

    guard: DepthGuard = field(default_factory=lambda: DepthGuard(MAX_DEPTH))
    whitespace: frozenset[int] = STANDARD_WHITESPACE


def scan_value(cursor: Cursor, context: ScanContext) -> Cursor | None:
    """Scan any value and the whitespace that follows it.

    Args:
        cursor: Current position in source (at the lead byte)
        context: Scan context (depth guard, whitespace set)

    Returns:
        Cursor after the value and trailing whitespace, or None

    Raises:
        DepthLimitExceededError: If nesting exceeds the guard's limit
    """
    if cursor.is_eof:
        return None

    lead = cursor.current

    if lead == _OBJECT_OPEN:
        result = scan_object(cursor, context)
    elif lead == _ARRAY_OPEN:
        result = scan_array(cursor, context)
    elif lead == _QUOTE:
        result = scan_string(cursor)
    elif lead in _NUMBER_START:
        result = scan_number(cursor)
    elif lead in _LITERALS:
        result = scan_literal(cursor, _LITERALS[lead])
    else:
        return None

    if result is None:
        return None
    return skip_whitespace(result, context.whitespace)


def scan_object(cursor: Cursor, context: ScanContext) -> Cursor | None:
    """Scan object: { (string : value (, string : value)*)? }

    Examples:
        {} → valid (empty object)
        {"a": 1, "b": [true]} → valid
        {"a":1,} → None (trailing comma)
        {"a":} → None (missing value)

    Args:
        cursor: Current position in source (at "{")
        context: Scan context (depth guard, whitespace set)

    Returns:
        Cursor just past the closing "}", or None

    Raises:
        DepthLimitExceededError: If nesting exceeds the guard's limit
    """
    if cursor.is_eof or cursor.current != _OBJECT_OPEN:
        return None

    with context.guard:
        cursor = skip_whitespace(cursor.advance(), context.whitespace)

        # Empty object
        closed = cursor.expect(_OBJECT_CLOSE)
        if closed is not None:
            return closed

        while True:
            key_end = scan_string(cursor)
            if key_end is None:
                return None

            colon = skip_whitespace(key_end, context.whitespace).expect(_COLON)
            if colon is None:
                return None

            value_end = scan_value(skip_whitespace(colon, context.whitespace), context)
            if value_end is None:
                return None

            # scan_value already skipped whitespace after the value
            if value_end.is_eof:
                return None
            if value_end.current == _OBJECT_CLOSE:
                return value_end.advance()
            if value_end.current != _COMMA:
                return None
            cursor = skip_whitespace(value_end.advance(), context.whitespace)


def scan_array(cursor: Cursor, context: ScanContext) -> Cursor | None:
    """Scan array: [ (value (, value)*)? ]

    Running out of input before "]" is a failure, exactly as for objects.

    Examples:
        [] → valid (empty array)
        [1, "two", [3]] → valid
        [1,2, → None (truncated)
        [1,] → None (trailing comma)

    Args:
        cursor: Current position in source (at "[")
        context: Scan context (depth guard, whitespace set)

    Returns:
        Cursor just past the closing "]", or None

    Raises:
        DepthLimitExceededError: If nesting exceeds the guard's limit
    """
    if cursor.is_eof or cursor.current != _ARRAY_OPEN:
        return None

    with context.guard:
        cursor = skip_whitespace(cursor.advance(), context.whitespace)

        # Empty array
        closed = cursor.expect(_ARRAY_CLOSE)
        if closed is not None:
            return closed

        while True:
            value_end = scan_value(cursor, context)
            if value_end is None:
                return None

            if value_end.is_eof:
                return None
            if value_end.current == _ARRAY_CLOSE:
                return value_end.advance()
            if value_end.current != _COMMA:
                return None
            cursor = skip_whitespace(value_end.advance(), context.whitespace)
