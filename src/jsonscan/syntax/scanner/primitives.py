"""Primitive grammar rules for the JSON scanner.

This module provides the leaf rules of the grammar: strings and their
escape sequences, numbers and digit runs, and the three keyword literals.
None of them recurse, and none of them skip whitespace; the structural
rules in :mod:`jsonscan.syntax.scanner.rules` own whitespace handling.

Every rule takes a Cursor and returns the advanced Cursor on success or
None on failure. A failed rule's position is meaningless.
"""

from jsonscan.constants import ASCII_DIGITS, HEX_DIGITS, SIMPLE_ESCAPES
from jsonscan.syntax.cursor import Cursor

__all__ = [
    "FALSE_LITERAL",
    "NULL_LITERAL",
    "TRUE_LITERAL",
    "scan_digits",
    "scan_escape_sequence",
    "scan_literal",
    "scan_number",
    "scan_string",
]

TRUE_LITERAL: bytes = b"true"
FALSE_LITERAL: bytes = b"false"
NULL_LITERAL: bytes = b"null"

# \uXXXX = 4 hex digits. Shape only: surrogate pairing is not checked.
_UNICODE_ESCAPE_LEN: int = 4

# Bytes below U+0020 must be escaped inside strings.
_FIRST_UNESCAPED: int = 0x20

_QUOTE: int = ord('"')
_BACKSLASH: int = ord("\\")
_MINUS: int = ord("-")
_PLUS: int = ord("+")
_ZERO: int = ord("0")
_DOT: int = ord(".")
_EXPONENT: frozenset[int] = frozenset(b"eE")
_U: int = ord("u")


def scan_digits(cursor: Cursor) -> Cursor | None:
    """Scan digit run: [0-9]+

    Args:
        cursor: Current position in source

    Returns:
        Cursor just past the last digit, or None if no digit is present
    """
    if cursor.is_eof or cursor.current not in ASCII_DIGITS:
        return None
    return cursor.skip_while(ASCII_DIGITS)


def scan_number(cursor: Cursor) -> Cursor | None:
    """Scan number: -? (0 | [1-9][0-9]*) (.[0-9]+)? ([eE][+-]?[0-9]+)?

    A leading zero ends the integer part. In ``01`` the rule stops after
    ``0`` and the caller rejects the stray ``1``, so leading zeros are
    never accepted as part of a valid document.

    Examples:
        0, -0, 42, 1.5, 1e10, -2.5E-3 → valid
        -, 1., 1e, 1e+, .5 → None

    Args:
        cursor: Current position in source

    Returns:
        Cursor positioned exactly after the last digit consumed, or None
    """
    # Optional minus sign
    if not cursor.is_eof and cursor.current == _MINUS:
        cursor = cursor.advance()

    if cursor.is_eof:
        return None

    # Integer part: a lone zero, or a nonzero digit followed by a digit run
    if cursor.current == _ZERO:
        cursor = cursor.advance()
    else:
        result = scan_digits(cursor)
        if result is None:
            return None
        cursor = result

    # Optional fraction
    if not cursor.is_eof and cursor.current == _DOT:
        result = scan_digits(cursor.advance())
        if result is None:
            return None
        cursor = result

    # Optional exponent
    if not cursor.is_eof and cursor.current in _EXPONENT:
        cursor = cursor.advance()
        if not cursor.is_eof and cursor.current in (_PLUS, _MINUS):
            cursor = cursor.advance()
        result = scan_digits(cursor)
        if result is None:
            return None
        cursor = result

    return cursor


def scan_escape_sequence(cursor: Cursor) -> Cursor | None:
    """Scan escape sequence after backslash in string.

    Supported escape sequences:
        \\" \\\\ \\/ \\b \\f \\n \\r \\t
        \\uXXXX (exactly 4 hex digits, any case)

    The escape is validated, never decoded.

    Args:
        cursor: Position AFTER the backslash

    Returns:
        Cursor past the escape sequence, or None on invalid escape
    """
    if cursor.is_eof:
        return None

    escape_byte = cursor.current

    if escape_byte in SIMPLE_ESCAPES:
        return cursor.advance()

    if escape_byte == _U:
        # 'u' plus four hex digits must fit before reading any of them
        if cursor.remaining < 1 + _UNICODE_ESCAPE_LEN:
            return None
        cursor = cursor.advance()
        hex_digits = cursor.slice_ahead(_UNICODE_ESCAPE_LEN)
        if not all(b in HEX_DIGITS for b in hex_digits):
            return None
        return cursor.advance(_UNICODE_ESCAPE_LEN)

    return None


def scan_string(cursor: Cursor) -> Cursor | None:
    """Scan string: " ( unescaped | escape )* "

    Unescaped bytes exclude the quote, the backslash, and control bytes
    below U+0020 (a raw tab or newline inside a string is invalid).
    Bytes 0x80-0xFF are accepted as opaque data; no UTF-8 decoding is
    attempted.

    Examples:
        "abc", "a\\nb", "a\\u0041b" → valid
        "a\\uZZZZb", "abc (unterminated) → None

    Args:
        cursor: Current position in source

    Returns:
        Cursor past the closing quote, or None if invalid
    """
    if cursor.is_eof or cursor.current != _QUOTE:
        return None

    cursor = cursor.advance()  # Skip opening "
    escape_pending = False

    while not cursor.is_eof:
        if escape_pending:
            result = scan_escape_sequence(cursor)
            if result is None:
                return None
            cursor = result
            escape_pending = False
            continue

        byte = cursor.current
        if byte == _QUOTE:
            return cursor.advance()
        if byte == _BACKSLASH:
            escape_pending = True
        elif byte < _FIRST_UNESCAPED:
            return None
        cursor = cursor.advance()

    # EOF without closing quote
    return None


def scan_literal(cursor: Cursor, literal: bytes) -> Cursor | None:
    """Scan a keyword literal (true, false, null).

    The remaining length is checked before comparing so a truncated
    literal at the end of input fails cleanly.

    Args:
        cursor: Current position in source
        literal: Expected bytes, e.g. TRUE_LITERAL

    Returns:
        Cursor past the literal, or None on mismatch or truncation
    """
    if cursor.remaining < len(literal):
        return None
    if cursor.slice_ahead(len(literal)) != literal:
        return None
    return cursor.advance(len(literal))
