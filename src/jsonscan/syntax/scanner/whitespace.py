"""Whitespace handling for the JSON scanner.

Two byte sets are supported, selected by ScanConfig.whitespace:

    STANDARD (RFC 8259):
        ws ::= ( %x20 | %x09 | %x0A | %x0D )*

    SPACE_ONLY (legacy):
        ws ::= %x20*

SPACE_ONLY reproduces scanners that only recognised the space character;
documents containing tabs or line breaks between tokens are then invalid.
"""

from jsonscan.syntax.cursor import Cursor


def skip_whitespace(cursor: Cursor, whitespace: frozenset[int]) -> Cursor:
    """Skip insignificant whitespace.

    Args:
        cursor: Current position in source
        whitespace: Byte values treated as whitespace

    Returns:
        New cursor at first non-whitespace byte (or EOF)

    Design:
        Immutable cursor ensures termination.
    """
    return cursor.skip_while(whitespace)  # Always makes progress
