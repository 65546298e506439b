"""Immutable cursor infrastructure for byte-level scanning.

Implements the immutable cursor pattern for zero-`None` scanning over a
``bytes`` buffer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Position never exceeds the buffer length: 0 <= pos <= limit

Bytes, not text:
    Indexing ``bytes`` yields ``int``, so ``current`` and ``peek`` return
    byte values. Compare against ``ord('"')`` style constants or byte sets.

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from jsonscan.diagnostics import ErrorTemplate

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker over a byte buffer.

    Key Design Decisions:
        1. Frozen dataclass - Immutability enforced by Python
        2. Slots - Memory efficiency (one cursor per consumed byte)
        3. Simple position - Just an integer offset
        4. EOF is a property - Not a return value
        5. current raises - No None handling needed!

    Example:
        >>> cursor = Cursor(b"[1]", 0)
        >>> cursor.current == ord("[")
        True
        >>> cursor.advance().current == ord("1")
        True
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> Cursor(b"[]", 2).is_eof
        True
        >>> Cursor(b"[]", 2).current
        Traceback (most recent call last):
        ...
        EOFError: Unexpected EOF at position 2
    """

    source: bytes
    pos: int

    @property
    def limit(self) -> int:
        """Exclusive upper bound of valid positions (the buffer length)."""
        return len(self.source)

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length

        Note: This is the preferred way to check for EOF.
              Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def remaining(self) -> int:
        """Number of unconsumed bytes.

        Use before fixed-width reads (literals, \\u escapes) instead of
        indexing ahead and catching failures.
        """
        return max(0, len(self.source) - self.pos)

    @property
    def current(self) -> int:
        """Get current byte value.

        Returns:
            Byte value (0-255) at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> int | None:
        """Peek at byte with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Byte value at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        The new position is clamped to the buffer length, so a cursor can
        never point past the end of input.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged)

        Example:
            >>> cursor = Cursor(b"null", 0)
            >>> cursor.advance(4).pos
            4
            >>> cursor.advance(10).pos  # Clamped at the limit
            4
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_ahead(self, n: int) -> bytes:
        """Get next n bytes without advancing cursor.

        Args:
            n: Number of bytes to get

        Returns:
            Up to n bytes starting at current position.
            May return fewer bytes if near EOF.

        Example:
            >>> Cursor(b"true]", 0).slice_ahead(4)
            b'true'
            >>> Cursor(b"tr", 0).slice_ahead(4)
            b'tr'
        """
        return self.source[self.pos : self.pos + n]

    def skip_while(self, byte_set: frozenset[int]) -> "Cursor":
        """Skip consecutive bytes that belong to byte_set.

        Returns:
            New cursor advanced past all matching bytes (or at EOF)

        Example:
            >>> Cursor(b"  \\t1", 0).skip_while(frozenset(b" \\t")).pos
            3
            >>> Cursor(b"1", 0).skip_while(frozenset(b" ")).pos  # Nothing to skip
            0
        """
        c = self
        while not c.is_eof and c.current in byte_set:
            c = c.advance()
        return c

    def expect(self, byte: int) -> "Cursor | None":
        """Consume byte if it matches expected, return None otherwise.

        Args:
            byte: Expected byte value

        Returns:
            New cursor advanced by 1 if current byte matches,
            None if no match or at EOF

        Example:
            >>> Cursor(b":1", 0).expect(ord(":")).pos
            1
            >>> Cursor(b",1", 0).expect(ord(":")) is None
            True
            >>> Cursor(b"", 0).expect(ord(":")) is None
            True
        """
        if not self.is_eof and self.current == byte:
            return self.advance()
        return None
