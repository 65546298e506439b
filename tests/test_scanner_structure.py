"""Tests for structural rules: value dispatch, objects and arrays.

Covers the delimiter state machines and the value rule's lead-byte
dispatch, both through the rules directly and through is_valid().
"""

from __future__ import annotations

import pytest

from jsonscan import is_valid
from jsonscan.core.depth_guard import DepthGuard
from jsonscan.syntax.cursor import Cursor
from jsonscan.syntax.scanner.rules import ScanContext, scan_array, scan_object, scan_value


def _context() -> ScanContext:
    return ScanContext(guard=DepthGuard(max_depth=50))


# ============================================================================
# VALUE DISPATCH
# ============================================================================


class TestScanValue:
    """Test lead-byte dispatch of the value rule."""

    @pytest.mark.parametrize(
        "source",
        [b"{}", b"[]", b'"s"', b"true", b"false", b"null", b"-1", b"0", b"9.5e2"],
    )
    def test_every_value_kind(self, source: bytes) -> None:
        result = scan_value(Cursor(source, 0), _context())

        assert result is not None
        assert result.pos == len(source)

    def test_skips_trailing_whitespace(self) -> None:
        """The value rule consumes whitespace after the token."""
        result = scan_value(Cursor(b"true \t\n ,", 0), _context())

        assert result is not None
        assert result.current == ord(",")

    @pytest.mark.parametrize("source", [b"", b"x", b"+1", b".5", b"}", b"]", b",", b":", b"'a'"])
    def test_unknown_lead_byte(self, source: bytes) -> None:
        assert scan_value(Cursor(source, 0), _context()) is None

    def test_depth_returns_to_zero(self) -> None:
        """After a successful nested value the guard is back at depth zero."""
        context = _context()
        scan_value(Cursor(b'[{"a": [1]}]', 0), context)

        assert context.guard.current_depth == 0


# ============================================================================
# OBJECTS
# ============================================================================


class TestObjects:
    """Test the object rule."""

    @pytest.mark.parametrize(
        "source",
        [
            b"{}",
            b'{"a":1}',
            b'{"a": 1, "b": [true, false, null]}',
            b'{ "a" : { "b" : { } } }',
            b'{"":""}',
            b'{"a":1,"a":2}',
        ],
    )
    def test_valid(self, source: bytes) -> None:
        result = scan_object(Cursor(source, 0), _context())

        assert result is not None
        assert result.pos == len(source)

    @pytest.mark.parametrize(
        "source",
        [
            b'{"a":1,}',
            b'{"a":}',
            b'{"a"}',
            b'{"a" 1}',
            b"{a:1}",
            b"{1:1}",
            b'{"a":1 "b":2}',
            b'{"a":1;"b":2}',
            b'{,"a":1}',
            b"{",
            b'{"a":1',
            b'{"a":1,',
            b'{"a":',
            b'{"a"',
            b'{"a":1]',
            b"{]",
        ],
    )
    def test_invalid(self, source: bytes) -> None:
        assert scan_object(Cursor(source, 0), _context()) is None

    def test_requires_open_brace(self) -> None:
        assert scan_object(Cursor(b"[]", 0), _context()) is None

    def test_stops_after_closing_brace(self) -> None:
        """The object rule does not consume bytes after '}'."""
        result = scan_object(Cursor(b"{} ,", 0), _context())

        assert result is not None
        assert result.pos == 2


# ============================================================================
# ARRAYS
# ============================================================================


class TestArrays:
    """Test the array rule."""

    @pytest.mark.parametrize(
        "source",
        [
            b"[]",
            b"[1,2,3]",
            b'[ 1 , "two" , [ 3 ] , { } ]',
            b"[[[]]]",
            b"[-0, 0.5, 1e-3]",
        ],
    )
    def test_valid(self, source: bytes) -> None:
        result = scan_array(Cursor(source, 0), _context())

        assert result is not None
        assert result.pos == len(source)

    @pytest.mark.parametrize(
        "source",
        [
            b"[1,2,",
            b"[1,2",
            b"[1,]",
            b"[,1]",
            b"[1 2]",
            b"[01]",
            b"[1}",
            b"[",
            b"[ ",
            b"[true,",
            b"[nul]",
        ],
    )
    def test_invalid(self, source: bytes) -> None:
        """Truncated arrays fail; exhaustion is never success."""
        assert scan_array(Cursor(source, 0), _context()) is None

    def test_requires_open_bracket(self) -> None:
        assert scan_array(Cursor(b"{}", 0), _context()) is None


# ============================================================================
# THROUGH THE ENTRY POINT
# ============================================================================


class TestStructuralDocuments:
    """Documented boundary cases through is_valid()."""

    def test_object_cases(self) -> None:
        assert is_valid(b'{"a":1}')
        assert not is_valid(b'{"a":1,}')
        assert not is_valid(b'{"a":}')

    def test_array_cases(self) -> None:
        assert is_valid(b"[1,2,3]")
        assert not is_valid(b"[1,2,")

    @pytest.mark.parametrize(
        ("number", "expected"),
        [
            (b"0", True),
            (b"01", False),
            (b"-0", True),
            (b"1.5", True),
            (b"1.", False),
            (b"1e10", True),
            (b"1e", False),
            (b"-", False),
        ],
    )
    def test_number_cases(self, number: bytes, expected: bool) -> None:
        assert is_valid(b"[" + number + b"]") is expected

    @pytest.mark.parametrize(
        ("string", "expected"),
        [
            (b'"abc"', True),
            (b'"a\\nb"', True),
            (b'"a\\u0041b"', True),
            (b'"a\\uZZZZb"', False),
            (b'"a\tb"', False),
        ],
    )
    def test_string_cases(self, string: bytes, expected: bool) -> None:
        assert is_valid(b"[" + string + b"]") is expected

    def test_unterminated_string(self) -> None:
        assert not is_valid(b'["abc]')
        assert not is_valid(b'{"abc')

    @pytest.mark.parametrize("literal", [b"true", b"false", b"null"])
    def test_literals_in_containers(self, literal: bytes) -> None:
        assert is_valid(b"[" + literal + b"]")
        assert is_valid(b'{"k":' + literal + b"}")

    @pytest.mark.parametrize("literal", [b"tru", b"fals", b"nul", b"truee", b"nulll"])
    def test_malformed_literals(self, literal: bytes) -> None:
        assert not is_valid(b"[" + literal + b"]")

    def test_truncated_literal_at_end_of_input(self) -> None:
        """A literal cut off by the end of the buffer fails without indexing past it."""
        assert not is_valid(b"[tr")
        assert not is_valid(b'{"a":fa')
