"""Tests for the byte cursor and input conversion."""

import pytest

from bracemark.cursor import Cursor, to_bytes
from bracemark.errors import EndOfFileError, UnexpectedCharError
from bracemark.location import Span


class TestToBytes:
    """Any byte-producing source becomes an owned bytes buffer."""

    def test_str_is_utf8_encoded(self) -> None:
        assert to_bytes("é[") == b"\xc3\xa9["

    def test_bytes_passthrough(self) -> None:
        assert to_bytes(b"abc") == b"abc"

    def test_bytearray_is_copied(self) -> None:
        buf = bytearray(b"abc")
        result = to_bytes(buf)
        buf[0] = ord("z")
        assert result == b"abc"

    def test_memoryview(self) -> None:
        assert to_bytes(memoryview(b"xyz")) == b"xyz"

    def test_iterable_of_ints(self) -> None:
        assert to_bytes([91, 97]) == b"[a"

    def test_rejects_non_iterable(self) -> None:
        with pytest.raises(TypeError, match="int"):
            to_bytes(42)  # type: ignore[arg-type]


class TestPeekAndBump:
    """Lookahead never moves the cursor; bump always does until the end."""

    def test_peek_does_not_consume(self) -> None:
        cursor = Cursor(b"ab")
        assert cursor.peek() == (0, ord("a"))
        assert cursor.peek() == (0, ord("a"))
        assert cursor.position == 0

    def test_bump_advances(self) -> None:
        cursor = Cursor(b"ab")
        assert cursor.bump() == (0, ord("a"))
        assert cursor.bump() == (1, ord("b"))
        assert cursor.position == 2

    def test_end_of_input(self) -> None:
        cursor = Cursor(b"a")
        cursor.bump()
        assert cursor.at_end()
        assert cursor.peek() is None
        assert cursor.bump() is None
        assert cursor.position == 1

    def test_empty_buffer(self) -> None:
        cursor = Cursor(b"")
        assert cursor.at_end()
        assert cursor.peek() is None
        assert cursor.bump() is None
        assert cursor.position == 0

    def test_non_ascii_bytes_are_opaque(self) -> None:
        cursor = Cursor(b"\xff")
        assert cursor.bump() == (0, 0xFF)


class TestSkipWhitespace:
    """Only ASCII whitespace is skipped."""

    def test_skips_mixed_whitespace(self) -> None:
        cursor = Cursor(b" \t\r\n\x0cx")
        cursor.skip_whitespace()
        assert cursor.peek() == (5, ord("x"))

    def test_vertical_tab_is_not_whitespace(self) -> None:
        cursor = Cursor(b"\x0bx")
        cursor.skip_whitespace()
        assert cursor.position == 0

    def test_stops_at_end(self) -> None:
        cursor = Cursor(b"   ")
        cursor.skip_whitespace()
        assert cursor.at_end()
        assert cursor.position == 3

    def test_noop_on_non_whitespace(self) -> None:
        cursor = Cursor(b"x ")
        cursor.skip_whitespace()
        assert cursor.position == 0


class TestExpect:
    """expect() consumes one byte and checks it."""

    def test_match_returns_offset(self) -> None:
        cursor = Cursor(b"a|")
        cursor.bump()
        assert cursor.expect(ord("|")) == 1
        assert cursor.at_end()

    def test_mismatch(self) -> None:
        cursor = Cursor(b"x")
        with pytest.raises(UnexpectedCharError) as exc_info:
            cursor.expect(ord("|"))
        err = exc_info.value
        assert err.expected == "'|'"
        assert err.received == "'x'"
        assert err.span == Span(0, 0)

    def test_end_of_input_points_at_length(self) -> None:
        cursor = Cursor(b"ab")
        cursor.bump()
        cursor.bump()
        with pytest.raises(EndOfFileError) as exc_info:
            cursor.expect(ord("|"), "pipe")
        assert exc_info.value.expected == "pipe"
        assert exc_info.value.span == Span(2, 2)
