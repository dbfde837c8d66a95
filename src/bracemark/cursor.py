"""Byte cursor over a source buffer.

The cursor owns the input buffer and a read position. It offers one byte
of non-consuming lookahead (``peek``) and a consuming ``bump``; both yield
the byte together with its absolute offset. The grammar never needs to
un-consume a byte, so there is no rewind.

Thread Safety:
Cursor instances are single-use. Create one per parse.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable

from bracemark.charsets import WHITESPACE, describe_byte
from bracemark.errors import EndOfFileError, UnexpectedCharError
from bracemark.location import Span

Source = str | bytes | bytearray | memoryview | Iterable[int]


def to_bytes(source: Source) -> bytes:
    """Convert any byte-producing source into an owned buffer.

    Strings are encoded as UTF-8. Byte-like objects are copied so later
    mutation of the caller's buffer cannot change the parse.

    Raises:
        TypeError: If source cannot be converted to bytes
    """
    if isinstance(source, str):
        return source.encode("utf-8")
    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)
    if isinstance(source, Iterable):
        return bytes(source)
    msg = f"Cannot parse object of type {type(source).__name__!r}"
    raise TypeError(msg)


class Cursor:
    """Read position into an immutable byte buffer.

    Usage:
            >>> cursor = Cursor(b"a b")
            >>> cursor.bump()
            (0, 97)
            >>> cursor.skip_whitespace()
            >>> cursor.peek()
            (2, 98)

    The position only moves forward. It is 0 at the start and equal to
    the buffer length at end of input.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
    )

    def __init__(self, source: bytes) -> None:
        self._source = source
        self._source_len = len(source)
        self._pos = 0

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unconsumed byte."""
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= self._source_len

    def peek(self) -> tuple[int, int] | None:
        """Return the next byte and its offset without consuming it.

        Returns:
            ``(offset, byte)`` or None at end of input.
        """
        if self._pos >= self._source_len:
            return None
        return self._pos, self._source[self._pos]

    def bump(self) -> tuple[int, int] | None:
        """Consume and return the next byte and its offset.

        Returns:
            ``(offset, byte)`` or None at end of input (position unchanged).
        """
        pos = self._pos
        if pos >= self._source_len:
            return None
        self._pos = pos + 1
        return pos, self._source[pos]

    def skip_whitespace(self) -> None:
        """Consume ASCII whitespace up to the next other byte or end of input."""
        source = self._source
        source_len = self._source_len
        pos = self._pos
        while pos < source_len and source[pos] in WHITESPACE:
            pos += 1
        self._pos = pos

    def expect(self, expected: int, description: str | None = None) -> int:
        """Consume exactly the byte ``expected``.

        Args:
            expected: Required byte value
            description: How to name the byte in errors (defaults to the
                quoted character)

        Returns:
            Offset of the consumed byte.

        Raises:
            EndOfFileError: If input is exhausted
            UnexpectedCharError: If a different byte is found
        """
        if description is None:
            description = describe_byte(expected)
        item = self.bump()
        if item is None:
            raise EndOfFileError(description, Span.point(self._source_len))
        idx, byte = item
        if byte != expected:
            raise UnexpectedCharError(description, describe_byte(byte), Span.point(idx))
        return idx
