"""Source spans and located values.

Every parsed value is tied to the half-open byte range ``[start, end)`` it
came from. Spans are plain integer ranges into the original buffer, not
slices of it, so the buffer must stay available to any stage that wants to
materialize text.

Provides:
- Span: half-open byte range
- Located: a value paired with its Span
- SourceLocation: 1-indexed line/column coordinates for error messages

Thread Safety:
All classes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open byte range ``[start, end)`` into a source buffer.

    A zero-length span is a point location, e.g. an end-of-file error
    sits at ``Span(len(source), len(source))``.

    Examples:
            >>> span = Span(6, 11)
            >>> len(span)
            5
            >>> span.slice(b"hello world")
            b'world'

    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if not (0 <= self.start <= self.end):
            msg = f"Invalid span: start={self.start}, end={self.end}"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start

    @classmethod
    def point(cls, offset: int) -> Span:
        """Create a zero-length span at offset."""
        return cls(offset, offset)

    @property
    def is_point(self) -> bool:
        return self.start == self.end

    def slice(self, source: bytes) -> bytes:
        """Materialize the bytes this span covers.

        Args:
            source: The buffer the span was produced from

        Raises:
            ValueError: If the span extends past the end of source
        """
        if self.end > len(source):
            msg = f"Span {self.start}..{self.end} exceeds source length {len(source)}"
            raise ValueError(msg)
        return bytes(source[self.start : self.end])


@dataclass(frozen=True, slots=True)
class Located(Generic[T]):
    """A value paired with the span it was parsed from."""

    value: T
    span: Span

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Human-readable location for error messages.

    Line and column are 1-indexed. Columns count bytes, not characters.

    Attributes:
        lineno: Starting line number (1-indexed)
        col_offset: Starting column offset (1-indexed)
        offset: Absolute start offset in source buffer
        end_offset: Absolute end offset in source buffer
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation.from_span(b"ab\\ncd", Span(4, 5))
            >>> str(loc)
            '2:2'

    """

    lineno: int
    col_offset: int
    offset: int = 0
    end_offset: int = 0
    source_file: str | None = None

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.bm:10:5" or "10:5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.lineno}:{self.col_offset}"
        return f"{self.lineno}:{self.col_offset}"

    @classmethod
    def from_span(
        cls,
        source: bytes,
        span: Span,
        source_file: str | None = None,
    ) -> SourceLocation:
        """Compute line/column coordinates for the start of span.

        Uses bytes.count/rfind over the prefix (C implementation), so the
        cost is paid only when an error is actually reported.
        """
        prefix = source[: span.start]
        lineno = prefix.count(b"\n") + 1
        line_start = prefix.rfind(b"\n") + 1
        return cls(
            lineno=lineno,
            col_offset=span.start - line_start + 1,
            offset=span.start,
            end_offset=span.end,
            source_file=source_file,
        )
