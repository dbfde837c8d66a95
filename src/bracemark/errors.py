"""Exception classes for Bracemark.

Parse failures form a closed set. Each one carries the span it applies to,
so callers can render a caret diagnostic against the original source:

- UnmatchedRightBracketError: a ``]`` or ``}`` with no opener
- EndOfFileError: input exhausted while a token was still required
- UnexpectedCharError: a concrete byte violated a grammar expectation

The first error aborts the whole parse; there is no recovery.
"""

from __future__ import annotations

from bracemark.location import SourceLocation, Span

ERROR_POINTER_CHAR = "^"
ERROR_ELLIPSIS = "..."

MAX_ERROR_CONTEXT_LEN = 80
"""
The maximum number of bytes on either side of the invalid input
to include in a diagnostic.

Diagnostics display the entire line containing the invalid input
unless the part before or after it is longer than this, in which case
that part is truncated and marked with an ellipsis.
"""


class BracemarkError(Exception):
    """Base exception for all Bracemark errors.

    Subclass this for specific error categories.
    """

    pass


class ParseError(BracemarkError):
    """Error during document parsing.

    Raised when the parser encounters invalid or unexpected input.
    """

    def __init__(
        self,
        message: str,
        span: Span,
        *,
        location: SourceLocation | None = None,
    ) -> None:
        """Initialize parse error with its span.

        Args:
            message: Error description
            span: Byte range the error applies to (a point for most errors)
            location: Line/column coordinates, when the source is known
        """
        self.message = message
        self.span = span
        self.location = location

        prefix = f"{location} " if location is not None else ""
        super().__init__(f"{prefix}{message}")

    @property
    def source_file(self) -> str | None:
        return self.location.source_file if self.location is not None else None

    def with_location(self, location: SourceLocation) -> ParseError:
        """Attach line/column coordinates, returning self for chaining."""
        self.location = location
        self.args = (f"{location} {self.message}",)
        return self

    def format_diagnostic(self, source: bytes) -> str:
        """Render the offending line with a caret underline.

        Args:
            source: The buffer that was being parsed

        Returns:
            Multi-line diagnostic: message, position, source line, carets.
        """
        start = min(self.span.start, len(source))
        line_start = source.rfind(b"\n", 0, start) + 1
        line_end = source.find(b"\n", start)
        if line_end == -1:
            line_end = len(source)

        mark_end = max(start, min(self.span.end, line_end))

        before = _decode(source[line_start:start])
        marked = _decode(source[start:mark_end])
        after = _decode(source[mark_end:line_end])
        if MAX_ERROR_CONTEXT_LEN < len(after):
            after = f"{after[:MAX_ERROR_CONTEXT_LEN]}{ERROR_ELLIPSIS}"
        if MAX_ERROR_CONTEXT_LEN < len(before):
            before = f"{ERROR_ELLIPSIS}{before[-MAX_ERROR_CONTEXT_LEN:]}"

        # A point span still gets one caret so the position is visible
        width = max(1, len(marked))
        location = self.location or SourceLocation.from_span(source, self.span)
        return (
            f"{self.message}\n"
            f"{location}, bytes {self.span.start}..{self.span.end}:\n"
            f"{before}{marked}{after}\n"
            f"{' ' * len(before)}{ERROR_POINTER_CHAR * width}"
        )


class UnmatchedRightBracketError(ParseError):
    """A closing bracket was found with no matching opener."""

    def __init__(self, span: Span, bracket: str = "]") -> None:
        self.bracket = bracket
        super().__init__("right bracket without matching left bracket", span)


class EndOfFileError(ParseError):
    """Input ended while a specific token was still expected."""

    def __init__(self, expected: str, span: Span) -> None:
        self.expected = expected
        super().__init__(f"end of file reached, expected {expected}", span)


class UnexpectedCharError(ParseError):
    """A byte did not match what the grammar required."""

    def __init__(self, expected: str, received: str, span: Span) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"expected {expected}, received {received}", span)


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
