"""Recursive descent parser producing located expressions.

Grammar (bytes; only ASCII is structurally significant):

    document  := ( text | inline | block )*
    inline    := "[" ws name ws                  (content must follow)
    block     := "{" ws name ws "|"
    name      := ALPHA ALNUM*

A ``]`` or ``}`` at the top level is always an error: there is no depth
tracking, and directive bodies are not parsed yet.

One byte of lookahead is enough everywhere, so the parser runs in O(n)
without backtracking.

Thread Safety:
Parser instances are single-use and not thread-safe. Create one per
parse operation. Configuration is read from ContextVar (thread-local).
The resulting expressions are immutable and thread-safe.

"""

from __future__ import annotations

from bracemark.charsets import (
    ALNUM,
    ALPHA,
    CLOSE_BRACKETS,
    OPEN_BLOCK,
    OPEN_INLINE,
    PIPE,
    describe_byte,
)
from bracemark.config import ParseConfig, get_parse_config
from bracemark.cursor import Cursor, Source, to_bytes
from bracemark.errors import (
    EndOfFileError,
    ParseError,
    UnexpectedCharError,
    UnmatchedRightBracketError,
)
from bracemark.location import Located, SourceLocation, Span
from bracemark.nodes import Block, Expression, Inline, Text
from bracemark.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Recursive descent parser for Bracemark documents.

    Usage:
            >>> parser = Parser(b"see {note| and [em this")
            >>> exprs = parser.parse()
            >>> [type(e.value).__name__ for e in exprs]
            ['Text', 'Block', 'Text', 'Inline', 'Text']

    A parser is consumed by ``parse()``; calling it twice raises
    RuntimeError. Parse the same buffer again with a fresh instance.

    """

    __slots__ = (
        "_source",
        "_source_file",
        "_cursor",
        "_consumed",
    )

    def __init__(
        self,
        source: Source,
        source_file: str | None = None,
    ) -> None:
        """Initialize parser with source bytes.

        Configuration is read from ContextVar, not passed as parameters.
        Use parse_config_context() before calling parse() if you need
        non-default configuration.

        Args:
            source: str (encoded as UTF-8), bytes-like object or iterable of ints
            source_file: Optional source file path for error messages

        """
        self._source = to_bytes(source)
        self._source_file = source_file
        self._cursor = Cursor(self._source)
        self._consumed = False

    @property
    def source(self) -> bytes:
        """The owned buffer that spans refer to."""
        return self._source

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> tuple[Located[Expression], ...]:
        """Parse the whole buffer.

        Returns:
            Located expressions in source order.

        Raises:
            ParseError: On the first grammar violation, with its location
                attached. Nothing is returned for partially parsed input.
            RuntimeError: If this parser was already used.
        """
        if self._consumed:
            msg = "Parser instances are single-use; create a new Parser"
            raise RuntimeError(msg)
        self._consumed = True

        try:
            exprs = self._parse_document()
        except ParseError as err:
            err.with_location(
                SourceLocation.from_span(self._source, err.span, self._source_file)
            )
            logger.debug("Parse failed at %s: %s", err.location, err.message)
            raise

        logger.debug(
            "Parsed %d expressions from %d bytes", len(exprs), len(self._source)
        )
        return exprs

    # =========================================================================
    # Grammar rules
    # =========================================================================

    def _parse_document(self) -> tuple[Located[Expression], ...]:
        """Top-level loop: text runs separated by directives.

        After a directive, the next text run starts at the cursor, so
        whitespace after an inline name and before a block's pipe (and the
        pipe itself) is covered by no node.
        """
        config = self._config
        cursor = self._cursor
        exprs: list[Located[Expression]] = []
        # Start of the pending text run; its end is fixed when the next
        # structural byte or end of input is reached.
        text_start = 0

        while (item := cursor.bump()) is not None:
            idx, byte = item
            if byte == OPEN_INLINE:
                self._push_text(exprs, text_start, idx, config)
                exprs.append(self._parse_inline(idx))
                text_start = cursor.position
            elif byte == OPEN_BLOCK:
                self._push_text(exprs, text_start, idx, config)
                exprs.append(self._parse_block(idx))
                text_start = cursor.position
            elif byte in CLOSE_BRACKETS:
                raise UnmatchedRightBracketError(Span.point(idx), chr(byte))

        if config.flush_trailing_text and text_start < len(self._source):
            self._push_text(exprs, text_start, len(self._source), config)

        return tuple(exprs)

    def _push_text(
        self,
        exprs: list[Located[Expression]],
        start: int,
        end: int,
        config: ParseConfig,
    ) -> None:
        if start == end and config.skip_empty_text:
            return
        span = Span(start, end)
        exprs.append(Located(Text(span), span))

    def _parse_name(self) -> Span:
        """Parse ``ALPHA ALNUM*`` and return its span.

        The span end is exclusive, including when the name runs to the
        very end of the input.
        """
        cursor = self._cursor
        item = cursor.bump()
        if item is None:
            raise EndOfFileError("name", Span.point(len(self._source)))

        start, byte = item
        if byte not in ALPHA:
            raise UnexpectedCharError("letter", describe_byte(byte), Span.point(start))

        while (item := cursor.peek()) is not None and item[1] in ALNUM:
            cursor.bump()

        return Span(start, cursor.position)

    def _parse_inline(self, start: int) -> Located[Expression]:
        """Parse an inline directive whose ``[`` is at offset start.

        The located range runs from the bracket to the end of the name.
        """
        cursor = self._cursor
        cursor.skip_whitespace()
        name = self._parse_name()
        cursor.skip_whitespace()
        if cursor.at_end():
            raise EndOfFileError("inline directive content", Span.point(len(self._source)))

        logger.debug("Inline directive %r at %d", self._source[name.start : name.end], start)
        return Located(Inline(name=name), Span(start, name.end))

    def _parse_block(self, start: int) -> Located[Expression]:
        """Parse a block directive whose ``{`` is at offset start.

        The located range runs from the brace to the end of the name; the
        pipe is consumed but not included.
        """
        cursor = self._cursor
        cursor.skip_whitespace()
        name = self._parse_name()
        cursor.skip_whitespace()
        cursor.expect(PIPE)

        logger.debug("Block directive %r at %d", self._source[name.start : name.end], start)
        return Located(Block(name=name), Span(start, name.end))
