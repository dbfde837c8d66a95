"""
Bracemark — a byte-level scanner/parser for bracket directive markup.

Free-running text mixes with two kinds of embedded directives:

- inline: ``[name`` followed by content (no closing bracket)
- block: ``{name|`` where the name is followed by a pipe

Parsing yields located expressions: every node carries the half-open byte
range it came from, and every error carries the span it applies to.

Quick Start:
    >>> from bracemark import parse
    >>> doc = parse(b"hello {box| world")
    >>> [type(item.value).__name__ for item in doc]
    ['Text', 'Block', 'Text']

Nodes hold spans, not text. Materialize against the buffer you parsed:
    >>> source = b"hello {box| world"
    >>> parse(source)[1].value.name.slice(source)
    b'box'
"""

from bracemark.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from bracemark.cursor import Cursor, Source, to_bytes
from bracemark.errors import (
    BracemarkError,
    EndOfFileError,
    ParseError,
    UnexpectedCharError,
    UnmatchedRightBracketError,
)
from bracemark.location import Located, SourceLocation, Span
from bracemark.nodes import Block, Directive, Document, Expression, Inline, Node, Text
from bracemark.parser import Parser
from bracemark.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def parse(
    source: Source,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse a buffer into a Document.

    Args:
        source: str (encoded as UTF-8), bytes-like object or iterable of ints
        source_file: Optional source file path for error messages
        config: Parse configuration for this call (defaults to the
            config active in the current context)

    Returns:
        Document of located expressions

    Raises:
        ParseError: On the first grammar violation

    Example:
        >>> doc = parse("[bold text")
        >>> doc[1].value
        Inline(name=Span(start=1, end=5), args=(), body=())
    """
    parser = Parser(source, source_file=source_file)
    if config is None:
        children = parser.parse()
    else:
        with parse_config_context(config):
            children = parser.parse()
    return Document(
        children=children,
        span=Span(0, len(parser.source)),
        source_file=source_file,
    )


__all__ = [
    # Version
    "__version__",
    # Main API
    "parse",
    "Parser",
    # Nodes
    "Node",
    "Text",
    "Directive",
    "Inline",
    "Block",
    "Expression",
    "Document",
    # Location
    "Span",
    "Located",
    "SourceLocation",
    # Cursor
    "Cursor",
    "Source",
    "to_bytes",
    # Errors
    "BracemarkError",
    "ParseError",
    "UnmatchedRightBracketError",
    "EndOfFileError",
    "UnexpectedCharError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
