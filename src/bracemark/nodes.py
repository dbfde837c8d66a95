"""Typed expression nodes for Bracemark.

All nodes are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Text
└── Directive
    ├── Inline   ``[name ...``
    └── Block    ``{name |...``

Nodes hold byte spans, not text. Materialize content with
``span.slice(source)`` against the buffer that was parsed.

Directive ``args`` and ``body`` are ordered tuples that the current
grammar always leaves empty.

"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import TypeAlias, overload

from bracemark.location import Located, Span


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all expression nodes."""


@dataclass(frozen=True, slots=True)
class Text(Node):
    """A run of literal bytes between structural tokens."""

    span: Span


@dataclass(frozen=True, slots=True)
class Directive(Node):
    """Common shape of inline and block directives.

    Attributes:
        name: Span of the directive name
        args: Argument spans, in source order
        body: Child expressions, in source order

    """

    name: Span
    args: tuple[Span, ...] = ()
    body: tuple[Located[Expression], ...] = ()


@dataclass(frozen=True, slots=True)
class Inline(Directive):
    """A ``[``-introduced directive.

    Terminated by the end of its name and trailing whitespace; there is
    no closing bracket in this grammar.

    """


@dataclass(frozen=True, slots=True)
class Block(Directive):
    """A ``{``-introduced directive whose name is followed by ``|``."""


Expression: TypeAlias = Text | Inline | Block


@dataclass(frozen=True, slots=True)
class Document(Sequence[Located[Expression]]):
    """Result of parsing a whole buffer.

    An immutable sequence of located expressions in source order.

    Attributes:
        children: Located expressions, left to right
        span: Range of the whole buffer
        source_file: Source file path (optional)

    """

    children: tuple[Located[Expression], ...]
    span: Span
    source_file: str | None = field(default=None, compare=False)

    @overload
    def __getitem__(self, index: int) -> Located[Expression]: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Located[Expression], ...]: ...

    def __getitem__(
        self, index: int | slice
    ) -> Located[Expression] | tuple[Located[Expression], ...]:
        return self.children[index]

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Located[Expression]]:
        return iter(self.children)
