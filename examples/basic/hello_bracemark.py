"""Parse a buffer and show each located expression with its bytes."""

from bracemark import parse

source = b"hello {box| world and [em this"
doc = parse(source)

for item in doc:
    kind = type(item.value).__name__
    print(f"{kind:6} {item.start:>3}..{item.end:<3} {item.span.slice(source)!r}")
