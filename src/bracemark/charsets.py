"""Byte classes for O(1) classification.

The scanner works on raw byte values. Only the ASCII subset is
structurally significant; every other byte passes through opaquely
inside text runs.

Usage:
    from bracemark.charsets import ALNUM

    if byte in ALNUM:  # O(1) lookup
        ...
"""

import string

# ASCII whitespace: space, tab, line feed, form feed, carriage return.
# Vertical tab (0x0b) is deliberately absent.
WHITESPACE: frozenset[int] = frozenset(b" \t\n\x0c\r")

ALPHA: frozenset[int] = frozenset(string.ascii_letters.encode("ascii"))

DIGITS: frozenset[int] = frozenset(string.digits.encode("ascii"))

ALNUM: frozenset[int] = ALPHA | DIGITS

# Structural bytes
OPEN_INLINE: int = ord("[")
OPEN_BLOCK: int = ord("{")
CLOSE_BRACKETS: frozenset[int] = frozenset(b"]}")
PIPE: int = ord("|")

_PRINTABLE: frozenset[int] = frozenset(range(0x20, 0x7F))


def describe_byte(byte: int) -> str:
    """Render a byte for error messages.

    Printable ASCII is quoted (``'x'``); anything else is shown in hex
    (``0x0a``) so control characters and non-ASCII bytes stay readable.

    """
    if byte in _PRINTABLE:
        return f"'{chr(byte)}'"
    return f"0x{byte:02x}"
