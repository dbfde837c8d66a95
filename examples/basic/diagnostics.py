"""Render a caret diagnostic for the first parse error."""

from bracemark import ParseError, parse

source = b"first line\nthe [bold] directive has no closing bracket"

try:
    parse(source, source_file="example.bm")
except ParseError as err:
    print(err.format_diagnostic(source))
