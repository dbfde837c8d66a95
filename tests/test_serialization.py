"""Tests for bracemark.serialization — JSON round-trip."""

import json

import pytest

from bracemark import parse
from bracemark.location import Located, Span
from bracemark.nodes import Block, Document, Inline, Text
from bracemark.serialization import from_dict, from_json, to_dict, to_json


class TestToDict:
    """Values serialize with a _type discriminator."""

    def test_span(self) -> None:
        assert to_dict(Span(1, 4)) == {"_type": "Span", "start": 1, "end": 4}

    def test_text(self) -> None:
        assert to_dict(Text(Span(0, 2))) == {
            "_type": "Text",
            "span": {"_type": "Span", "start": 0, "end": 2},
        }

    def test_block_keeps_empty_args_and_body(self) -> None:
        data = to_dict(Block(name=Span(1, 4)))
        assert data["_type"] == "Block"
        assert data["args"] == []
        assert data["body"] == []

    def test_located(self) -> None:
        data = to_dict(Located(Inline(name=Span(1, 2)), Span(0, 2)))
        assert data["_type"] == "Located"
        assert data["value"]["_type"] == "Inline"
        assert data["span"] == {"_type": "Span", "start": 0, "end": 2}


class TestFromDict:
    """from_dict rebuilds typed values."""

    def test_round_trip_nested_body(self) -> None:
        child = Located(Text(Span(5, 6)), Span(5, 6))
        block = Block(name=Span(1, 2), args=(Span(3, 4),), body=(child,))
        assert from_dict(to_dict(block)) == block

    def test_missing_type(self) -> None:
        with pytest.raises(ValueError, match="Missing '_type'"):
            from_dict({"start": 0})

    def test_unknown_type(self) -> None:
        with pytest.raises(ValueError, match="Unknown node type"):
            from_dict({"_type": "Paragraph"})


class TestJson:
    """Documents round-trip through JSON."""

    def test_document_round_trip(self) -> None:
        doc = parse(b"see {note| and [em this", source_file="a.bm")
        restored = from_json(to_json(doc))
        assert restored == doc
        assert restored.source_file == "a.bm"

    def test_output_is_deterministic(self) -> None:
        doc = parse(b"a [b c")
        assert to_json(doc) == to_json(parse(b"a [b c"))
        assert list(json.loads(to_json(doc))) == sorted(json.loads(to_json(doc)))

    def test_indent(self) -> None:
        assert "\n" in to_json(parse(b"x"), indent=2)

    def test_empty_document(self) -> None:
        doc = Document(children=(), span=Span(0, 0))
        assert from_json(to_json(doc)) == doc

    def test_rejects_non_document(self) -> None:
        with pytest.raises(ValueError, match="Expected Document"):
            from_json(json.dumps(to_dict(Span(0, 1))))
