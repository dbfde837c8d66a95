"""Expression serialization — JSON round-trip for Bracemark documents.

Converts documents, located values and nodes to/from JSON-compatible dicts.
Useful for:
- Caching parse results between pipeline stages
- Debugging and inspection (the command line prints this form)

All output is deterministic (sorted keys) for cache-key stability.

Example:
    from bracemark import parse
    from bracemark.serialization import to_json, from_json

    doc = parse(b"see {note| here")
    json_str = to_json(doc)
    restored = from_json(json_str)
    assert doc == restored

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from dataclasses import fields
from typing import Any

from bracemark.location import Located, Span
from bracemark.nodes import Block, Document, Inline, Node, Text

# Registry of node type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Text": Text,
    "Inline": Inline,
    "Block": Block,
}


def to_dict(value: Node | Document | Located[Any] | Span) -> dict[str, Any]:
    """Convert a node, document, located value or span to a dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        value: Any Bracemark value.

    Returns:
        Dict with ``_type`` and all fields.

    """
    if isinstance(value, Span):
        return {"_type": "Span", "start": value.start, "end": value.end}
    if isinstance(value, Located):
        return {
            "_type": "Located",
            "span": to_dict(value.span),
            "value": _serialize_value(value.value),
        }

    result: dict[str, Any] = {"_type": type(value).__name__}
    for f in fields(value):
        result[f.name] = _serialize_value(getattr(value, f.name))
    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Node, Document, Located, Span)):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    # Primitives: str, int, None
    return value


def from_dict(data: dict[str, Any]) -> Any:
    """Reconstruct a typed value from a dict.

    Uses the ``_type`` discriminator to determine the class.

    Args:
        data: Dict with ``_type`` and fields (as produced by to_dict).

    Returns:
        Span, Located, node or Document (all frozen dataclasses).

    Raises:
        ValueError: If ``_type`` is missing or unknown.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized value"
        raise ValueError(msg)

    if type_name == "Span":
        return Span(data["start"], data["end"])
    if type_name == "Located":
        return Located(
            value=_deserialize_value(data["value"]),
            span=from_dict(data["span"]),
        )

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        msg = f"Unknown node type: {type_name!r}"
        raise ValueError(msg)

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _deserialize_value(data[f.name])

    return node_cls(**kwargs)


def _deserialize_value(value: Any) -> Any:
    """Deserialize a single field value."""
    if isinstance(value, dict):
        return from_dict(value)
    if isinstance(value, list):
        return tuple(_deserialize_value(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string.

    Output is deterministic (sorted keys) for cache-key stability.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Args:
        data: JSON string (as produced by to_json).

    Returns:
        Document.

    Raises:
        ValueError: If the JSON doesn't represent a Document.

    """
    raw = json.loads(data)
    node = from_dict(raw)
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
