"""Cache a parsed document to disk — JSON round-trip."""

from bracemark import parse
from bracemark.serialization import from_json, to_json

doc = parse(b"{note| Spans survive the round trip [em intact")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
