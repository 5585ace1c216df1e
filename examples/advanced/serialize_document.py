"""Cache parsed documents to disk: JSON round-trip."""

from linemark import parse
from linemark.serialization import from_json, to_json

doc = parse("# Cached document\n\nThis *document* can be serialized and restored.")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
