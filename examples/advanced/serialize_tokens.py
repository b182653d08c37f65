"""Hand tokens to a JavaScript renderer — JSON round-trip."""

from marklet import tokenize
from marklet.serialization import from_json, to_json

tokens = tokenize("# Cached document\n\n> These tokens can be serialized and restored.")

json_str = to_json(tokens, indent=2)
restored = from_json(json_str)

print(json_str)
print("Original == restored:", tokens == restored)
