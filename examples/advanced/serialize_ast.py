"""Ship a parsed message to a UI adapter as JSON, and back."""

from chatmark import from_json, parse, to_json

doc = parse("## Steps\n1. install\n2. run `chatmark`")
payload = to_json(doc, indent=2)
print(payload)

restored = from_json(payload)
print("Round trip equal:", restored == doc)
