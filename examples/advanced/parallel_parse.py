"""Thread safe: parse a whole conversation history in parallel."""

from concurrent.futures import ThreadPoolExecutor

from chatmark import parse

messages = [f"**User {i}**: question {i}\n\n- point a\n- point b" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, messages))

print(f"Parsed {len(results)} messages in parallel")
print("First message blocks:", len(results[0].children))
print("Last message blocks:", len(results[-1].children))
