"""Typewriter effect: re-render a reply as it appears."""

import time

from chatmark import reveal, render_text

reply = "## Answer\n\nUse `parse()`:\n```py\ndoc = parse(text)\n```\nDone."

for doc in reveal(reply, step=4):
    print("\x1b[2J\x1b[H" + render_text(doc), end="", flush=True)
    time.sleep(0.05)
print()
