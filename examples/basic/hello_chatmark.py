"""Parse and render a chat message in 3 lines."""

from chatmark import parse, render

doc = parse("# Hello **World**\n- see [docs](https://example.com)")
html = render(doc)
print(html)
