"""One engine, two presets: chat messages and AI-analysis text."""

from chatmark import ANALYSIS_PRESET, CHAT_PRESET, parse, render

source = """# Verdict
| risk | level |
|---|---|
| churn | low |
##### Fine print
See [report](https://example.com/report)"""

print("Chat preset:")
print(render(parse(source, CHAT_PRESET)))

print("Analysis preset (no tables or links, 4 heading levels, diamond markers):")
print(render(parse(source, ANALYSIS_PRESET)))
