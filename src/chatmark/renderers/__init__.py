"""chatmark renderers.

Renderers map typed blocks to output. Each conforms to the BlockRenderer
protocol (``render(node: Block) -> T``).

Available Renderers:
- HtmlRenderer: Renders blocks to escaped HTML using StringBuilder pattern
- TextRenderer: Renders blocks to plain text for copy/download/titles

Thread Safety:
All renderers use a StringBuilder local to each render() call.
Safe for concurrent use from multiple threads.

"""

from chatmark.renderers.html import HtmlRenderer
from chatmark.renderers.protocol import BlockRenderer, render_blocks
from chatmark.renderers.text import TextRenderer, render_text

__all__ = ["BlockRenderer", "HtmlRenderer", "TextRenderer", "render_blocks", "render_text"]
