"""HTML renderer using StringBuilder pattern.

Reference adapter for the BlockRenderer protocol: each top-level block
becomes one HTML fragment. All text is escaped; raw HTML in the source is
never interpreted.

Markup:
- Decorated headings carry a ``◆`` marker span
- Links open in a new tab (``target="_blank" rel="noopener noreferrer"``)
- Code blocks are wrapped with a language label; unclosed blocks are marked
- Spacers are an empty ``<div class="spacer"></div>``
- Ordered list items keep their written numeral as ``value``

Thread Safety:
HtmlRenderer holds only the highlight flag. Every render() call uses its own
StringBuilder, so one instance can be shared across threads.
"""

from __future__ import annotations

from chatmark.errors import RenderError
from chatmark.highlighting import highlight, plain_code_block
from chatmark.nodes import (
    Block,
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Inline,
    Italic,
    Link,
    List,
    Node,
    Paragraph,
    Spacer,
    Table,
    TableCell,
    Text,
)
from chatmark.stringbuilder import StringBuilder
from chatmark.utils.logger import get_logger
from chatmark.utils.text import escape_html

logger = get_logger(__name__)

DIAMOND = "◆"


class HtmlRenderer:
    """Render blocks to HTML using StringBuilder pattern.

    Usage:
        >>> from chatmark import parse
        >>> renderer = HtmlRenderer()
        >>> renderer.render_document(parse("Hello **World**"))
        '<p>Hello <strong>World</strong></p>\\n'

    Thread Safety:
        Multiple threads can safely share a single HtmlRenderer instance.
    """

    __slots__ = ("_highlight",)

    def __init__(self, *, highlight: bool = False) -> None:
        """Initialize renderer.

        Args:
            highlight: Enable syntax highlighting for code blocks
        """
        self._highlight = highlight

    def render(self, node: Block) -> str:
        """Render one block to an HTML fragment.

        Raises:
            RenderError: If ``node`` is not a chatmark node.
        """
        if not isinstance(node, Node):
            msg = f"Cannot render {type(node).__name__!r}: not a chatmark node"
            raise RenderError(msg)
        sb = StringBuilder()
        self._render_block(node, sb)
        return sb.build()

    def render_document(self, doc: Document) -> str:
        """Render every block of a document to one HTML string."""
        if not isinstance(doc, Document):
            msg = f"Expected Document, got {type(doc).__name__!r}"
            raise RenderError(msg)
        sb = StringBuilder()
        for child in doc.children:
            self._render_block(child, sb)
        return sb.build()

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Node, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Heading():
                self._render_heading(block, sb)
            case Paragraph():
                sb.append("<p>")
                self._render_inlines(block.content, sb)
                sb.append("</p>\n")
            case CodeBlock():
                self._render_code_block(block, sb)
            case List():
                self._render_list(block, sb)
            case Table():
                self._render_table(block, sb)
            case Blockquote():
                sb.append("<blockquote>")
                self._render_inlines(block.content, sb)
                sb.append("</blockquote>\n")
            case HorizontalRule():
                sb.append("<hr />\n")
            case Spacer():
                sb.append('<div class="spacer"></div>\n')
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case Text() | Bold() | Italic() | Code() | Link():
                self._render_inline(block, sb)
            case _:
                msg = f"Cannot render {type(block).__name__!r} as a block"
                raise RenderError(msg)

    def _render_heading(self, heading: Heading, sb: StringBuilder) -> None:
        """Render heading, with a marker when decorated."""
        tag = f"h{heading.level}"
        if heading.decoration == "diamond":
            sb.append(f'<{tag} class="decorated"><span class="marker">{DIAMOND}</span> ')
        else:
            sb.append(f"<{tag}>")
        self._render_inlines(heading.content, sb)
        sb.append(f"</{tag}>\n")

    def _render_code_block(self, block: CodeBlock, sb: StringBuilder) -> None:
        """Render fenced code with its language label."""
        lang = block.language
        css = "code-block" if block.closed else "code-block unclosed"
        sb.append(f'<div class="{css}">')
        if lang:
            sb.append(f'<span class="code-language">{escape_html(lang)}</span>')

        code_html = None
        if self._highlight and lang:
            try:
                code_html = highlight(block.content, lang)
            except Exception:
                # Log unexpected errors but continue with fallback
                logger.debug("Syntax highlighting failed for language %r", lang, exc_info=True)

        sb.append(code_html if code_html is not None else plain_code_block(block.content, lang))
        sb.append("</div>\n")

    def _render_list(self, lst: List, sb: StringBuilder) -> None:
        """Render ordered or unordered list."""
        tag = "ol" if lst.ordered else "ul"
        sb.append(f"<{tag}>\n")
        for item in lst.items:
            if item.label is not None:
                sb.append(f'<li value="{escape_html(item.label)}">')
            else:
                sb.append("<li>")
            self._render_inlines(item.content, sb)
            sb.append("</li>\n")
        sb.append(f"</{tag}>\n")

    def _render_table(self, table: Table, sb: StringBuilder) -> None:
        """Render pipe table. Rows keep their own cell counts."""
        sb.append("<table>\n<thead>\n")
        self._render_cells(table.header_cells, "th", sb)
        sb.append("</thead>\n")
        if table.rows:
            sb.append("<tbody>\n")
            for row in table.rows:
                self._render_cells(row.cells, "td", sb)
            sb.append("</tbody>\n")
        sb.append("</table>\n")

    def _render_cells(self, cells: tuple[TableCell, ...], tag: str, sb: StringBuilder) -> None:
        sb.append("<tr>")
        for cell in cells:
            sb.append(f"<{tag}>")
            self._render_inlines(cell.content, sb)
            sb.append(f"</{tag}>")
        sb.append("</tr>\n")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        """Render a sequence of inline nodes."""
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        """Render an inline node."""
        match inline:
            case Text():
                sb.append(escape_html(inline.content))
            case Bold():
                sb.append("<strong>")
                self._render_inlines(inline.children, sb)
                sb.append("</strong>")
            case Italic():
                sb.append("<em>")
                self._render_inlines(inline.children, sb)
                sb.append("</em>")
            case Code():
                sb.append("<code>").append(escape_html(inline.code)).append("</code>")
            case Link():
                href = escape_html(inline.url)
                sb.append(f'<a href="{href}" target="_blank" rel="noopener noreferrer">')
                self._render_inlines(inline.children, sb)
                sb.append("</a>")
