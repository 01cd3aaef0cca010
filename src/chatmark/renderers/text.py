"""Plain-text renderer for copy-to-clipboard, downloads and titles.

Strips all formatting. Each block becomes one or more lines; list items keep
their bullet or written numeral, table cells are joined with `` | ``, links
keep their URL in parentheses and spacers become empty lines.

Example:
    >>> from chatmark import parse, render_text
    >>> render_text(parse("# Hello **World**\\n\\n- item"))
    'Hello World\\n\\n- item\\n'
"""

from chatmark.errors import RenderError
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


class TextRenderer:
    """Render blocks to plain text.

    No markup. Conforms to BlockRenderer[str].
    """

    __slots__ = ()

    def render(self, node: Block) -> str:
        """Render one block to plain text ending in a newline."""
        if not isinstance(node, Node):
            msg = f"Cannot render {type(node).__name__!r}: not a chatmark node"
            raise RenderError(msg)
        sb = StringBuilder()
        self._render_block(node, sb)
        return sb.build()

    def render_document(self, doc: Document) -> str:
        """Render document to plain text."""
        sb = StringBuilder()
        for child in doc.children:
            self._render_block(child, sb)
        return sb.build()

    def _render_block(self, block: Node, sb: StringBuilder) -> None:
        """Render a block node."""
        match block:
            case Heading() | Paragraph() | Blockquote():
                self._render_inlines(block.content, sb)
                sb.append_line()
            case CodeBlock():
                sb.append_line(block.content)
            case List():
                for item in block.items:
                    sb.append(f"{item.label}. " if item.label is not None else "- ")
                    self._render_inlines(item.content, sb)
                    sb.append_line()
            case Table():
                self._render_row(block.header_cells, sb)
                for row in block.rows:
                    self._render_row(row.cells, sb)
            case HorizontalRule():
                sb.append_line("---")
            case Spacer():
                sb.append_line()
            case Document():
                for child in block.children:
                    self._render_block(child, sb)
            case Text() | Bold() | Italic() | Code() | Link():
                self._render_inline(block, sb)
            case _:
                msg = f"Cannot render {type(block).__name__!r} as text"
                raise RenderError(msg)

    def _render_row(self, cells: tuple[TableCell, ...], sb: StringBuilder) -> None:
        for i, cell in enumerate(cells):
            if i:
                sb.append(" | ")
            self._render_inlines(cell.content, sb)
        sb.append_line()

    def _render_inlines(self, inlines: tuple[Inline, ...], sb: StringBuilder) -> None:
        for inline in inlines:
            self._render_inline(inline, sb)

    def _render_inline(self, inline: Inline, sb: StringBuilder) -> None:
        """Render a single inline node."""
        match inline:
            case Text():
                sb.append(inline.content)
            case Bold() | Italic():
                self._render_inlines(inline.children, sb)
            case Link():
                self._render_inlines(inline.children, sb)
                sb.append(f" ({inline.url})")
            case Code():
                sb.append(inline.code)


def render_text(doc: Document) -> str:
    """Render document to plain text.

    Args:
        doc: Document to render.

    Returns:
        Plain text, one line per paragraph, heading or list item.
    """
    return TextRenderer().render_document(doc)
