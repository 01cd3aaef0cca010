"""AST Visitor and Transformer for chatmark.

Provides a base visitor class with match-based dispatch and an immutable
transform function for rewriting frozen documents.

Example, collect all links:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.urls: list[str] = []

        def visit_link(self, node: Link) -> None:
            self.urls.append(node.url)

    collector = LinkCollector()
    collector.visit(doc)

Example, drop spacers:

    new_doc = transform(doc, lambda n: None if isinstance(n, Spacer) else n)

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. The transform function
    is pure and safe to call from any thread.

"""

import dataclasses
from collections.abc import Callable

from chatmark.nodes import (
    Blockquote,
    Bold,
    Code,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Italic,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Spacer,
    Table,
    TableCell,
    TableRow,
    Text,
)


class BaseVisitor[T]:
    """Base AST visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for node types you care about.
    Unhandled node types fall through to ``visit_default``. Children are
    walked automatically after the ``visit_*`` call.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, node: Node) -> T:
        """Dispatch to the appropriate ``visit_*`` method.

        Walks children automatically after the visit method returns.

        """
        result = self._dispatch(node)
        self._walk_children(node)
        return result

    def visit_default(self, node: Node) -> T:
        """Called for node types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_document(self, node: Document) -> T:
        return self.visit_default(node)

    def visit_heading(self, node: Heading) -> T:
        return self.visit_default(node)

    def visit_paragraph(self, node: Paragraph) -> T:
        return self.visit_default(node)

    def visit_code_block(self, node: CodeBlock) -> T:
        return self.visit_default(node)

    def visit_list(self, node: List) -> T:
        return self.visit_default(node)

    def visit_list_item(self, node: ListItem) -> T:
        return self.visit_default(node)

    def visit_table(self, node: Table) -> T:
        return self.visit_default(node)

    def visit_table_row(self, node: TableRow) -> T:
        return self.visit_default(node)

    def visit_table_cell(self, node: TableCell) -> T:
        return self.visit_default(node)

    def visit_blockquote(self, node: Blockquote) -> T:
        return self.visit_default(node)

    def visit_horizontal_rule(self, node: HorizontalRule) -> T:
        return self.visit_default(node)

    def visit_spacer(self, node: Spacer) -> T:
        return self.visit_default(node)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, node: Text) -> T:
        return self.visit_default(node)

    def visit_bold(self, node: Bold) -> T:
        return self.visit_default(node)

    def visit_italic(self, node: Italic) -> T:
        return self.visit_default(node)

    def visit_code(self, node: Code) -> T:
        return self.visit_default(node)

    def visit_link(self, node: Link) -> T:
        return self.visit_default(node)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, node: Node) -> T:
        """Match-based dispatch to visit_* methods."""
        match node:
            case Document():
                return self.visit_document(node)
            case Heading():
                return self.visit_heading(node)
            case Paragraph():
                return self.visit_paragraph(node)
            case CodeBlock():
                return self.visit_code_block(node)
            case List():
                return self.visit_list(node)
            case ListItem():
                return self.visit_list_item(node)
            case Table():
                return self.visit_table(node)
            case TableRow():
                return self.visit_table_row(node)
            case TableCell():
                return self.visit_table_cell(node)
            case Blockquote():
                return self.visit_blockquote(node)
            case HorizontalRule():
                return self.visit_horizontal_rule(node)
            case Spacer():
                return self.visit_spacer(node)
            case Text():
                return self.visit_text(node)
            case Bold():
                return self.visit_bold(node)
            case Italic():
                return self.visit_italic(node)
            case Code():
                return self.visit_code(node)
            case Link():
                return self.visit_link(node)
            case _:
                return self.visit_default(node)

    def _walk_children(self, node: Node) -> None:
        """Recursively visit child nodes."""
        for child in _children(node):
            self.visit(child)


def _children(node: Node) -> tuple[Node, ...]:
    """Direct child nodes in document order."""
    match node:
        case Document() | Bold() | Italic() | Link():
            return node.children
        case Heading() | Paragraph() | ListItem() | TableCell() | Blockquote():
            return node.content
        case List(items=items):
            return items
        case Table(header_cells=header_cells, rows=rows):
            return (*header_cells, *rows)
        case TableRow(cells=cells):
            return cells
        case _:
            return ()  # Leaf nodes: no children


def transform(doc: Document, fn: Callable[[Node], Node | None]) -> Document:
    """Apply a function to every node in the tree, returning a new tree.

    The function ``fn`` is called bottom-up: children are transformed first,
    then the parent is transformed with its new children. This ensures ``fn``
    always receives nodes with already-transformed children.

    Return ``None`` from ``fn`` to remove a node from the tree. The root
    Document cannot be removed; returning None for it raises TypeError.

    Since all nodes are frozen dataclasses, this produces a new immutable tree.
    The original tree is untouched.

    Args:
        doc: The document to transform.
        fn: Function that receives a node and returns a (possibly new) node,
            or None to remove the node from the tree.

    Returns:
        A new Document with the transformation applied.

    """
    result = _transform_node(doc, fn)
    if result is None or not isinstance(result, Document):
        msg = "transform fn must return a Document for the root (cannot remove root)"
        raise TypeError(msg)
    return result


def _transform_node(node: Node, fn: Callable[[Node], Node | None]) -> Node | None:
    """Transform a single node bottom-up: children first, then self."""
    transformed = _transform_children(node, fn)
    return fn(transformed)


def _transform_children(node: Node, fn: Callable[[Node], Node | None]) -> Node:
    """Produce a new node with children transformed; filter out None (removed) nodes."""

    def _filtered(children: tuple[Node, ...]) -> tuple[Node, ...]:
        return tuple(
            result for c in children
            if (result := _transform_node(c, fn)) is not None
        )

    match node:
        case Document() | Bold() | Italic() | Link():
            children = node.children
            new_children = _filtered(children)
            if new_children != children:
                return dataclasses.replace(node, children=new_children)
        case Heading() | Paragraph() | ListItem() | TableCell() | Blockquote():
            content = node.content
            new_content = _filtered(content)
            if new_content != content:
                return dataclasses.replace(node, content=new_content)
        case List(items=items):
            new_items = _filtered(items)
            if new_items != items:
                return dataclasses.replace(node, items=new_items)
        case Table(header_cells=header_cells, rows=rows):
            new_header = _filtered(header_cells)
            new_rows = _filtered(rows)
            if new_header != header_cells or new_rows != rows:
                return dataclasses.replace(node, header_cells=new_header, rows=new_rows)
        case TableRow(cells=cells):
            new_cells = _filtered(cells)
            if new_cells != cells:
                return dataclasses.replace(node, cells=new_cells)
    return node


__all__ = ["BaseVisitor", "transform"]
