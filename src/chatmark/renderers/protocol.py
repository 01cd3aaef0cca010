"""BlockRenderer protocol: the interface UI adapters implement.

A renderer maps one top-level block to one visual element of whatever type
the host UI uses (an HTML string, a widget, a terminal line...). The engine
never imports a UI toolkit; it only calls ``render`` once per block.

Example:
    from chatmark.renderers.protocol import BlockRenderer, render_blocks

    class Widgets:
        def render(self, node: Block) -> Widget:
            ...

    widgets = render_blocks(doc, Widgets())

"""

from typing import Protocol

from chatmark.nodes import Block, Document


class BlockRenderer[T](Protocol):
    """Protocol for block renderer adapters.

    The built-in ``HtmlRenderer`` (``T = str``) and ``TextRenderer``
    conform to this protocol.

    """

    def render(self, node: Block) -> T:
        """Render one top-level block.

        Args:
            node: A block node from ``Document.children``.

        Returns:
            The visual element for that block.

        """
        ...


def render_blocks[T](doc: Document, renderer: BlockRenderer[T]) -> list[T]:
    """Render every top-level block of ``doc`` in order."""
    return [renderer.render(block) for block in doc.children]
