"""Walk a Document with a visitor, then rewrite it with transform."""

import dataclasses

from chatmark import BaseVisitor, Link, Node, parse, render, transform


class LinkCollector(BaseVisitor[None]):
    def __init__(self) -> None:
        self.urls: list[str] = []

    def visit_link(self, node: Link) -> None:
        self.urls.append(node.url)


def proxy_links(node: Node) -> Node:
    """Route every link through a redirect page."""
    if isinstance(node, Link):
        return dataclasses.replace(node, url=f"/out?to={node.url}")
    return node


doc = parse("Read [the guide](https://a.example) and **[the FAQ](https://b.example)**")

collector = LinkCollector()
collector.visit(doc)
print("Links:", collector.urls)

print(render(transform(doc, proxy_links)))
