"""Typed document nodes for chatmark.

All nodes are frozen dataclasses with slots:
- Immutability: a Document is never mutated after parse() returns
- Pattern matching: renderers dispatch with ``match`` on the node class
- Structural equality: two parses of the same text compare equal

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Heading
│   ├── Paragraph
│   ├── CodeBlock
│   ├── List (of ListItem)
│   ├── Table (of TableCell / TableRow)
│   ├── Blockquote
│   ├── HorizontalRule
│   └── Spacer
└── Inline (inline elements)
    ├── Text
    ├── Bold
    ├── Italic
    ├── Code
    └── Link

Every node has a keyword-only ``location``. It is excluded from equality and
repr so that nodes compare by structure alone.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from chatmark.location import SourceLocation

_UNKNOWN = SourceLocation.unknown()


# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all document nodes."""

    location: SourceLocation = field(default=_UNKNOWN, compare=False, repr=False, kw_only=True)


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Literal text."""

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markdown: **text**

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markdown: *text* or _text_

    """

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Code(Node):
    """Inline code span. Its content is never tokenized further.

    Markdown: `code`

    """

    code: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. Only produced when the config supports links.

    Markdown: [text](url)

    """

    children: tuple[Inline, ...]
    url: str


# PEP 695 type alias for inline elements
type Inline = Text | Bold | Italic | Code | Link


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading(Node):
    """ATX heading.

    ``decoration`` is "diamond" for level 1-2 headings when the config asks
    for diamond decoration, else None.

    """

    level: Literal[1, 2, 3, 4, 5, 6]
    content: tuple[Inline, ...]
    decoration: Literal["diamond"] | None = None


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """One non-empty source line.

    Lines are never merged, so hard line breaks in chat text survive.

    """

    content: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Fenced code block with verbatim content.

    ``closed`` is False when the source ended before the closing fence.

    """

    language: str
    content: str
    closed: bool = True


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    ``label`` is the numeral of an ordered item exactly as written ("3"),
    None for unordered items.

    """

    content: tuple[Inline, ...]
    label: str | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """A contiguous run of list lines of the same kind."""

    ordered: bool
    items: tuple[ListItem, ...]


@dataclass(frozen=True, slots=True)
class TableCell(Node):
    """Table cell (header or data)."""

    content: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class TableRow(Node):
    """Table data row. Its cell count is independent of the header's."""

    cells: tuple[TableCell, ...]


@dataclass(frozen=True, slots=True)
class Table(Node):
    """Pipe table. Only produced when the config supports tables.

    Markdown:
        | A | B |
        |---|---|
        | 1 | 2 |

    """

    header_cells: tuple[TableCell, ...]
    rows: tuple[TableRow, ...]


@dataclass(frozen=True, slots=True)
class Blockquote(Node):
    """A single ``>``-prefixed line."""

    content: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    Markdown: --- or *** or ___

    """


@dataclass(frozen=True, slots=True)
class Spacer(Node):
    """Vertical space for a blank line that follows earlier content."""


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the ordered top-level blocks."""

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = (
    Heading
    | Paragraph
    | CodeBlock
    | List
    | Table
    | Blockquote
    | HorizontalRule
    | Spacer
)
