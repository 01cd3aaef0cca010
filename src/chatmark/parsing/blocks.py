"""Line-oriented block parsing for chatmark.

Consumes one fence-free segment line by line. Each stripped line is checked
against the rules below in order; the first match wins.

1. Table row        contains ``|`` and is not a separator   (tables only)
2. Table separator  separator pattern, with a table open or a ``|``  (tables only)
3. Table end        any other line closes an open table first
4. Blank line       Spacer, unless nothing was emitted yet
5. Heading          ``#`` x 1..max_heading_level, whitespace, text
6. Horizontal rule  3+ of ``-``, ``*``, ``_``
7. Blockquote       leading ``>``
8. Unordered item   ``-``/``*``/``+`` marker
9. Ordered item     ``1.`` or ``1)`` marker, numeral kept as the label
10. Paragraph       everything else, one per line

Tables and lists span several lines and are buffered in ParserState until
they end. Every rule other than a list item of the same kind flushes the
open list; switching between ordered and unordered starts a new list, while
switching marker characters does not.

Thread Safety:
BlockParser holds only immutable configuration. All mutable state lives in
a ParserState created per parse() call.

"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from chatmark.config import FeatureConfig
from chatmark.location import SourceLocation
from chatmark.nodes import (
    Block,
    Blockquote,
    Heading,
    HorizontalRule,
    List,
    ListItem,
    Paragraph,
    Spacer,
)
from chatmark.parsing.inline import InlineTokenizer
from chatmark.parsing.table import TableParsingMixin, is_separator

# Compiled per supported maximum heading level
_HEADING_PATTERNS = {
    level: re.compile(rf"^(#{{1,{level}}})\s+(.+)$") for level in (4, 6)
}
_HORIZONTAL_RULE = re.compile(r"^([-*_]){3,}$")
_UNORDERED_ITEM = re.compile(r"^[-*+]\s+(.+)$")
_ORDERED_ITEM = re.compile(r"^([0-9]+)[.)]\s+(.+)$")


@dataclass(slots=True)
class ListBuffer:
    """Items of the list currently being collected.

    Each item is (lineno, label, text); label is None for unordered items.
    """

    ordered: bool
    items: list[tuple[int, str | None, str]] = field(default_factory=list)


@dataclass(slots=True)
class ParserState:
    """Per-parse mutable state.

    Created fresh for each BlockParser.parse() call and discarded afterwards.
    """

    blocks: list[Block] = field(default_factory=list)
    table_buffer: list[tuple[int, str]] = field(default_factory=list)
    list_buffer: ListBuffer | None = None


class BlockParser(TableParsingMixin):
    """Parse one plain-text segment into block nodes.

    Usage:
        >>> from chatmark.config import CHAT_PRESET
        >>> BlockParser(CHAT_PRESET).parse("# Title\\n- a\\n- b")
        (Heading(level=1, ...), List(ordered=False, items=(...)))

    """

    __slots__ = ("_config", "_tokenizer", "_heading_pattern")

    def __init__(self, config: FeatureConfig) -> None:
        self._config = config
        self._tokenizer = InlineTokenizer(links=config.supports_links)
        self._heading_pattern = _HEADING_PATTERNS[config.max_heading_level]

    def parse(self, text: str, *, lineno: int = 1) -> tuple[Block, ...]:
        """Parse a segment.

        Args:
            text: Segment text containing no code fences
            lineno: Source line number of the segment's first line

        Returns:
            Tuple of block nodes in source order
        """
        state = ParserState()
        for offset, line in enumerate(text.split("\n")):
            self._parse_line(line.strip(), lineno + offset, state)

        self._flush_table(state)
        self._flush_list(state)
        return tuple(state.blocks)

    def _parse_line(self, line: str, lineno: int, state: ParserState) -> None:
        """Classify one stripped line and update state."""
        location = SourceLocation(lineno)

        if self._config.supports_tables:
            separator = is_separator(line)
            if "|" in line and not separator:
                self._flush_list(state)
                state.table_buffer.append((lineno, line))
                return
            # A bare "---" only counts as a separator inside a table
            if separator and (state.table_buffer or "|" in line):
                self._flush_list(state)
                state.table_buffer.append((lineno, line))
                return
            # Any other line ends an open table
            if state.table_buffer:
                self._flush_table(state)

        if not line:
            self._flush_list(state)
            if state.blocks:
                state.blocks.append(Spacer(location=location))
            return

        tokenize = self._tokenizer.tokenize

        if heading := self._heading_pattern.match(line):
            self._flush_list(state)
            level = len(heading.group(1))
            state.blocks.append(
                Heading(
                    level,  # type: ignore[arg-type]
                    tokenize(heading.group(2), location),
                    "diamond" if self._config.decorates(level) else None,
                    location=location,
                )
            )
            return

        if _HORIZONTAL_RULE.match(line):
            self._flush_list(state)
            state.blocks.append(HorizontalRule(location=location))
            return

        if line.startswith(">"):
            self._flush_list(state)
            state.blocks.append(Blockquote(tokenize(line[1:].strip(), location), location=location))
            return

        if item := _UNORDERED_ITEM.match(line):
            self._append_list_item(state, lineno, None, item.group(1), ordered=False)
            return

        if item := _ORDERED_ITEM.match(line):
            self._append_list_item(state, lineno, item.group(1), item.group(2), ordered=True)
            return

        self._flush_list(state)
        state.blocks.append(Paragraph(tokenize(line, location), location=location))

    def _append_list_item(
        self,
        state: ParserState,
        lineno: int,
        label: str | None,
        text: str,
        *,
        ordered: bool,
    ) -> None:
        """Add an item, starting a new list when the list kind changes."""
        if state.list_buffer is None or state.list_buffer.ordered != ordered:
            self._flush_list(state)
            state.list_buffer = ListBuffer(ordered=ordered)
        state.list_buffer.items.append((lineno, label, text))

    def _flush_list(self, state: ParserState) -> None:
        """Emit the buffered list, if any, as one List node."""
        buffered = state.list_buffer
        if buffered is None:
            return
        state.list_buffer = None

        items = []
        for lineno, label, text in buffered.items:
            location = SourceLocation(lineno)
            items.append(ListItem(self._tokenizer.tokenize(text, location), label, location=location))

        location = SourceLocation(buffered.items[0][0], buffered.items[-1][0])
        state.blocks.append(List(buffered.ordered, tuple(items), location=location))
