"""Table buffering for the chatmark block parser.

Pipe tables arrive one line at a time, so the block parser buffers table
lines and builds the Table node when the table ends (the flush).

Flush policy:
- ``buffer[0]`` is the header, ``buffer[1]`` the separator (skipped without
  inspection), ``buffer[2:]`` the data rows.
- With fewer than two buffered lines there is no table. Each buffered line
  is emitted as its own Paragraph instead of being dropped.
- Cells are split on ``|``, stripped, and empty cells removed. Every row
  keeps its own cell count; rows are never padded or truncated to the
  header width.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from chatmark.location import SourceLocation
from chatmark.nodes import Paragraph, Table, TableCell, TableRow
from chatmark.utils.logger import get_logger

if TYPE_CHECKING:
    from chatmark.parsing.blocks import ParserState
    from chatmark.parsing.inline import InlineTokenizer

logger = get_logger(__name__)

SEPARATOR_PATTERN = re.compile(r"^\|?[\s\-:|]+\|?$")


def is_separator(line: str) -> bool:
    """Whether a stripped line looks like a table separator (``|---|:-:|``)."""
    return SEPARATOR_PATTERN.match(line) is not None


class TableParsingMixin:
    """Mixin for pipe-table buffering and flushing.

    Required Host Attributes:
        - _tokenizer: InlineTokenizer

    """

    _tokenizer: InlineTokenizer

    def _flush_table(self, state: ParserState) -> None:
        """Turn the buffered table lines into blocks and clear the buffer."""
        buffered = state.table_buffer
        if not buffered:
            return
        state.table_buffer = []

        if len(buffered) < 2:
            logger.debug(
                "Table on line %d has no separator row; keeping it as text",
                buffered[0][0],
            )
            for lineno, line in buffered:
                location = SourceLocation(lineno)
                state.blocks.append(
                    Paragraph(self._tokenizer.tokenize(line, location), location=location)
                )
            return

        location = SourceLocation(buffered[0][0], buffered[-1][0])
        header_lineno, header = buffered[0]
        rows = tuple(
            TableRow(self._split_cells(line, SourceLocation(lineno)), location=SourceLocation(lineno))
            for lineno, line in buffered[2:]
        )
        state.blocks.append(
            Table(
                header_cells=self._split_cells(header, SourceLocation(header_lineno)),
                rows=rows,
                location=location,
            )
        )

    def _split_cells(self, line: str, location: SourceLocation) -> tuple[TableCell, ...]:
        """Split a table line into non-empty, stripped, tokenized cells."""
        return tuple(
            TableCell(self._tokenizer.tokenize(cell, location), location=location)
            for cell in (part.strip() for part in line.split("|"))
            if cell
        )
