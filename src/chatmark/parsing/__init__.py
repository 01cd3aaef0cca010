"""Block and inline parsing for chatmark.

Operates on fence-free plain-text segments produced by chatmark.fences.

Components:
- BlockParser: line-oriented block classification with list/table buffering
- TableParsingMixin: pipe-table buffering and flush policy
- InlineTokenizer: single-pass regex scan for code/bold/italic/link

"""

from chatmark.parsing.blocks import BlockParser, ParserState
from chatmark.parsing.inline import InlineTokenizer, tokenize
from chatmark.parsing.table import TableParsingMixin

__all__ = [
    "BlockParser",
    "InlineTokenizer",
    "ParserState",
    "TableParsingMixin",
    "tokenize",
]
