"""Document assembly for chatmark.

Runs the pipeline for one source text:

    raw text -> split_fences -> Fence     -> CodeBlock
                             -> PlainText -> BlockParser -> InlineTokenizer

and concatenates the results in source order. No state crosses a fence: an
open list or table before a fence is flushed with its own segment.

Configuration is read from the ContextVar in chatmark.config; parse() in the
package root sets it for the duration of a call.

Thread Safety:
Parser instances are single-use and not shared. The produced blocks are
immutable. An optional segment cache can be shared between parsers of the
same config on one thread (see chatmark.reveal).

"""

from __future__ import annotations

from chatmark.config import FeatureConfig, get_feature_config
from chatmark.fences import Fence, PlainText, Segment, split_fences
from chatmark.location import SourceLocation
from chatmark.nodes import Block, CodeBlock, Document, Paragraph, Text
from chatmark.parsing.blocks import BlockParser
from chatmark.utils.logger import get_logger

logger = get_logger(__name__)

type SegmentCache = dict[Segment, tuple[Block, ...]]


class Parser:
    """Assemble a Document from fence segments.

    Usage:
        >>> parser = Parser("Hello\\n```py\\nx = 1\\n```")
        >>> parser.parse()
        (Paragraph(content=(Text(content='Hello'),)), CodeBlock(language='py', content='x = 1', closed=True))

    """

    __slots__ = ("_source", "_segment_cache")

    def __init__(self, source: str, *, segment_cache: SegmentCache | None = None) -> None:
        """Initialize parser.

        Args:
            source: Raw text to parse
            segment_cache: Optional memo of segment -> blocks. Only valid for
                a single config; reuse it across parses of related texts.
                After each parse it holds only that parse's segments.
        """
        self._source = source
        self._segment_cache = segment_cache

    @property
    def _config(self) -> FeatureConfig:
        """Active feature configuration (ContextVar)."""
        return get_feature_config()

    def parse(self) -> tuple[Block, ...]:
        """Parse the source into top-level blocks."""
        block_parser = BlockParser(self._config)
        try:
            segments = split_fences(self._source)
        except Exception:
            logger.warning("Fence splitting failed; parsing source as plain text", exc_info=True)
            segments = [PlainText(self._source)]

        blocks: list[Block] = []
        for segment in segments:
            blocks.extend(self._parse_segment(segment, block_parser))

        if self._segment_cache is not None:
            # Drop segments this parse no longer produced
            live = set(segments)
            for stale in self._segment_cache.keys() - live:
                del self._segment_cache[stale]
        return tuple(blocks)

    def parse_document(self) -> Document:
        """Parse and wrap the blocks in a Document."""
        end_lineno = self._source.count("\n") + 1
        return Document(self.parse(), location=SourceLocation(1, end_lineno))

    def _parse_segment(self, segment: Segment, block_parser: BlockParser) -> tuple[Block, ...]:
        cache = self._segment_cache
        if cache is not None and (cached := cache.get(segment)) is not None:
            return cached

        match segment:
            case Fence():
                blocks: tuple[Block, ...] = (
                    CodeBlock(
                        segment.language,
                        segment.content,
                        segment.closed,
                        location=SourceLocation(segment.lineno, segment.end_lineno),
                    ),
                )
            case PlainText():
                blocks = self._parse_plain(segment, block_parser)

        if cache is not None:
            cache[segment] = blocks
        return blocks

    def _parse_plain(self, segment: PlainText, block_parser: BlockParser) -> tuple[Block, ...]:
        """Run the block parser, degrading to one paragraph per line on failure."""
        try:
            return block_parser.parse(segment.text, lineno=segment.lineno)
        except Exception:
            logger.warning(
                "Block parsing failed for segment at line %d; emitting plain paragraphs",
                segment.lineno,
                exc_info=True,
            )

        fallback: list[Block] = []
        for offset, line in enumerate(segment.text.split("\n")):
            stripped = line.strip()
            if stripped:
                location = SourceLocation(segment.lineno + offset)
                fallback.append(Paragraph((Text(stripped, location=location),), location=location))
        return tuple(fallback)
