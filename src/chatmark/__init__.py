"""
chatmark: constrained Markdown for chat and AI-analysis text.

A small, predictable Markdown dialect for rendering chat messages and
AI-generated analysis. One engine, parameterized by a FeatureConfig preset,
turns any string into an immutable, renderer-agnostic Document. Parsing is
total: every input produces a Document and nothing raises.

Quick Start:
    >>> from chatmark import parse, render
    >>> doc = parse("## Summary\\n- **fast**\\n- `typed`")
    >>> html = render(doc)

    >>> # AI-analysis call site: no tables or links, 4 heading levels, ◆ markers
    >>> from chatmark import ANALYSIS_PRESET
    >>> doc = parse("# Verdict\\nLooks *good*", ANALYSIS_PRESET)
    >>> doc.children[0].decoration
    'diamond'

    >>> # Or use the high-level Markdown class
    >>> from chatmark import Markdown
    >>> md = Markdown.analysis()
    >>> html = md("# Verdict")

Installation:
    pip install chatmark              # Core parser (zero deps)
    pip install chatmark[syntax]      # + Syntax highlighting via Rosettes
"""

from collections.abc import Iterable

from chatmark.cache import DictParseCache, ParseCache, hash_config, hash_content
from chatmark.config import (
    ANALYSIS_PRESET,
    CHAT_PRESET,
    PRESETS,
    FeatureConfig,
    feature_config_context,
    get_feature_config,
    get_preset,
    reset_feature_config,
    set_feature_config,
)
from chatmark.errors import ChatmarkError, ConfigError, RenderError
from chatmark.location import SourceLocation
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
    ListItem,
    Node,
    Paragraph,
    Spacer,
    Table,
    TableCell,
    TableRow,
    Text,
)
from chatmark.parser import Parser
from chatmark.renderers.html import HtmlRenderer
from chatmark.renderers.protocol import BlockRenderer, render_blocks
from chatmark.renderers.text import TextRenderer, render_text
from chatmark.reveal import reveal
from chatmark.serialization import from_dict, from_json, to_dict, to_json
from chatmark.visitor import BaseVisitor, transform

__version__ = "0.1.0"


def _parse_with_cache(source: str, config: FeatureConfig, cache: ParseCache | None) -> Document:
    """Parse under an already-active config, consulting ``cache`` if given."""
    if cache is None:
        return Parser(source).parse_document()

    content_hash = hash_content(source)
    config_hash = hash_config(config)
    cached = cache.get(content_hash, config_hash)
    if cached is not None:
        return cached

    doc = Parser(source).parse_document()
    cache.put(content_hash, config_hash, doc)
    return doc


def parse(
    source: str,
    config: FeatureConfig = CHAT_PRESET,
    *,
    cache: ParseCache | None = None,
) -> Document:
    """Parse text into a Document.

    Never raises for any string: unrecognized syntax stays literal text.

    Args:
        source: Raw message or analysis text
        config: Feature configuration (defaults to the chat preset)
        cache: Optional content-addressed parse cache. When provided, checks
            cache before parsing; on miss, parses and stores result. For
            parallel parsing, use a thread-safe cache implementation.

    Returns:
        Document root node

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0]
        Heading(level=1, ...)

        >>> from chatmark import DictParseCache
        >>> cache = DictParseCache()
        >>> doc = parse("# Hello", cache=cache)
    """
    with feature_config_context(config):
        return _parse_with_cache(source, config, cache)


def render(doc: Document, *, highlight: bool = False) -> str:
    """Render a Document to HTML.

    Args:
        doc: Document to render
        highlight: Enable syntax highlighting for code blocks

    Returns:
        HTML string

    Example:
        >>> render(parse("Hello *there*"))
        '<p>Hello <em>there</em></p>\\n'
    """
    return HtmlRenderer(highlight=highlight).render_document(doc)


class Markdown:
    """High-level processor bound to one FeatureConfig.

    Usage:
        >>> md = Markdown()
        >>> md("Hello **World**")
        '<p>Hello <strong>World</strong></p>\\n'

        >>> # Access the Document
        >>> doc = md.parse("# Heading")
        >>> doc.children[0].level
        1

        >>> # Analysis call site
        >>> md = Markdown.analysis()

    Thread Safety:
        Uses ContextVar for per-call configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config", "_highlight")

    def __init__(self, config: FeatureConfig = CHAT_PRESET, *, highlight: bool = False) -> None:
        """Initialize Markdown processor.

        Args:
            config: Feature configuration for every parse
            highlight: Enable syntax highlighting for code blocks
        """
        self._config = config
        self._highlight = highlight

    @classmethod
    def chat(cls, *, highlight: bool = False) -> "Markdown":
        """Processor for chat messages."""
        return cls(CHAT_PRESET, highlight=highlight)

    @classmethod
    def analysis(cls, *, highlight: bool = False) -> "Markdown":
        """Processor for AI-analysis text."""
        return cls(ANALYSIS_PRESET, highlight=highlight)

    @property
    def config(self) -> FeatureConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render to HTML in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str, *, cache: ParseCache | None = None) -> Document:
        """Parse text into a Document.

        Thread Safety:
            Sets config via ContextVar (thread-local). Safe for concurrent use.
        """
        with feature_config_context(self._config):
            return _parse_with_cache(source, self._config, cache)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        cache: ParseCache | None = None,
    ) -> list[Document]:
        """Parse multiple texts (a conversation history, say).

        Sets config once, parses all, resets once. When cache is provided,
        duplicate sources within the batch hit cache.

        Example:
            >>> md = Markdown()
            >>> docs = md.parse_many(["# Doc 1", "# Doc 2", "# Doc 3"])
        """
        with feature_config_context(self._config):
            return [_parse_with_cache(source, self._config, cache) for source in sources]

    def render(self, doc: Document) -> str:
        """Render a Document to HTML."""
        return HtmlRenderer(highlight=self._highlight).render_document(doc)


__all__ = [
    # Presets and configuration
    "ANALYSIS_PRESET",
    "CHAT_PRESET",
    "PRESETS",
    "FeatureConfig",
    "feature_config_context",
    "get_feature_config",
    "get_preset",
    "reset_feature_config",
    "set_feature_config",
    # Nodes
    "Block",
    "Blockquote",
    "Bold",
    "Code",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "Inline",
    "Italic",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "SourceLocation",
    "Spacer",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    # Errors
    "ChatmarkError",
    "ConfigError",
    "RenderError",
    # Cache
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
    # Rendering
    "BlockRenderer",
    "HtmlRenderer",
    "TextRenderer",
    "render",
    "render_blocks",
    "render_text",
    # Serialization and traversal
    "BaseVisitor",
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    "transform",
    # Main API
    "Markdown",
    "Parser",
    "__version__",
    "parse",
    "reveal",
]
