"""Inline tokenization for chatmark.

Converts one run of text into a tree of inline nodes with a single
left-to-right regex scan. At any position the alternatives are tried in
priority order:

1. code span   `code`        (leaf, never re-tokenized; any matching
                              backtick run delimits it, so ```x``` is code)
2. bold        **text**
3. italic      *text* or _text_
4. link        [text](url)   (only when links are enabled)

The leftmost match wins; priority only breaks ties at the same position.
Text between matches becomes Text nodes. Bold and italic contents and link
text are tokenized recursively, which is how nesting such as
``**bold *italic* end**`` is produced.

Bold content may not contain ``*`` except as part of a complete
single-asterisk span. That keeps ``*a**b*`` from being read as nested
emphasis: whichever pattern matches first at the earliest position consumes
it, and anything left unmatched stays literal text.

Thread Safety:
InlineTokenizer holds only a compiled pattern. Safe to share across threads.

"""

from __future__ import annotations

import re

from chatmark.location import SourceLocation
from chatmark.nodes import Bold, Code, Inline, Italic, Link, Text

_CODE = r"(?<!`)(?P<ticks>`+)(?P<code>[^`](?:.*?[^`])??)(?P=ticks)(?!`)"
_BOLD = r"\*\*(?P<bold>(?:[^*]|\*[^*]+\*)+)\*\*"
_ITALIC = r"\*(?P<star>[^*]+)\*|_(?P<underscore>[^_]+)_"
_LINK = r"\[(?P<link_text>[^\]]+)\]\((?P<url>[^)]+)\)"

_INLINE_PATTERN = re.compile("|".join((_CODE, _BOLD, _ITALIC)))
_INLINE_LINK_PATTERN = re.compile("|".join((_CODE, _BOLD, _ITALIC, _LINK)))

_UNKNOWN = SourceLocation.unknown()


class InlineTokenizer:
    """Tokenize inline formatting into Text/Bold/Italic/Code/Link nodes.

    Usage:
        >>> InlineTokenizer(links=True).tokenize("see [docs](https://x.io)")
        (Text(content='see '), Link(children=(Text(content='docs'),), url='https://x.io'))

    """

    __slots__ = ("_pattern", "_links")

    def __init__(self, *, links: bool = False) -> None:
        """Initialize tokenizer.

        Args:
            links: Recognize [text](url) links. Without it they stay literal.
        """
        self._links = links
        self._pattern = _INLINE_LINK_PATTERN if links else _INLINE_PATTERN

    @property
    def links(self) -> bool:
        return self._links

    def tokenize(self, text: str, location: SourceLocation = _UNKNOWN) -> tuple[Inline, ...]:
        """Tokenize ``text`` into inline nodes.

        Args:
            text: One line (or fragment of a line) of source
            location: Location attached to every produced node

        Returns:
            Tuple of inline nodes; empty for empty text.
        """
        if not text:
            return ()

        nodes: list[Inline] = []
        last = 0
        for match in self._pattern.finditer(text):
            start = match.start()
            if start > last:
                nodes.append(Text(text[last:start], location=location))
            nodes.append(self._build(match, location))
            last = match.end()

        if last < len(text):
            nodes.append(Text(text[last:], location=location))
        return tuple(nodes)

    def _build(self, match: re.Match[str], location: SourceLocation) -> Inline:
        """Build the node for one matched alternative."""
        if (code := match.group("code")) is not None:
            return Code(code, location=location)
        if (bold := match.group("bold")) is not None:
            return Bold(self.tokenize(bold, location), location=location)
        if (star := match.group("star")) is not None:
            return Italic(self.tokenize(star, location), location=location)
        if (underscore := match.group("underscore")) is not None:
            return Italic(self.tokenize(underscore, location), location=location)
        return Link(
            self.tokenize(match.group("link_text"), location),
            match.group("url"),
            location=location,
        )


def tokenize(text: str, *, links: bool = False) -> tuple[Inline, ...]:
    """Tokenize inline formatting with a throwaway tokenizer.

    Example:
        >>> tokenize("**bold *italic* end**")
        (Bold(children=(Text(content='bold '), Italic(children=(Text(content='italic'),)), Text(content=' end'))),)

    """
    return InlineTokenizer(links=links).tokenize(text)
