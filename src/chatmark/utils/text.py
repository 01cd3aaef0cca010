"""Text helpers shared by the renderers.

Example:
    >>> from chatmark.utils.text import escape_html
    >>> escape_html("<b>")
    '&lt;b&gt;'
"""

from __future__ import annotations

import html as html_module
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chatmark.nodes import Inline


def escape_html(text: str) -> str:
    """Escape HTML special characters for element content and attributes.

    Escapes &, <, >, double and single quotes.

    Examples:
        >>> escape_html("<script>alert('x')</script>")
        '&lt;script&gt;alert(&#x27;x&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=True)


def plain_text(inlines: Iterable[Inline]) -> str:
    """Flatten inline nodes to their visible text.

    Link URLs are dropped; only the link text is kept.
    """
    from chatmark.nodes import Bold, Code, Italic, Link, Text

    parts: list[str] = []
    for inline in inlines:
        match inline:
            case Text():
                parts.append(inline.content)
            case Code():
                parts.append(inline.code)
            case Bold() | Italic() | Link():
                parts.append(plain_text(inline.children))
    return "".join(parts)
