"""Optional syntax highlighting for rendered code blocks.

When chatmark[syntax] is installed, Rosettes is used automatically. Any other
highlighter can be injected with set_highlighter().

Usage:
    from chatmark import Markdown
    md = Markdown(highlight=True)  # Rosettes if installed, escaped text otherwise

    from chatmark.highlighting import set_highlighter

    def my_highlighter(code: str, language: str) -> str:
        return f'<pre class="language-{language}"><code>{code}</code></pre>'

    set_highlighter(my_highlighter)

Thread Safety:
    The highlighter is process-global and set once at startup. Highlighters
    must be safe to call from concurrent render threads.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from chatmark.utils.logger import get_logger
from chatmark.utils.text import escape_html

logger = get_logger(__name__)


class Highlighter(Protocol):
    """Protocol for syntax highlighters.

    Highlighters take code and a language label and return HTML markup.
    """

    def highlight(self, code: str, language: str) -> str:
        """Highlight code with syntax colors.

        Contract:
            - MUST escape HTML entities in code
            - SHOULD fall back to plain text for unknown languages
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if highlighter supports the given language. MUST NOT raise."""
        ...


# Support for simple callable-based highlighters
SimpleHighlighter = Callable[[str, str], str]

_highlighter: Highlighter | SimpleHighlighter | None = None
_tried_rosettes: bool = False


def set_highlighter(highlighter: Highlighter | SimpleHighlighter | None) -> None:
    """Set the global syntax highlighter.

    Args:
        highlighter: A Highlighter protocol implementation, or a simple
            function that takes (code, language) and returns HTML.
            Pass None to clear the highlighter (Rosettes is not retried).
    """
    global _highlighter, _tried_rosettes
    _highlighter = highlighter
    _tried_rosettes = True


class RosettesHighlighter:
    """Rosettes-based syntax highlighter implementing Highlighter."""

    def __init__(self, rosettes_module) -> None:
        self._rosettes = rosettes_module

    def highlight(self, code: str, language: str) -> str:
        result: str = self._rosettes.highlight(code, language=language)
        return result

    def supports_language(self, language: str) -> bool:
        try:
            result: bool = self._rosettes.supports_language(language)
            return result
        except Exception:
            return False


def _try_import_rosettes() -> bool:
    """Try to import and configure the Rosettes highlighter."""
    global _highlighter, _tried_rosettes

    if _tried_rosettes:
        return _highlighter is not None

    _tried_rosettes = True

    try:
        import rosettes  # type: ignore[import-not-found]
    except ImportError:
        logger.debug("rosettes not installed; code blocks render unhighlighted")
        return False

    _highlighter = RosettesHighlighter(rosettes)
    return True


def highlight(code: str, language: str) -> str:
    """Highlight code using the configured highlighter.

    Falls back to an escaped plain code block if no highlighter is available.

    Returns:
        HTML markup (highlighted if available, plain otherwise)
    """
    if _highlighter is None:
        _try_import_rosettes()

    if _highlighter is not None:
        if hasattr(_highlighter, "highlight") and callable(_highlighter.highlight):
            return _highlighter.highlight(code, language)
        if callable(_highlighter):
            return _highlighter(code, language)

    return plain_code_block(code, language)


def plain_code_block(code: str, language: str) -> str:
    """Unhighlighted ``<pre><code>`` with the code escaped."""
    lang_class = f' class="language-{escape_html(language)}"' if language else ""
    return f"<pre><code{lang_class}>{escape_html(code)}</code></pre>"


def has_highlighter() -> bool:
    """Check if a syntax highlighter is available."""
    if _highlighter is not None:
        return True
    return _try_import_rosettes()
