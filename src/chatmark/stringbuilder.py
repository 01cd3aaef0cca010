"""StringBuilder for O(n) output accumulation.

The renderers append many small fragments per document. Collecting them in a
list and joining once keeps rendering linear in output size.

Thread Safety:
StringBuilder instances are local to each render call.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only string accumulator.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hello").append("</p>")
        >>> sb.build()
        '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append ``s`` (empty strings are skipped) and return self."""
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append ``s`` followed by a newline and return self."""
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
