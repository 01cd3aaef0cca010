"""Source location tracking for chatmark nodes.

Every node records the span of source lines it was built from. Locations are
informational: they never take part in node equality.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Line span of a node in the original text.

    All positions are 1-indexed. ``end_lineno`` is None for single-line nodes.

    Examples:
        >>> SourceLocation(lineno=3)
        SourceLocation(lineno=3, end_lineno=None)
        >>> str(SourceLocation(2, 5))
        '2-5'

    """

    lineno: int
    end_lineno: int | None = None

    def __str__(self) -> str:
        if self.end_lineno is not None and self.end_lineno != self.lineno:
            return f"{self.lineno}-{self.end_lineno}"
        return str(self.lineno)

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to ``end``."""
        return SourceLocation(
            lineno=self.lineno,
            end_lineno=end.end_lineno or end.lineno,
        )

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Placeholder location for nodes built outside the parser."""
        return cls(lineno=0)
