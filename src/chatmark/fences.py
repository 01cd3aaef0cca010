"""Fence splitting: the first stage of the parse pipeline.

Splits raw text into alternating plain-text and fenced-code segments before
any block parsing runs, so nothing inside a fence is ever interpreted.

Fence rules:
- An opening fence is a line whose stripped text starts with 3+ backticks
  and whose remainder contains no backtick. The remainder is the info
  string; its first word is the language.
- A fence closes at the first run of backticks at least as long as the
  opening run, on any later line. Text before the run on that line is the
  last content line; text after it is plain text again.
- A fence with no closing run runs to the end of the input and is marked
  ``closed=False``. A final newline does not add an empty content line.

Example:
    >>> split_fences("Intro\\n```py\\nprint(1)\\n```\\nOutro")
    [PlainText(text='Intro', lineno=1),
     Fence(language='py', content='print(1)', lineno=2, end_lineno=4, closed=True),
     PlainText(text='Outro', lineno=5)]

Thread Safety:
    split_fences is a pure function. Segments are frozen.

"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chatmark.utils.logger import get_logger

logger = get_logger(__name__)

_FENCE_OPEN = re.compile(r"^\s*(`{3,})([^`]*)$")
_BACKTICK_RUN = re.compile(r"`{3,}")


@dataclass(frozen=True, slots=True)
class PlainText:
    """A run of lines outside any fence, joined with newlines."""

    text: str
    lineno: int = 1


@dataclass(frozen=True, slots=True)
class Fence:
    """A fenced code region.

    Attributes:
        language: First word of the info string ("" when absent)
        content: Lines between the fences, verbatim
        lineno: Line of the opening fence
        end_lineno: Line of the closing fence, or the last line of input
        closed: False when the input ended before a closing fence
    """

    language: str
    content: str
    lineno: int = 1
    end_lineno: int = 1
    closed: bool = True


type Segment = PlainText | Fence


def split_fences(source: str) -> list[Segment]:
    """Split source into PlainText and Fence segments, in order.

    Never raises. An empty source yields a single empty PlainText.
    """
    lines = source.split("\n")
    segments: list[Segment] = []
    plain: list[str] = []
    plain_start = 1

    i = 0
    total = len(lines)
    while i < total:
        opening = _FENCE_OPEN.match(lines[i])
        if opening is None:
            if not plain:
                plain_start = i + 1
            plain.append(lines[i])
            i += 1
            continue

        if plain:
            segments.append(PlainText("\n".join(plain), plain_start))
            plain = []

        fence, i, rest = _read_fence(lines, i, len(opening.group(1)), opening.group(2))
        segments.append(fence)
        if rest is not None:
            # Text after a closing run shares the closing line
            plain = [rest]
            plain_start = i

    if plain or not segments:
        segments.append(PlainText("\n".join(plain), plain_start))
    return segments


def _read_fence(
    lines: list[str], start: int, width: int, info: str
) -> tuple[Fence, int, str | None]:
    """Collect the fence opened at ``lines[start]``.

    Returns the Fence, the index of the first line after it, and the text
    following the closing run on its line (None when there is none).
    """
    info = info.strip()
    language = info.split()[0] if info else ""

    end = start + 1
    while end < len(lines):
        line = lines[end]
        closing = next((m for m in _BACKTICK_RUN.finditer(line) if len(m.group()) >= width), None)
        if closing is not None:
            body = lines[start + 1 : end]
            before, after = line[: closing.start()], line[closing.end() :]
            if before.strip():
                body.append(before)
            fence = Fence(
                language=language,
                content="\n".join(body),
                lineno=start + 1,
                end_lineno=end + 1,
            )
            return fence, end + 1, after if after.strip() else None
        end += 1

    body = lines[start + 1 :]
    if body and body[-1] == "":
        body.pop()
    logger.debug("Unterminated code fence opened on line %d; extending to end of input", start + 1)
    fence = Fence(
        language=language,
        content="\n".join(body),
        lineno=start + 1,
        end_lineno=start + 1 + len(body),
        closed=False,
    )
    return fence, len(lines), None
