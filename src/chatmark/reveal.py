"""Progressive reveal: re-parse a text as it appears character by character.

Typewriter-style UIs show a reply growing one character at a time and
re-render the whole message at every step. ``reveal`` produces the Document
for each revealed prefix.

Cost:
    Every prefix is a full re-parse, so revealing N characters costs O(N²)
    overall. Segments that already appeared unchanged in an earlier prefix
    (everything before the last fence boundary) are memoized, which removes
    the repeated work for text above a code block but not for the segment
    still growing.

Correctness:
    Each yielded Document equals ``parse(prefix, config)``. The memo is keyed
    on segment text and starting line, so a segment is only reused when it is
    identical in both. After each frame the memo holds only that
    frame's segments, so memory stays proportional to one prefix.

Thread Safety:
    The memo is local to one ``reveal`` generator. Do not share a generator
    across threads.

"""

from collections.abc import Iterator

from chatmark.config import CHAT_PRESET, FeatureConfig, feature_config_context
from chatmark.nodes import Document
from chatmark.parser import Parser, SegmentCache


def reveal(
    source: str,
    config: FeatureConfig = CHAT_PRESET,
    *,
    step: int = 1,
) -> Iterator[Document]:
    """Yield the Document of each revealed prefix of ``source``.

    Prefix lengths are ``step``, ``2 * step``, ... and always end with the
    full text. An empty source yields one empty Document.

    Args:
        source: Complete text to be revealed
        config: Feature configuration for every prefix
        step: Characters revealed per frame (must be positive)

    Raises:
        ValueError: If step is not positive.

    Example:
        >>> frames = list(reveal("**hi**", step=2))
        >>> len(frames)
        3

    """
    if step <= 0:
        msg = f"step must be positive, got {step}"
        raise ValueError(msg)

    segment_cache: SegmentCache = {}
    for end in _prefix_ends(len(source), step):
        # Config is scoped per frame so it never leaks to the consumer between yields
        with feature_config_context(config):
            doc = Parser(source[:end], segment_cache=segment_cache).parse_document()
        yield doc


def _prefix_ends(length: int, step: int) -> list[int]:
    """Prefix lengths for a reveal of ``length`` characters."""
    ends = list(range(step, length, step))
    ends.append(length)
    return ends
