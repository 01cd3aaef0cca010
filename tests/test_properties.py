"""Property-based tests for chatmark using Hypothesis.

These tests verify invariants that hold for any input:
1. parse() never raises, under every preset
2. Text with no special syntax becomes one Paragraph per line plus Spacers
3. Re-parsing is deterministic
4. Fenced content is preserved byte for byte
5. Rendering any parsed document never raises
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from chatmark import (
    ANALYSIS_PRESET,
    CHAT_PRESET,
    CodeBlock,
    Document,
    FeatureConfig,
    Paragraph,
    Spacer,
    Text,
    from_json,
    parse,
    render,
    render_text,
    to_json,
)

presets = st.sampled_from([CHAT_PRESET, ANALYSIS_PRESET, FeatureConfig()])

# Characters that carry meaning somewhere in the grammar
markdown_alphabet = st.sampled_from(list("ab1 .)#*_`[]()|->:+\n\t"))
markdown_text = st.one_of(
    st.text(max_size=200),
    st.text(markdown_alphabet, max_size=200),
)

# Letters and spaces only: no rule can fire
plain_lines = st.lists(
    st.text(st.sampled_from(list("abcxyz ")), max_size=20),
    max_size=15,
)


class TestTotality:
    """parse() is total over all strings."""

    @given(source=markdown_text, config=presets)
    @settings(max_examples=300)
    def test_never_raises(self, source: str, config: FeatureConfig) -> None:
        doc = parse(source, config)
        assert isinstance(doc, Document)

    @given(source=markdown_text, config=presets)
    @settings(max_examples=100)
    def test_renderers_never_raise(self, source: str, config: FeatureConfig) -> None:
        doc = parse(source, config)
        assert isinstance(render(doc), str)
        assert isinstance(render_text(doc), str)


class TestPlainTextShape:
    """No special syntax: one Paragraph per non-empty line, Spacers for later blanks."""

    @given(lines=plain_lines, config=presets)
    @settings(max_examples=200)
    def test_paragraph_per_line(self, lines: list[str], config: FeatureConfig) -> None:
        expected: list[Paragraph | Spacer] = []
        for line in lines:
            stripped = line.strip()
            if stripped:
                expected.append(Paragraph((Text(stripped),)))
            elif expected:
                expected.append(Spacer())

        assert parse("\n".join(lines), config).children == tuple(expected)


class TestDeterminism:
    """No hidden state between calls."""

    @given(source=markdown_text, config=presets)
    @settings(max_examples=150)
    def test_reparse_is_equal(self, source: str, config: FeatureConfig) -> None:
        assert parse(source, config) == parse(source, config)

    @given(source=markdown_text)
    @settings(max_examples=100)
    def test_json_round_trip(self, source: str) -> None:
        doc = parse(source)
        assert from_json(to_json(doc)) == doc


class TestFencePreservation:
    """Code between fences is never interpreted."""

    @given(
        body=st.text(st.sampled_from(list("ab#*_|-> \n")), max_size=80),
        language=st.sampled_from(["", "py", "js"]),
    )
    @settings(max_examples=150)
    def test_content_round_trip(self, body: str, language: str) -> None:
        doc = parse(f"```{language}\n{body}\n```")
        assert doc.children == (CodeBlock(language, body),)
