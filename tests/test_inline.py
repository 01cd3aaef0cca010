"""Tests for inline tokenization."""

import pytest

from chatmark import Bold, Code, Italic, Link, Text
from chatmark.parsing.inline import InlineTokenizer, tokenize


class TestBasicTokens:
    """Each inline construct on its own."""

    def test_empty(self) -> None:
        assert tokenize("") == ()

    def test_plain_text(self) -> None:
        assert tokenize("just words") == (Text("just words"),)

    def test_code_span(self) -> None:
        assert tokenize("run `ls -la` now") == (Text("run "), Code("ls -la"), Text(" now"))

    def test_adjacent_code_spans(self) -> None:
        assert tokenize("`a` and `b`") == (Code("a"), Text(" and "), Code("b"))

    def test_triple_backtick_span_on_one_line(self) -> None:
        assert tokenize("see ```js x``` here") == (Text("see "), Code("js x"), Text(" here"))

    def test_longer_run_can_hold_a_backtick(self) -> None:
        assert tokenize("``a`b``") == (Code("a`b"),)

    def test_bold(self) -> None:
        assert tokenize("**hi**") == (Bold((Text("hi"),)),)

    def test_italic_star(self) -> None:
        assert tokenize("*hi*") == (Italic((Text("hi"),)),)

    def test_italic_underscore(self) -> None:
        assert tokenize("_hi_") == (Italic((Text("hi"),)),)

    def test_multiple_spans(self) -> None:
        assert tokenize("**a** and *b*") == (
            Bold((Text("a"),)),
            Text(" and "),
            Italic((Text("b"),)),
        )


class TestNesting:
    """Recursive tokenization of emphasis content."""

    def test_italic_inside_bold(self) -> None:
        assert tokenize("**bold *italic* end**") == (
            Bold((Text("bold "), Italic((Text("italic"),)), Text(" end"))),
        )

    def test_code_inside_bold(self) -> None:
        assert tokenize("**use `x`**") == (Bold((Text("use "), Code("x"))),)

    def test_bold_inside_underscore_italic(self) -> None:
        assert tokenize("_a **b**_") == (Italic((Text("a "), Bold((Text("b"),)))),)

    def test_code_content_is_not_tokenized(self) -> None:
        assert tokenize("`**not bold**`") == (Code("**not bold**"),)


class TestMalformedDelimiters:
    """Unbalanced or ambiguous delimiters stay literal."""

    @pytest.mark.parametrize(
        "text",
        ["**unclosed", "*unclosed", "`unclosed", "_unclosed", "a * b", "**", "``"],
    )
    def test_unbalanced_is_literal(self, text: str) -> None:
        assert tokenize(text) == (Text(text),)

    def test_star_run_is_not_nested(self) -> None:
        # The earliest single-asterisk span wins, then scanning resumes
        assert tokenize("*a**b*") == (Italic((Text("a"),)), Italic((Text("b"),)))

    def test_visible_text_is_preserved(self) -> None:
        tokens = tokenize("x **y _z_** `w`")
        assert "".join(_flatten(tokens)) == "x y z w"

    def test_leftmost_match_wins(self) -> None:
        assert tokenize("*a `b* c`") == (Italic((Text("a `b"),)), Text(" c`"))

    def test_empty_emphasis_is_literal(self) -> None:
        assert tokenize("****") == (Text("****"),)


class TestLinks:
    """Links are only recognized when enabled."""

    def test_link_disabled_by_default(self) -> None:
        assert tokenize("[docs](https://x.io)") == (Text("[docs](https://x.io)"),)

    def test_link_enabled(self) -> None:
        tokens = tokenize("see [docs](https://x.io)", links=True)
        assert tokens == (Text("see "), Link((Text("docs"),), "https://x.io"))

    def test_link_text_is_tokenized(self) -> None:
        tokens = tokenize("[**docs**](u)", links=True)
        assert tokens == (Link((Bold((Text("docs"),)),), "u"),)

    def test_bold_outranks_link_at_same_position(self) -> None:
        tokens = tokenize("**[a](u)**", links=True)
        assert tokens == (Bold((Link((Text("a"),), "u"),)),)

    def test_tokenizer_reports_links_flag(self) -> None:
        assert InlineTokenizer(links=True).links is True
        assert InlineTokenizer().links is False


def _flatten(tokens: tuple) -> list[str]:
    parts: list[str] = []
    for token in tokens:
        match token:
            case Text(content=content) | Code(code=content):
                parts.append(content)
            case Bold(children=children) | Italic(children=children) | Link(children=children):
                parts.extend(_flatten(children))
    return parts
