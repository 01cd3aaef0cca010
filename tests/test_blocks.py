"""Tests for block classification: headings, rules, quotes, spacers, paragraphs."""

import pytest

from chatmark import (
    ANALYSIS_PRESET,
    CHAT_PRESET,
    Blockquote,
    Bold,
    FeatureConfig,
    Heading,
    HorizontalRule,
    Paragraph,
    Spacer,
    Text,
    parse,
)
from chatmark.parsing.blocks import BlockParser


def para(text: str) -> Paragraph:
    return Paragraph((Text(text),))


class TestParagraphs:
    """Default rule: one Paragraph per non-empty line."""

    def test_empty_input(self) -> None:
        assert parse("").children == ()

    def test_single_line(self) -> None:
        assert parse("hello").children == (para("hello"),)

    def test_lines_are_never_merged(self) -> None:
        assert parse("one\ntwo\nthree").children == (para("one"), para("two"), para("three"))

    def test_lines_are_stripped(self) -> None:
        assert parse("   padded   ").children == (para("padded"),)

    def test_inline_formatting_in_paragraph(self) -> None:
        assert parse("a **b**").children == (Paragraph((Text("a "), Bold((Text("b"),)))),)


class TestSpacers:
    """Blank lines become Spacers once content exists."""

    def test_leading_blank_lines_are_skipped(self) -> None:
        assert parse("\n\nhello").children == (para("hello"),)

    def test_blank_between_paragraphs(self) -> None:
        assert parse("a\n\nb").children == (para("a"), Spacer(), para("b"))

    def test_each_blank_line_is_a_spacer(self) -> None:
        assert parse("a\n\n\nb").children == (para("a"), Spacer(), Spacer(), para("b"))

    def test_trailing_blank_line(self) -> None:
        assert parse("a\n").children == (para("a"), Spacer())

    def test_whitespace_only_line_is_blank(self) -> None:
        assert parse("a\n   \nb").children == (para("a"), Spacer(), para("b"))


class TestHeadings:
    """ATX headings bounded by max_heading_level."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_chat_levels(self, level: int) -> None:
        (heading,) = parse("#" * level + " Title").children
        assert heading == Heading(level, (Text("Title"),))

    def test_seven_hashes_is_paragraph(self) -> None:
        assert parse("####### x").children == (para("####### x"),)

    def test_analysis_max_level_four(self) -> None:
        (heading,) = parse("#### x", ANALYSIS_PRESET).children
        assert isinstance(heading, Heading)
        assert heading.level == 4

    def test_analysis_level_five_is_paragraph(self) -> None:
        assert parse("##### x", ANALYSIS_PRESET).children == (para("##### x"),)

    def test_hash_without_space_is_paragraph(self) -> None:
        assert parse("#hashtag").children == (para("#hashtag"),)

    def test_heading_content_is_tokenized(self) -> None:
        (heading,) = parse("## **Big** news").children
        assert heading.content == (Bold((Text("Big"),)), Text(" news"))


class TestHeadingDecoration:
    """Diamond decoration for the top two levels under the analysis preset."""

    @pytest.mark.parametrize(("source", "decoration"), [
        ("# a", "diamond"),
        ("## a", "diamond"),
        ("### a", None),
        ("#### a", None),
    ])
    def test_analysis_decoration(self, source: str, decoration: str | None) -> None:
        (heading,) = parse(source, ANALYSIS_PRESET).children
        assert heading.decoration == decoration

    def test_chat_never_decorates(self) -> None:
        (heading,) = parse("# a", CHAT_PRESET).children
        assert heading.decoration is None


class TestHorizontalRule:
    """3+ of -, * or _."""

    @pytest.mark.parametrize("line", ["---", "***", "___", "-----", "  ---  "])
    def test_rules(self, line: str) -> None:
        assert parse(line).children == (HorizontalRule(),)

    def test_mixed_characters_is_rule(self) -> None:
        # The pattern only requires each character to be a rule character
        assert parse("-*-").children == (HorizontalRule(),)

    def test_two_dashes_is_paragraph(self) -> None:
        assert parse("--").children == (para("--"),)

    def test_rule_under_analysis(self) -> None:
        assert parse("---", ANALYSIS_PRESET).children == (HorizontalRule(),)


class TestBlockquote:
    """Single-line blockquotes."""

    def test_blockquote(self) -> None:
        assert parse("> quoted").children == (Blockquote((Text("quoted"),)),)

    def test_blockquote_without_space(self) -> None:
        assert parse(">quoted").children == (Blockquote((Text("quoted"),)),)

    def test_consecutive_quotes_stay_separate(self) -> None:
        doc = parse("> a\n> b")
        assert doc.children == (Blockquote((Text("a"),)), Blockquote((Text("b"),)))

    def test_empty_blockquote(self) -> None:
        assert parse(">").children == (Blockquote(()),)


class TestBlockParserDirect:
    """BlockParser used without the Document assembler."""

    def test_line_numbers_offset(self) -> None:
        blocks = BlockParser(CHAT_PRESET).parse("a\nb", lineno=10)
        assert [b.location.lineno for b in blocks] == [10, 11]

    def test_parser_is_reusable(self) -> None:
        parser = BlockParser(FeatureConfig())
        assert parser.parse("- a") == parser.parse("- a")
