"""Tests for the plain-text renderer."""

import pytest

from chatmark import RenderError, TextRenderer, parse, render_blocks, render_text


class TestRenderText:
    """Formatting is stripped, structure kept as lines."""

    def test_heading_and_list(self) -> None:
        assert render_text(parse("# Hello **World**\n\n- item")) == "Hello World\n\n- item\n"

    def test_ordered_labels(self) -> None:
        assert render_text(parse("4. d\n5) e")) == "4. d\n5. e\n"

    def test_link_keeps_url(self) -> None:
        assert render_text(parse("see [docs](https://x.io)")) == "see docs (https://x.io)\n"

    def test_code_block_content(self) -> None:
        assert render_text(parse("```py\na = 1\nb = 2\n```")) == "a = 1\nb = 2\n"

    def test_table_rows(self) -> None:
        assert render_text(parse("| A | B |\n|---|---|\n| 1 | 2 |")) == "A | B\n1 | 2\n"

    def test_rule_and_quote(self) -> None:
        assert render_text(parse("> q\n---")) == "q\n---\n"

    def test_no_markup(self) -> None:
        text = render_text(parse("**a** _b_ `c`"))
        assert text == "a b c\n"

    def test_empty_document(self) -> None:
        assert render_text(parse("")) == ""


class TestTextRendererAdapter:
    """TextRenderer as a BlockRenderer."""

    def test_render_blocks(self) -> None:
        assert render_blocks(parse("a\nb"), TextRenderer()) == ["a\n", "b\n"]

    def test_rejects_non_nodes(self) -> None:
        with pytest.raises(RenderError):
            TextRenderer().render(42)  # type: ignore[arg-type]
