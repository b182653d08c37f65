"""Tests for extract_text()."""

from marklet import tokenize
from marklet.text import extract_text
from marklet.tokens import (
    Bold,
    Code,
    CodeBlock,
    HorizontalRule,
    Image,
    Link,
    Text,
)


class TestExtractTextInline:
    """extract_text on inline tokens."""

    def test_text(self) -> None:
        assert extract_text(Text(content="hello")) == "hello"

    def test_code(self) -> None:
        assert extract_text(Code(content="x = 1")) == "x = 1"

    def test_image(self) -> None:
        assert extract_text(Image(alt="description", src="x.png")) == "description"

    def test_nested_styles(self) -> None:
        token = Bold(content=(Text(content="a "), Link(href="u", content=(Text(content="b"),))))
        assert extract_text(token) == "a b"

    def test_inline_sequence_is_one_line(self) -> None:
        assert extract_text([Text(content="a"), Code(content="b")]) == "ab"


class TestExtractTextBlocks:
    """extract_text on block tokens and documents."""

    def test_heading(self) -> None:
        assert extract_text(tokenize("# Hello **World**")[0]) == "Hello World"

    def test_blocks_joined_by_newline(self) -> None:
        assert extract_text(tokenize("# T\n\nbody")) == "T\nbody"

    def test_code_block(self) -> None:
        assert extract_text(CodeBlock(content="a\nb")) == "a\nb"

    def test_horizontal_rule_is_empty(self) -> None:
        assert extract_text(HorizontalRule()) == ""
        assert extract_text(tokenize("a\n---\nb")) == "a\nb"

    def test_nested_list(self) -> None:
        assert extract_text(tokenize("- a\n  - b\n- c")) == "a\nb\nc"

    def test_table_rows(self) -> None:
        assert extract_text(tokenize("| a | b |\n|---|---|\n| 1 | 2 |")) == "a b\n1 2"

    def test_headerless_table(self) -> None:
        assert extract_text(tokenize("| a |\n| b |")) == "a\nb"

    def test_blockquote(self) -> None:
        assert extract_text(tokenize("> one\n> > two")) == "one\ntwo"

    def test_link_and_image(self) -> None:
        assert extract_text(tokenize("[site](u) ![pic](p)")) == "site pic"

    def test_empty(self) -> None:
        assert extract_text([]) == ""

    def test_deep_quotes(self) -> None:
        assert extract_text(tokenize(">" * 10_000 + " deep")) == "deep"
