"""Tests for the inline lexer.

Covers styled spans, atomic spans (image, link, code), precedence between
them, escapes, and marker toggles.
"""

import pytest

from marklet import ParseConfig
from marklet.parsing.inline import InlineLexer, mask_escapes, tokenize_inline, unmask
from marklet.tokens import (
    Bold,
    BoldItalic,
    Code,
    Highlight,
    Image,
    Italic,
    Link,
    Strikethrough,
    Subscript,
    Superscript,
    Text,
)


class TestStyledSpans:
    """Paired markers produce styled tokens with nested content."""

    @pytest.mark.parametrize(
        "source,token_type",
        [
            ("***x***", BoldItalic),
            ("___x___", BoldItalic),
            ("**x**", Bold),
            ("__x__", Bold),
            ("*x*", Italic),
            ("_x_", Italic),
            ("~~x~~", Strikethrough),
            ("==x==", Highlight),
            ("~x~", Subscript),
            ("^x^", Superscript),
        ],
    )
    def test_marker_pairs(self, source: str, token_type: type) -> None:
        assert tokenize_inline(source) == [token_type(content=(Text(content="x"),))]

    def test_surrounding_text(self) -> None:
        assert tokenize_inline("a **b** c") == [
            Text(content="a "),
            Bold(content=(Text(content="b"),)),
            Text(content=" c"),
        ]

    def test_subscript_in_word(self) -> None:
        assert tokenize_inline("H~2~O") == [
            Text(content="H"),
            Subscript(content=(Text(content="2"),)),
            Text(content="O"),
        ]

    def test_superscript_at_end(self) -> None:
        assert tokenize_inline("E=mc^2^") == [
            Text(content="E=mc"),
            Superscript(content=(Text(content="2"),)),
        ]

    def test_empty_superscript_pair_is_literal(self) -> None:
        assert tokenize_inline("a ^^ b") == [Text(content="a ^^ b")]

    def test_empty_subscript_pair_does_not_hide_later_span(self) -> None:
        config = ParseConfig(strikethrough_enabled=False)
        assert tokenize_inline("a ~~ b ~c~", config=config) == [
            Text(content="a ~~ b "),
            Subscript(content=(Text(content="c"),)),
        ]

    def test_strikethrough_pair(self) -> None:
        assert tokenize_inline("~~gone~~") == [
            Strikethrough(content=(Text(content="gone"),))
        ]

    def test_triple_tilde_prefers_strikethrough(self) -> None:
        assert tokenize_inline("~~~text~~~") == [
            Strikethrough(content=(Text(content="~text"),)),
            Text(content="~"),
        ]

    def test_strikethrough_wins_over_later_subscript_pair(self) -> None:
        # "~b~" is a non-empty subscript pair, but the strikethrough opens first
        assert tokenize_inline("~~a~b~~") == [
            Strikethrough(content=(Text(content="a~b"),))
        ]

    def test_triple_tilde_without_strikethrough_is_subscript(self) -> None:
        config = ParseConfig(strikethrough_enabled=False)
        assert tokenize_inline("~~~text~~~", config=config) == [
            Text(content="~~"),
            Subscript(content=(Text(content="text"),)),
            Text(content="~~"),
        ]

    def test_deeply_mixed_nesting(self) -> None:
        assert tokenize_inline("**a ~~b ==c== b~~ a**") == [
            Bold(
                content=(
                    Text(content="a "),
                    Strikethrough(
                        content=(
                            Text(content="b "),
                            Highlight(content=(Text(content="c"),)),
                            Text(content=" b"),
                        )
                    ),
                    Text(content=" a"),
                )
            )
        ]

    def test_two_spans_in_sequence(self) -> None:
        assert tokenize_inline("*a* and *b*") == [
            Italic(content=(Text(content="a"),)),
            Text(content=" and "),
            Italic(content=(Text(content="b"),)),
        ]


class TestUnmatchedMarkers:
    """Markers without a partner stay literal text."""

    @pytest.mark.parametrize(
        "source",
        ["a * b", "trailing *", "x ~ y", "2 ^ 3", "a = b", "snake_case"],
    )
    def test_literal(self, source: str) -> None:
        assert tokenize_inline(source) == [Text(content=source)]

    def test_empty_input(self) -> None:
        assert tokenize_inline("") == []


class TestAtomicSpans:
    """Images, links and code spans."""

    def test_code_span(self) -> None:
        assert tokenize_inline("use `x = 1` here") == [
            Text(content="use "),
            Code(content="x = 1"),
            Text(content=" here"),
        ]

    def test_code_content_not_lexed(self) -> None:
        assert tokenize_inline("`**not bold**`") == [Code(content="**not bold**")]

    def test_image(self) -> None:
        assert tokenize_inline("![alt text](img.png)") == [
            Image(alt="alt text", src="img.png")
        ]

    def test_image_empty_alt(self) -> None:
        assert tokenize_inline("![](img.png)") == [Image(alt="", src="img.png")]

    def test_link_text_is_lexed(self) -> None:
        assert tokenize_inline("see [the **docs**](https://x.io) now") == [
            Text(content="see "),
            Link(
                href="https://x.io",
                content=(Text(content="the "), Bold(content=(Text(content="docs"),))),
            ),
            Text(content=" now"),
        ]

    def test_innermost_bracket_wins(self) -> None:
        assert tokenize_inline("[a [b](c)") == [
            Text(content="[a "),
            Link(href="c", content=(Text(content="b"),)),
        ]

    def test_image_alt_cannot_hold_bracket(self) -> None:
        assert tokenize_inline("![a [b](c)") == [
            Text(content="![a "),
            Link(href="c", content=(Text(content="b"),)),
        ]

    def test_unclosed_link_is_text(self) -> None:
        assert tokenize_inline("[text](no close") == [Text(content="[text](no close")]

    def test_atomic_before_styled(self) -> None:
        assert tokenize_inline("`*a*` *b*") == [
            Code(content="*a*"),
            Text(content=" "),
            Italic(content=(Text(content="b"),)),
        ]

    def test_styled_before_atomic(self) -> None:
        assert tokenize_inline("*a* `b`") == [
            Italic(content=(Text(content="a"),)),
            Text(content=" "),
            Code(content="b"),
        ]

    def test_link_inside_bold(self) -> None:
        assert tokenize_inline("**[x](y)**") == [
            Bold(content=(Link(href="y", content=(Text(content="x"),)),))
        ]


class TestEscapes:
    """Backslash escapes hide markers from the lexer."""

    def test_escaped_asterisks(self) -> None:
        assert tokenize_inline("\\*not italic\\*") == [Text(content="*not italic*")]

    def test_escape_inside_span(self) -> None:
        assert tokenize_inline("**a\\*b**") == [Bold(content=(Text(content="a*b"),))]

    def test_code_keeps_backslash(self) -> None:
        assert tokenize_inline("`a\\*b`") == [Code(content="a\\*b")]

    def test_href_expands_escape(self) -> None:
        assert tokenize_inline("[x](a\\_b)") == [Link(href="a_b", content=(Text(content="x"),))]

    def test_image_alt_expands_escape(self) -> None:
        assert tokenize_inline("![a\\*b](p.png)") == [Image(alt="a*b", src="p.png")]

    def test_escaped_bracket_breaks_link(self) -> None:
        assert tokenize_inline("\\[x](y)") == [Text(content="[x](y)")]

    def test_trailing_backslash_is_literal(self) -> None:
        assert tokenize_inline("end\\") == [Text(content="end\\")]

    def test_double_backslash(self) -> None:
        assert tokenize_inline("a\\\\b") == [Text(content="a\\b")]

    def test_raw_nul_preserved(self) -> None:
        assert tokenize_inline("a\x00b") == [Text(content="a\x00b")]


class TestMaskHelpers:
    """Sentinel masking used by the lexer."""

    def test_mask_positions(self) -> None:
        masked, escapes = mask_escapes("a\\*b\\_")
        assert masked == "a\x00b\x00"
        assert escapes == {1: "*", 3: "_"}

    def test_unmask_verbatim(self) -> None:
        masked, escapes = mask_escapes("x\\*y")
        assert unmask(masked, 0, len(masked), escapes) == "x*y"
        assert unmask(masked, 0, len(masked), escapes, verbatim=True) == "x\\*y"


class TestMarkerToggles:
    """ParseConfig removes optional markers from the lexer."""

    def test_strikethrough_disabled(self) -> None:
        config = ParseConfig(strikethrough_enabled=False, subsup_enabled=False)
        assert tokenize_inline("~~gone~~", config=config) == [Text(content="~~gone~~")]

    def test_highlight_disabled(self) -> None:
        config = ParseConfig(highlight_enabled=False)
        assert tokenize_inline("==mark==", config=config) == [Text(content="==mark==")]

    def test_subsup_disabled(self) -> None:
        config = ParseConfig(subsup_enabled=False)
        assert tokenize_inline("H~2~O x^2^", config=config) == [Text(content="H~2~O x^2^")]

    def test_core_markers_always_on(self) -> None:
        config = ParseConfig(
            strikethrough_enabled=False,
            highlight_enabled=False,
            subsup_enabled=False,
        )
        assert InlineLexer(config).tokenize("**b**") == [Bold(content=(Text(content="b"),))]

    def test_non_string_raises(self) -> None:
        with pytest.raises(TypeError):
            tokenize_inline(None)  # type: ignore[arg-type]
