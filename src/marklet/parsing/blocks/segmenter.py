"""Block segmentation for Marklet.

The top-level driver. Scans lines in order and tries block matchers in a
fixed precedence:

    1. fenced code      ```lang
    2. horizontal rule  --- *** ___
    3. blockquote       > text
    4. list             - item / 1. item / - [ ] task
    5. heading          # ... ######
    6. table            | a | b |
    7. paragraph        anything else, one line per paragraph

Blockquotes re-enter block parsing on their dequoted lines. Instead of
recursing, the segmenter keeps an explicit stack of line spans: a quote
pushes a child span, and when that span is exhausted its tokens become the
quote's content in the parent span. Quote depth therefore never touches the
Python call stack.

Thread Safety:
    BlockSegmenter holds only immutable configuration and stateless helpers.
    All scan state lives in local spans.

"""

from __future__ import annotations

from dataclasses import dataclass

from marklet.config import ParseConfig, get_parse_config
from marklet.parsing.blocks.fence import parse_fenced_code
from marklet.parsing.blocks.list import ListBuilder, list_kind
from marklet.parsing.blocks.quote import collect_blockquote, strip_quote_marker
from marklet.parsing.blocks.table import TableDetector
from marklet.parsing.inline import InlineLexer
from marklet.parsing.patterns import FENCE_OPEN, HEADING, HORIZONTAL_RULE
from marklet.tokens import Block, BlockQuote, Heading, HorizontalRule, Inline, Paragraph


@dataclass(slots=True)
class _Span:
    """Lines still to be segmented and the list their blocks go into.

    ``into`` is set for quote spans: once the span is exhausted,
    ``BlockQuote(tuple(sink))`` is appended to it.

    """

    lines: list[str]
    index: int
    sink: list[Block]
    into: list[Block] | None = None


class BlockSegmenter:
    """Splits markdown source into block tokens.

    Usage:
        >>> segmenter = BlockSegmenter()
        >>> [type(block).__name__ for block in segmenter.tokenize("# Title\\n\\nBody")]
        ['Heading', 'Paragraph']

    """

    __slots__ = ("_config", "_inline", "_lists", "_tables")

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._config = config or get_parse_config()
        self._inline = InlineLexer(self._config)
        self._lists = ListBuilder(self._inline, task_lists=self._config.task_lists_enabled)
        self._tables = TableDetector(self._inline)

    def tokenize(self, source: str) -> list[Block]:
        """Tokenize a whole document. Never raises for any string."""
        result: list[Block] = []
        stack: list[_Span] = [_Span(lines=source.split("\n"), index=0, sink=result)]

        while stack:
            span = stack[-1]

            if span.index >= len(span.lines):
                stack.pop()
                if span.into is not None:
                    span.into.append(BlockQuote(content=tuple(span.sink)))
                continue

            trimmed = span.lines[span.index].strip()
            if not trimmed:
                span.index += 1
                continue

            # Quotes push a child span instead of returning an end index
            if trimmed.startswith(">"):
                self._enter_blockquote(span, trimmed, stack)
                continue

            span.index = self._parse_block(span.lines, span.index, trimmed, span.sink)

        return result

    def _enter_blockquote(self, span: _Span, trimmed: str, stack: list[_Span]) -> None:
        """Push a child span for the quote at ``span.index``.

        With ``nested_blockquotes`` off, a quote line inside a quote is
        flattened into a paragraph of the outer quote instead.

        """
        if span.into is not None and not self._config.nested_blockquotes:
            span.sink.append(Paragraph(content=self._inline_tuple(strip_quote_marker(trimmed))))
            span.index += 1
            return

        dequoted, end = collect_blockquote(span.lines, span.index)
        span.index = end
        stack.append(_Span(lines=dequoted, index=0, sink=[], into=span.sink))

    def _parse_block(self, lines: list[str], index: int, trimmed: str, sink: list[Block]) -> int:
        """Parse one non-quote block at ``lines[index]``.

        Returns:
            Index of the first line not consumed by the block.

        """
        fence = FENCE_OPEN.fullmatch(trimmed)
        if fence is not None:
            code, end = parse_fenced_code(lines, index, fence[1])
            sink.append(code)
            return end

        if HORIZONTAL_RULE.fullmatch(trimmed):
            sink.append(HorizontalRule())
            return index + 1

        ordered = list_kind(trimmed)
        if ordered is not None:
            token, end = self._lists.build(lines, index, ordered)
            sink.append(token)
            return end

        heading = HEADING.fullmatch(trimmed)
        if heading is not None:
            sink.append(
                Heading(
                    level=len(heading[1]),  # type: ignore[arg-type]
                    content=self._inline_tuple(heading[2]),
                )
            )
            return index + 1

        if self._config.tables_enabled and "|" in trimmed:
            found = self._tables.detect(lines, index)
            if found is not None:
                table, end = found
                sink.append(table)
                return end

        sink.append(Paragraph(content=self._inline_tuple(trimmed)))
        return index + 1

    def _inline_tuple(self, text: str) -> tuple[Inline, ...]:
        return tuple(self._inline.tokenize(text))


__all__ = ["BlockSegmenter"]
