"""
Marklet — Markdown to typed tokens for Python 3.12+

Turns a Markdown document into a tree of immutable block and inline tokens,
ready for a renderer to walk. Parsing is total: any string produces tokens,
malformed constructs degrade to plain text, and no input nesting depth can
exhaust the Python call stack.

Quick Start:
    >>> from marklet import tokenize
    >>> tokenize("# Hello **World**")
    [Heading(level=1, content=(Text(content='Hello '), Bold(content=(Text(content='World'),))))]

    >>> # Turn optional syntax off for one call
    >>> from marklet import ParseConfig
    >>> tokenize("| a | b |", config=ParseConfig(tables_enabled=False))
    [Paragraph(content=(Text(content='| a | b |'),))]

    >>> # JSON in the classic megaType/type shape
    >>> from marklet import to_json
    >>> to_json(tokenize("---"))
    '[{"megaType": "horizontalRule"}]'
"""

import logging
import time

from marklet.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from marklet.errors import MarkletError, SerializationError
from marklet.parsing import BlockSegmenter, InlineLexer, tokenize_inline
from marklet.protocols import Renderer, Sanitizer
from marklet.serialization import from_dict, from_json, to_dict, to_json
from marklet.text import extract_text
from marklet.tokens import (
    Block,
    BlockQuote,
    Bold,
    BoldItalic,
    Cell,
    Code,
    CodeBlock,
    Heading,
    Highlight,
    HorizontalRule,
    Image,
    Inline,
    Italic,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Subscript,
    Superscript,
    Table,
    Text,
    Token,
)
from marklet.utils.logger import get_logger
from marklet.visitor import BaseVisitor, walk

__version__ = "0.1.0"

logger = get_logger(__name__)


def tokenize(source: str, *, config: ParseConfig | None = None) -> list[Block]:
    """Tokenize a Markdown document into block tokens.

    Args:
        source: Markdown source text. Lines are split on ``\\n``.
        config: Config for this call (uses the active context's if None)

    Returns:
        Block tokens in document order. Never raises for a ``str``.

    Raises:
        TypeError: If ``source`` is not a string.

    Example:
        >>> tokenize("- [x] done")
        [List(items=(ListItem(content=(Text(content='done'),), checked=True, items=()),), ordered=False, start=1)]

    """
    if not isinstance(source, str):
        raise TypeError(f"tokenize() expects str, got {type(source).__name__}")

    started = time.perf_counter()
    blocks = BlockSegmenter(config).tokenize(source)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Tokenized %d lines into %d blocks in %.3f ms",
            source.count("\n") + 1,
            len(blocks),
            (time.perf_counter() - started) * 1000,
        )
    return blocks


__all__ = [
    "Block",
    "BlockQuote",
    "BlockSegmenter",
    "Bold",
    "BoldItalic",
    "Cell",
    "Code",
    "CodeBlock",
    "Heading",
    "Highlight",
    "HorizontalRule",
    "Image",
    "Inline",
    "InlineLexer",
    "Italic",
    "Link",
    "List",
    "ListItem",
    "MarkletError",
    "Paragraph",
    "ParseConfig",
    "Renderer",
    "Sanitizer",
    "SerializationError",
    "Strikethrough",
    "Subscript",
    "Superscript",
    "Table",
    "Text",
    "Token",
    "__version__",
    "extract_text",
    "from_dict",
    "from_json",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
    "to_dict",
    "to_json",
    "tokenize",
    "tokenize_inline",
    "walk",
]
