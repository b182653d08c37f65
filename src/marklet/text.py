"""Extract plain text from Marklet tokens.

Provides a public API for extracting text content from any token or token
list, used for heading slugs, excerpts, and search indexing.

Example:
    >>> from marklet import tokenize, extract_text
    >>> extract_text(tokenize("# Hello **World**")[0])
    'Hello World'
"""

from collections.abc import Iterable

from marklet.tokens import (
    STYLED_TYPES,
    BlockQuote,
    Code,
    CodeBlock,
    Heading,
    Image,
    List,
    ListItem,
    Link,
    Paragraph,
    Table,
    Text,
    Token,
)
from marklet.visitor import walk

_INLINE_TYPES = (Text, Code, Image, Link, *STYLED_TYPES)


def extract_text(tokens: Token | Iterable[Token]) -> str:
    """Extract plain text from a token or a token list.

    Text and code contribute their content and images their alt text.
    Consecutive inline tokens form one line; every block (heading,
    paragraph, code block, list item, table row) starts a new line.
    Table cells in a row are joined by a single space. Horizontal rules
    contribute nothing.

    Returns:
        The extracted lines joined by newlines.

    """
    roots = list(tokens) if isinstance(tokens, Iterable) else [tokens]
    lines: list[str] = []
    run: list[Token] = []

    for token in roots:
        if isinstance(token, _INLINE_TYPES):
            run.append(token)
            continue
        if run:
            lines.append(_inline_text(run))
            run = []
        lines.extend(_block_lines(token))

    if run:
        lines.append(_inline_text(run))
    return "\n".join(lines)


def _inline_text(tokens: Iterable[Token]) -> str:
    parts: list[str] = []
    for token in walk(tokens):
        match token:
            case Text(content=content) | Code(content=content):
                parts.append(content)
            case Image(alt=alt):
                parts.append(alt)
    return "".join(parts)


def _block_lines(block: Token) -> list[str]:
    """Lines of one block and everything nested in it, without recursion."""
    lines: list[str] = []
    stack: list[Token] = [block]

    while stack:
        token = stack.pop()
        match token:
            case Heading(content=content) | Paragraph(content=content):
                lines.append(_inline_text(content))
            case CodeBlock(content=content):
                lines.append(content)
            case BlockQuote(content=content):
                stack.extend(reversed(content))
            case List(items=items):
                stack.extend(reversed(items))
            case ListItem(content=content, items=items):
                lines.append(_inline_text(content))
                stack.extend(reversed(items))
            case Table(header=header, rows=rows):
                for row in (header, *rows) if header else rows:
                    lines.append(" ".join(_inline_text(cell) for cell in row))
    return lines


__all__ = ["extract_text"]
