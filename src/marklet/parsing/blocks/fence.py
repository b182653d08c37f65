"""Fenced code block scanning for Marklet.

A fence opens with a line of three backticks and an optional language tag.
Everything up to the closing fence is kept verbatim. A fence that never
closes runs to the end of input; that is not an error.
"""

from __future__ import annotations

from marklet.parsing.patterns import FENCE_CLOSE
from marklet.tokens import CodeBlock
from marklet.utils.logger import get_logger

logger = get_logger(__name__)


def parse_fenced_code(lines: list[str], start: int, language: str) -> tuple[CodeBlock, int]:
    """Consume the fenced code block opened at ``lines[start]``.

    Args:
        lines: All lines of the current block span
        start: Index of the opening fence line
        language: Language tag captured from the opening fence

    Returns:
        The code block and the index of the first line after it.

    """
    end = start + 1
    total = len(lines)
    while end < total and FENCE_CLOSE.fullmatch(lines[end].strip()) is None:
        end += 1

    block = CodeBlock(content="\n".join(lines[start + 1 : end]), language=language)

    if end < total:
        return block, end + 1

    logger.debug("Unterminated code fence at line %d runs to end of input", start + 1)
    return block, end
