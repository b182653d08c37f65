"""Parsing internals for Marklet.

Two levels:
    blocks: line-oriented segmentation into block tokens
    inline: span lexing of a single line into inline tokens
"""

from marklet.parsing.blocks import BlockSegmenter
from marklet.parsing.inline import InlineLexer, tokenize_inline

__all__ = ["BlockSegmenter", "InlineLexer", "tokenize_inline"]
