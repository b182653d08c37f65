"""Block-level parsing for Marklet.

Submodules:
    segmenter: Top-level line scanner and block dispatch
    fence: Fenced code blocks
    list: Indentation-stack list builder
    quote: Blockquote marker stripping
    table: Pipe table detection
"""

from marklet.parsing.blocks.list import ListBuilder
from marklet.parsing.blocks.segmenter import BlockSegmenter
from marklet.parsing.blocks.table import TableDetector

__all__ = ["BlockSegmenter", "ListBuilder", "TableDetector"]
