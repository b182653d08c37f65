"""Typed tokens — collect headings for a table of contents."""

from marklet import extract_text, tokenize
from marklet.tokens import Heading
from marklet.visitor import BaseVisitor


class TocCollector(BaseVisitor[None]):
    """Collect headings for a table of contents."""

    def __init__(self) -> None:
        self.headings: list[tuple[int, str]] = []

    def visit_heading(self, token: Heading) -> None:
        self.headings.append((token.level, extract_text(token)))


source = """# Introduction

Welcome to the **guide**.

## Getting Started

> ### Quoted headings count too

### Installation

How to install.
"""

collector = TocCollector()
collector.visit(tokenize(source))

print("Table of Contents:")
for level, text in collector.headings:
    indent = "  " * (level - 1)
    print(f"{indent}{'#' * level} {text}")
