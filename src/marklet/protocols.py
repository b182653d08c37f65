"""Protocols for Marklet.

Defines the contracts for collaborators that consume token lists. Marklet
ships no implementation of either; renderers and sanitizers live with the
application.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from marklet.tokens import Block


@runtime_checkable
class Renderer(Protocol):
    """Protocol for turning block tokens into markup.

    Thread Safety:
        Implementations should keep per-call state in local variables so one
        renderer can serve concurrent ``render`` calls.

    """

    def render(self, tokens: Sequence[Block]) -> str:
        """Render ``tokens`` (typically ``tokenize`` output) to a string."""
        ...


@runtime_checkable
class Sanitizer(Protocol):
    """Protocol for cleaning rendered markup before it is displayed.

    Link hrefs and image sources are passed through by the tokenizer exactly
    as written; filtering unsafe schemes is the sanitizer's job.

    """

    def sanitize(self, markup: str) -> str:
        ...
