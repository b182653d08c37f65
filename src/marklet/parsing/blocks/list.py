"""List building for Marklet.

Builds arbitrarily nested lists from a flat run of item lines using an
indentation stack:

    - a            stack: [a]
      - b          stack: [a, b]        (2 > 0, b is a's child)
      - c          pop b (2 >= 2); stack: [a, c]
    - d            pop c, pop a;   stack: [d]

An item is frozen into a ``ListItem`` when it leaves the stack, at which point
all of its children are known. The run ends at the first blank line or the
first line that is not an item of the same kind (ordered vs unordered).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from marklet.parsing.inline import InlineLexer
from marklet.parsing.patterns import ORDERED_ITEM, TASK_ITEM, UNORDERED_ITEM
from marklet.tokens import Inline, List, ListItem


class ItemLine(NamedTuple):
    """A list item line broken into its parts."""

    indent: int
    text: str
    checked: bool | None = None
    number: int | None = None


def measure_indent(prefix: str) -> int:
    """Column width of leading whitespace.

    Tabs expand to the next multiple of 4 columns.

    Example:
        >>> measure_indent("  ")
        2
        >>> measure_indent(" \\t")
        4

    """
    indent = 0
    for char in prefix:
        if char == "\t":
            indent += 4 - (indent % 4)
        else:
            indent += 1
    return indent


def match_item(line: str, ordered: bool, *, task_lists: bool = True) -> ItemLine | None:
    """Match ``line`` as an item of an ordered or unordered list.

    Task markers (``[ ]``, ``[x]``, ``[X]``) are tried before plain unordered
    items when ``task_lists`` is enabled.

    Returns:
        The parsed item line, or None if the line is not an item of this kind.

    """
    if ordered:
        match = ORDERED_ITEM.fullmatch(line)
        if match is None:
            return None
        return ItemLine(measure_indent(match[1]), match[3].strip(), number=int(match[2]))

    if task_lists:
        match = TASK_ITEM.fullmatch(line)
        if match is not None:
            return ItemLine(
                measure_indent(match[1]),
                (match[4] or "").strip(),
                checked=match[3].lower() == "x",
            )

    match = UNORDERED_ITEM.fullmatch(line)
    if match is None:
        return None
    return ItemLine(measure_indent(match[1]), match[3].strip())


def list_kind(trimmed: str) -> bool | None:
    """Return True/False if ``trimmed`` opens an ordered/unordered list, else None.

    Task items are unordered items, so they need no separate check here.

    """
    if UNORDERED_ITEM.fullmatch(trimmed):
        return False
    if ORDERED_ITEM.fullmatch(trimmed):
        return True
    return None


@dataclass(slots=True)
class _OpenItem:
    """An item still on the indent stack; more children may follow."""

    indent: int
    content: tuple[Inline, ...]
    checked: bool | None
    children: list[ListItem] = field(default_factory=list)

    def freeze(self) -> ListItem:
        return ListItem(content=self.content, checked=self.checked, items=tuple(self.children))


class ListBuilder:
    """Builds ``List`` tokens from consecutive item lines.

    Usage:
        >>> builder = ListBuilder(InlineLexer())
        >>> token, end = builder.build(["- a", "  - b", "- c"], 0, ordered=False)
        >>> [len(item.items) for item in token.items]
        [1, 0]

    """

    __slots__ = ("_inline", "_task_lists")

    def __init__(self, inline: InlineLexer, *, task_lists: bool = True) -> None:
        self._inline = inline
        self._task_lists = task_lists

    def build(self, lines: list[str], start: int, ordered: bool) -> tuple[List, int]:
        """Consume the list run beginning at ``lines[start]``.

        Args:
            lines: All lines of the current block span
            start: Index of the first item line
            ordered: Whether this is an ordered (``1.``) list

        Returns:
            The list token and the index of the first unconsumed line.

        """
        top: list[ListItem] = []
        stack: list[_OpenItem] = []
        first_number = 1
        index = start
        total = len(lines)

        while index < total:
            line = lines[index]
            if not line.strip():
                break

            item = match_item(line, ordered, task_lists=self._task_lists)
            if item is None:
                break

            if index == start and item.number is not None:
                first_number = item.number

            while stack and stack[-1].indent >= item.indent:
                _close_top(stack, top)

            stack.append(
                _OpenItem(
                    indent=item.indent,
                    content=tuple(self._inline.tokenize(item.text)),
                    checked=item.checked,
                )
            )
            index += 1

        while stack:
            _close_top(stack, top)

        return List(items=tuple(top), ordered=ordered, start=first_number), index


def _close_top(stack: list[_OpenItem], top: list[ListItem]) -> None:
    """Freeze the innermost open item into its parent (or the top level)."""
    item = stack.pop().freeze()
    if stack:
        stack[-1].children.append(item)
    else:
        top.append(item)


__all__ = ["ItemLine", "ListBuilder", "list_kind", "match_item", "measure_indent"]
