"""Table detection for Marklet.

Two shapes are recognized:

| Header 1 | Header 2 |   <- header row
|----------|:--------:|   <- separator row
| Cell 1   | Cell 2   |   <- body rows

| Cell 1 | Cell 2 |       <- headerless: consecutive piped lines
| Cell 3 | Cell 4 |

Alignment colons in the separator are accepted but not recorded.
"""

from __future__ import annotations

from marklet.parsing.inline import InlineLexer
from marklet.parsing.patterns import TABLE_SEPARATOR
from marklet.tokens import Cell, Table


def split_cells(line: str) -> list[str]:
    """Split a stripped table row into trimmed cell strings.

    Pipes escaped with a backslash do not split; the escape stays in the cell
    so inline lexing turns it into a literal ``|``. The empty cells produced
    by a leading or trailing pipe are dropped, interior empty cells are kept.

    Example:
        >>> split_cells("| a | b \\\\| c || d |")
        ['a', 'b \\\\| c', '', 'd']

    """
    cells: list[str] = []
    start = 0
    pos = 0
    line_len = len(line)

    while pos < line_len:
        char = line[pos]
        if char == "\\":
            pos += 2
            continue
        if char == "|":
            cells.append(line[start:pos].strip())
            start = pos + 1
        pos += 1
    cells.append(line[start:].strip())

    if line.startswith("|"):
        cells.pop(0)
    if cells and line.endswith("|") and cells[-1] == "":
        cells.pop()
    return cells


def is_separator(line: str) -> bool:
    """Check for a ``|---|:---:|`` separator row (stripped line)."""
    return "|" in line and TABLE_SEPARATOR.fullmatch(line) is not None


class TableDetector:
    """Recognizes pipe tables and tokenizes their cells."""

    __slots__ = ("_inline",)

    def __init__(self, inline: InlineLexer) -> None:
        self._inline = inline

    def detect(self, lines: list[str], start: int) -> tuple[Table, int] | None:
        """Try to read a table whose first row is ``lines[start]``.

        Returns:
            The table and the index of the first line after it, or None when
            the lines do not form a table.

        """
        first = lines[start].strip()
        if "|" not in first or start + 1 >= len(lines):
            return None

        following = lines[start + 1].strip()
        if "|" not in following:
            return None

        header: tuple[Cell, ...] = ()
        body_start = start
        if is_separator(following):
            header = self._row(first)
            body_start = start + 2

        rows: list[tuple[Cell, ...]] = []
        end = body_start
        while end < len(lines):
            row_line = lines[end].strip()
            if not row_line or "|" not in row_line:
                break
            rows.append(self._row(row_line))
            end += 1

        return Table(header=header, rows=tuple(rows)), end

    def _row(self, line: str) -> tuple[Cell, ...]:
        return tuple(tuple(self._inline.tokenize(cell)) for cell in split_cells(line))


__all__ = ["TableDetector", "is_separator", "split_cells"]
