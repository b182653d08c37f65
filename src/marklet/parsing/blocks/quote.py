"""Blockquote collection for Marklet.

A blockquote is the run of lines that start with ``>`` or are blank. Blank
lines inside the run keep multi-paragraph quotes together. The collector only
strips markers; the segmenter parses the dequoted lines in a child frame of
its explicit stack, so nested quotes never recurse.
"""

from __future__ import annotations

from marklet.parsing.patterns import QUOTE_MARKER


def strip_quote_marker(line: str) -> str:
    """Remove one ``>`` and at most one following space.

    Leading indentation before the marker is ignored. Lines without a marker
    are returned unchanged.

    Example:
        >>> strip_quote_marker("  > > nested")
        '> nested'

    """
    stripped = line.lstrip()
    match = QUOTE_MARKER.match(stripped)
    if match is None:
        return line
    return stripped[match.end() :]


def collect_blockquote(lines: list[str], start: int) -> tuple[list[str], int]:
    """Collect and dequote the quoted run beginning at ``lines[start]``.

    Returns:
        The dequoted lines (blank lines kept as empty strings) and the index
        of the first line after the run.

    """
    dequoted: list[str] = []
    end = start
    total = len(lines)

    while end < total:
        line = lines[end]
        if not line.strip():
            dequoted.append("")
        elif line.lstrip().startswith(">"):
            dequoted.append(strip_quote_marker(line))
        else:
            break
        end += 1

    return dequoted, end
