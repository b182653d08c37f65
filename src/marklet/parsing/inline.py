"""Inline lexing for Marklet.

Turns one logical line of text into a tree of inline tokens.

Algorithm:
    1. Mask escapes: every ``\\X`` becomes a sentinel and ``X`` is recorded
       against the sentinel's position, so escaped characters can never open
       or close a span.
    2. Scan with an explicit stack of frames. A frame is a span
       ``[pos, end)`` of the masked text plus the list its tokens go into.
       Each step finds the earliest atomic span (image, link, code) and the
       earliest styled span (bold, italic, ...). The earlier one wins; atomic
       wins ties. Nested content gets its own frame on top of the stack, and
       the finished frame is wrapped into its token and appended to the
       parent list. The parent then resumes right after the span.

No recursion is involved, so nesting depth never touches the Python call
stack. Searches take explicit positions (``pattern.search(text, pos, end)``
and ``str.find(marker, pos, end)``) and never slice the remaining text.

Thread Safety:
    InlineLexer holds only immutable configuration. All scan state lives in
    local frames, so one instance may be shared freely.

"""

from collections.abc import Callable
from dataclasses import dataclass, field
from functools import partial
from re import Match, Pattern
from typing import NamedTuple

from marklet.config import ParseConfig, get_parse_config
from marklet.parsing.patterns import CODE_SPAN, ESCAPE_SENTINEL, IMAGE, LINK
from marklet.tokens import (
    Bold,
    BoldItalic,
    Code,
    Highlight,
    Image,
    Inline,
    Italic,
    Link,
    Strikethrough,
    Subscript,
    Superscript,
    Text,
)


class _Marker(NamedTuple):
    """A styled-span delimiter and the token class it produces."""

    text: str
    token: type
    needs_content: bool = False


# Precedence order: earlier entries win when two spans start at the same offset.
_BOLD_ITALIC = (_Marker("***", BoldItalic), _Marker("___", BoldItalic))
_BOLD = (_Marker("**", Bold), _Marker("__", Bold))
_ITALIC = (_Marker("*", Italic), _Marker("_", Italic))
_STRIKETHROUGH = (_Marker("~~", Strikethrough),)
_HIGHLIGHT = (_Marker("==", Highlight),)
_SUBSCRIPT = (_Marker("~", Subscript, needs_content=True),)
_SUPERSCRIPT = (_Marker("^", Superscript, needs_content=True),)

# Atomic spans, tie order image > link > code
_ATOMIC: tuple[tuple[str, Pattern[str]], ...] = (
    ("image", IMAGE),
    ("link", LINK),
    ("code", CODE_SPAN),
)


def build_marker_table(config: ParseConfig) -> tuple[_Marker, ...]:
    """Return the styled markers enabled by ``config`` in precedence order."""
    markers = [*_BOLD_ITALIC, *_BOLD, *_ITALIC]
    if config.strikethrough_enabled:
        markers.extend(_STRIKETHROUGH)
    if config.highlight_enabled:
        markers.extend(_HIGHLIGHT)
    if config.subsup_enabled:
        markers.extend(_SUBSCRIPT)
        markers.extend(_SUPERSCRIPT)
    return tuple(markers)


def mask_escapes(text: str) -> tuple[str, dict[int, str]]:
    """Replace each ``\\X`` with a sentinel and record ``X`` by position.

    A trailing backslash with nothing after it is kept literally.

    Returns:
        The masked text and a map from sentinel offset to escaped character.

    Example:
        >>> mask_escapes("a\\\\*b")
        ('a\\x00b', {1: '*'})

    """
    escapes: dict[int, str] = {}
    parts: list[str] = []
    size = 0
    pos = 0
    text_len = len(text)

    while True:
        slash = text.find("\\", pos)
        if slash == -1 or slash + 1 == text_len:
            parts.append(text[pos:])
            break
        chunk = text[pos:slash]
        parts.append(chunk)
        size += len(chunk)
        escapes[size] = text[slash + 1]
        parts.append(ESCAPE_SENTINEL)
        size += 1
        pos = slash + 2

    return "".join(parts), escapes


def unmask(
    masked: str,
    start: int,
    end: int,
    escapes: dict[int, str],
    *,
    verbatim: bool = False,
) -> str:
    """Expand sentinels in ``masked[start:end]`` back to their characters.

    With ``verbatim=True`` the backslash is restored too (used for code,
    whose content is never interpreted). A sentinel character that came from
    the input itself has no recorded escape and is kept as is.

    """
    hit = masked.find(ESCAPE_SENTINEL, start, end)
    if hit == -1:
        return masked[start:end]

    parts: list[str] = []
    while hit != -1:
        parts.append(masked[start:hit])
        char = escapes.get(hit)
        if char is None:
            parts.append(ESCAPE_SENTINEL)
        elif verbatim:
            parts.append("\\" + char)
        else:
            parts.append(char)
        start = hit + 1
        hit = masked.find(ESCAPE_SENTINEL, start, end)
    parts.append(masked[start:end])
    return "".join(parts)


@dataclass(slots=True)
class _Frame:
    """One pending span of masked text.

    Tokens found in ``[pos, end)`` go to ``sink``. When the span is used up,
    ``wrap(tuple(sink))`` is appended to ``into`` (unless this is the root).
    ``atomic_hits`` and ``styled_hits`` memoize the next candidate per
    pattern or marker. An entry stays valid while its start is still at or
    after ``pos``; a miss stays a miss for the rest of the frame.

    """

    pos: int
    end: int
    sink: list[Inline]
    into: list[Inline] | None = None
    wrap: Callable[[tuple[Inline, ...]], Inline] | None = None
    atomic_hits: dict[str, Match[str] | None] = field(default_factory=dict)
    styled_hits: dict[str, tuple[int, int] | None] = field(default_factory=dict)


class _StyledHit(NamedTuple):
    start: int
    close: int
    marker: _Marker


class InlineLexer:
    """Explicit-stack inline lexer.

    Usage:
        >>> lexer = InlineLexer()
        >>> lexer.tokenize("**bold** and `code`")
        [Bold(content=(Text(content='bold'),)), Text(content=' and '), Code(content='code')]

    """

    __slots__ = ("_markers",)

    def __init__(self, config: ParseConfig | None = None) -> None:
        self._markers = build_marker_table(config or get_parse_config())

    def tokenize(self, text: str) -> list[Inline]:
        """Tokenize ``text`` into a list of inline tokens. Never raises."""
        result: list[Inline] = []
        if not text:
            return result

        masked, escapes = mask_escapes(text)
        stack: list[_Frame] = [_Frame(pos=0, end=len(masked), sink=result)]

        while stack:
            frame = stack[-1]

            if frame.pos >= frame.end:
                stack.pop()
                if frame.into is not None and frame.wrap is not None:
                    frame.into.append(frame.wrap(tuple(frame.sink)))
                continue

            atomic = self._find_atomic(masked, frame)
            styled = self._find_styled(masked, frame)

            if atomic is None and styled is None:
                self._flush(masked, frame.pos, frame.end, escapes, frame.sink)
                frame.pos = frame.end
                continue

            if atomic is not None and (styled is None or atomic[1].start() <= styled.start):
                kind, match = atomic
                self._flush(masked, frame.pos, match.start(), escapes, frame.sink)
                frame.pos = match.end()

                if kind == "image":
                    frame.sink.append(
                        Image(
                            alt=unmask(masked, match.start(1), match.end(1), escapes),
                            src=unmask(masked, match.start(2), match.end(2), escapes),
                        )
                    )
                elif kind == "code":
                    frame.sink.append(
                        Code(
                            content=unmask(
                                masked, match.start(1), match.end(1), escapes, verbatim=True
                            )
                        )
                    )
                else:
                    href = unmask(masked, match.start(2), match.end(2), escapes)
                    stack.append(
                        _Frame(
                            pos=match.start(1),
                            end=match.end(1),
                            sink=[],
                            into=frame.sink,
                            wrap=partial(Link, href),
                        )
                    )
                continue

            assert styled is not None
            width = len(styled.marker.text)
            self._flush(masked, frame.pos, styled.start, escapes, frame.sink)
            frame.pos = styled.close + width
            stack.append(
                _Frame(
                    pos=styled.start + width,
                    end=styled.close,
                    sink=[],
                    into=frame.sink,
                    wrap=styled.marker.token,
                )
            )

        return result

    def _find_atomic(self, masked: str, frame: _Frame) -> tuple[str, Match[str]] | None:
        """Earliest image/link/code match in the frame, ties in table order."""
        best: tuple[str, Match[str]] | None = None
        hits = frame.atomic_hits
        pos = frame.pos

        for kind, pattern in _ATOMIC:
            if kind in hits:
                match = hits[kind]
                if match is not None and match.start() < pos:
                    match = hits[kind] = pattern.search(masked, pos, frame.end)
            else:
                match = hits[kind] = pattern.search(masked, pos, frame.end)

            if match is not None and (best is None or match.start() < best[1].start()):
                best = (kind, match)

        return best

    def _find_styled(self, masked: str, frame: _Frame) -> _StyledHit | None:
        """Earliest styled marker pair in the frame, ties in precedence order."""
        best: _StyledHit | None = None
        hits = frame.styled_hits
        pos = frame.pos

        for marker in self._markers:
            text = marker.text
            if text in hits:
                pair = hits[text]
                if pair is not None and pair[0] < pos:
                    pair = hits[text] = _find_pair(masked, marker, pos, frame.end)
            else:
                pair = hits[text] = _find_pair(masked, marker, pos, frame.end)

            if pair is None:
                continue
            start, close = pair
            if best is None or start < best.start:
                best = _StyledHit(start, close, marker)

        return best

    @staticmethod
    def _flush(
        masked: str,
        start: int,
        end: int,
        escapes: dict[int, str],
        sink: list[Inline],
    ) -> None:
        if start < end:
            sink.append(Text(content=unmask(masked, start, end, escapes)))


def _find_pair(masked: str, marker: _Marker, pos: int, end: int) -> tuple[int, int] | None:
    """First occurrence of ``marker`` and the next one after it, or None.

    For markers that need content, an empty pair (``~~``, ``^^``) is not a
    span; the search resumes after it.

    """
    text = marker.text
    width = len(text)
    start = masked.find(text, pos, end)
    while start != -1:
        close = masked.find(text, start + width, end)
        if close == -1:
            return None
        if not marker.needs_content or close > start + width:
            return start, close
        start = masked.find(text, close + width, end)
    return None


def tokenize_inline(text: str, *, config: ParseConfig | None = None) -> list[Inline]:
    """Tokenize one line of inline markdown.

    Args:
        text: Inline markdown (a heading's text, a paragraph line, a cell...)
        config: Config to use instead of the active context's

    Returns:
        List of inline tokens. Unmatched markers stay literal text.

    Raises:
        TypeError: If ``text`` is not a string.

    Example:
        >>> tokenize_inline("**a *b* c**")
        [Bold(content=(Text(content='a '), Italic(content=(Text(content='b'),)), Text(content=' c')))]

    """
    if not isinstance(text, str):
        raise TypeError(f"tokenize_inline() expects str, got {type(text).__name__}")
    return InlineLexer(config).tokenize(text)


__all__ = [
    "InlineLexer",
    "build_marker_table",
    "mask_escapes",
    "tokenize_inline",
    "unmask",
]
