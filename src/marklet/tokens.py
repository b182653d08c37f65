"""Typed tokens for Marklet.

All tokens are frozen dataclasses with slots for:
- Immutability: the tree is built once per ``tokenize`` call and handed over
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: Python 3.10+ match statements work naturally

Token Hierarchy:
Block (discriminant: ``mega_type``)
├── Heading
├── Paragraph
├── CodeBlock
├── HorizontalRule
├── BlockQuote
├── List (holds ListItem)
└── Table
Inline (discriminant: ``type``)
├── Text
├── Bold / Italic / BoldItalic
├── Strikethrough / Highlight
├── Subscript / Superscript
├── Code
├── Link
└── Image

The discriminants are class attributes, not fields, so they never appear in
``dataclasses.fields()`` and cannot disagree with the class.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal

# =============================================================================
# Inline Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Plain text content, with escapes already resolved."""

    type: ClassVar[str] = "text"

    content: str


@dataclass(frozen=True, slots=True)
class Bold:
    """Bold text.

    Markdown: **text** or __text__

    """

    type: ClassVar[str] = "bold"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Italic:
    """Italic text.

    Markdown: *text* or _text_

    """

    type: ClassVar[str] = "italic"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class BoldItalic:
    """Bold and italic text.

    Markdown: ***text*** or ___text___

    """

    type: ClassVar[str] = "boldItalic"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Strikethrough:
    """Struck-out text.

    Markdown: ~~text~~

    """

    type: ClassVar[str] = "strikethrough"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Highlight:
    """Highlighted text.

    Markdown: ==text==

    """

    type: ClassVar[str] = "highlight"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Subscript:
    """Subscript text.

    Markdown: H~2~O

    """

    type: ClassVar[str] = "subscript"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Superscript:
    """Superscript text.

    Markdown: E=mc^2^

    """

    type: ClassVar[str] = "superscript"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Code:
    """Inline code. Content is verbatim and never lexed further.

    Markdown: `code`

    """

    type: ClassVar[str] = "code"

    content: str


@dataclass(frozen=True, slots=True)
class Link:
    """Hyperlink whose text is itself inline content.

    Markdown: [text](href)

    """

    type: ClassVar[str] = "link"

    href: str
    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Image:
    """Image. Alt text is a plain string, never lexed.

    Markdown: ![alt](src)

    """

    type: ClassVar[str] = "image"

    alt: str
    src: str


# PEP 695 type aliases for inline tokens
type Styled = Bold | Italic | BoldItalic | Strikethrough | Highlight | Subscript | Superscript

type Inline = (
    Text
    | Bold
    | Italic
    | BoldItalic
    | Strikethrough
    | Highlight
    | Subscript
    | Superscript
    | Code
    | Link
    | Image
)

STYLED_TYPES: tuple[type, ...] = (
    Bold,
    Italic,
    BoldItalic,
    Strikethrough,
    Highlight,
    Subscript,
    Superscript,
)

# One table cell is a run of inline tokens
type Cell = tuple[Inline, ...]


# =============================================================================
# Block Tokens
# =============================================================================


@dataclass(frozen=True, slots=True)
class Heading:
    """ATX heading.

    Markdown: # Heading ... ###### Heading

    """

    mega_type: ClassVar[str] = "heading"

    level: Literal[1, 2, 3, 4, 5, 6]
    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class Paragraph:
    """A single non-blank line that matched no other block."""

    mega_type: ClassVar[str] = "paragraph"

    content: tuple[Inline, ...] = ()


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Fenced code block.

    Markdown: ```lang ... ```

    """

    mega_type: ClassVar[str] = "codeBlock"

    content: str
    language: str = ""


@dataclass(frozen=True, slots=True)
class HorizontalRule:
    """Horizontal rule.

    Markdown: --- or *** or ___

    """

    mega_type: ClassVar[str] = "horizontalRule"


@dataclass(frozen=True, slots=True)
class BlockQuote:
    """Block quote holding re-tokenized block content.

    Markdown: > quoted text

    """

    mega_type: ClassVar[str] = "blockquote"

    content: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class ListItem:
    """List item.

    ``checked`` is None for plain items and True/False for task items.
    ``items`` holds nested items of deeper indentation.

    """

    content: tuple[Inline, ...] = ()
    checked: bool | None = None
    items: tuple[ListItem, ...] = ()


@dataclass(frozen=True, slots=True)
class List:
    """Ordered or unordered list.

    Markdown: - item or 1. item

    """

    mega_type: ClassVar[str] = "list"

    items: tuple[ListItem, ...] = ()
    ordered: bool = False
    start: int = 1  # Starting number for ordered lists


@dataclass(frozen=True, slots=True)
class Table:
    """Pipe table. ``header`` is empty for headerless tables.

    Markdown:
        | a | b |
        |---|---|
        | 1 | 2 |

    """

    mega_type: ClassVar[str] = "table"

    header: tuple[Cell, ...] = ()
    rows: tuple[tuple[Cell, ...], ...] = ()


# PEP 695 type alias for block tokens
type Block = Heading | Paragraph | CodeBlock | HorizontalRule | BlockQuote | List | Table

type Token = Block | ListItem | Inline
