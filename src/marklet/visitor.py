"""Token tree walking and visiting for Marklet.

Provides a pre-order ``walk`` generator and a base visitor class with
match-based dispatch.

Example — collect all link targets:

    class LinkCollector(BaseVisitor[None]):
        def __init__(self) -> None:
            self.hrefs: list[str] = []

        def visit_link(self, token: Link) -> None:
            self.hrefs.append(token.href)

    collector = LinkCollector()
    collector.visit(tokenize(source))

Both walk the tree with an explicit stack, so deeply nested blockquotes do
not hit the recursion limit.

Thread Safety:
    Visitors are NOT shared across threads by default (they may accumulate
    mutable state). Create a new visitor per thread. ``walk`` is pure.

"""

from collections.abc import Iterable, Iterator, Sequence

from marklet.tokens import (
    BlockQuote,
    Bold,
    BoldItalic,
    Code,
    CodeBlock,
    Heading,
    Highlight,
    HorizontalRule,
    Image,
    Italic,
    Link,
    List,
    ListItem,
    Paragraph,
    Strikethrough,
    Subscript,
    Superscript,
    Table,
    Text,
    Token,
)


def children(token: Token) -> tuple[Token, ...]:
    """Direct child tokens of ``token`` in document order.

    Table cells are flattened: header cells first, then each row's cells.

    """
    match token:
        case (
            Heading(content=content)
            | Paragraph(content=content)
            | BlockQuote(content=content)
            | Bold(content=content)
            | Italic(content=content)
            | BoldItalic(content=content)
            | Strikethrough(content=content)
            | Highlight(content=content)
            | Subscript(content=content)
            | Superscript(content=content)
            | Link(content=content)
        ):
            return content
        case List(items=items):
            return items
        case ListItem(content=content, items=items):
            return (*content, *items)
        case Table(header=header, rows=rows):
            return tuple(
                inline
                for row in (header, *rows)
                for cell in row
                for inline in cell
            )
        case _:
            return ()  # Leaf tokens: no children


def walk(tokens: Token | Iterable[Token]) -> Iterator[Token]:
    """Yield every token in pre-order (parents before children).

    Args:
        tokens: A single token or a token list such as ``tokenize`` output.

    Example:
        >>> [type(t).__name__ for t in walk(tokenize("# **Hi**"))]
        ['Heading', 'Bold', 'Text']

    """
    roots = list(tokens) if isinstance(tokens, Iterable) else [tokens]
    stack: list[Token] = roots[::-1]
    while stack:
        token = stack.pop()
        yield token
        stack.extend(reversed(children(token)))


class BaseVisitor[T]:
    """Base token visitor with match-based dispatch.

    Subclass and override ``visit_*`` methods for token types you care about.
    Unhandled token types fall through to ``visit_default``. Children are
    visited automatically in pre-order after their parent.

    Type parameter ``T`` is the return type of visit methods (use ``None``
    for side-effect-only visitors).

    """

    def visit(self, tokens: Token | Sequence[Token]) -> T | None:
        """Visit ``tokens`` and every descendant.

        Returns:
            The result for a single root token; None for a token list.

        """
        result: T | None = None
        is_root = not isinstance(tokens, Sequence)
        for token in walk(tokens):
            value = self._dispatch(token)
            if is_root:
                result = value
                is_root = False
        return result

    def visit_default(self, token: Token) -> T:
        """Called for token types without a specific ``visit_*`` method.

        Override this for catch-all behavior. Default returns None
        (suitable for ``BaseVisitor[None]``).

        """
        return None  # type: ignore[return-value]

    # -- Block visitors --------------------------------------------------------

    def visit_heading(self, token: Heading) -> T:
        return self.visit_default(token)

    def visit_paragraph(self, token: Paragraph) -> T:
        return self.visit_default(token)

    def visit_code_block(self, token: CodeBlock) -> T:
        return self.visit_default(token)

    def visit_horizontal_rule(self, token: HorizontalRule) -> T:
        return self.visit_default(token)

    def visit_block_quote(self, token: BlockQuote) -> T:
        return self.visit_default(token)

    def visit_list(self, token: List) -> T:
        return self.visit_default(token)

    def visit_list_item(self, token: ListItem) -> T:
        return self.visit_default(token)

    def visit_table(self, token: Table) -> T:
        return self.visit_default(token)

    # -- Inline visitors -------------------------------------------------------

    def visit_text(self, token: Text) -> T:
        return self.visit_default(token)

    def visit_bold(self, token: Bold) -> T:
        return self.visit_default(token)

    def visit_italic(self, token: Italic) -> T:
        return self.visit_default(token)

    def visit_bold_italic(self, token: BoldItalic) -> T:
        return self.visit_default(token)

    def visit_strikethrough(self, token: Strikethrough) -> T:
        return self.visit_default(token)

    def visit_highlight(self, token: Highlight) -> T:
        return self.visit_default(token)

    def visit_subscript(self, token: Subscript) -> T:
        return self.visit_default(token)

    def visit_superscript(self, token: Superscript) -> T:
        return self.visit_default(token)

    def visit_code(self, token: Code) -> T:
        return self.visit_default(token)

    def visit_link(self, token: Link) -> T:
        return self.visit_default(token)

    def visit_image(self, token: Image) -> T:
        return self.visit_default(token)

    # -- Internal dispatch -----------------------------------------------------

    def _dispatch(self, token: Token) -> T:
        """Match-based dispatch to visit_* methods."""
        match token:
            case Heading():
                return self.visit_heading(token)
            case Paragraph():
                return self.visit_paragraph(token)
            case CodeBlock():
                return self.visit_code_block(token)
            case HorizontalRule():
                return self.visit_horizontal_rule(token)
            case BlockQuote():
                return self.visit_block_quote(token)
            case List():
                return self.visit_list(token)
            case ListItem():
                return self.visit_list_item(token)
            case Table():
                return self.visit_table(token)
            case Text():
                return self.visit_text(token)
            case Bold():
                return self.visit_bold(token)
            case Italic():
                return self.visit_italic(token)
            case BoldItalic():
                return self.visit_bold_italic(token)
            case Strikethrough():
                return self.visit_strikethrough(token)
            case Highlight():
                return self.visit_highlight(token)
            case Subscript():
                return self.visit_subscript(token)
            case Superscript():
                return self.visit_superscript(token)
            case Code():
                return self.visit_code(token)
            case Link():
                return self.visit_link(token)
            case Image():
                return self.visit_image(token)
            case _:
                return self.visit_default(token)


__all__ = ["BaseVisitor", "children", "walk"]
