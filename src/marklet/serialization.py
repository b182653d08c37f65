"""Token serialization — JSON round-trip for Marklet tokens.

Converts typed tokens to/from JSON-compatible dicts in the classic token
shape used by markdown-to-HTML renderers:

    {"megaType": "heading", "level": 1, "content": [{"type": "text", "content": "Hi"}]}

Block tokens carry ``megaType``, inline tokens carry ``type``. List items have
no discriminant; ``checked`` is omitted when unset and ``items`` when empty.

``to_dict`` and ``from_dict`` use an explicit work stack, so arbitrarily deep
trees (for instance thousands of nested blockquotes) convert without
recursion. The JSON helpers add the ``json`` module on top.

Example:
    from marklet import tokenize
    from marklet.serialization import to_json, from_json

    tokens = tokenize("# Hello **World**")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from collections.abc import Sequence
from dataclasses import fields
from typing import Any

from marklet.errors import SerializationError
from marklet.tokens import (
    Block,
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

BLOCK_KEY = "megaType"
INLINE_KEY = "type"

# Registry of discriminants to classes for deserialization
_BLOCK_TYPES: dict[str, type] = {
    cls.mega_type: cls
    for cls in (Heading, Paragraph, CodeBlock, HorizontalRule, BlockQuote, List, Table)
}
_INLINE_TYPES: dict[str, type] = {
    cls.type: cls
    for cls in (
        Text,
        Bold,
        Italic,
        BoldItalic,
        Strikethrough,
        Highlight,
        Subscript,
        Superscript,
        Code,
        Link,
        Image,
    )
}

# Fields whose dict elements are list items rather than tagged tokens
_ITEM_FIELDS = {"items"}


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token (and its subtree) to a JSON-compatible dict.

    Args:
        token: Any block token, list item, or inline token.

    Returns:
        Dict with the discriminant key first, then the token's fields.

    """
    root: dict[str, Any] = {}
    stack: list[tuple[Token, dict[str, Any]]] = [(token, root)]

    while stack:
        node, out = stack.pop()

        if isinstance(node, ListItem):
            out["content"] = _emit(node.content, stack)
            if node.checked is not None:
                out["checked"] = node.checked
            if node.items:
                out["items"] = _emit(node.items, stack)
            continue

        mega_type = getattr(node, "mega_type", None)
        if mega_type is not None:
            out[BLOCK_KEY] = mega_type
        else:
            out[INLINE_KEY] = node.type

        for f in fields(node):
            out[f.name] = _emit(getattr(node, f.name), stack)

    return root


def _emit(value: Any, stack: list[tuple[Token, dict[str, Any]]]) -> Any:
    """Serialize one field value, deferring child tokens to ``stack``.

    Nested tuples only occur at fixed, shallow depths (table rows of cells),
    so walking them directly is bounded by the token shapes.

    """
    if isinstance(value, tuple):
        result: list[Any] = []
        for item in value:
            if isinstance(item, tuple):
                result.append(_emit(item, stack))
            else:
                child: dict[str, Any] = {}
                stack.append((item, child))
                result.append(child)
        return result
    return value


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a typed token from a dict.

    Args:
        data: Dict as produced by :func:`to_dict`. A dict without a
            discriminant is read as a list item.

    Returns:
        Typed token (frozen dataclass).

    Raises:
        SerializationError: If a discriminant is unknown, a field is not
            accepted by the token, or a value has the wrong shape.

    """
    if not isinstance(data, dict):
        raise SerializationError(f"Expected a token dict, got {type(data).__name__}")

    # Post-order: ("enter", value, path, field) expands a value,
    # ("list", n) and ("token", cls, names, path) assemble finished children.
    values: list[Any] = []
    work: list[tuple[Any, ...]] = [("enter", data, "$", "items" if _is_item(data) else "")]

    while work:
        entry = work.pop()
        kind = entry[0]

        if kind == "enter":
            _, value, path, field_name = entry
            if isinstance(value, list):
                work.append(("list", len(value)))
                for index in range(len(value) - 1, -1, -1):
                    work.append(("enter", value[index], f"{path}[{index}]", field_name))
            elif isinstance(value, dict):
                cls = _resolve_class(value, path, field_name)
                names = [key for key in value if key not in (BLOCK_KEY, INLINE_KEY)]
                work.append(("token", cls, names, path))
                for name in reversed(names):
                    work.append(("enter", value[name], f"{path}.{name}", name))
            else:
                values.append(value)

        elif kind == "list":
            count = entry[1]
            items = tuple(values[len(values) - count :]) if count else ()
            del values[len(values) - count :]
            values.append(items)

        else:
            _, cls, names, path = entry
            count = len(names)
            args = values[len(values) - count :] if count else []
            del values[len(values) - count :]
            values.append(_build(cls, dict(zip(names, args, strict=True)), path))

    return values[0]


def _is_item(data: dict[str, Any]) -> bool:
    return BLOCK_KEY not in data and INLINE_KEY not in data


def _resolve_class(value: dict[str, Any], path: str, field_name: str) -> type:
    """Pick the token class for a dict from its discriminant."""
    if BLOCK_KEY in value:
        cls = _BLOCK_TYPES.get(value[BLOCK_KEY])
        if cls is None:
            raise SerializationError(f"Unknown block type: {value[BLOCK_KEY]!r}", path)
        return cls
    if INLINE_KEY in value:
        cls = _INLINE_TYPES.get(value[INLINE_KEY])
        if cls is None:
            raise SerializationError(f"Unknown inline type: {value[INLINE_KEY]!r}", path)
        return cls
    if field_name in _ITEM_FIELDS:
        return ListItem
    raise SerializationError(f"Missing {BLOCK_KEY!r} or {INLINE_KEY!r} field", path)


def _build(cls: type, kwargs: dict[str, Any], path: str) -> Token:
    valid = {f.name for f in fields(cls)}
    unknown = sorted(set(kwargs) - valid)
    if unknown:
        raise SerializationError(f"Unexpected field(s) for {cls.__name__}: {unknown}", path)
    try:
        return cls(**kwargs)
    except TypeError as e:
        raise SerializationError(f"Cannot build {cls.__name__}: {e}", path) from e


def to_json(tokens: Token | Sequence[Token], *, indent: int | None = None) -> str:
    """Serialize a token or a token list to a JSON string.

    Output is deterministic (sorted keys).

    Args:
        tokens: A single token or a sequence (typically ``tokenize`` output).
        indent: JSON indentation level (None for compact).

    """
    if isinstance(tokens, Sequence):
        payload: Any = [to_dict(token) for token in tokens]
    else:
        payload = to_dict(tokens)
    return json.dumps(payload, sort_keys=True, indent=indent, ensure_ascii=False)


def from_json(data: str) -> list[Block] | Token:
    """Deserialize tokens from a JSON string.

    Returns:
        A list of tokens for a JSON array, otherwise a single token.

    Raises:
        SerializationError: If the JSON does not describe tokens.

    """
    try:
        raw = json.loads(data)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e.msg}") from e

    if isinstance(raw, list):
        return [from_dict(item) for item in raw]  # type: ignore[misc]
    return from_dict(raw)


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
