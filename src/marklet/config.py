"""ContextVar-based parse configuration for Marklet.

Provides context-local configuration using Python's ContextVars (PEP 567).
The tokenizer reads the active config once per call.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Per call
    tokens = tokenize(source, config=ParseConfig(tables_enabled=False))

    # For a whole block of work
    from marklet.config import parse_config_context, ParseConfig

    with parse_config_context(ParseConfig(nested_blockquotes=False)):
        tokens = tokenize(source)

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Every feature is enabled by default. Disabling one makes its syntax fall
    through to the next interpretation, usually literal text or a paragraph.

    Attributes:
        tables_enabled: Recognize pipe tables
        task_lists_enabled: Recognize ``- [ ]`` / ``- [x]`` list items
        strikethrough_enabled: Recognize ``~~text~~``
        highlight_enabled: Recognize ``==text==``
        subsup_enabled: Recognize ``~sub~`` and ``^sup^``
        nested_blockquotes: Tokenize ``> > text`` as a blockquote inside a
            blockquote. When False, a nested marker is stripped and the line
            becomes a paragraph of the outer quote.

    """

    tables_enabled: bool = True
    task_lists_enabled: bool = True
    strikethrough_enabled: bool = True
    highlight_enabled: bool = True
    subsup_enabled: bool = True
    nested_blockquotes: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "ParseConfig":
        """Create ParseConfig from dictionary.

        Only includes keys that are valid ParseConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "tables_enabled": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tables_enabled
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "marklet_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (context-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.

    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[ParseConfig]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(tables_enabled=False)):
        ...     tokens = tokenize("| a | b |\\n| c | d |")
        >>> # Previous config restored here

    """
    token = _parse_config.set(config)
    try:
        yield config
    finally:
        _parse_config.reset(token)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
