"""Tests for ContextVar-based parse configuration.

Validates defaults, context manager behavior, thread isolation, and that the
tokenizer honors the active config.
"""

from threading import Thread

import pytest

from marklet import (
    ParseConfig,
    Table,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
    tokenize,
)
from marklet.parsing.inline import build_marker_table


class TestParseConfigDataclass:
    """Test ParseConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        """Default config has every feature enabled."""
        config = ParseConfig()
        assert config.tables_enabled is True
        assert config.task_lists_enabled is True
        assert config.strikethrough_enabled is True
        assert config.highlight_enabled is True
        assert config.subsup_enabled is True
        assert config.nested_blockquotes is True

    def test_immutability(self) -> None:
        """Config is frozen and cannot be modified."""
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.tables_enabled = False  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = ParseConfig.from_dict({"tables_enabled": False, "unknown_key": "ignored"})
        assert config == ParseConfig(tables_enabled=False)

    def test_from_dict_empty(self) -> None:
        assert ParseConfig.from_dict({}) == ParseConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_get_returns_default(self) -> None:
        assert get_parse_config() == ParseConfig()

    def test_set_and_reset(self) -> None:
        custom = ParseConfig(highlight_enabled=False)
        set_parse_config(custom)
        assert get_parse_config() is custom
        reset_parse_config()
        assert get_parse_config() == ParseConfig()


class TestParseConfigContext:
    """Test the parse_config_context context manager."""

    def test_yields_and_restores(self) -> None:
        custom = ParseConfig(tables_enabled=False)
        with parse_config_context(custom) as active:
            assert active is custom
            assert get_parse_config() is custom
        assert get_parse_config() == ParseConfig()

    def test_restores_previous_not_default(self) -> None:
        outer = ParseConfig(subsup_enabled=False)
        inner = ParseConfig(tables_enabled=False)
        with parse_config_context(outer):
            with parse_config_context(inner):
                assert get_parse_config() is inner
            assert get_parse_config() is outer

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError), parse_config_context(ParseConfig(tables_enabled=False)):
            raise RuntimeError("boom")
        assert get_parse_config() == ParseConfig()

    def test_tokenize_uses_context(self) -> None:
        source = "| a | b |\n| 1 | 2 |"
        with parse_config_context(ParseConfig(tables_enabled=False)):
            blocks = tokenize(source)
        assert not any(isinstance(block, Table) for block in blocks)

    def test_explicit_config_beats_context(self) -> None:
        source = "| a | b |\n| 1 | 2 |"
        with parse_config_context(ParseConfig(tables_enabled=False)):
            blocks = tokenize(source, config=ParseConfig())
        assert isinstance(blocks[0], Table)


class TestThreadIsolation:
    """Config set in one thread does not leak into another."""

    def test_worker_config_stays_in_worker(self) -> None:
        custom = ParseConfig(tables_enabled=False)
        seen: list[ParseConfig] = []

        def worker() -> None:
            set_parse_config(custom)
            seen.append(get_parse_config())

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [custom]
        assert get_parse_config() == ParseConfig()


class TestMarkerTable:
    """Feature toggles shape the inline marker table."""

    def test_default_markers(self) -> None:
        texts = [marker.text for marker in build_marker_table(ParseConfig())]
        assert texts == ["***", "___", "**", "__", "*", "_", "~~", "==", "~", "^"]

    def test_all_optional_markers_off(self) -> None:
        config = ParseConfig(
            strikethrough_enabled=False,
            highlight_enabled=False,
            subsup_enabled=False,
        )
        texts = [marker.text for marker in build_marker_table(config)]
        assert texts == ["***", "___", "**", "__", "*", "_"]
