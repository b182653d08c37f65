"""Shared fixtures for the Marklet test suite."""

from collections.abc import Iterator

import pytest

from marklet import reset_parse_config


@pytest.fixture(autouse=True)
def _default_config() -> Iterator[None]:
    """Every test starts and ends with the default parse config."""
    reset_parse_config()
    yield
    reset_parse_config()
