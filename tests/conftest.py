"""Shared test configuration and fixtures."""

import logging
from collections.abc import Iterator

import pytest

from playlie.logging import JSONLogFormatter

_SETTINGS_ENV = (
    "LASTFM_API_KEY",
    "PLAYLIE_USER",
    "PLAYLIE_ARTIST",
    "PLAYLIE_TRACK",
    "PLAYLIE_REQUEST_TIMEOUT",
    "PLAYLIE_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's own Last.fm configuration out of the tests."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Drop handlers installed by configure_logging() and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, JSONLogFormatter):
            root.removeHandler(handler)
    root.setLevel(level)
