"""Shared test fixtures for fuzzymatch."""

import pytest
from pathlib import Path

from fuzzymatch.services.config import ConfigManager, MatchSettings
from fuzzymatch.services.fuzzy import Matcher, Memo
from fuzzymatch.services.markup import MarkupStyle


@pytest.fixture
def matcher() -> Matcher:
    """Create a Matcher with default weights."""
    return Matcher()


@pytest.fixture
def rich_matcher() -> Matcher:
    """Create a Matcher that renders Rich console markup."""
    return Matcher(MatchSettings(markup_style=MarkupStyle.RICH))


@pytest.fixture
def memo() -> Memo:
    """Create an empty Memo."""
    return Memo()


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def config_manager(config_dir: Path) -> ConfigManager:
    """Create a ConfigManager with temp directory."""
    return ConfigManager(config_dir=config_dir)
