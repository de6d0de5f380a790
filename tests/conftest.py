"""
Shared test fixtures for the markhop test suite.

Provides temporary bookmarks and settings files that use real file I/O
(no mocking of the filesystem).
"""

import json

import pytest
import toml
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks added by setup_logging so they don't outlive the test's stderr."""
    yield
    logger.remove()


@pytest.fixture
def bookmarks_data():
    """Bookmark groups in the on-disk format."""
    return {
        "work": [
            {"title": "Dashboard", "href": "http://a"},
            {"title": "Dash Reports", "href": "http://b"},
        ],
        "personal": [
            {"title": "Other", "href": "http://c"},
        ],
    }


@pytest.fixture
def tmp_bookmarks(tmp_path, bookmarks_data):
    """Create a real bookmarks JSON file with test entries."""
    bookmarks_path = tmp_path / "bookmarks.json"
    bookmarks_path.write_text(json.dumps(bookmarks_data, indent=2))
    return bookmarks_path


@pytest.fixture
def tmp_settings(tmp_path, tmp_bookmarks):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "bookmarks": {"file": str(tmp_bookmarks)},
        "search": {"default_url": "https://search.example.com"},
        "logging": {"level": "debug"},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


@pytest.fixture
def env(tmp_path, tmp_bookmarks):
    """Minimal environment: no settings file, both required variables set."""
    return {
        "XDG_CONFIG_HOME": str(tmp_path / "config"),
        "BOOKMARKS_FILE": str(tmp_bookmarks),
        "DEFAULT_SEARCH_URL": "https://search.example.com",
    }
