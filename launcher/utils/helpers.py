"""
Helper utilities for the markhop workflow.

Provides common functions used by the entry point:
- Settings loading (TOML file + environment)
- Logging setup
- Writing result items for the launcher host
"""

import json
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, TextIO

import toml
from loguru import logger


class LauncherError(Exception):
    """Base class for fatal errors raised before any query is ranked."""


class ConfigError(LauncherError):
    """A required setting is missing or the settings file is unusable."""


@dataclass(frozen=True)
class Settings:
    """Resolved workflow configuration, built once at startup."""
    bookmarks_file: Path
    default_search_url: str
    log_level: str = "WARNING"


DEFAULTS: Dict[str, Any] = {
    "bookmarks": {
        "file": None,
    },
    "search": {
        "default_url": None,
    },
    "logging": {
        "level": "WARNING",
    },
}

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "BOOKMARKS_FILE": ("bookmarks", "file"),
    "DEFAULT_SEARCH_URL": ("search", "default_url"),
    "MARKHOP_LOG_LEVEL": ("logging", "level"),
}


def _settings_path(environ: Mapping[str, str]) -> Path:
    """Locate settings.toml (MARKHOP_SETTINGS, then XDG config dir)."""
    explicit = environ.get("MARKHOP_SETTINGS")
    if explicit:
        return Path(explicit).expanduser()

    config_home = environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / "markhop" / "settings.toml"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Load workflow settings.

    Defaults are overlaid with settings.toml (if present), then with
    environment variables.

    Args:
        environ: Environment mapping, defaults to os.environ

    Returns:
        Settings instance

    Raises:
        ConfigError: settings file is unreadable or malformed, bookmarks
            file / default search URL are not configured, or the log level
            is unknown

    Example settings.toml:
        [bookmarks]
        file = "~/bookmarks.json"

        [search]
        default_url = "https://bookmarks.example.com"
    """
    if environ is None:
        environ = os.environ

    settings_path = _settings_path(environ)

    if settings_path.exists():
        try:
            loaded = toml.load(settings_path)
        except (OSError, UnicodeDecodeError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Could not load settings from {settings_path}: {e}") from e
        merged = _deep_merge(DEFAULTS, loaded)

        for section in DEFAULTS:
            if not isinstance(merged[section], dict):
                raise ConfigError(f"Section [{section}] in {settings_path} must be a table")
    else:
        logger.debug(f"Settings file not found at {settings_path}, using environment only")
        merged = _deep_merge(DEFAULTS, {})

    for var, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(var)
        if value:
            merged = _deep_merge(merged, {section: {key: value}})

    bookmarks_file = merged["bookmarks"].get("file")
    if not bookmarks_file:
        raise ConfigError("BOOKMARKS_FILE not set")

    default_search_url = merged["search"].get("default_url")
    if not default_search_url:
        raise ConfigError("DEFAULT_SEARCH_URL not set")

    log_level = str(merged["logging"].get("level") or "WARNING").upper()
    try:
        logger.level(log_level)
    except ValueError as e:
        raise ConfigError(f"Unknown log level '{log_level}'") from e

    return Settings(
        bookmarks_file=Path(str(bookmarks_file)).expanduser(),
        default_search_url=str(default_search_url),
        log_level=log_level,
    )


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def setup_logging(level: str = "WARNING") -> None:
    """Send loguru output to stderr only; stdout carries the item list."""
    logger.remove()
    logger.add(sys.stderr, level=level)


def write_items(items: Iterable, stream: Optional[TextIO] = None) -> None:
    """
    Write result items as Alfred script-filter JSON.

    Args:
        items: ResultItem objects (title, subtitle, arg)
        stream: Output stream, defaults to sys.stdout

    Output shape:
        {"items": [{"title": ..., "subtitle": ..., "arg": ...}]}
    """
    if stream is None:
        stream = sys.stdout

    payload = {
        "items": [
            {"title": item.title, "subtitle": item.subtitle, "arg": item.arg}
            for item in items
        ]
    }
    stream.write(json.dumps(payload, ensure_ascii=False))
    stream.write("\n")
    stream.flush()
