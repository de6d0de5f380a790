# markhop Utilities Package
"""
Shared utility functions and helpers for the markhop workflow.
"""

from .helpers import (
    ConfigError,
    LauncherError,
    Settings,
    load_settings,
    setup_logging,
    write_items,
)

__all__ = [
    "ConfigError",
    "LauncherError",
    "Settings",
    "load_settings",
    "setup_logging",
    "write_items",
]
