"""
Bookmarks Service - Bookmark records and the bookmarks file loader.

The bookmarks file is a JSON object mapping group names to arrays of
entries, each with a "title" and an "href":

    {
        "work": [{"title": "Dashboard", "href": "https://dash.example.com"}],
        "personal": [{"title": "Mail", "href": "https://mail.example.com"}]
    }

Groups are flattened in file order. An entry missing either field stops
the load; no partial collection is ever returned.
"""

import json
from dataclasses import dataclass
from pathlib import Path

from loguru import logger
from search.router import ResultItem
from utils.helpers import LauncherError

OPEN_CAPTION = "Open in browser"


class BookmarkLoadError(LauncherError):
    """The bookmarks file is missing, unreadable, or malformed."""


@dataclass(frozen=True)
class Bookmark:
    """A named link. Only the name is searched."""
    name: str
    link: str

    def display(self) -> ResultItem:
        """Project this bookmark into a result item for the host."""
        return ResultItem(title=self.name, subtitle=OPEN_CAPTION, arg=self.link)


def read_bookmarks(text: str) -> list[Bookmark]:
    """
    Parse bookmarks JSON text.

    Args:
        text: Contents of a bookmarks file

    Returns:
        List of Bookmark objects, groups flattened in file order

    Raises:
        BookmarkLoadError: invalid JSON, wrong shape, or an entry
            without a string "title" and "href"
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise BookmarkLoadError(f"Invalid bookmarks JSON: {e}") from e

    if not isinstance(data, dict):
        raise BookmarkLoadError("Bookmarks file must contain a JSON object of groups")

    bookmarks = []
    for group, entries in data.items():
        if not isinstance(entries, list):
            raise BookmarkLoadError(f"Group '{group}' must be an array of bookmarks")

        for index, entry in enumerate(entries):
            bookmarks.append(_entry_to_bookmark(group, index, entry))

    return bookmarks


def _entry_to_bookmark(group: str, index: int, entry) -> Bookmark:
    """Validate one file entry and build its Bookmark."""
    if not isinstance(entry, dict):
        raise BookmarkLoadError(f"Bookmark {group}[{index}] is not an object")

    for field in ("title", "href"):
        if not isinstance(entry.get(field), str):
            raise BookmarkLoadError(f"Bookmark {group}[{index}] is missing '{field}'")

    if not entry["title"]:
        raise BookmarkLoadError(f"Bookmark {group}[{index}] has an empty 'title'")

    return Bookmark(name=entry["title"], link=entry["href"])


def load_bookmarks(path: Path) -> list[Bookmark]:
    """
    Load bookmarks from a JSON file.

    Args:
        path: Location of the bookmarks file

    Returns:
        List of Bookmark objects

    Raises:
        BookmarkLoadError: file cannot be read or its contents are malformed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise BookmarkLoadError(f"Could not read bookmarks from {path}: {e}") from e

    bookmarks = read_bookmarks(text)
    logger.debug(f"Loaded {len(bookmarks)} bookmarks from {path}")
    return bookmarks
