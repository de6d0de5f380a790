# markhop Services Package
"""
Backend services for the markhop workflow.

Services handle the bookmark data and its loading from disk.
"""

from .bookmarks import Bookmark, BookmarkLoadError, load_bookmarks, read_bookmarks

__all__ = ["Bookmark", "BookmarkLoadError", "load_bookmarks", "read_bookmarks"]
