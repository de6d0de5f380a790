"""
Search handlers - Pluggable query processors.

Each handler checks if it can handle a query and returns typed results.
"""

from .bookmark_search import BookmarkSearchHandler

__all__ = [
    "BookmarkSearchHandler",
]
