"""
Bookmark Search Handler - Fuzzy search over the loaded bookmarks.

Matches against bookmark names only; links are never searched.
"""

from search.matcher import Scorer, rank, score
from search.router import ResultItem


class BookmarkSearchHandler:
    """Rank bookmarks by fuzzy match on their names."""

    name = "bookmarks"
    priority = 1000

    def __init__(self, bookmarks, scorer: Scorer = score):
        self.bookmarks = tuple(bookmarks)
        self.scorer = scorer

    def matches(self, query: str) -> bool:
        return True

    def get_results(self, query: str) -> list[ResultItem]:
        ranked = rank(query, self.bookmarks, scorer=self.scorer)
        return [bookmark.display() for bookmark in ranked]
