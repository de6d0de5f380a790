"""
Search package - Query routing, fuzzy ranking, and handler framework.

Queries are dispatched to priority-ordered handlers; the bookmark handler
ranks bookmarks with the fuzzy matcher.
"""

from .router import QueryRouter, SearchHandler, ResultItem
from .matcher import rank, score

__all__ = ["QueryRouter", "SearchHandler", "ResultItem", "rank", "score"]
