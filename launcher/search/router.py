"""
Query Router - Dispatches search queries to priority-ordered handlers.

Each handler declares a priority (lower = higher priority) and a matches()
method. The router asks matching handlers in order and returns the first
non-empty result list. A blank query gets a prompt item, and a query no
handler can answer gets a "nothing found" item; both point at the
configured default search URL.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

FALLBACK_CAPTION = "Open them"


@dataclass(frozen=True)
class ResultItem:
    """A single display item handed to the launcher host."""
    title: str
    subtitle: str = ""
    arg: str = ""


class SearchHandler(ABC):
    """Base class for all search handlers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Handler identifier."""
        ...

    @property
    @abstractmethod
    def priority(self) -> int:
        """Lower number = checked first. Bookmark search is 1000."""
        ...

    @abstractmethod
    def matches(self, query: str) -> bool:
        """Return True if this handler should process the query."""
        ...

    @abstractmethod
    def get_results(self, query: str) -> list[ResultItem]:
        """Return results for the normalized query."""
        ...


def normalize_query(query: Optional[str]) -> str:
    """Trim surrounding whitespace and lower-case."""
    if query is None:
        return ""
    return query.strip().lower()


def prompt_item(default_search_url: str) -> ResultItem:
    """Item shown before anything has been typed."""
    return ResultItem(
        title="Search for bookmarks",
        subtitle=FALLBACK_CAPTION,
        arg=default_search_url,
    )


def no_match_item(query: str, default_search_url: str) -> ResultItem:
    """Item shown when no bookmark matches the query."""
    return ResultItem(
        title=f"nothing found for {query}, try search on website",
        subtitle=FALLBACK_CAPTION,
        arg=default_search_url,
    )


class QueryRouter:
    """Routes queries to the appropriate handler based on priority."""

    def __init__(self, default_search_url: str):
        self.default_search_url = default_search_url
        self._handlers: list[SearchHandler] = []

    def register(self, handler: SearchHandler) -> None:
        """Register a handler and re-sort by priority."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)

    def route(self, query: Optional[str]) -> tuple[str, list[ResultItem]]:
        """
        Find the first handler with results for the query.

        Args:
            query: Raw query text, may be None or blank

        Returns:
            Tuple of (handler_name, results_list).
            ("prompt", [prompt item]) for a blank query,
            ("none", [no-match item]) if no handler has results.
        """
        q = normalize_query(query)
        if not q:
            return "prompt", [prompt_item(self.default_search_url)]

        for handler in self._handlers:
            if handler.matches(q):
                results = handler.get_results(q)
                if results:
                    return handler.name, results

        return "none", [no_match_item(q, self.default_search_url)]
