"""
markhop - Bookmark search script filter.

The launcher host runs this once per keystroke with the typed text as the
first argument and reads the result items from stdout.

Usage:
  BOOKMARKS_FILE=~/bookmarks.json DEFAULT_SEARCH_URL=https://... markhop "dash"
"""

import os
import sys
from typing import Mapping, Optional, Sequence, TextIO

from loguru import logger
from search.handlers import BookmarkSearchHandler
from search.router import QueryRouter, ResultItem
from services.bookmarks import load_bookmarks
from utils.helpers import LauncherError, Settings, load_settings, setup_logging, write_items


def build_router(settings: Settings, bookmarks) -> QueryRouter:
    """Create a router with the bookmark handler registered."""
    router = QueryRouter(settings.default_search_url)
    router.register(BookmarkSearchHandler(bookmarks))
    return router


def search(settings: Settings, query: Optional[str]) -> list[ResultItem]:
    """Load bookmarks and return the items for one query."""
    bookmarks = load_bookmarks(settings.bookmarks_file)
    router = build_router(settings, bookmarks)

    handler_name, items = router.route(query)
    logger.debug(f"Query {query!r} handled by {handler_name}: {len(items)} items")
    return items


def main(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
    stream: Optional[TextIO] = None,
) -> int:
    """
    Run one query and write its items.

    Returns:
        Process exit status (0 on success, 1 on configuration or load errors)
    """
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ

    query = argv[0] if argv else None

    setup_logging()

    try:
        settings = load_settings(environ)
        setup_logging(settings.log_level)
        items = search(settings, query)
    except LauncherError as e:
        logger.error(str(e))
        return 1

    write_items(items, stream)
    return 0


if __name__ == "__main__":
    sys.exit(main())
