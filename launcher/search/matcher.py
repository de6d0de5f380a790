"""
Fuzzy Matcher - Subsequence scoring and ranking of bookmarks by name.

A query matches a name when all of its characters appear in the name in
order (not necessarily adjacent), ignoring case. Matches are scored with
an fzf-style alignment:

  - every matched character:           +16
  - character at a word boundary:       +8  (doubled for the first query char)
  - character continuing a run:         +4  (or the boundary bonus if larger)
  - opening a gap between matches:      -3
  - each further skipped character:     -1

The best-scoring alignment over all placements is used, so "board" ranks
"Board Games" above "Dashboard".
"""

from typing import Callable, Iterable, Optional

from rapidfuzz.distance import LCSseq

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = 8
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

Scorer = Callable[[str, str], Optional[int]]


def _boundary_bonus(text: str, index: int) -> int:
    """Bonus for matching at text[index]: name start or after a separator."""
    if index == 0:
        return BONUS_BOUNDARY
    if text[index].isalnum() and not text[index - 1].isalnum():
        return BONUS_BOUNDARY
    return 0


def _best(*values: Optional[int]) -> Optional[int]:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def score(query: str, candidate: str) -> Optional[int]:
    """
    Score how well query fuzzy-matches candidate.

    Args:
        query: Search text (case is ignored)
        candidate: Text to match against (case is ignored)

    Returns:
        Integer score (higher = better), or None if the query characters
        do not occur in candidate in order.
    """
    query = query.lower()
    text = candidate.lower()

    if not query:
        return 0

    # The query is a subsequence iff it is its own longest common subsequence
    if len(query) > len(text) or LCSseq.similarity(query, text) < len(query):
        return None

    bonuses = [_boundary_bonus(text, j) for j in range(len(text))]

    # prev[j]: best score with the previous query char matched at text[j]
    prev: list[Optional[int]] = [
        SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER if ch == query[0] else None
        for j, ch in enumerate(text)
    ]

    for qch in query[1:]:
        cur: list[Optional[int]] = [None] * len(text)
        # Best score ending at least one skipped character before j
        gap_best = None

        for j, ch in enumerate(text):
            opened = prev[j - 2] + SCORE_GAP_START if j >= 2 and prev[j - 2] is not None else None
            extended = gap_best + SCORE_GAP_EXTENSION if gap_best is not None else None
            gap_best = _best(opened, extended)

            if ch != qch:
                continue

            consecutive = None
            if j >= 1 and prev[j - 1] is not None:
                consecutive = prev[j - 1] + SCORE_MATCH + max(bonuses[j], BONUS_CONSECUTIVE)
            gapped = gap_best + SCORE_MATCH + bonuses[j] if gap_best is not None else None
            cur[j] = _best(consecutive, gapped)

        prev = cur

    return _best(*prev)


def rank(query: str, records: Iterable, scorer: Scorer = score) -> list:
    """
    Rank records by how well their name matches the query.

    Each record is scored once. Records without a score are dropped, the
    rest are ordered by descending score. Equal scores keep input order.

    Args:
        query: Normalized, non-empty search text
        records: Objects with a ``name`` attribute (e.g. Bookmark)
        scorer: Function (query, name) -> int or None

    Returns:
        Matching records, best first. Empty if nothing matches.
    """
    scored = []
    for record in records:
        value = scorer(query, record.name)
        if value is not None:
            scored.append((value, record))

    # list.sort is stable, also with reverse=True
    scored.sort(key=lambda pair: pair[0], reverse=True)

    return [record for _value, record in scored]
