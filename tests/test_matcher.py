"""
Tests for fuzzy scoring and ranking.

Uses real Bookmark objects; no mocking.
"""

import pytest

from search.matcher import rank, score
from services.bookmarks import Bookmark


def _names(records):
    return [r.name for r in records]


def _is_subsequence(query, text):
    it = iter(text)
    return all(ch in it for ch in query)


@pytest.fixture
def records():
    return [
        Bookmark("Dashboard", "http://a"),
        Bookmark("Dash Reports", "http://b"),
        Bookmark("Other", "http://c"),
    ]


class TestScore:
    """Test the fuzzy score function directly."""

    def test_non_subsequence_has_no_score(self):
        assert score("xyz", "Dashboard") is None

    def test_out_of_order_has_no_score(self):
        assert score("hsad", "Dashboard") is None

    def test_query_longer_than_candidate(self):
        assert score("dashboards", "Dashboard") is None

    def test_subsequence_has_score(self):
        assert score("dbd", "Dashboard") is not None

    def test_case_insensitive(self):
        assert score("DASH", "dashboard") == score("dash", "Dashboard")

    def test_contiguous_beats_scattered(self):
        assert score("dash", "Dashboard") > score("dash", "Dxaxsxh")

    def test_word_boundary_beats_inner_match(self):
        assert score("board", "Board Games") > score("board", "Dashboard")

    def test_shorter_gap_beats_longer_gap(self):
        assert score("ab", "axb") > score("ab", "axxxxb")

    def test_best_alignment_is_used(self):
        # scattered early, contiguous at a word start later
        assert score("mail", "xmxaxixl mail") == score("mail", "mail")

    def test_empty_query_scores_zero(self):
        assert score("", "anything") == 0


class TestRank:
    """Test filtering, ordering, and tie handling."""

    def test_example_dash(self, records):
        result = rank("dash", records)
        assert "Dashboard" in _names(result)
        assert "Dash Reports" in _names(result)
        assert "Other" not in _names(result)

    def test_ties_keep_input_order(self, records):
        assert _names(rank("dash", records)) == ["Dashboard", "Dash Reports"]
        assert _names(rank("dash", list(reversed(records)))) == ["Dash Reports", "Dashboard"]

    def test_sorted_by_descending_score(self):
        records = [
            Bookmark("Dashboard", "http://a"),
            Bookmark("Board Games", "http://b"),
        ]
        assert _names(rank("board", records)) == ["Board Games", "Dashboard"]

    def test_case_insensitive(self):
        records = [Bookmark("Dashboard", "http://x")]
        assert rank("DASH", records) == records
        assert rank("dash", records) == records

    def test_empty_collection(self):
        assert rank("dash", []) == []

    def test_no_match_returns_empty(self, records):
        assert rank("zzzzz_not_present", records) == []

    def test_link_is_not_matched(self):
        records = [Bookmark("Mail", "https://dashboard.example.com")]
        assert rank("dash", records) == []

    def test_deterministic(self, records):
        assert rank("d", records) == rank("d", records)

    def test_output_is_subset_without_duplicates(self, records):
        result = rank("o", records)
        assert len(result) == len(set(id(r) for r in result))
        assert all(any(r is rec for rec in records) for r in result)

    @pytest.mark.parametrize("query", ["d", "da", "ot", "rep", "dr", "a r", "oth", "xq"])
    def test_included_iff_subsequence(self, records, query):
        result = rank(query, records)
        for record in records:
            expected = _is_subsequence(query, record.name.lower())
            assert (record in result) is expected

    def test_scores_each_record_once(self, records):
        calls = []

        def counting_scorer(query, name):
            calls.append(name)
            return score(query, name)

        rank("dash", records, scorer=counting_scorer)
        assert sorted(calls) == sorted(r.name for r in records)

    def test_custom_scorer(self, records):
        def by_length(query, name):
            return len(name) if query in name.lower() else None

        assert _names(rank("o", records, scorer=by_length)) == ["Dash Reports", "Dashboard", "Other"]

    def test_returns_records_not_scores(self, records):
        result = rank("dash", records)
        assert all(isinstance(r, Bookmark) for r in result)
