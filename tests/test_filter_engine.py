"""
Tests for processing/filter_engine.py

Covers: text search across all columns, facet selections, AND combination,
absent facets, order preservation, and monotonicity.
"""

import pytest

from processing.column_resolver import resolve_facets
from processing.filter_engine import FilterState, filter_rows
from processing.ingestor import ingest


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_roster():
    return ingest([
        ["Name", "Role", "Team", "Region"],
        ["Alice", "Support", "Astralis", "EU"],
        ["Bob", "Mid", "Fnatic", "EU"],
        ["Cara", "Support", "Fnatic", "NA"],
        ["Dan", "ADC", "Astralis", "NA"],
        ["Eve", "Jungle", "", "KR"],
    ])


def _names(rows) -> list[str]:
    return [row["Name"] for row in rows]


@pytest.fixture
def roster():
    return _make_roster()


@pytest.fixture
def facets(roster):
    return resolve_facets(roster.headers)


# ═══════════════════════════════════════════════════════════════════════════
# Default state
# ═══════════════════════════════════════════════════════════════════════════

class TestDefaultState:
    def test_empty_state_returns_all_rows(self, roster, facets):
        assert filter_rows(roster, FilterState(), facets) == roster.rows

    def test_result_is_new_list(self, roster, facets):
        result = filter_rows(roster, FilterState(), facets)
        assert result is not roster.rows


# ═══════════════════════════════════════════════════════════════════════════
# Text search
# ═══════════════════════════════════════════════════════════════════════════

class TestTextSearch:
    def test_case_insensitive(self, roster, facets):
        result = filter_rows(roster, FilterState(query="ALICE"), facets)
        assert _names(result) == ["Alice"]

    def test_matches_any_column(self, roster, facets):
        result = filter_rows(roster, FilterState(query="fnat"), facets)
        assert _names(result) == ["Bob", "Cara"]

    def test_substring(self, roster, facets):
        result = filter_rows(roster, FilterState(query="up"), facets)
        assert _names(result) == ["Alice", "Cara"]

    def test_no_match(self, roster, facets):
        assert filter_rows(roster, FilterState(query="zzz"), facets) == []

    def test_query_not_trimmed(self, roster, facets):
        """A trailing space is part of the needle."""
        assert filter_rows(roster, FilterState(query="alice "), facets) == []


# ═══════════════════════════════════════════════════════════════════════════
# Facet selections
# ═══════════════════════════════════════════════════════════════════════════

class TestFacetSelections:
    def test_single_facet(self, roster, facets):
        state = FilterState(selections={"role": "Support"})
        assert _names(filter_rows(roster, state, facets)) == ["Alice", "Cara"]

    def test_exact_case_sensitive_match(self, roster, facets):
        state = FilterState(selections={"role": "support"})
        assert filter_rows(roster, state, facets) == []

    def test_empty_selection_is_no_constraint(self, roster, facets):
        state = FilterState(selections={"role": "", "team": ""})
        assert filter_rows(roster, state, facets) == roster.rows

    def test_multiple_facets_and_combined(self, roster, facets):
        state = FilterState(selections={"team": "Fnatic", "region": "NA"})
        assert _names(filter_rows(roster, state, facets)) == ["Cara"]

    def test_query_and_facet_combined(self, roster, facets):
        state = FilterState(query="a", selections={"team": "Astralis"})
        assert _names(filter_rows(roster, state, facets)) == ["Alice", "Dan"]

    def test_absent_facet_ignored(self):
        dataset = ingest([["Name", "Role"], ["Alice", "Support"], ["Bob", "Mid"]])
        facets = resolve_facets(dataset.headers)
        state = FilterState(selections={"region": "EU"})
        assert filter_rows(dataset, state, facets) == dataset.rows

    def test_unknown_facet_name_ignored(self, roster, facets):
        state = FilterState(selections={"country": "Denmark"})
        assert filter_rows(roster, state, facets) == roster.rows


# ═══════════════════════════════════════════════════════════════════════════
# Properties
# ═══════════════════════════════════════════════════════════════════════════

class TestProperties:
    @pytest.mark.parametrize(
        "state",
        [
            FilterState(query="a"),
            FilterState(selections={"region": "EU"}),
            FilterState(query="s", selections={"team": "Fnatic"}),
            FilterState(query="nobody"),
        ],
    )
    def test_order_preserving_subsequence(self, roster, facets, state):
        result = filter_rows(roster, state, facets)
        positions = [roster.rows.index(row) for row in result]
        assert positions == sorted(positions)

    @pytest.mark.parametrize(
        "state",
        [
            FilterState(query="e"),
            FilterState(selections={"role": "Support"}),
            FilterState(query="e", selections={"region": "NA"}),
        ],
    )
    def test_never_grows_result(self, roster, facets, state):
        baseline = filter_rows(roster, FilterState(), facets)
        assert len(filter_rows(roster, state, facets)) <= len(baseline)
