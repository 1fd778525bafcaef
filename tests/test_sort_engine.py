"""
Tests for processing/sort_engine.py

Covers: unsorted identity, numeric vs text comparison, blank-as-zero,
direction, stability, double reversal, and the header-click transition.
"""

import pytest

from processing.sort_engine import SortState, compare_values, sort_rows, toggle_sort


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

HEADERS = ["Name", "Score", "Team"]


def _rows(*triples) -> list[dict[str, str]]:
    return [dict(zip(HEADERS, triple)) for triple in triples]


def _column(rows, header: str) -> list[str]:
    return [row[header] for row in rows]


# ═══════════════════════════════════════════════════════════════════════════
# Unsorted state
# ═══════════════════════════════════════════════════════════════════════════

class TestUnsorted:
    def test_identity_order(self):
        rows = _rows(("b", "2", "x"), ("a", "1", "y"))
        assert sort_rows(rows, HEADERS, SortState()) == rows

    def test_returns_new_list(self):
        rows = _rows(("b", "2", "x"))
        assert sort_rows(rows, HEADERS, SortState()) is not rows

    def test_out_of_range_column_leaves_order(self):
        rows = _rows(("b", "2", "x"), ("a", "1", "y"))
        assert sort_rows(rows, HEADERS, SortState(column=9)) == rows
        assert sort_rows(rows, HEADERS, SortState(column=-1)) == rows


# ═══════════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════════

class TestComparison:
    def test_numeric_not_lexicographic(self):
        rows = _rows(("a", "10", ""), ("b", "9", ""), ("c", "2", ""))
        result = sort_rows(rows, HEADERS, SortState(column=1))
        assert _column(result, "Score") == ["2", "9", "10"]

    def test_text_code_point_order(self):
        rows = _rows(("bob", "", ""), ("Alice", "", ""), ("alice", "", ""))
        result = sort_rows(rows, HEADERS, SortState(column=0))
        assert _column(result, "Name") == ["Alice", "alice", "bob"]

    def test_blank_counts_as_zero(self):
        rows = _rows(("a", "5", ""), ("b", "", ""), ("c", "-3", ""))
        result = sort_rows(rows, HEADERS, SortState(column=1))
        assert _column(result, "Score") == ["-3", "", "5"]

    def test_mixed_pair_compares_as_text(self):
        assert compare_values("10", "abc") == -1
        assert compare_values("abc", "10") == 1

    def test_decimal_and_exponent(self):
        assert compare_values("1.5", "1e1") == -1
        assert compare_values("2.50", "2.5") == 0

    def test_explicit_tie(self):
        assert compare_values("same", "same") == 0


# ═══════════════════════════════════════════════════════════════════════════
# Direction and stability
# ═══════════════════════════════════════════════════════════════════════════

class TestDirection:
    def test_descending(self):
        rows = _rows(("a", "10", ""), ("b", "9", ""), ("c", "2", ""))
        result = sort_rows(rows, HEADERS, SortState(column=1, ascending=False))
        assert _column(result, "Score") == ["10", "9", "2"]

    def test_stable_ascending(self):
        rows = _rows(("a", "1", "x"), ("b", "1", "y"), ("c", "0", "z"), ("d", "1", "w"))
        result = sort_rows(rows, HEADERS, SortState(column=1))
        assert _column(result, "Name") == ["c", "a", "b", "d"]

    def test_stable_descending(self):
        rows = _rows(("a", "1", "x"), ("b", "1", "y"), ("c", "0", "z"), ("d", "1", "w"))
        result = sort_rows(rows, HEADERS, SortState(column=1, ascending=False))
        assert _column(result, "Name") == ["a", "b", "d", "c"]

    def test_double_reversal_matches_single_descending(self):
        rows = _rows(
            ("a", "3", "x"), ("b", "1", "y"), ("c", "3", "z"),
            ("d", "", "w"), ("e", "1", "v"),
        )
        ascending = sort_rows(rows, HEADERS, SortState(column=1, ascending=True))
        twice = sort_rows(ascending, HEADERS, SortState(column=1, ascending=False))
        once = sort_rows(rows, HEADERS, SortState(column=1, ascending=False))
        assert twice == once

    def test_input_not_modified(self):
        rows = _rows(("b", "2", ""), ("a", "1", ""))
        snapshot = list(rows)
        sort_rows(rows, HEADERS, SortState(column=0))
        assert rows == snapshot


# ═══════════════════════════════════════════════════════════════════════════
# Header-click transition
# ═══════════════════════════════════════════════════════════════════════════

class TestToggleSort:
    def test_first_click_ascending(self):
        assert toggle_sort(SortState(), 2) == SortState(column=2, ascending=True)

    def test_same_column_toggles(self):
        state = SortState(column=2, ascending=True)
        assert toggle_sort(state, 2) == SortState(column=2, ascending=False)
        assert toggle_sort(toggle_sort(state, 2), 2) == state

    @pytest.mark.parametrize("ascending", [True, False])
    def test_new_column_resets_to_ascending(self, ascending):
        state = SortState(column=1, ascending=ascending)
        assert toggle_sort(state, 0) == SortState(column=0, ascending=True)
