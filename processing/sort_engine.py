"""
Sort engine — orders rows by one column with numeric-aware comparison.

Two values compare numerically when both parse as numbers (an empty or
blank cell counts as 0). Otherwise they compare as text in code-point order.
The sort is stable: rows with equal keys keep their input order, in either
direction.

Header clicks are turned into a new SortState by toggle_sort(): clicking the
active column flips the direction, clicking another column starts ascending.

Public API:
    sort_rows(rows, headers, state) → list[Row]
    toggle_sort(state, column) → SortState
"""

import logging
from dataclasses import dataclass
from functools import cmp_to_key

from processing.ingestor import Row
from utils.numeric import is_blank, parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortState:
    """Index of the sorted header (None = unsorted) and the direction."""

    column: int | None = None
    ascending: bool = True


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def sort_rows(rows: list[Row], headers: list[str], state: SortState) -> list[Row]:
    """
    Return *rows* ordered by the column at *state.column*.

    Args:
        rows: Rows to order (not modified).
        headers: Header labels; state.column indexes into this list.
        state: Sort column and direction.

    Returns:
        A new list. When the state is unsorted, or its column index does not
        name a header, the rows come back in input order.
    """
    if state.column is None or not 0 <= state.column < len(headers):
        return list(rows)

    key = headers[state.column]
    sign = 1 if state.ascending else -1

    def _compare_rows(a: Row, b: Row) -> int:
        return sign * compare_values(a.get(key, ""), b.get(key, ""))

    ordered = sorted(rows, key=cmp_to_key(_compare_rows))

    logger.debug(
        f"Sorted {len(ordered)} rows by '{key}' "
        f"({'ascending' if state.ascending else 'descending'})"
    )
    return ordered


def compare_values(a: str, b: str) -> int:
    """
    Three-way compare two cell values.

    Returns:
        -1, 0 or 1. Numeric when both values are numbers, otherwise by
        code-point order of the text.
    """
    num_a = _sort_number(a)
    num_b = _sort_number(b)

    if num_a is not None and num_b is not None:
        left, right = num_a, num_b
    else:
        left, right = str(a), str(b)

    if left < right:
        return -1
    if left > right:
        return 1
    return 0


def toggle_sort(state: SortState, column: int) -> SortState:
    """Next sort state after the header at *column* is clicked."""
    if state.column == column:
        return SortState(column=column, ascending=not state.ascending)
    return SortState(column=column, ascending=True)


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _sort_number(value: str) -> float | None:
    """Numeric sort key for *value*; blank cells sort as 0."""
    if is_blank(value):
        return 0.0
    return parse_number(value)
