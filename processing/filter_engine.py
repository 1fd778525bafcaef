"""
Filter engine — selects the rows matching the current search and facets.

A row is kept when it passes every active predicate:
  1. Text search — the query appears, case-insensitively, as a substring of
     at least one of the row's values. An empty query matches everything.
  2. Facet selections — for each facet with a non-empty selection, the
     row's value in the facet column equals the selection exactly. Facets
     whose column is absent never constrain the result.

Filtering never reorders rows.

Public API:
    filter_rows(dataset, state, facets) → list[Row]
"""

import logging
from dataclasses import dataclass, field

from processing.column_resolver import FacetColumn
from processing.ingestor import Dataset, Row

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterState:
    """Search text plus the selected value per facet name ("" = none)."""

    query: str = ""
    selections: dict[str, str] = field(default_factory=dict)


def filter_rows(
    dataset: Dataset,
    state: FilterState,
    facets: dict[str, FacetColumn],
) -> list[Row]:
    """
    Return the Dataset rows matching *state*, in their original order.

    Args:
        dataset: The ingested Dataset.
        state: Current search text and facet selections.
        facets: Resolved facet columns, keyed by facet name.

    Returns:
        A new list holding the matching rows.
    """
    needle = state.query.lower()
    constraints = _active_constraints(state, facets)

    matched = [
        row for row in dataset.rows
        if _matches_query(row, needle) and _matches_facets(row, constraints)
    ]

    logger.debug(
        f"Filter query='{state.query}' constraints={constraints}: "
        f"{len(matched)}/{len(dataset.rows)} rows"
    )
    return matched


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _active_constraints(
    state: FilterState,
    facets: dict[str, FacetColumn],
) -> list[tuple[str, str]]:
    """(header, required value) for every selected facet that is present."""
    constraints: list[tuple[str, str]] = []
    for name, selected in state.selections.items():
        if not selected:
            continue
        facet = facets.get(name)
        if facet is None or not facet.is_present:
            continue
        constraints.append((facet.header, selected))
    return constraints


def _matches_query(row: Row, needle: str) -> bool:
    if not needle:
        return True
    return any(needle in value.lower() for value in row.values())


def _matches_facets(row: Row, constraints: list[tuple[str, str]]) -> bool:
    return all(row[header] == selected for header, selected in constraints)
