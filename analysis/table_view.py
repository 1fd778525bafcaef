"""
Table view — runs the full query pipeline for one UI state.

Ties the engine together for the presentation layer:
  load → ingest → resolve facets → facet options → filter → sort

and adds the display helpers the page needs: summary counts, per-cell
rendering (date columns go through the date decoder), role badge classes
and conversion to a pandas DataFrame.

Everything is recomputed from scratch for each call. The Dataset is never
modified and the UI state arrives as explicit frozen objects.

Public API:
    load_dataset(location) → Dataset
    build_table_view(dataset, filter_state, sort_state, facet_targets) → TableView
    render_cell(header, value, date_columns) → str
    role_badge_class(role) → str
    to_dataframe(view, date_columns) → pd.DataFrame
"""

import logging
import re
from dataclasses import dataclass, field

import pandas as pd

from config.settings import DATA_FILE_PATH, DATE_COLUMNS
from processing.column_resolver import FacetColumn, resolve_facets
from processing.date_decoder import decode_date
from processing.facet_indexer import facet_option_lists
from processing.file_reader import read_first_sheet
from processing.filter_engine import FilterState, filter_rows
from processing.ingestor import Dataset, Row, ingest
from processing.sort_engine import SortState, sort_rows
from processing.source_loader import fetch_workbook_bytes

logger = logging.getLogger(__name__)

_NON_LETTERS = re.compile(r"[^a-z]")


# ═══════════════════════════════════════════════════════════════════════════
# Data classes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class TableView:
    """Everything the page renders for one filter/sort state."""

    headers: list[str] = field(default_factory=list)
    facets: dict[str, FacetColumn] = field(default_factory=dict)
    facet_options: dict[str, list[str]] = field(default_factory=dict)
    rows: list[Row] = field(default_factory=list)
    total_rows: int = 0

    @property
    def visible_rows(self) -> int:
        return len(self.rows)

    @property
    def team_count(self) -> int:
        """Number of distinct teams, shown in the stats bar."""
        return len(self.facet_options.get("team", []))


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def load_dataset(location: str = DATA_FILE_PATH) -> Dataset:
    """
    Fetch, decode and ingest the workbook at *location*.

    Raises:
        RetrievalError: If the workbook cannot be fetched or opened.
        EmptySheetError: If its first sheet has no rows.
    """
    data = fetch_workbook_bytes(location)
    grid = read_first_sheet(data)
    dataset = ingest(grid)

    logger.info(
        f"Loaded '{location}': {len(dataset.headers)} columns, "
        f"{len(dataset.rows)} rows"
    )
    return dataset


def build_table_view(
    dataset: Dataset,
    filter_state: FilterState,
    sort_state: SortState,
    facet_targets: dict[str, str] | None = None,
) -> TableView:
    """
    Produce the filtered, sorted view of *dataset* for the given UI state.

    Args:
        dataset: The ingested Dataset.
        filter_state: Search text and facet selections.
        sort_state: Sort column index and direction.
        facet_targets: Facet name → header substring. Defaults to
            FACET_TARGETS.

    Returns:
        TableView with headers, resolved facets, option lists, final rows
        and the unfiltered row count.
    """
    facets = resolve_facets(dataset.headers, facet_targets)
    options = facet_option_lists(dataset, facets)

    visible = filter_rows(dataset, filter_state, facets)
    ordered = sort_rows(visible, dataset.headers, sort_state)

    return TableView(
        headers=list(dataset.headers),
        facets=facets,
        facet_options=options,
        rows=ordered,
        total_rows=len(dataset.rows),
    )


def render_cell(
    header: str,
    value: str,
    date_columns: frozenset[str] = DATE_COLUMNS,
) -> str:
    """Display text for one cell; date columns are decoded from serials."""
    if header in date_columns:
        return decode_date(value)
    return value or ""


def role_badge_class(role: str) -> str:
    """CSS class for a role badge: "Mid Laner" → "role-midlaner"."""
    return "role-" + _NON_LETTERS.sub("", role.lower())


def to_dataframe(
    view: TableView,
    date_columns: frozenset[str] = DATE_COLUMNS,
) -> pd.DataFrame:
    """
    Render the view's rows into a DataFrame of display text.

    Duplicate header labels collapse into a single column, matching the row
    mapping. An empty view still carries its columns.
    """
    columns = list(dict.fromkeys(view.headers))
    records = [
        {header: render_cell(header, row.get(header, ""), date_columns) for header in columns}
        for row in view.rows
    ]
    return pd.DataFrame(records, columns=columns)
