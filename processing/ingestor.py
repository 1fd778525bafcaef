"""
Ingestor — converts a raw cell grid into a normalized Dataset.

The first grid row is the header row. Every later row is zipped against the
headers by position: missing trailing cells become "", extra trailing cells
are ignored. Rows whose values are all "" are dropped.

Duplicate header labels are tolerated: the later column's value overwrites
the earlier one in the row mapping.

Public API:
    ingest(grid) → Dataset
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from processing.errors import EmptySheetError

logger = logging.getLogger(__name__)

Row = dict[str, str]


# ═══════════════════════════════════════════════════════════════════════════
# Data classes
# ═══════════════════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class Dataset:
    """Headers plus the valid rows of one ingested sheet."""

    headers: list[str] = field(default_factory=list)
    rows: list[Row] = field(default_factory=list)


# ═══════════════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════════════

def ingest(grid: Sequence[Sequence[object]]) -> Dataset:
    """
    Build a Dataset from a two-dimensional grid of cell values.

    Args:
        grid: Rows of cells, header row first. Cells may be text, numbers,
            booleans or None.

    Returns:
        Dataset with trimmed headers and every non-empty data row, in
        source order.

    Raises:
        EmptySheetError: If *grid* has no rows at all.
    """
    if len(grid) == 0:
        raise EmptySheetError("The sheet has no rows")

    headers = [cell_to_text(cell).strip() for cell in grid[0]]

    rows: list[Row] = []
    dropped = 0

    for raw_row in grid[1:]:
        row = _build_row(headers, raw_row)
        if _is_valid_row(row):
            rows.append(row)
        else:
            dropped += 1

    logger.info(
        f"Ingested {len(headers)} columns, {len(rows)} rows "
        f"({dropped} empty rows dropped)"
    )

    return Dataset(headers=headers, rows=rows)


def cell_to_text(value: object) -> str:
    """
    Coerce one cell value to its text form.

    None becomes "", integral floats lose their ".0" (44927.0 → "44927"),
    booleans render as spreadsheets show them ("TRUE" / "FALSE").
    Text is returned unchanged, without trimming.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_row(headers: list[str], raw_row: Sequence[object]) -> Row:
    """Zip one raw row against the headers, padding missing cells with ""."""
    row: Row = {}
    for position, header in enumerate(headers):
        value = raw_row[position] if position < len(raw_row) else None
        # Later duplicate headers overwrite earlier ones
        row[header] = cell_to_text(value)
    return row


def _is_valid_row(row: Row) -> bool:
    """A row is kept if at least one value is not the empty string."""
    return any(value != "" for value in row.values())
