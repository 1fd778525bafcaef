"""
Workbook reader — decodes the first worksheet of an .xlsx file into a grid.

Only the first sheet is read. Cell values are passed through as openpyxl
returns them, except date and time cells, which are converted back to
spreadsheet serial numbers so the date decoder treats them like any other
serial column.

Public API:
    read_first_sheet(data) → list[list[object]]
"""

import logging
from datetime import date, datetime, time
from io import BytesIO

import openpyxl
from openpyxl.utils.datetime import to_excel

from processing.errors import RetrievalError

logger = logging.getLogger(__name__)


def read_first_sheet(data: bytes) -> list[list[object]]:
    """
    Read every row of the workbook's first sheet.

    Args:
        data: Raw .xlsx bytes.

    Returns:
        One list of cell values per sheet row, in sheet order. Rows keep
        their openpyxl width; empty cells are None. Trailing rows with no
        values at all are dropped, so an empty sheet yields [].

    Raises:
        RetrievalError: If the bytes are not a readable workbook.
    """
    try:
        workbook = openpyxl.load_workbook(BytesIO(data), read_only=True, data_only=True)
    except Exception as exc:
        error_message = f"Cannot open workbook: {exc}"
        logger.error(error_message)
        raise RetrievalError(error_message) from exc

    try:
        worksheet = workbook.worksheets[0]
        logger.info(f"Reading sheet '{worksheet.title}'")

        grid = [
            [_normalize_cell(value) for value in row]
            for row in worksheet.iter_rows(values_only=True)
        ]
    except Exception as exc:
        # read_only mode parses the sheet XML lazily, during iteration
        error_message = f"Cannot read first sheet: {exc}"
        logger.error(error_message)
        raise RetrievalError(error_message) from exc
    finally:
        workbook.close()

    # Formatted-but-empty rows at the bottom of a sheet carry no data
    while grid and all(value is None for value in grid[-1]):
        grid.pop()

    logger.info(f"Read {len(grid)} rows from sheet '{worksheet.title}'")
    return grid


# ═══════════════════════════════════════════════════════════════════════════
# Internal helpers
# ═══════════════════════════════════════════════════════════════════════════

def _normalize_cell(value: object) -> object:
    """Turn date/time cells back into spreadsheet serials; pass others through."""
    if isinstance(value, (datetime, date, time)):
        return to_excel(value)
    return value
