"""
Date decoder — turns spreadsheet date serials into ISO calendar dates.

Serials count whole days from 1899-12-30 (the Google Sheets / Excel epoch),
so serial 1 is 1899-12-31. The arithmetic is pure date arithmetic: no
time zones, no wall-clock conversion.

Zero, empty and unparseable serials all render as empty text. A genuine
serial 0 therefore cannot be displayed; that is accepted.

Public API:
    decode_date(serial) → "YYYY-MM-DD" or ""
"""

import logging
import math
from datetime import timedelta

from config.settings import SPREADSHEET_EPOCH
from utils.numeric import parse_number

logger = logging.getLogger(__name__)


def decode_date(serial: object) -> str:
    """
    Convert a spreadsheet date serial into an ISO date string.

    Args:
        serial: A number or numeric text such as "44927". Fractional
            serials are truncated to the whole day.

    Returns:
        The date formatted as YYYY-MM-DD, or "" when *serial* is missing,
        zero, not a number, or outside the representable date range.
    """
    number = parse_number(serial)

    if number is None or number == 0:
        return ""

    if math.isinf(number):
        logger.debug(f"Date serial '{serial}' is infinite; rendering empty")
        return ""

    try:
        decoded = SPREADSHEET_EPOCH + timedelta(days=math.floor(number))
    except OverflowError:
        logger.debug(f"Date serial '{serial}' is out of range; rendering empty")
        return ""

    return decoded.isoformat()
