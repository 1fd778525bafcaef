"""
Numeric text parsing shared by the sort engine and the date decoder.

Cells are stored as text, so "is this a number?" is decided here, once,
with explicit rules instead of implicit coercion.
"""

import logging
import math

logger = logging.getLogger(__name__)


def parse_number(value: object) -> float | None:
    """
    Parse *value* as a number.

    Accepts ints and floats as-is, and text that Python's float() accepts
    (surrounding whitespace, exponents, "inf"). Digit grouping with
    underscores is rejected, as is anything that parses to NaN.

    Empty or all-whitespace text returns None; callers decide what an
    empty cell means for them.

    Args:
        value: A cell value (usually text).

    Returns:
        The parsed float, or None if *value* is empty or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            # Integers beyond float range
            return math.inf if value > 0 else -math.inf
        return None if math.isnan(number) else number

    text = str(value).strip()
    if not text or "_" in text:
        return None

    try:
        number = float(text)
    except ValueError:
        return None

    if math.isnan(number):
        return None
    return number


def is_blank(value: object) -> bool:
    """Return True for None and for text that is empty after stripping."""
    return value is None or (isinstance(value, str) and not value.strip())
