"""
Exceptions raised by the table engine and its loaders.

Only these two failures ever surface to the caller. Every other anomaly
(missing cells, unmatched facets, non-numeric sort keys, bad date serials)
degrades to a well-defined default instead.
"""


class TableEngineError(Exception):
    """Base class for errors raised by the table engine."""


class EmptySheetError(TableEngineError, ValueError):
    """The first worksheet contains no rows at all, not even a header."""


class RetrievalError(TableEngineError):
    """The workbook could not be fetched or decoded."""
