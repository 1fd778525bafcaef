"""
Facet indexer — builds the option list for each filter facet.

Options are the distinct non-empty values of the facet column, sorted in
ascending code-point order. They depend on the Dataset alone, so they only
need recomputing when a new file is loaded.

Public API:
    facet_options(dataset, facet) → list[str]
    facet_option_lists(dataset, facets) → dict[facet name, list[str]]
"""

import logging

from processing.column_resolver import FacetColumn
from processing.ingestor import Dataset

logger = logging.getLogger(__name__)


def facet_options(dataset: Dataset, facet: FacetColumn) -> list[str]:
    """
    Return the sorted distinct non-empty values of *facet*'s column.

    An absent facet (no matching header) yields an empty list.
    """
    if not facet.is_present:
        return []

    values = {row[facet.header] for row in dataset.rows}
    values.discard("")
    return sorted(values)


def facet_option_lists(
    dataset: Dataset,
    facets: dict[str, FacetColumn],
) -> dict[str, list[str]]:
    """Compute facet_options() for every facet, keyed by facet name."""
    option_lists = {name: facet_options(dataset, facet) for name, facet in facets.items()}

    logger.debug(
        "Facet options: "
        + ", ".join(f"{name}={len(options)}" for name, options in option_lists.items())
    )
    return option_lists
