"""
Column resolver — finds facet columns by header name.

A facet such as "team" is bound to the first header whose lowercased label
contains the target substring ("Team Name", "Current Team", ...). The lookup
runs once per Dataset; the facet indexer and filter engine receive the
resolved FacetColumn instead of repeating the search.

Public API:
    resolve_column(headers, target) → header or None
    resolve_facets(headers, targets) → dict[facet name, FacetColumn]
"""

import logging
from dataclasses import dataclass

from config.settings import FACET_TARGETS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FacetColumn:
    """A filter dimension and the header it resolved to (None if absent)."""

    name: str
    target: str
    header: str | None = None

    @property
    def is_present(self) -> bool:
        return self.header is not None


def resolve_column(headers: list[str], target: str) -> str | None:
    """
    Return the first header whose lowercased text contains *target*.

    Args:
        headers: Header labels in sheet order.
        target: Substring to look for, compared in lowercase.

    Returns:
        The matching header label, or None when no header matches.
    """
    needle = target.lower()
    for header in headers:
        if needle in header.lower():
            return header
    return None


def resolve_facets(
    headers: list[str],
    targets: dict[str, str] | None = None,
) -> dict[str, FacetColumn]:
    """
    Resolve every configured facet against *headers*.

    Args:
        headers: Header labels in sheet order.
        targets: Facet name → target substring. Defaults to FACET_TARGETS.

    Returns:
        Facet name → FacetColumn, in the order of *targets*. Facets with no
        matching header are included with header=None.
    """
    if targets is None:
        targets = FACET_TARGETS

    facets: dict[str, FacetColumn] = {}
    for name, target in targets.items():
        header = resolve_column(headers, target)
        facets[name] = FacetColumn(name=name, target=target, header=header)
        if header is None:
            logger.info(f"Facet '{name}': no header contains '{target}'")
        else:
            logger.debug(f"Facet '{name}' resolved to column '{header}'")

    return facets
