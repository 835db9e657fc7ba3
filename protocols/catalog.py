"""
Catalog Protocol — Interface for the six classification catalogs.

Skuman defines this protocol. The catalog store (skuman's own models, or any
other catalog system) implements it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class CatalogEntry:
    """One classification code as seen by skuman: code and active flag only."""

    dimension: str
    code: str
    is_active: bool


@runtime_checkable
class CatalogBackend(Protocol):
    """
    Protocol for classification lookups.

    Absence is a normal outcome: implementations return None / an empty list
    for unknown codes and never raise for them.
    """

    def resolve(
        self, dimension: str, code: str, category: str | None = None
    ) -> CatalogEntry | None:
        """
        Look up a code in one dimension.

        For "subcategory", `category` scopes the lookup: if the code exists
        under that category, the entry reflects that row alone. Otherwise
        (or without `category`) the entry is active if the code is usable
        under at least one category.

        Args:
            dimension: One of skuman.codec.DIMENSIONS
            code: Classification code
            category: Owning category code (subcategory only)

        Returns:
            CatalogEntry or None if not found
        """
        ...

    def parent_categories(self, subcategory_code: str) -> list[str]:
        """
        Category codes owning an active subcategory with this code.

        Subcategory codes are unique only within their category, so a code
        may have several owners.

        Args:
            subcategory_code: Subcategory code

        Returns:
            Category codes (empty if not found)
        """
        ...
