"""
Catalog adapters — implementations of CatalogBackend.

ModelCatalogBackend reads skuman's own catalog models (default).
InMemoryCatalogBackend is a plain-dict catalog for development, scripts and
tests that should not depend on a database.

Configuration:
    SKUMAN = {
        "CATALOG_BACKEND": "skuman.adapters.catalog.ModelCatalogBackend",
    }
"""

from __future__ import annotations

import logging

from django.core.exceptions import ImproperlyConfigured

from skuman.codec import DIMENSIONS, SkuLayout
from skuman.exceptions import SkuError
from skuman.protocols.catalog import CatalogEntry

logger = logging.getLogger(__name__)


def _check_dimension(dimension: str) -> None:
    if dimension not in DIMENSIONS:
        raise SkuError("UNKNOWN_DIMENSION", dimension=dimension)


class ModelCatalogBackend:
    """
    CatalogBackend over ProductType, Category, Subcategory, Size, Color, Season.

    A subcategory counts as active only if it is active, open for new
    products, and its category is active.

    Catalog `code` columns have fixed lengths, so the layout's segment
    widths may not exceed them.

    Raises:
        ImproperlyConfigured: a SEGMENT_WIDTHS entry is wider than its
            model's code column
    """

    def __init__(self, layout: SkuLayout | None = None):
        from skuman.conf import get_layout
        from skuman.models import CATALOG_MODELS

        layout = layout or get_layout()
        for dimension, model in CATALOG_MODELS.items():
            max_length = model._meta.get_field("code").max_length
            if layout.width(dimension) > max_length:
                raise ImproperlyConfigured(
                    f"SKUMAN['SEGMENT_WIDTHS']['{dimension}'] is "
                    f"{layout.width(dimension)}, but {model.__name__}.code holds "
                    f"at most {max_length} character(s)"
                )

    def resolve(
        self, dimension: str, code: str, category: str | None = None
    ) -> CatalogEntry | None:
        from skuman.models import CATALOG_MODELS, Subcategory

        _check_dimension(dimension)

        if dimension == "subcategory":
            rows = Subcategory.objects.filter(code=code)
            if not rows.exists():
                return None
            usable = self._usable_subcategories(code)
            if category is not None and rows.filter(category__code=category).exists():
                usable = usable.filter(category__code=category)
            return CatalogEntry(
                dimension=dimension, code=code, is_active=usable.exists()
            )

        row = CATALOG_MODELS[dimension].objects.filter(code=code).first()
        return row.as_entry() if row else None

    def parent_categories(self, subcategory_code: str) -> list[str]:
        return list(
            self._usable_subcategories(subcategory_code)
            .order_by("category__code")
            .values_list("category__code", flat=True)
        )

    @staticmethod
    def _usable_subcategories(code: str):
        from skuman.models import Subcategory

        return Subcategory.objects.filter(
            code=code,
            is_active=True,
            available_for_new_products=True,
            category__is_active=True,
        )


class InMemoryCatalogBackend:
    """
    CatalogBackend over plain dicts.

    Usage:
        catalog = InMemoryCatalogBackend(
            product_type={"1": True},
            category={"10": True, "20": True},
            subcategory={"1": {"10": True}, "9": {"20": True}},
            size={"02": True},
            color={"05": True},
            season={"1": True},
        )

    Each dimension maps code → active flag; "subcategory" maps
    code → {category code → active flag}.
    """

    def __init__(self, **dimensions):
        unknown = set(dimensions) - set(DIMENSIONS)
        if unknown:
            raise SkuError("UNKNOWN_DIMENSION", dimension=sorted(unknown))
        self._entries = {name: dict(dimensions.get(name, {})) for name in DIMENSIONS}
        self.lookups: list[tuple[str, str]] = []

    def resolve(
        self, dimension: str, code: str, category: str | None = None
    ) -> CatalogEntry | None:
        _check_dimension(dimension)
        self.lookups.append((dimension, code))

        if code not in self._entries[dimension]:
            return None

        active = self._entries[dimension][code]
        if dimension == "subcategory":
            active = active[category] if category in active else any(active.values())
        return CatalogEntry(dimension=dimension, code=code, is_active=active)

    def parent_categories(self, subcategory_code: str) -> list[str]:
        self.lookups.append(("subcategory", subcategory_code))
        owners = self._entries["subcategory"].get(subcategory_code, {})
        return sorted(category for category, active in owners.items() if active)
