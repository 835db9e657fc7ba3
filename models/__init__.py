"""
Skuman Models.

- ProductType, Category, Subcategory, Size, Color, Season: the six
  classification catalogs a SKU is built from
- SkuSequence: atomic per-combination sequence counter
"""

from skuman.models.catalog import (
    CATALOG_MODELS,
    Category,
    Color,
    ColorType,
    ProductType,
    Season,
    SeasonType,
    Size,
    Subcategory,
)
from skuman.models.sequence import SkuSequence

__all__ = [
    "CATALOG_MODELS",
    "ProductType",
    "Category",
    "Subcategory",
    "Size",
    "Color",
    "ColorType",
    "Season",
    "SeasonType",
    "SkuSequence",
]
