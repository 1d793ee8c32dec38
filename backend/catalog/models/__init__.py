"""SQLAlchemy models for the catalog."""

from catalog.models.brand import CatalogBrand
from catalog.models.category import CatalogCategory
from catalog.models.item import CatalogItem

__all__ = [
    "CatalogBrand",
    "CatalogCategory",
    "CatalogItem",
]
