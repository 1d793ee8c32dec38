from catalog.schemas.brand import (
    CatalogBrandCreate, CatalogBrandUpdate, CatalogBrandResponse,
)
from catalog.schemas.category import (
    CatalogCategoryCreate, CatalogCategoryUpdate, CatalogCategoryResponse,
)
from catalog.schemas.item import (
    CatalogItemCreate, CatalogItemUpdate, CatalogItemMaxStockThresholdUpdate,
    CatalogItemResponse, CatalogMedia,
)

__all__ = [
    "CatalogBrandCreate", "CatalogBrandUpdate", "CatalogBrandResponse",
    "CatalogCategoryCreate", "CatalogCategoryUpdate", "CatalogCategoryResponse",
    "CatalogItemCreate", "CatalogItemUpdate", "CatalogItemMaxStockThresholdUpdate",
    "CatalogItemResponse", "CatalogMedia",
]
