"""Brand schemas for API request/response."""

from pydantic import Field

from catalog.schemas.common import CatalogSchema, NameStr


class CatalogBrandCreate(CatalogSchema):
    brand: NameStr


class CatalogBrandUpdate(CatalogSchema):
    id: int = Field(..., gt=0)
    brand: NameStr


class CatalogBrandResponse(CatalogSchema):
    id: int
    brand: str
