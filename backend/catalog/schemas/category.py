"""Category schemas for API request/response."""

from pydantic import Field

from catalog.schemas.common import CatalogSchema, NameStr


class CatalogCategoryCreate(CatalogSchema):
    category: NameStr
    parent_id: int | None = Field(None, gt=0)


class CatalogCategoryUpdate(CatalogSchema):
    id: int = Field(..., gt=0)
    category: NameStr


class CatalogCategoryResponse(CatalogSchema):
    id: int
    category: str
    parent_id: int | None = None
    path: str
