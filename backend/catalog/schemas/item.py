"""Catalog item schemas for API request/response."""

from pydantic import Field, field_validator

from catalog.core.slug import to_slug
from catalog.schemas.common import CatalogSchema, DescriptionStr, NameStr, SlugStr, not_blank


class CatalogMedia(CatalogSchema):
    file_name: str
    url: str


class CatalogItemCreate(CatalogSchema):
    name: NameStr
    description: str | None = Field(None, max_length=5000)
    max_stock_threshold: int = Field(..., gt=0)
    brand_id: int = Field(..., gt=0)
    category_id: int = Field(..., gt=0, alias="CatalogId")

    @field_validator("name")
    @classmethod
    def name_must_yield_slug(cls, value: str) -> str:
        if not to_slug(value):
            raise ValueError("must contain at least one letter or digit")
        return value

    @field_validator("description")
    @classmethod
    def description_not_blank_when_given(cls, value: str | None) -> str | None:
        return not_blank(value) if value is not None else value


class CatalogItemUpdate(CatalogSchema):
    slug: SlugStr
    description: DescriptionStr
    brand_id: int = Field(..., gt=0)
    category_id: int = Field(..., gt=0, alias="CatalogId")


class CatalogItemMaxStockThresholdUpdate(CatalogSchema):
    slug: SlugStr
    max_stock_threshold: int = Field(..., gt=0)


class CatalogItemResponse(CatalogSchema):
    name: str
    slug: str
    description: str
    brand_id: int
    brand_name: str | None = None
    category_id: int
    category_name: str | None = None
    price: float
    available_stock: int
    max_stock_threshold: int
    medias: list[CatalogMedia] = []
