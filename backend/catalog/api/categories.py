"""Category endpoints."""

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.db.base import get_db
from catalog.schemas.category import (
    CatalogCategoryCreate,
    CatalogCategoryResponse,
    CatalogCategoryUpdate,
)
from catalog.services import categories

router = APIRouter(prefix="/categories", tags=["categories"])


def _location(category_id: int) -> str:
    return f"{settings.API_V1_STR}/categories/{category_id}"


def _to_response(category, path: str) -> CatalogCategoryResponse:
    return CatalogCategoryResponse(
        id=category.id,
        category=category.name,
        parent_id=category.parent_id,
        path=path,
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(body: CatalogCategoryCreate, db: AsyncSession = Depends(get_db)):
    category = await categories.create_category(db, body)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": _location(category.id)})


@router.put("", status_code=status.HTTP_201_CREATED)
async def update_category(body: CatalogCategoryUpdate, db: AsyncSession = Depends(get_db)):
    category = await categories.rename_category(db, body)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": _location(category.id)})


@router.get("", response_model=list[CatalogCategoryResponse])
async def list_categories(db: AsyncSession = Depends(get_db)):
    """All categories ordered by id, with their display paths."""
    return [_to_response(c, path) for c, path in await categories.list_categories(db)]


@router.get("/{category_id}", response_model=CatalogCategoryResponse)
async def get_category(category_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    category, path = await categories.get_category(db, category_id)
    return _to_response(category, path)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(category_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    """Delete a category. Refused while it still has child categories."""
    await categories.delete_category(db, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
