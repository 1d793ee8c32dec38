"""Brand endpoints."""

from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.db.base import get_db
from catalog.schemas.brand import CatalogBrandCreate, CatalogBrandResponse, CatalogBrandUpdate
from catalog.services import brands

router = APIRouter(prefix="/brands", tags=["brands"])


def _location(brand_id: int) -> str:
    return f"{settings.API_V1_STR}/brands/{brand_id}"


def _to_response(brand) -> CatalogBrandResponse:
    return CatalogBrandResponse(id=brand.id, brand=brand.name)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_brand(body: CatalogBrandCreate, db: AsyncSession = Depends(get_db)):
    brand = await brands.create_brand(db, body)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": _location(brand.id)})


@router.put("", status_code=status.HTTP_201_CREATED)
async def update_brand(body: CatalogBrandUpdate, db: AsyncSession = Depends(get_db)):
    brand = await brands.rename_brand(db, body)
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": _location(brand.id)})


@router.get("", response_model=list[CatalogBrandResponse])
async def list_brands(db: AsyncSession = Depends(get_db)):
    return [_to_response(b) for b in await brands.list_brands(db)]


@router.get("/{brand_id}", response_model=CatalogBrandResponse)
async def get_brand(brand_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    return _to_response(await brands.get_brand(db, brand_id))


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_brand(brand_id: int = Path(..., gt=0), db: AsyncSession = Depends(get_db)):
    await brands.delete_brand(db, brand_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
