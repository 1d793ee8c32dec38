"""Brand operations: integrity checks, mutation and commit."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import NotFoundError
from catalog.db.base import commit
from catalog.models.brand import CatalogBrand
from catalog.schemas.brand import CatalogBrandCreate, CatalogBrandUpdate
from catalog.services import integrity

logger = logging.getLogger(__name__)


async def list_brands(db: AsyncSession) -> list[CatalogBrand]:
    result = await db.execute(select(CatalogBrand).order_by(CatalogBrand.id))
    return list(result.scalars().all())


async def get_brand(db: AsyncSession, brand_id: int) -> CatalogBrand:
    result = await db.execute(select(CatalogBrand).where(CatalogBrand.id == brand_id))
    brand = result.scalar_one_or_none()
    if brand is None:
        raise NotFoundError(f"Brand with id {brand_id} not found.")
    return brand


async def create_brand(db: AsyncSession, data: CatalogBrandCreate) -> CatalogBrand:
    await integrity.check_brand_name_available(db, data.brand)

    brand = CatalogBrand.create(data.brand)
    db.add(brand)
    await commit(db, integrity.brand_name_conflict(data.brand))

    logger.info("Created brand %s (%s)", brand.id, brand.name)
    return brand


async def rename_brand(db: AsyncSession, data: CatalogBrandUpdate) -> CatalogBrand:
    brand = await get_brand(db, data.id)

    if data.brand != brand.name:
        await integrity.check_brand_name_available(db, data.brand, exclude_id=brand.id)

    brand.rename(data.brand)
    await commit(db, integrity.brand_name_conflict(data.brand))

    logger.info("Renamed brand %s to %s", brand.id, brand.name)
    return brand


async def delete_brand(db: AsyncSession, brand_id: int) -> None:
    """Delete a brand. Its items go with it through the foreign key cascade."""
    brand = await get_brand(db, brand_id)
    await db.delete(brand)
    await db.commit()
    logger.info("Deleted brand %s", brand_id)
