"""Catalog item operations: reference checks, mutation and commit."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.exceptions import NotFoundError, ValidationError
from catalog.core.slug import to_slug
from catalog.db.base import commit
from catalog.models.brand import CatalogBrand
from catalog.models.category import CatalogCategory
from catalog.models.item import CatalogItem
from catalog.schemas.item import (
    CatalogItemCreate,
    CatalogItemMaxStockThresholdUpdate,
    CatalogItemUpdate,
)
from catalog.services import integrity

logger = logging.getLogger(__name__)


def _check_slug(slug: str) -> None:
    if not slug or not slug.strip():
        raise ValidationError({"Slug": ["Slug is not valid."]}, detail="Slug is not valid.")


async def _find(db: AsyncSession, slug: str, with_references: bool = False) -> CatalogItem:
    query = select(CatalogItem).where(CatalogItem.slug == slug)
    if with_references:
        query = query.options(selectinload(CatalogItem.brand), selectinload(CatalogItem.category))
    result = await db.execute(query)
    item = result.scalar_one_or_none()
    if item is None:
        raise NotFoundError(f"Item with slug {slug} not found.")
    return item


async def list_items(db: AsyncSession) -> list[CatalogItem]:
    result = await db.execute(
        select(CatalogItem)
        .options(selectinload(CatalogItem.brand), selectinload(CatalogItem.category))
        .order_by(CatalogItem.name)
    )
    return list(result.scalars().all())


async def get_item(db: AsyncSession, slug: str) -> CatalogItem:
    _check_slug(slug)
    return await _find(db, slug, with_references=True)


async def create_item(
    db: AsyncSession, data: CatalogItemCreate
) -> tuple[CatalogItem, CatalogBrand, CatalogCategory]:
    """Create an item and return it with the brand and category it references."""
    brand, category = await integrity.check_item_references(db, data.brand_id, data.category_id)

    slug = to_slug(data.name)
    await integrity.check_slug_available(db, slug)

    item = CatalogItem.create(
        data.name,
        data.description or "",
        data.max_stock_threshold,
        data.brand_id,
        data.category_id,
    )
    db.add(item)
    await commit(db, integrity.slug_conflict(slug))

    logger.info("Created item %s (brand=%s, category=%s)", item.slug, brand.id, category.id)
    return item, brand, category


async def update_item(db: AsyncSession, data: CatalogItemUpdate) -> CatalogItem:
    item = await _find(db, data.slug)
    await integrity.check_item_references(db, data.brand_id, data.category_id)

    item.update(data.description, data.brand_id, data.category_id)
    await commit(db, integrity.slug_conflict(item.slug))

    logger.info("Updated item %s", item.slug)
    return item


async def set_max_stock_threshold(
    db: AsyncSession, data: CatalogItemMaxStockThresholdUpdate
) -> CatalogItem:
    item = await _find(db, data.slug)

    item.set_max_stock_threshold(data.max_stock_threshold)
    await commit(db, integrity.slug_conflict(item.slug))

    logger.info("Set max stock threshold of %s to %s", item.slug, data.max_stock_threshold)
    return item


async def delete_item(db: AsyncSession, slug: str) -> None:
    _check_slug(slug)
    item = await _find(db, slug)
    await db.delete(item)
    await db.commit()
    logger.info("Deleted item %s", slug)
