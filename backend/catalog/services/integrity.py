"""Store-backed checks run before any mutation.

Every check is a single lookup by primary key or unique natural key. They give
callers a precise error early; the schema constraints remain the final guard
(see ``catalog.db.base.commit``).
"""

import logging

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import ConflictError, InvalidReferenceError, PreconditionError
from catalog.models.brand import CatalogBrand
from catalog.models.category import CatalogCategory
from catalog.models.item import CatalogItem

logger = logging.getLogger(__name__)


async def _exists(db: AsyncSession, *conditions) -> bool:
    result = await db.execute(select(exists().where(*conditions)))
    return bool(result.scalar())


def brand_name_conflict(name: str) -> ConflictError:
    return ConflictError(f"A brand with the name '{name}' already exists.")


def category_name_conflict(name: str) -> ConflictError:
    return ConflictError(f"A category with the name '{name}' in this level already exists.")


def slug_conflict(slug: str) -> ConflictError:
    return ConflictError(f"An item with the slug '{slug}' already exists.")


async def check_brand_name_available(
    db: AsyncSession, name: str, exclude_id: int | None = None
) -> None:
    conditions = [CatalogBrand.name == name]
    if exclude_id is not None:
        conditions.append(CatalogBrand.id != exclude_id)
    if await _exists(db, *conditions):
        logger.warning("Rejected duplicate brand name %r", name)
        raise brand_name_conflict(name)


async def check_parent_exists(db: AsyncSession, parent_id: int) -> None:
    if not await _exists(db, CatalogCategory.id == parent_id):
        logger.warning("Rejected unknown parent category %s", parent_id)
        raise InvalidReferenceError("A parent Id is not valid.")


async def check_category_name_available(
    db: AsyncSession, name: str, parent_id: int | None, exclude_id: int | None = None
) -> None:
    """Sibling categories (same parent, or both at the root) must have distinct names."""
    conditions = [CatalogCategory.name == name]
    if parent_id is None:
        conditions.append(CatalogCategory.parent_id.is_(None))
    else:
        conditions.append(CatalogCategory.parent_id == parent_id)
    if exclude_id is not None:
        conditions.append(CatalogCategory.id != exclude_id)
    if await _exists(db, *conditions):
        logger.warning("Rejected duplicate category %r under parent %s", name, parent_id)
        raise category_name_conflict(name)


async def check_item_references(
    db: AsyncSession, brand_id: int, category_id: int
) -> tuple[CatalogBrand, CatalogCategory]:
    """Resolve the brand and category an item points at, category first."""
    category = await db.get(CatalogCategory, category_id)
    if category is None:
        logger.warning("Rejected unknown category %s", category_id)
        raise InvalidReferenceError("A category Id is not valid.")

    brand = await db.get(CatalogBrand, brand_id)
    if brand is None:
        logger.warning("Rejected unknown brand %s", brand_id)
        raise InvalidReferenceError("A brand Id is not valid.")

    return brand, category


async def check_slug_available(db: AsyncSession, slug: str) -> None:
    if await _exists(db, CatalogItem.slug == slug):
        logger.warning("Rejected duplicate item slug %r", slug)
        raise slug_conflict(slug)


def check_category_deletable(category: CatalogCategory) -> None:
    """``category.children`` must already be loaded."""
    if category.children:
        raise PreconditionError("The category has child categories and cannot be deleted.")
