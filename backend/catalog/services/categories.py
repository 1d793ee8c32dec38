"""Category operations: tree rules, mutation and commit."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from catalog.core.exceptions import NotFoundError, PreconditionError
from catalog.db.base import commit
from catalog.models.category import CatalogCategory
from catalog.schemas.category import CatalogCategoryCreate, CatalogCategoryUpdate
from catalog.services import hierarchy, integrity

logger = logging.getLogger(__name__)


def _not_found(category_id: int) -> NotFoundError:
    return NotFoundError(f"Category with id {category_id} not found.")


async def _find(db: AsyncSession, category_id: int, with_children: bool = False) -> CatalogCategory:
    query = select(CatalogCategory).where(CatalogCategory.id == category_id)
    if with_children:
        query = query.options(selectinload(CatalogCategory.children))
    result = await db.execute(query)
    category = result.scalar_one_or_none()
    if category is None:
        raise _not_found(category_id)
    return category


async def list_categories(db: AsyncSession) -> list[tuple[CatalogCategory, str]]:
    """All categories ordered by id, each with its display path."""
    result = await db.execute(select(CatalogCategory).order_by(CatalogCategory.id))
    categories = list(result.scalars().all())
    paths = hierarchy.paths_by_id(categories)
    return [(c, paths[c.id]) for c in categories]


async def get_category(db: AsyncSession, category_id: int) -> tuple[CatalogCategory, str]:
    category = await _find(db, category_id)
    chain = await hierarchy.load_lineage(db, category)
    return category, hierarchy.build_path(chain)


async def create_category(db: AsyncSession, data: CatalogCategoryCreate) -> CatalogCategory:
    if data.parent_id is not None:
        await integrity.check_parent_exists(db, data.parent_id)
    await integrity.check_category_name_available(db, data.category, data.parent_id)

    category = CatalogCategory.create(data.category, data.parent_id)
    db.add(category)
    await commit(db, integrity.category_name_conflict(data.category))

    logger.info("Created category %s (%s) under parent %s", category.id, category.name, category.parent_id)
    return category


async def rename_category(db: AsyncSession, data: CatalogCategoryUpdate) -> CatalogCategory:
    category = await _find(db, data.id)

    if data.category != category.name:
        await integrity.check_category_name_available(
            db, data.category, category.parent_id, exclude_id=category.id
        )

    category.rename(data.category)
    await commit(db, integrity.category_name_conflict(data.category))

    logger.info("Renamed category %s to %s", category.id, category.name)
    return category


async def delete_category(db: AsyncSession, category_id: int) -> None:
    category = await _find(db, category_id, with_children=True)
    integrity.check_category_deletable(category)

    await db.delete(category)
    # A child added concurrently makes the parent foreign key fail here.
    has_children = PreconditionError("The category has child categories and cannot be deleted.")
    await commit(db, has_children, broken_reference=has_children)

    logger.info("Deleted category %s", category_id)
