"""Category ancestry and display paths.

Paths read root first, e.g. ``"Electronics > Computers > Laptops"``.
"""

from typing import Iterable, Mapping

from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.exceptions import CategoryCycleError
from catalog.models.category import CatalogCategory

PATH_SEPARATOR = " > "


def _cycle(category_id: int) -> CategoryCycleError:
    return CategoryCycleError(f"Category {category_id} is part of a parent cycle.")


def lineage(
    category: CatalogCategory, categories: Mapping[int, CatalogCategory]
) -> list[CatalogCategory]:
    """Ancestors of ``category`` (itself included), root first.

    ``categories`` maps ids to already loaded rows. A parent missing from the
    map ends the walk.
    """
    chain: list[CatalogCategory] = []
    seen: set[int] = set()
    current: CatalogCategory | None = category
    while current is not None:
        if current.id in seen:
            raise _cycle(current.id)
        seen.add(current.id)
        chain.append(current)
        current = categories.get(current.parent_id) if current.parent_id is not None else None
    chain.reverse()
    return chain


def build_path(chain: Iterable[CatalogCategory]) -> str:
    return PATH_SEPARATOR.join(node.name for node in chain)


def paths_by_id(categories: Iterable[CatalogCategory]) -> dict[int, str]:
    """Paths for a complete set of categories, computed without extra queries."""
    by_id = {c.id: c for c in categories}
    return {cid: build_path(lineage(c, by_id)) for cid, c in by_id.items()}


async def load_lineage(db: AsyncSession, category: CatalogCategory) -> list[CatalogCategory]:
    """Walk the parent chain one primary-key lookup at a time."""
    chain = [category]
    seen = {category.id}
    parent_id = category.parent_id
    while parent_id is not None:
        if parent_id in seen:
            raise _cycle(parent_id)
        parent = await db.get(CatalogCategory, parent_id)
        if parent is None:
            break
        seen.add(parent.id)
        chain.append(parent)
        parent_id = parent.parent_id
    chain.reverse()
    return chain
