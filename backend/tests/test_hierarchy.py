"""Unit tests for category paths."""

from unittest.mock import AsyncMock

import pytest

from catalog.core.exceptions import CategoryCycleError
from catalog.models.category import CatalogCategory
from catalog.services.hierarchy import build_path, lineage, load_lineage, paths_by_id


def _category(category_id, name, parent_id=None):
    category = CatalogCategory.create(name, parent_id)
    category._id = category_id
    return category


@pytest.fixture
def tree():
    electronics = _category(1, "Electronics")
    computers = _category(2, "Computers", parent_id=1)
    laptops = _category(3, "Laptops", parent_id=2)
    garden = _category(4, "Garden")
    return {c.id: c for c in (electronics, computers, laptops, garden)}


def test_lineage_is_root_first(tree):
    chain = lineage(tree[3], tree)
    assert [c.name for c in chain] == ["Electronics", "Computers", "Laptops"]
    assert build_path(chain) == "Electronics > Computers > Laptops"


def test_root_path_is_its_own_name(tree):
    assert build_path(lineage(tree[4], tree)) == "Garden"


def test_paths_by_id(tree):
    assert paths_by_id(tree.values()) == {
        1: "Electronics",
        2: "Electronics > Computers",
        3: "Electronics > Computers > Laptops",
        4: "Garden",
    }


def test_lineage_detects_cycles():
    a = _category(1, "A", parent_id=2)
    b = _category(2, "B", parent_id=1)
    with pytest.raises(CategoryCycleError):
        lineage(a, {1: a, 2: b})


@pytest.mark.asyncio
async def test_load_lineage_walks_parents_by_primary_key(tree):
    mock_db = AsyncMock()
    mock_db.get.side_effect = lambda model, pk: tree.get(pk)

    chain = await load_lineage(mock_db, tree[3])

    assert build_path(chain) == "Electronics > Computers > Laptops"
    assert mock_db.get.await_count == 2


@pytest.mark.asyncio
async def test_load_lineage_stops_at_missing_parent():
    orphan = _category(7, "Orphan", parent_id=99)
    mock_db = AsyncMock()
    mock_db.get.return_value = None

    chain = await load_lineage(mock_db, orphan)

    assert build_path(chain) == "Orphan"


@pytest.mark.asyncio
async def test_load_lineage_detects_cycles():
    a = _category(1, "A", parent_id=2)
    b = _category(2, "B", parent_id=1)
    mock_db = AsyncMock()
    mock_db.get.side_effect = lambda model, pk: {1: a, 2: b}[pk]

    with pytest.raises(CategoryCycleError):
        await load_lineage(mock_db, a)
