"""Unit tests for the catalog entities' mutation contracts."""

from decimal import Decimal

import pytest

from catalog.models.brand import CatalogBrand
from catalog.models.category import CatalogCategory
from catalog.models.item import CatalogItem


# ── Brand ──────────────────────

def test_brand_create_and_rename():
    brand = CatalogBrand.create("Acme")
    assert brand.name == "Acme"
    assert brand.id is None  # assigned by the store

    brand.rename("Acme Corp")
    assert brand.name == "Acme Corp"


def test_brand_fields_are_read_only():
    brand = CatalogBrand.create("Acme")
    with pytest.raises(AttributeError):
        brand.name = "Other"
    with pytest.raises(AttributeError):
        brand.id = 5


# ── Category ──────────────────────

def test_category_create_with_and_without_parent():
    root = CatalogCategory.create("Electronics")
    assert root.parent_id is None

    child = CatalogCategory.create("Laptops", parent_id=1)
    assert child.name == "Laptops"
    assert child.parent_id == 1


def test_category_rename_keeps_parent():
    category = CatalogCategory.create("Laptops", parent_id=3)
    category.rename("Notebooks")
    assert category.name == "Notebooks"
    assert category.parent_id == 3


def test_category_parent_cannot_be_reassigned():
    category = CatalogCategory.create("Laptops", parent_id=3)
    with pytest.raises(AttributeError):
        category.parent_id = 4


# ── Item ──────────────────────

def test_item_create_derives_slug_and_defaults():
    item = CatalogItem.create("Pro Widget!!", "A widget", 10, brand_id=1, category_id=2)

    assert item.slug == "pro-widget"
    assert item.name == "Pro Widget!!"
    assert item.description == "A widget"
    assert item.max_stock_threshold == 10
    assert item.brand_id == 1
    assert item.category_id == 2
    assert item.price == Decimal("0")
    assert item.available_stock == 0
    assert item.medias == []


def test_item_update_does_not_touch_slug():
    item = CatalogItem.create("Pro Widget", "Old", 10, brand_id=1, category_id=2)

    item.update("New description", brand_id=3, category_id=4)

    assert item.slug == "pro-widget"
    assert item.name == "Pro Widget"
    assert item.description == "New description"
    assert item.brand_id == 3
    assert item.category_id == 4


def test_item_set_max_stock_threshold():
    item = CatalogItem.create("Pro Widget", "", 10, brand_id=1, category_id=2)
    item.set_max_stock_threshold(25)
    assert item.max_stock_threshold == 25


def test_item_fields_are_read_only():
    item = CatalogItem.create("Pro Widget", "", 10, brand_id=1, category_id=2)
    with pytest.raises(AttributeError):
        item.slug = "other"
    with pytest.raises(AttributeError):
        item.max_stock_threshold = 1


def test_item_reference_names():
    item = CatalogItem.create("Pro Widget", "", 10, brand_id=1, category_id=2)
    assert item.brand_name is None

    item.brand = CatalogBrand.create("Acme")
    item.category = CatalogCategory.create("Gadgets")
    assert item.brand_name == "Acme"
    assert item.category_name == "Gadgets"
