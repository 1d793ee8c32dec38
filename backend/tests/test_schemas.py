"""Unit tests for request validation."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from catalog.core.exceptions import error_map
from catalog.schemas.brand import CatalogBrandCreate, CatalogBrandUpdate
from catalog.schemas.category import CatalogCategoryCreate
from catalog.schemas.item import (
    CatalogItemCreate,
    CatalogItemMaxStockThresholdUpdate,
    CatalogItemUpdate,
)


@pytest.mark.parametrize("name", ["", "   ", "x" * 101, None])
def test_brand_name_rejected(name):
    with pytest.raises(PydanticValidationError):
        CatalogBrandCreate.model_validate({"Brand": name})


def test_brand_name_accepts_pascal_and_snake_case_keys():
    assert CatalogBrandCreate.model_validate({"Brand": "Acme"}).brand == "Acme"
    assert CatalogBrandCreate(brand="x" * 100).brand == "x" * 100


def test_brand_update_requires_positive_id():
    with pytest.raises(PydanticValidationError):
        CatalogBrandUpdate.model_validate({"Id": 0, "Brand": "Acme"})


@pytest.mark.parametrize("parent_id", [0, -3])
def test_category_parent_id_must_be_positive(parent_id):
    with pytest.raises(PydanticValidationError):
        CatalogCategoryCreate.model_validate({"Category": "Laptops", "ParentId": parent_id})


def test_category_parent_id_is_optional():
    body = CatalogCategoryCreate.model_validate({"Category": "Electronics", "ParentId": None})
    assert body.parent_id is None


def test_item_create_minimal_payload():
    body = CatalogItemCreate.model_validate(
        {"Name": "Pro Widget!!", "BrandId": 1, "CatalogId": 1, "MaxStockThreshold": 10}
    )
    assert body.category_id == 1
    assert body.description is None


@pytest.mark.parametrize(
    "override",
    [
        {"Name": "!!!"},
        {"Name": ""},
        {"Description": ""},
        {"Description": "   "},
        {"Description": "x" * 5001},
        {"BrandId": 0},
        {"CatalogId": -1},
        {"MaxStockThreshold": 0},
    ],
)
def test_item_create_rejects_invalid_fields(override):
    payload = {"Name": "Pro Widget", "BrandId": 1, "CatalogId": 1, "MaxStockThreshold": 10}
    payload.update(override)
    with pytest.raises(PydanticValidationError):
        CatalogItemCreate.model_validate(payload)


def test_item_update_requires_description():
    with pytest.raises(PydanticValidationError):
        CatalogItemUpdate.model_validate(
            {"Slug": "pro-widget", "Description": "", "BrandId": 1, "CatalogId": 1}
        )


def test_threshold_update_requires_slug():
    with pytest.raises(PydanticValidationError):
        CatalogItemMaxStockThresholdUpdate.model_validate({"Slug": " ", "MaxStockThreshold": 5})


def test_error_map_groups_messages_by_field():
    with pytest.raises(PydanticValidationError) as exc_info:
        CatalogItemCreate.model_validate({"Name": "", "BrandId": 0, "CatalogId": 1})

    errors = error_map(exc_info.value.errors())

    assert set(errors) == {"Name", "BrandId", "MaxStockThreshold"}
    assert all(isinstance(m, str) for messages in errors.values() for m in messages)
