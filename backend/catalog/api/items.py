"""Catalog item endpoints."""

from fastapi import APIRouter, BackgroundTasks, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.core.config import settings
from catalog.db.base import get_db
from catalog.models.item import CatalogItem
from catalog.schemas.item import (
    CatalogItemCreate,
    CatalogItemMaxStockThresholdUpdate,
    CatalogItemResponse,
    CatalogItemUpdate,
    CatalogMedia,
)
from catalog.services import items
from catalog.services.events import CatalogItemAddedEvent, EventPublisher, get_event_publisher

router = APIRouter(prefix="/items", tags=["items"])


def _location(slug: str) -> str:
    return f"{settings.API_V1_STR}/items/{slug}"


def _created(slug: str) -> Response:
    return Response(status_code=status.HTTP_201_CREATED, headers={"Location": _location(slug)})


def _to_response(item: CatalogItem) -> CatalogItemResponse:
    return CatalogItemResponse(
        name=item.name,
        slug=item.slug,
        description=item.description,
        brand_id=item.brand_id,
        brand_name=item.brand_name,
        category_id=item.category_id,
        category_name=item.category_name,
        price=item.price,
        available_stock=item.available_stock,
        max_stock_threshold=item.max_stock_threshold,
        medias=[CatalogMedia.model_validate(m) for m in item.medias],
    )


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_item(
    body: CatalogItemCreate,
    background_tasks: BackgroundTasks,
    db: AsyncSession = Depends(get_db),
    publisher: EventPublisher = Depends(get_event_publisher),
):
    """Create an item; an item-added event is published after the response."""
    item, brand, category = await items.create_item(db, body)

    detail_url = _location(item.slug)
    event = CatalogItemAddedEvent(
        name=item.name,
        description=item.description,
        catalog_category=category.name,
        catalog_brand=brand.name,
        slug=item.slug,
        detail_url=detail_url,
    )
    background_tasks.add_task(publisher.publish_item_added, event)

    return _created(item.slug)


@router.put("", status_code=status.HTTP_201_CREATED)
async def update_item(body: CatalogItemUpdate, db: AsyncSession = Depends(get_db)):
    item = await items.update_item(db, body)
    return _created(item.slug)


@router.patch("/max_stock_threshold", status_code=status.HTTP_201_CREATED)
async def update_max_stock_threshold(
    body: CatalogItemMaxStockThresholdUpdate, db: AsyncSession = Depends(get_db)
):
    item = await items.set_max_stock_threshold(db, body)
    return _created(item.slug)


@router.get("", response_model=list[CatalogItemResponse])
async def list_items(db: AsyncSession = Depends(get_db)):
    return [_to_response(i) for i in await items.list_items(db)]


@router.get("/{slug}", response_model=CatalogItemResponse)
async def get_item(slug: str, db: AsyncSession = Depends(get_db)):
    return _to_response(await items.get_item(db, slug))


@router.delete("/{slug}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(slug: str, db: AsyncSession = Depends(get_db)):
    await items.delete_item(db, slug)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
