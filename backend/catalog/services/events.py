"""Outbound integration events, published on a redis channel.

Delivery is at-most-once and best effort: a failed publish is logged and
dropped, it never fails the request that triggered it.
"""

import logging

from redis.asyncio import Redis
from redis.exceptions import RedisError

from catalog.core.config import settings
from catalog.schemas.common import CatalogSchema

logger = logging.getLogger(__name__)


class CatalogItemAddedEvent(CatalogSchema):
    name: str
    description: str
    catalog_category: str
    catalog_brand: str
    slug: str
    detail_url: str


class EventPublisher:
    def __init__(self, redis_url: str, channel: str, enabled: bool = True):
        self.redis_url = redis_url
        self.channel = channel
        self.enabled = enabled
        self._redis: Redis | None = None

    def _client(self) -> Redis:
        if self._redis is None:
            self._redis = Redis.from_url(self.redis_url, decode_responses=True)
        return self._redis

    async def publish_item_added(self, event: CatalogItemAddedEvent) -> None:
        if not self.enabled:
            logger.debug("Events disabled, dropping item-added event for %s", event.slug)
            return

        payload = event.model_dump_json(by_alias=True)
        try:
            await self._client().publish(self.channel, payload)
        except (RedisError, ValueError) as e:
            logger.warning("Failed to publish item-added event for %s: %s", event.slug, e)
            return
        logger.info("Published item-added event for %s on %s", event.slug, self.channel)

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None


publisher = EventPublisher(settings.REDIS_URL, settings.EVENTS_CHANNEL, settings.EVENTS_ENABLED)


def get_event_publisher() -> EventPublisher:
    return publisher
