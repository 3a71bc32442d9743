"""Redis-backed feed store.

Stores the same JSON envelope as ``FileFeedStore`` under a single key.
"""

import asyncio
from datetime import datetime

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from feedcache.cache.codec import decode_snapshot, encode_snapshot
from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.store import Empty, Failure, FeedStore, RetrievalResult
from feedcache.shared.logger import get_feed_logger


class RedisFeedStore(FeedStore):
    """Thin async wrapper around one Redis key, serialized by a FIFO lock."""

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379",
        key: str = "feedcache:snapshot",
        client: aioredis.Redis | None = None,
    ):
        self._redis_url = redis_url
        self._key = key
        self._client = client
        self._lock = asyncio.Lock()
        self.logger = get_feed_logger(__name__)

    def _redis(self) -> aioredis.Redis:
        if self._client is None:
            self._client = aioredis.from_url(self._redis_url)
        return self._client

    async def delete_cached_feed(self) -> None:
        async with self._lock:
            await self._redis().delete(self._key)

    async def insert(self, feed: list[LocalFeedImage], timestamp: datetime) -> None:
        data = encode_snapshot(feed, timestamp)
        async with self._lock:
            await self._redis().set(self._key, data)

    async def retrieve(self) -> RetrievalResult:
        async with self._lock:
            try:
                data = await self._redis().get(self._key)
            except RedisError as e:
                self.logger.warning(f"Redis read failed for {self._key}: {e!r}")
                return Failure(e)

        if data is None:
            return Empty()
        try:
            return decode_snapshot(data)
        except (ValueError, KeyError, TypeError) as e:
            self.logger.warning(f"Unreadable snapshot under {self._key}: {e!r}")
            return Failure(e)

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
