"""In-memory feed store, mainly for tests and short-lived processes."""

import asyncio
from datetime import datetime

from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.store import Empty, FeedStore, Found, RetrievalResult


class InMemoryFeedStore(FeedStore):
    """Holds the snapshot in memory. Operations are serialized by a FIFO lock."""

    def __init__(self):
        self._snapshot: Found | None = None
        self._lock = asyncio.Lock()

    async def delete_cached_feed(self) -> None:
        async with self._lock:
            self._snapshot = None

    async def insert(self, feed: list[LocalFeedImage], timestamp: datetime) -> None:
        async with self._lock:
            self._snapshot = Found(feed=list(feed), timestamp=timestamp)

    async def retrieve(self) -> RetrievalResult:
        async with self._lock:
            return self._snapshot if self._snapshot is not None else Empty()
