"""Select a feed store backend from configuration."""

from typing import Any

from feedcache.cache.file_store import FileFeedStore
from feedcache.cache.memory_store import InMemoryFeedStore
from feedcache.cache.redis_store import RedisFeedStore
from feedcache.cache.store import FeedStore


def build_store(config: dict[str, Any]) -> FeedStore:
    """Build the store named by ``config["store"]`` ("file", "memory" or "redis").

    Raises:
        ValueError: If the backend name is unknown.
    """
    backend = config.get("store", "file")
    if backend == "file":
        return FileFeedStore(config.get("store_path", "feed.store.json"))
    if backend == "memory":
        return InMemoryFeedStore()
    if backend == "redis":
        return RedisFeedStore(
            redis_url=config.get("redis_url", "redis://localhost:6379"),
            key=config.get("redis_key", "feedcache:snapshot"),
        )
    raise ValueError(f"Unknown feed store backend: {backend}")
