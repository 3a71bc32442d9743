"""Feed cache: storage port, policy, loader and store backends."""

from feedcache.cache.factory import build_store
from feedcache.cache.file_store import FileFeedStore
from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.local_loader import LocalFeedLoader
from feedcache.cache.memory_store import InMemoryFeedStore
from feedcache.cache.policy import MAX_CACHE_AGE_DAYS, FeedCachePolicy
from feedcache.cache.redis_store import RedisFeedStore
from feedcache.cache.store import Empty, Failure, FeedStore, Found, RetrievalResult

__all__ = [
    "build_store",
    "FileFeedStore",
    "InMemoryFeedStore",
    "RedisFeedStore",
    "LocalFeedImage",
    "LocalFeedLoader",
    "MAX_CACHE_AGE_DAYS",
    "FeedCachePolicy",
    "FeedStore",
    "RetrievalResult",
    "Empty",
    "Found",
    "Failure",
]
