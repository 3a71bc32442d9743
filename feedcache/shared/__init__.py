"""Shared utilities for feed cache components."""

from feedcache.shared.config import DEFAULT_CONFIG, cache_timezone, load_feed_config
from feedcache.shared.dispatch import deliver
from feedcache.shared.errors import DeletionFailed, FeedCacheError, InsertionFailed, RetrievalFailed
from feedcache.shared.logger import get_feed_logger

__all__ = [
    "DEFAULT_CONFIG",
    "load_feed_config",
    "cache_timezone",
    "deliver",
    "FeedCacheError",
    "DeletionFailed",
    "InsertionFailed",
    "RetrievalFailed",
    "get_feed_logger",
]
