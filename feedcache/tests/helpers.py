"""Fixtures shared across the feed cache tests."""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone

from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.policy import MAX_CACHE_AGE_DAYS
from feedcache.feed.models import FeedImage

FIXED_NOW = datetime(2024, 5, 1, 10, 30, 15, 123456, tzinfo=timezone.utc)


def any_error() -> Exception:
    return RuntimeError("any error")


def unique_image() -> FeedImage:
    return FeedImage(id=uuid.uuid4(), description="any", location="any", url="https://any-url.com")


def unique_feed() -> tuple[list[FeedImage], list[LocalFeedImage]]:
    models = [unique_image(), unique_image()]
    local = [
        LocalFeedImage(id=m.id, description=m.description, location=m.location, url=m.url)
        for m in models
    ]
    return models, local


def max_age_ago(now: datetime) -> datetime:
    """Timestamp at which a snapshot expires exactly at ``now``."""
    return now - timedelta(days=MAX_CACHE_AGE_DAYS)


async def settle(rounds: int = 10):
    """Let scheduled tasks run until they block on pending I/O."""
    for _ in range(rounds):
        await asyncio.sleep(0)
