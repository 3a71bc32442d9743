"""Cache-aside feed loader.

``LocalFeedLoader`` composes a ``FeedStore`` with ``FeedCachePolicy``:

- ``save`` deletes the current snapshot, then inserts the new one stamped
  with the injected clock.
- ``load`` returns the cached feed while it is valid and an empty feed when
  it is missing or expired.
- ``validate_cache`` purges expired or unreadable snapshots.

Every call schedules a task on the running loop. The task only keeps a weak
reference to the loader and checks it after each storage call, so results
arriving after the loader is released are dropped.
"""

import asyncio
import logging
import weakref
from datetime import datetime, timezone
from typing import Callable, Iterable

from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.policy import FeedCachePolicy
from feedcache.cache.store import Failure, FeedStore, Found, RetrievalResult
from feedcache.feed.loader import FeedLoader, LoadFailure, LoadResult, LoadSuccess
from feedcache.feed.models import FeedImage
from feedcache.shared.dispatch import deliver
from feedcache.shared.errors import DeletionFailed, InsertionFailed, RetrievalFailed
from feedcache.shared.logger import get_feed_logger

SaveCompletion = Callable[[Exception | None], object]
LoadCompletion = Callable[[LoadResult], object]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LocalFeedLoader(FeedLoader):
    """Saves, loads and validates the cached feed through a ``FeedStore``."""

    def __init__(
        self,
        store: FeedStore,
        current_date: Callable[[], datetime] = _utcnow,
        policy: FeedCachePolicy | None = None,
        logger: logging.Logger | None = None,
    ):
        self._store = store
        self._current_date = current_date
        self._policy = policy or FeedCachePolicy()
        self.logger = logger or get_feed_logger(__name__)
        self._tasks: set[asyncio.Task] = set()

    def save(self, feed: Iterable[FeedImage], completion: SaveCompletion) -> asyncio.Task:
        """Replace the cached feed. ``completion`` gets None or a ``FeedCacheError``."""
        return self._schedule(_save(self._context(), list(feed), completion))

    def load(self, completion: LoadCompletion) -> asyncio.Task:
        """Deliver the cached feed, or an empty feed when missing or expired."""
        return self._schedule(_load(self._context(), completion))

    def validate_cache(self) -> asyncio.Task:
        """Delete the snapshot if it is expired or unreadable. Nothing is delivered."""
        return self._schedule(_validate(self._context()))

    def _context(self) -> "_LoaderContext":
        return _LoaderContext(self)

    def _schedule(self, coro) -> asyncio.Task:
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


class _LoaderContext:
    """What a pending operation needs from its loader, minus the loader itself."""

    def __init__(self, loader: LocalFeedLoader):
        self._owner = weakref.ref(loader)
        self.store = loader._store
        self.current_date = loader._current_date
        self.policy = loader._policy
        self.logger = loader.logger

    @property
    def released(self) -> bool:
        return self._owner() is None

    def is_valid(self, found: Found) -> bool:
        return self.policy.validate(found.timestamp, self.current_date())

    async def retrieve(self) -> RetrievalResult:
        try:
            return await self.store.retrieve()
        except Exception as e:
            return Failure(e)


async def _save(ctx: _LoaderContext, feed: list[FeedImage], completion: SaveCompletion):
    try:
        await ctx.store.delete_cached_feed()
    except Exception as e:
        if ctx.released:
            return
        ctx.logger.warning("Cache deletion failed", extra={"feed_data": {"error": repr(e)}})
        await deliver(completion, DeletionFailed(e))
        return

    if ctx.released:
        ctx.logger.debug("Loader released before insert, dropping save")
        return

    error = None
    try:
        await ctx.store.insert(_to_local(feed), ctx.current_date())
    except Exception as e:
        ctx.logger.warning("Cache insertion failed", extra={"feed_data": {"error": repr(e)}})
        error = InsertionFailed(e)

    if ctx.released:
        return
    if error is None:
        ctx.logger.info("Saved feed to cache", extra={"feed_data": {"count": len(feed)}})
    await deliver(completion, error)


async def _load(ctx: _LoaderContext, completion: LoadCompletion):
    result = await ctx.retrieve()
    if ctx.released:
        return

    if isinstance(result, Failure):
        ctx.logger.warning("Cache retrieval failed", extra={"feed_data": {"error": repr(result.error)}})
        await deliver(completion, LoadFailure(RetrievalFailed(result.error)))
    elif isinstance(result, Found) and ctx.is_valid(result):
        await deliver(completion, LoadSuccess(_to_models(result.feed)))
    else:
        await deliver(completion, LoadSuccess([]))


async def _validate(ctx: _LoaderContext):
    result = await ctx.retrieve()
    if ctx.released:
        return

    if isinstance(result, Failure):
        reason = "unreadable"
    elif isinstance(result, Found) and not ctx.is_valid(result):
        reason = "expired"
    else:
        return

    ctx.logger.info(f"Deleting {reason} cache")
    try:
        await ctx.store.delete_cached_feed()
    except Exception as e:
        ctx.logger.warning("Cache cleanup failed", extra={"feed_data": {"error": repr(e)}})


def _to_local(feed: list[FeedImage]) -> list[LocalFeedImage]:
    return [
        LocalFeedImage(id=image.id, description=image.description, location=image.location, url=image.url)
        for image in feed
    ]


def _to_models(feed: list[LocalFeedImage]) -> list[FeedImage]:
    return [
        FeedImage(id=image.id, description=image.description, location=image.location, url=image.url)
        for image in feed
    ]
