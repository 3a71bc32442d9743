"""Loads the feed from the remote API."""

import asyncio
import weakref
from typing import Callable

from feedcache.api.errors import Connectivity, InvalidData
from feedcache.api.http_client import HTTPClient
from feedcache.api.mapper import map_feed
from feedcache.feed.loader import FeedLoader, LoadFailure, LoadResult, LoadSuccess
from feedcache.shared.dispatch import deliver
from feedcache.shared.logger import get_feed_logger


class RemoteFeedLoader(FeedLoader):
    """Fetches ``url`` through an injected ``HTTPClient`` and maps the payload."""

    def __init__(self, client: HTTPClient, url: str):
        self._client = client
        self._url = url
        self.logger = get_feed_logger(__name__)
        self._tasks: set[asyncio.Task] = set()

    def load(self, completion: Callable[[LoadResult], object]) -> asyncio.Task:
        task = asyncio.create_task(
            _load(weakref.ref(self), self._client, self._url, self.logger, completion)
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task


async def _load(owner, client: HTTPClient, url: str, logger, completion):
    try:
        response = await client.get(url)
    except Exception as e:
        logger.warning(f"Request to {url} failed: {e!r}")
        result = LoadFailure(Connectivity(str(e)))
    else:
        try:
            result = LoadSuccess(map_feed(response))
        except InvalidData as e:
            logger.warning(f"Invalid feed from {url}: {e}")
            result = LoadFailure(e)

    if owner() is None:
        return
    await deliver(completion, result)
