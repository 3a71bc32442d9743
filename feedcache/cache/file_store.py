"""File-backed feed store.

Keeps one snapshot as a JSON envelope at ``store_path``. All operations of
an instance run on a private single-thread executor, so they never overlap
and complete in the order they were submitted.
"""

import asyncio
import os
import tempfile
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path

from feedcache.cache.codec import decode_snapshot, encode_snapshot
from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.store import Empty, Failure, FeedStore, RetrievalResult
from feedcache.shared.logger import get_feed_logger


class FileFeedStore(FeedStore):
    """JSON file store with serialized access."""

    def __init__(self, store_path: str | Path):
        self._path = Path(store_path)
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="feed-store")
        self.logger = get_feed_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    async def delete_cached_feed(self) -> None:
        await self._submit(self._delete)

    async def insert(self, feed: list[LocalFeedImage], timestamp: datetime) -> None:
        await self._submit(self._write, feed, timestamp)

    async def retrieve(self) -> RetrievalResult:
        return await self._submit(self._read)

    async def aclose(self) -> None:
        await asyncio.to_thread(self._executor.shutdown, wait=True)

    def _submit(self, fn, *args) -> asyncio.Future:
        loop = asyncio.get_running_loop()
        return loop.run_in_executor(self._executor, fn, *args)

    def _read(self) -> RetrievalResult:
        if not self._path.exists():
            return Empty()
        try:
            return decode_snapshot(self._path.read_bytes())
        except (OSError, ValueError, KeyError, TypeError) as e:
            self.logger.warning(f"Unreadable snapshot at {self._path}: {e!r}")
            return Failure(e)

    def _write(self, feed: list[LocalFeedImage], timestamp: datetime) -> None:
        data = encode_snapshot(feed, timestamp)
        self._path.parent.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        self.logger.debug(f"Wrote {len(feed)} images to {self._path}")

    def _delete(self) -> None:
        if not self._path.exists():
            return
        self._path.unlink()
        self.logger.debug(f"Deleted snapshot at {self._path}")
