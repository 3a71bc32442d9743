"""Storage port for the feed cache.

Any persistence backend (file, memory, Redis) implements ``FeedStore``.
Implementations must run the operations of one instance one at a time,
in the order they were submitted.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from feedcache.cache.local_image import LocalFeedImage


@dataclass(frozen=True)
class Empty:
    """Nothing is cached."""


@dataclass(frozen=True)
class Found:
    feed: list[LocalFeedImage]
    timestamp: datetime


@dataclass(frozen=True)
class Failure:
    """Stored data exists but could not be read."""

    error: Exception


RetrievalResult = Empty | Found | Failure


class FeedStore(ABC):
    """Persistence boundary used by ``LocalFeedLoader``."""

    @abstractmethod
    async def delete_cached_feed(self) -> None:
        """Remove the snapshot. Succeeds when nothing is stored; raises on failure."""
        ...

    @abstractmethod
    async def insert(self, feed: list[LocalFeedImage], timestamp: datetime) -> None:
        """Replace the snapshot with ``feed`` and ``timestamp``. Raises on failure."""
        ...

    @abstractmethod
    async def retrieve(self) -> RetrievalResult:
        """Return ``Empty``, ``Found`` or ``Failure``. Never raises."""
        ...

    async def aclose(self) -> None:
        """Release backend resources. Default is a no-op."""
