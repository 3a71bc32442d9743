"""Feed loading interface shared by the remote and local loaders."""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable

from feedcache.feed.models import FeedImage


@dataclass(frozen=True)
class LoadSuccess:
    feed: list[FeedImage] = field(default_factory=list)


@dataclass(frozen=True)
class LoadFailure:
    error: Exception


LoadResult = LoadSuccess | LoadFailure


class FeedLoader(ABC):
    """Produces a list of feed images or fails, once per call."""

    @abstractmethod
    def load(self, completion: Callable[[LoadResult], object]) -> asyncio.Task:
        """Schedule a load on the running loop and deliver the result to ``completion``.

        Returns the scheduled task so callers can await it.
        """
        ...
