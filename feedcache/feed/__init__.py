"""Feed feature: domain model and the loader interface."""

from feedcache.feed.loader import FeedLoader, LoadFailure, LoadResult, LoadSuccess
from feedcache.feed.models import FeedImage

__all__ = ["FeedImage", "FeedLoader", "LoadResult", "LoadSuccess", "LoadFailure"]
