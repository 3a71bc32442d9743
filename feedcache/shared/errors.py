"""Errors surfaced by the cache loader.

Each error wraps the storage backend's exception without reclassifying it:
the original is kept on ``error`` and chained as ``__cause__``.
"""


class FeedCacheError(Exception):
    """Base class for cache loader failures."""

    operation = "cache operation"

    def __init__(self, error: BaseException):
        super().__init__(f"{self.operation} failed: {error}")
        self.error = error
        self.__cause__ = error

    def __eq__(self, other):
        return type(self) is type(other) and self.error is other.error

    def __hash__(self):
        return hash((type(self), id(self.error)))


class DeletionFailed(FeedCacheError):
    operation = "cache deletion"


class InsertionFailed(FeedCacheError):
    operation = "cache insertion"


class RetrievalFailed(FeedCacheError):
    operation = "cache retrieval"
