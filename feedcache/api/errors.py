"""Errors delivered by ``RemoteFeedLoader``."""


class RemoteFeedError(Exception):
    """Base class for remote feed failures."""


class Connectivity(RemoteFeedError):
    """The request never produced an HTTP response."""


class InvalidData(RemoteFeedError):
    """The response was not a 200 with a valid feed payload."""
