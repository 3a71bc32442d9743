"""Remote feed API: HTTP client, payload mapper and remote loader."""

from feedcache.api.errors import Connectivity, InvalidData, RemoteFeedError
from feedcache.api.http_client import HTTPClient, HTTPResponse, HttpxHTTPClient
from feedcache.api.mapper import map_feed
from feedcache.api.remote_loader import RemoteFeedLoader

__all__ = [
    "Connectivity",
    "InvalidData",
    "RemoteFeedError",
    "HTTPClient",
    "HTTPResponse",
    "HttpxHTTPClient",
    "map_feed",
    "RemoteFeedLoader",
]
