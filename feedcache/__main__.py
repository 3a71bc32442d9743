"""Run the feed cache: python -m feedcache [config.json]

Fetches the remote feed and caches it; when the remote is unreachable,
serves whatever valid snapshot the cache still holds.
"""

import asyncio
import sys
from pathlib import Path
from typing import Any

from feedcache.api.http_client import HTTPClient, HttpxHTTPClient
from feedcache.api.remote_loader import RemoteFeedLoader
from feedcache.cache.factory import build_store
from feedcache.cache.local_loader import LocalFeedLoader
from feedcache.cache.policy import FeedCachePolicy
from feedcache.feed.loader import LoadFailure, LoadSuccess
from feedcache.feed.models import FeedImage
from feedcache.shared.config import DEFAULT_CONFIG, cache_timezone, load_feed_config
from feedcache.shared.logger import get_feed_logger

DEFAULT_CONFIG_PATH = str(Path(__file__).parent / "config.json")


async def _collect(start):
    """Await a callback-style operation and return the value it delivered."""
    delivered = []
    await start(delivered.append)
    return delivered[0]


async def run(config: dict[str, Any], http_client: HTTPClient | None = None) -> list[FeedImage]:
    logger = get_feed_logger("runner", log_file=config.get("log_file"), level=config.get("log_level", "INFO"))
    store = build_store(config)
    local = LocalFeedLoader(store, policy=FeedCachePolicy(tz=cache_timezone(config)))
    owns_client = http_client is None
    client = http_client or HttpxHTTPClient.create(timeout=config.get("http_timeout_seconds", 15))
    remote = RemoteFeedLoader(client, config["feed_url"])

    try:
        await local.validate_cache()

        result = await _collect(remote.load)
        if isinstance(result, LoadSuccess):
            error = await _collect(lambda completion: local.save(result.feed, completion))
            if error is not None:
                logger.warning(f"Could not cache feed: {error}")
            logger.info(f"Loaded {len(result.feed)} images from {config['feed_url']}")
            return result.feed

        logger.warning(f"Remote load failed ({result.error!r}), falling back to cache")
        cached = await _collect(local.load)
        if isinstance(cached, LoadFailure):
            raise cached.error
        logger.info(f"Loaded {len(cached.feed)} images from cache")
        return cached.feed
    finally:
        if owns_client:
            await client.close()
        await store.aclose()


def main():
    config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH
    config = load_feed_config(config_path, defaults=DEFAULT_CONFIG)

    try:
        feed = asyncio.run(run(config))
    except KeyboardInterrupt:
        print("\nfeedcache shutting down...")
        return

    for image in feed:
        print(f"{image.id}  {image.url}  {image.description or ''}")


if __name__ == "__main__":
    main()
