"""Configuration loader for the feed cache runner."""

import json
from datetime import timezone, tzinfo
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo

DEFAULT_CONFIG: dict[str, Any] = {
    "feed_url": "https://essentialdeveloper.com/feed-case-study/test-api/feed",
    "store": "file",
    "store_path": "feed.store.json",
    "redis_url": "redis://localhost:6379",
    "redis_key": "feedcache:snapshot",
    "cache_timezone": "UTC",
    "http_timeout_seconds": 15,
    "log_file": None,
    "log_level": "INFO",
}


def load_feed_config(config_path: str, defaults: dict[str, Any] | None = None) -> dict[str, Any]:
    """Load feed configuration from a JSON file, merging with optional defaults.

    Args:
        config_path: Path to the JSON configuration file.
        defaults: Optional dictionary of default values. File values override defaults.

    Returns:
        Merged configuration dictionary.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        config = json.load(f)

    if defaults:
        return {**defaults, **config}

    return config


def cache_timezone(config: dict[str, Any]) -> tzinfo:
    """Return the zone used for calendar-day cache expiry.

    Raises:
        ZoneInfoNotFoundError: If ``cache_timezone`` names an unknown zone.
    """
    name = config.get("cache_timezone") or "UTC"
    if name == "UTC":
        return timezone.utc
    return ZoneInfo(name)
