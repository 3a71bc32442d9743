"""JSON envelope for a persisted feed snapshot.

Layout::

    {"version": 1,
     "feed": [{"id": ..., "description": ..., "location": ..., "url": ...}],
     "timestamp": "2024-05-01T10:00:00+00:00"}

Envelopes written before versioning carry no ``version`` and read as 1.
"""

import json
from datetime import datetime

from feedcache.cache.local_image import LocalFeedImage
from feedcache.cache.store import Found

SCHEMA_VERSION = 1


def encode_snapshot(feed: list[LocalFeedImage], timestamp: datetime) -> bytes:
    """Raises ValueError for a timestamp without a UTC offset."""
    _require_offset(timestamp)
    envelope = {
        "version": SCHEMA_VERSION,
        "feed": [image.to_dict() for image in feed],
        "timestamp": timestamp.isoformat(),
    }
    return json.dumps(envelope).encode("utf-8")


def decode_snapshot(data: bytes | str) -> Found:
    """Decode an envelope into ``Found``.

    Raises:
        ValueError: Malformed JSON, unknown version, bad id, bad timestamp or
            a timestamp without a UTC offset.
        KeyError: A required field is missing.
        TypeError: A field has the wrong type.
    """
    envelope = json.loads(data)
    if not isinstance(envelope, dict):
        raise ValueError("Snapshot envelope must be a JSON object")

    version = envelope.get("version", SCHEMA_VERSION)
    if version != SCHEMA_VERSION:
        raise ValueError(f"Unsupported snapshot version: {version}")

    feed = [LocalFeedImage.from_dict(item) for item in envelope["feed"]]
    timestamp = datetime.fromisoformat(envelope["timestamp"])
    _require_offset(timestamp)
    return Found(feed=feed, timestamp=timestamp)


def _require_offset(timestamp: datetime) -> None:
    if timestamp.utcoffset() is None:
        raise ValueError(f"Snapshot timestamp has no UTC offset: {timestamp.isoformat()}")
