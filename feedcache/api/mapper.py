"""Maps the remote feed payload to ``FeedImage`` models.

Expected body for a 200 response::

    {"items": [{"id": "<uuid>", "description": "...", "location": "...", "image": "<url>"}]}

``description`` and ``location`` are optional.
"""

import json
import uuid

from feedcache.api.errors import InvalidData
from feedcache.api.http_client import HTTPResponse
from feedcache.feed.models import FeedImage

OK_200 = 200


def map_feed(response: HTTPResponse) -> list[FeedImage]:
    """Return the decoded feed. Raises ``InvalidData`` for non-200 or malformed bodies."""
    if response.status_code != OK_200:
        raise InvalidData(f"Unexpected status code {response.status_code}")

    try:
        root = json.loads(response.body)
        return [_map_item(item) for item in root["items"]]
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise InvalidData(f"Malformed feed payload: {e}") from e


def _map_item(item: dict) -> FeedImage:
    image = item["image"]
    if not isinstance(image, str):
        raise TypeError("image must be a string")
    return FeedImage(
        id=uuid.UUID(item["id"]),
        description=item.get("description"),
        location=item.get("location"),
        url=image,
    )
