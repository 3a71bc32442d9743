"""Domain model for feed images."""

import uuid
from dataclasses import dataclass


@dataclass(frozen=True)
class FeedImage:
    id: uuid.UUID
    description: str | None
    location: str | None
    url: str
