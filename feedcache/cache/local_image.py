"""Persisted shape of a cached feed image.

Kept separate from ``FeedImage`` so the on-disk format can evolve
independently of the domain model.
"""

import uuid
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LocalFeedImage:
    id: uuid.UUID
    description: str | None
    location: str | None
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "description": self.description,
            "location": self.location,
            "url": self.url,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LocalFeedImage":
        return cls(
            id=uuid.UUID(str(data["id"])),
            description=data.get("description"),
            location=data.get("location"),
            url=data["url"],
        )
