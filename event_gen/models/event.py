"""Definition of the `Event` dataclass handed back to callers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from ..config import AI_CREATOR
from .tag import Tag


@dataclass(frozen=True, slots=True)
class Location:
    """A point on the map, in degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class Event:
    """A validated, application-ready event.

    ``id`` stays empty until the persistence layer assigns one.
    """

    title: str
    description: str
    date: datetime
    location: Location
    tags: frozenset[Tag] = field(default_factory=frozenset)
    id: str = ""
    creator: str = AI_CREATOR
    participants: frozenset[str] = field(default_factory=frozenset)

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this event (without ``_id``)."""
        return {
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "tags": sorted(tag.display_name for tag in self.tags),
            "creator": self.creator,
            "participants": sorted(self.participants),
            "location": {"latitude": self.location.latitude, "longitude": self.location.longitude},
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> Event:
        tags = (Tag.from_display_name(name) for name in doc.get("tags", []))
        return cls(
            id=str(doc.get("_id", "")),
            title=doc["title"],
            description=doc.get("description", ""),
            date=doc["date"],
            tags=frozenset(tag for tag in tags if tag is not None),
            creator=doc.get("creator", AI_CREATOR),
            participants=frozenset(doc.get("participants", [])),
            location=Location(doc["location"]["latitude"], doc["location"]["longitude"]),
        )


__all__ = ["Event", "Location"]
