"""User profile as read from the profile store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict

from .tag import Tag


@dataclass(frozen=True, slots=True)
class Profile:
    """A user profile. ``country`` is an ISO 3166-1 alpha-2 code."""

    uid: str
    username: str
    first_name: str
    last_name: str
    country: str
    date_of_birth: date
    description: str | None = None
    tags: frozenset[Tag] = field(default_factory=frozenset)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> Profile:
        dob = doc["date_of_birth"]
        if isinstance(dob, datetime):
            dob = dob.date()
        elif isinstance(dob, str):
            dob = date.fromisoformat(dob)
        tags = (Tag.from_display_name(name) for name in doc.get("tags", []))
        return cls(
            uid=str(doc.get("uid") or doc["_id"]),
            username=doc.get("username", ""),
            first_name=doc.get("first_name", ""),
            last_name=doc.get("last_name", ""),
            country=doc.get("country", ""),
            description=doc.get("description"),
            date_of_birth=dob,
            tags=frozenset(tag for tag in tags if tag is not None),
        )


__all__ = ["Profile"]
