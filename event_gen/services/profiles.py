"""Read access to user profiles."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Iterable

from pymongo.collection import Collection

from ..config import USERS_COLLECTION
from ..errors import ProfileNotFoundError
from ..models.profile import Profile


class UserRepository(ABC):
    @abstractmethod
    def get_user(self, uid: str) -> Profile:
        """Return the profile for *uid*; raise :class:`ProfileNotFoundError` if unknown."""


class MongoUserRepository(UserRepository):
    def __init__(self, collection: Collection | None = None) -> None:
        if collection is None:
            from ..clients.mongodb_client import get_database

            collection = get_database()[USERS_COLLECTION]
        self._collection = collection

    def get_user(self, uid: str) -> Profile:
        doc = self._collection.find_one({"_id": uid})
        if doc is None:
            raise ProfileNotFoundError(uid)
        return Profile.from_document(doc)


class InMemoryUserRepository(UserRepository):
    def __init__(self, profiles: Iterable[Profile] = ()) -> None:
        self._profiles: Dict[str, Profile] = {p.uid: p for p in profiles}

    def add_user(self, profile: Profile) -> None:
        self._profiles[profile.uid] = profile

    def get_user(self, uid: str) -> Profile:
        try:
            return self._profiles[uid]
        except KeyError:
            raise ProfileNotFoundError(uid) from None


__all__ = ["UserRepository", "MongoUserRepository", "InMemoryUserRepository"]
