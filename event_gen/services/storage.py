"""Persistence layer for events: MongoDB document storage plus an in-memory store."""

from __future__ import annotations

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import Dict, Iterable, List

from pymongo.collection import Collection

from ..config import EVENTS_COLLECTION
from ..models.event import Event

logger = logging.getLogger(__name__)


class EventRepository(ABC):
    """Storage contract consumed by the orchestrator."""

    @abstractmethod
    def add_event(self, event: Event) -> None:
        """Store *event*, assigning a fresh id when ``event.id`` is empty."""

    @abstractmethod
    def get_all_events(self) -> List[Event]:
        """Return every stored event."""

    def new_id(self) -> str:
        return uuid.uuid4().hex

    def persist_ai_events(self, events: Iterable[Event]) -> List[Event]:
        """Store generated events under new ids and return the stored copies."""
        stored: List[Event] = []
        for event in events:
            with_id = replace(event, id=self.new_id())
            self.add_event(with_id)
            stored.append(with_id)
        return stored


class MongoEventRepository(EventRepository):
    """Events stored as documents; ``_id`` is the event id."""

    def __init__(self, collection: Collection | None = None) -> None:
        if collection is None:
            from ..clients.mongodb_client import get_database

            collection = get_database()[EVENTS_COLLECTION]
        self._collection = collection

    def add_event(self, event: Event) -> None:
        event_id = event.id or self.new_id()
        doc = {"_id": event_id, **event.to_document()}
        result = self._collection.insert_one(doc)
        logger.info("Stored event '%s' to MongoDB with _id=%s", event.title, result.inserted_id)

    def get_all_events(self) -> List[Event]:
        return [Event.from_document(doc) for doc in self._collection.find({})]


class InMemoryEventRepository(EventRepository):
    """Dictionary-backed store, used offline and in tests."""

    def __init__(self) -> None:
        self._events: Dict[str, Event] = {}

    def add_event(self, event: Event) -> None:
        if not event.id:
            event = replace(event, id=self.new_id())
        self._events[event.id] = event

    def get_all_events(self) -> List[Event]:
        return list(self._events.values())


__all__ = ["EventRepository", "MongoEventRepository", "InMemoryEventRepository"]
