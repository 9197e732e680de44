"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from event_gen.services import EventGenerator` without having to
know which underlying module provides the symbol.
"""

from .generator import EventGenerator  # noqa: F401
from .profiles import InMemoryUserRepository, MongoUserRepository, UserRepository  # noqa: F401
from .storage import EventRepository, InMemoryEventRepository, MongoEventRepository  # noqa: F401

__all__ = [
    "EventGenerator",
    "UserRepository",
    "MongoUserRepository",
    "InMemoryUserRepository",
    "EventRepository",
    "MongoEventRepository",
    "InMemoryEventRepository",
]
