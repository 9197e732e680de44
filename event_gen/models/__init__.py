"""Domain, query and wire models used across the project."""

from .candidate import CandidateLocation, CandidateRecord, GenerationOutcome, ValidationFailure  # noqa: F401
from .completion import (  # noqa: F401
    ChatMessage,
    Choice,
    CompletionRequest,
    CompletionResponse,
    ResponseFormat,
    TransportResponse,
    Usage,
)
from .event import Event, Location  # noqa: F401
from .profile import Profile  # noqa: F401
from .query import ContextConfig, GenerationQuery, TaskConfig  # noqa: F401
from .tag import Tag, TagCategory  # noqa: F401
from .viewport import Viewport  # noqa: F401

__all__ = [
    "CandidateLocation",
    "CandidateRecord",
    "GenerationOutcome",
    "ValidationFailure",
    "ChatMessage",
    "Choice",
    "CompletionRequest",
    "CompletionResponse",
    "ResponseFormat",
    "TransportResponse",
    "Usage",
    "Event",
    "Location",
    "Profile",
    "ContextConfig",
    "GenerationQuery",
    "TaskConfig",
    "Tag",
    "TagCategory",
    "Viewport",
]
