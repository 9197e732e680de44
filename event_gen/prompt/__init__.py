"""Prompt construction and the structured-output schema."""

from .builder import build_system_message, build_user_message  # noqa: F401
from .schema import EVENT_SCHEMA, event_response_format  # noqa: F401

__all__ = [
    "build_system_message",
    "build_user_message",
    "EVENT_SCHEMA",
    "event_response_format",
]
