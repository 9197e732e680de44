"""Convenience re-exports for SDK accessors and completion transports."""

from __future__ import annotations

from ..config import COMPLETION_TRANSPORT
from .fake_client import FakeCompletionTransport  # noqa: F401
from .http_client import HttpCompletionTransport, get_session  # noqa: F401
from .mongodb_client import get_database, get_mongo_client  # noqa: F401
from .openai_client import OpenAICompletionTransport, get_openai  # noqa: F401


def get_completion_transport(kind: str | None = None):
    """Build the transport named by *kind* (default: ``COMPLETION_TRANSPORT``)."""
    kind = (kind or COMPLETION_TRANSPORT).lower()
    if kind == "http":
        return HttpCompletionTransport()
    if kind == "sdk":
        return OpenAICompletionTransport()
    if kind == "fake":
        return FakeCompletionTransport()
    raise ValueError(f"Unknown completion transport: {kind!r} (expected 'http', 'sdk' or 'fake')")


__all__ = [
    "FakeCompletionTransport",
    "HttpCompletionTransport",
    "OpenAICompletionTransport",
    "get_completion_transport",
    "get_session",
    "get_openai",
    "get_mongo_client",
    "get_database",
]
