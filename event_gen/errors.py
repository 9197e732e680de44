"""Exception taxonomy for the generation pipeline.

Two families are fatal and abort a whole generation attempt:

* :class:`GenerationError` – the completion call itself did not produce a
  usable reply (transport failure, empty body, no choices, blank content).
* :class:`PayloadError` – the reply text could not be turned into a list of
  candidate records at all.

Per-record validation problems are *not* exceptions; they are collected as
``ValidationFailure`` entries of a ``GenerationOutcome``.
"""

from __future__ import annotations

from typing import Any


class EventGenError(Exception):
    """Base class for all errors raised by event_gen."""


# ---------------------------------------------------------------------------
# Completion call
# ---------------------------------------------------------------------------

class GenerationError(EventGenError, RuntimeError):
    """The completion service did not return usable content."""


class TransportError(GenerationError):
    """Non-success status, or the transport failed before a status was known."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    @classmethod
    def from_status(cls, status_code: int, body: str = "") -> "TransportError":
        return cls(f"OpenAI error: {status_code}\n{body}".rstrip(), status_code=status_code, body=body)


class EmptyResponseError(GenerationError):
    """The call succeeded but carried no body."""


class NoChoicesError(GenerationError):
    """The body contained zero choices."""


class BlankContentError(GenerationError):
    """The first choice's message content was empty or whitespace."""

    def __init__(self, finish_reason: str | None, usage: Any = None) -> None:
        prompt_tokens = getattr(usage, "prompt_tokens", None)
        completion_tokens = getattr(usage, "completion_tokens", None)
        total_tokens = getattr(usage, "total_tokens", None)
        super().__init__(
            "OpenAI returned empty content. "
            f"finish_reason={finish_reason}, "
            f"prompt_tokens={prompt_tokens}, "
            f"completion_tokens={completion_tokens}, "
            f"total_tokens={total_tokens}"
        )
        self.finish_reason = finish_reason
        self.usage = usage


# ---------------------------------------------------------------------------
# Payload decoding
# ---------------------------------------------------------------------------

class PayloadError(EventGenError, ValueError):
    """The model's text could not be decoded into candidate records."""


class MalformedPayloadError(PayloadError):
    """The reply text is not valid JSON (or not a JSON object)."""


class CandidateDecodeError(MalformedPayloadError):
    """An ``events`` element cannot be decoded into the expected shape."""


class MissingEventsFieldError(PayloadError):
    """Valid JSON that lacks the required ``events`` field."""


# ---------------------------------------------------------------------------
# Collaborators
# ---------------------------------------------------------------------------

class ProfileNotFoundError(EventGenError, LookupError):
    """No profile exists for the requested user id."""

    def __init__(self, uid: str) -> None:
        super().__init__(f"No user profile found for uid '{uid}'")
        self.uid = uid


__all__ = [
    "EventGenError",
    "GenerationError",
    "TransportError",
    "EmptyResponseError",
    "NoChoicesError",
    "BlankContentError",
    "PayloadError",
    "MalformedPayloadError",
    "CandidateDecodeError",
    "MissingEventsFieldError",
    "ProfileNotFoundError",
]
