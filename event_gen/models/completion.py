"""Request / response model definitions for the chat-completions endpoint.

These mirror the wire contract only; no business logic lives here.
Absent optional request fields are omitted from :meth:`CompletionRequest.to_dict`
rather than sent as ``null``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

ROLE_SYSTEM = "system"
ROLE_USER = "user"
ROLE_ASSISTANT = "assistant"

# Finish reasons reported by the service
FINISH_STOP = "stop"
FINISH_LENGTH = "length"
FINISH_CONTENT_FILTER = "content_filter"
FINISH_ERROR = "error"


@dataclass(frozen=True, slots=True)
class ChatMessage:
    """One chat message (system / user / assistant)."""

    role: str
    content: str

    def to_dict(self) -> Dict[str, Any]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ChatMessage:
        # content is null for refusals and tool calls
        return cls(role=data.get("role", ROLE_ASSISTANT), content=data.get("content") or "")


@dataclass(frozen=True, slots=True)
class ResponseFormat:
    """Structured-output control, e.g. ``{"type": "json_schema", ...}``."""

    type: str
    json_schema: Dict[str, Any] | None = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        if self.json_schema is not None:
            data["json_schema"] = self.json_schema
        return data


@dataclass(frozen=True, slots=True)
class CompletionRequest:
    """Chat completion input object."""

    model: str
    messages: List[ChatMessage]
    temperature: float | None = None
    max_completion_tokens: int | None = None
    response_format: ResponseFormat | None = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise for the wire, leaving out every absent optional field."""
        data: Dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        if self.temperature is not None:
            data["temperature"] = self.temperature
        if self.max_completion_tokens is not None:
            data["max_completion_tokens"] = self.max_completion_tokens
        if self.response_format is not None:
            data["response_format"] = self.response_format.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class Usage:
    """Token accounting for pricing."""

    prompt_tokens: int
    completion_tokens: int
    total_tokens: int

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Usage:
        return cls(
            prompt_tokens=int(data.get("prompt_tokens") or 0),
            completion_tokens=int(data.get("completion_tokens") or 0),
            total_tokens=int(data.get("total_tokens") or 0),
        )


@dataclass(frozen=True, slots=True)
class Choice:
    """One completion alternative."""

    index: int
    message: ChatMessage
    finish_reason: str | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Choice:
        return cls(
            index=int(data.get("index", 0)),
            message=ChatMessage.from_dict(data.get("message") or {}),
            finish_reason=data.get("finish_reason"),
        )


@dataclass(frozen=True, slots=True)
class CompletionResponse:
    """Response body returned by the service. Unknown keys are ignored."""

    id: str
    created: int
    model: str
    choices: List[Choice] = field(default_factory=list)
    usage: Usage | None = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CompletionResponse:
        usage = data.get("usage")
        return cls(
            id=str(data.get("id", "")),
            created=int(data.get("created") or 0),
            model=str(data.get("model", "")),
            choices=[Choice.from_dict(choice) for choice in data.get("choices") or []],
            usage=Usage.from_dict(usage) if usage else None,
        )


@dataclass(frozen=True, slots=True)
class TransportResponse:
    """What a transport hands back: an HTTP-like status plus the decoded body, if any."""

    status_code: int
    body: CompletionResponse | None = None
    error_text: str = ""

    @property
    def is_successful(self) -> bool:
        return 200 <= self.status_code < 300


__all__ = [
    "ROLE_SYSTEM",
    "ROLE_USER",
    "ROLE_ASSISTANT",
    "FINISH_STOP",
    "FINISH_LENGTH",
    "FINISH_CONTENT_FILTER",
    "FINISH_ERROR",
    "ChatMessage",
    "ResponseFormat",
    "CompletionRequest",
    "Usage",
    "Choice",
    "CompletionResponse",
    "TransportResponse",
]
