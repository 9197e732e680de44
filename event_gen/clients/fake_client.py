"""Deterministic offline stand-in for the completion service.

Returns a chat completion whose content is a valid ``{"events": [...]}``
object, with no network access. Every request is recorded in ``requests``.
"""

from __future__ import annotations

import json
import time
from typing import List

from ..models.completion import (
    ChatMessage,
    Choice,
    CompletionRequest,
    CompletionResponse,
    TransportResponse,
    ROLE_ASSISTANT,
    FINISH_STOP,
)

FAKE_EVENTS_PAYLOAD: str = json.dumps(
    {
        "events": [
            {
                "title": "Fake Rock Concert",
                "description": "A generated test event",
                "date": "2025-03-21T20:00",
                "tags": ["Rock", "Music"],
                "location": {"latitude": 46.52, "longitude": 6.63},
            }
        ]
    },
    indent=2,
)


class FakeCompletionTransport:
    def __init__(self, content: str = FAKE_EVENTS_PAYLOAD, finish_reason: str | None = FINISH_STOP) -> None:
        self.content = content
        self.finish_reason = finish_reason
        self.requests: List[CompletionRequest] = []

    def chat_completion(self, request: CompletionRequest) -> TransportResponse:
        self.requests.append(request)
        body = CompletionResponse(
            id="fake-id",
            created=int(time.time()),
            model="fake-model",
            usage=None,
            choices=[
                Choice(
                    index=0,
                    message=ChatMessage(role=ROLE_ASSISTANT, content=self.content),
                    finish_reason=self.finish_reason,
                )
            ],
        )
        return TransportResponse(status_code=200, body=body)


__all__ = ["FAKE_EVENTS_PAYLOAD", "FakeCompletionTransport"]
