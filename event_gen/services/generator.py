"""Event generation via the chat-completions API.

The pipeline proceeds in five stages:

1. **Prompt construction** – system & user messages from the query.
2. **Response specification** – attach the event schema as a strict output contract.
3. **API invocation** – one call through the configured transport.
4. **Model output validation** – status, body, choices and content checks.
5. **Parsing & conversion** – :func:`parse_events` turns the text into events.

No retries: a failed call raises and callers decide what to do.
"""

from __future__ import annotations

import logging
from typing import List, Protocol

from ..config import AI_MODEL, MAX_COMPLETION_TOKENS
from ..errors import BlankContentError, EmptyResponseError, NoChoicesError, TransportError
from ..models.candidate import GenerationOutcome
from ..models.completion import (
    FINISH_CONTENT_FILTER,
    FINISH_ERROR,
    FINISH_LENGTH,
    ROLE_SYSTEM,
    ROLE_USER,
    ChatMessage,
    CompletionRequest,
    TransportResponse,
)
from ..models.event import Event
from ..models.query import GenerationQuery
from ..prompt.builder import build_system_message, build_user_message
from ..prompt.schema import event_response_format
from ..response.parser import parse_events

logger = logging.getLogger(__name__)

_INCOMPLETE_FINISH_REASONS = frozenset({FINISH_LENGTH, FINISH_CONTENT_FILTER, FINISH_ERROR})


class CompletionTransport(Protocol):
    def chat_completion(self, request: CompletionRequest) -> TransportResponse: ...


class EventGenerator:
    """Generates :class:`Event` objects for a :class:`GenerationQuery`."""

    def __init__(
        self,
        transport: CompletionTransport,
        *,
        model: str = AI_MODEL,
        max_completion_tokens: int | None = MAX_COMPLETION_TOKENS,
        temperature: float | None = None,
    ) -> None:
        self.transport = transport
        self.model = model
        self.max_completion_tokens = max_completion_tokens
        self.temperature = temperature

    def build_request(self, query: GenerationQuery) -> CompletionRequest:
        system = build_system_message()
        user = build_user_message(query.profile, query.task, query.context)
        return CompletionRequest(
            model=self.model,
            messages=[
                ChatMessage(role=ROLE_SYSTEM, content=system),
                ChatMessage(role=ROLE_USER, content=user),
            ],
            temperature=self.temperature,
            max_completion_tokens=self.max_completion_tokens,
            response_format=event_response_format(),
        )

    def generate(self, query: GenerationQuery) -> GenerationOutcome:
        """Run the full pipeline and keep per-record failures.

        Raises
        ------
        TransportError, EmptyResponseError, NoChoicesError, BlankContentError
            The call did not yield usable content.
        MalformedPayloadError, MissingEventsFieldError
            The content could not be decoded into candidate events.
        """
        request = self.build_request(query)
        logger.info(
            "Requesting events from %s for user %s (max_tokens=%s)",
            request.model,
            query.profile.uid,
            request.max_completion_tokens,
        )
        logger.debug("System message: %s", request.messages[0].content)
        logger.debug("User message: %s", request.messages[1].content)

        response = self.transport.chat_completion(request)

        if not response.is_successful:
            raise TransportError.from_status(response.status_code, response.error_text)

        body = response.body
        if body is None:
            raise EmptyResponseError(f"OpenAI returned no body (status {response.status_code})")

        if not body.choices:
            raise NoChoicesError("OpenAI returned no choices")

        choice = body.choices[0]
        if choice.finish_reason in _INCOMPLETE_FINISH_REASONS:
            logger.warning(
                "Completion stopped early (finish_reason=%s); the reply may be cut off or empty",
                choice.finish_reason,
            )
        raw = choice.message.content or ""
        if not raw.strip():
            raise BlankContentError(choice.finish_reason, body.usage)

        if body.usage is not None:
            logger.info(
                "Completion used %d prompt + %d completion tokens (finish_reason=%s)",
                body.usage.prompt_tokens,
                body.usage.completion_tokens,
                choice.finish_reason,
            )

        return parse_events(raw)

    def generate_events(self, query: GenerationQuery) -> List[Event]:
        """Return only the valid events; rejected candidates are logged."""
        outcome = self.generate(query)
        if outcome.failures:
            logger.warning(
                "%d generated events were rejected, %d kept",
                len(outcome.failures),
                len(outcome.events),
            )
        return outcome.events


__all__ = ["CompletionTransport", "EventGenerator"]
