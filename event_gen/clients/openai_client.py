"""Singleton accessor for the OpenAI SDK client and an SDK-backed transport."""

from __future__ import annotations

import logging

import openai
from openai import OpenAI as _OpenAIClient

from ..config import OPENAI_API_KEY, OPENAI_BASE_URL, CONNECT_TIMEOUT_S, READ_TIMEOUT_S
from ..errors import TransportError
from ..models.completion import CompletionRequest, CompletionResponse, TransportResponse

logger = logging.getLogger(__name__)

_client: _OpenAIClient | None = None


def get_openai() -> _OpenAIClient:
    """Return a singleton instance of :class:`openai.OpenAI`."""
    global _client
    if _client is None:
        _client = _OpenAIClient(
            api_key=OPENAI_API_KEY,
            base_url=OPENAI_BASE_URL,
            timeout=openai.Timeout(READ_TIMEOUT_S, connect=CONNECT_TIMEOUT_S),
            # retries are the caller's business
            max_retries=0,
        )
    return _client


class OpenAICompletionTransport:
    """Sends :class:`CompletionRequest` through ``client.chat.completions.create``.

    SDK exceptions are folded into the same taxonomy as the HTTP transport:
    status errors become a non-success :class:`TransportResponse`, connection
    failures and timeouts raise :class:`TransportError`.
    """

    def __init__(self, client: _OpenAIClient | None = None) -> None:
        self._client = client or get_openai()

    def chat_completion(self, request: CompletionRequest) -> TransportResponse:
        payload = request.to_dict()
        logger.info("Requesting completion from %s", request.model)
        try:
            completion = self._client.chat.completions.create(**payload)
        except openai.APIStatusError as exc:
            logger.error("Error from OpenAI API: %s - %s", exc.status_code, exc.response.text)
            return TransportResponse(status_code=exc.status_code, error_text=exc.response.text)
        except openai.APIConnectionError as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc

        if completion is None:
            return TransportResponse(status_code=200, body=None)

        logger.debug("Raw %s response: %s", request.model, completion.model_dump_json())
        return TransportResponse(
            status_code=200, body=CompletionResponse.from_dict(completion.model_dump())
        )


__all__ = ["get_openai", "OpenAICompletionTransport"]
