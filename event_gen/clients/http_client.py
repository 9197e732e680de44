"""Chat-completions transport over a shared :class:`requests.Session`.

Logs method, URL, status and duration for every call; the response body is
only logged at DEBUG level and the Authorization header never is.
"""

from __future__ import annotations

import logging
import time

import requests

from ..config import CONNECT_TIMEOUT_S, OPENAI_API_KEY, OPENAI_BASE_URL, READ_TIMEOUT_S
from ..errors import TransportError
from ..models.completion import CompletionRequest, CompletionResponse, TransportResponse

logger = logging.getLogger(__name__)

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Return a singleton :class:`requests.Session` for completion calls."""
    global _session
    if _session is None:
        _session = requests.Session()
    return _session


class HttpCompletionTransport:
    """POSTs :class:`CompletionRequest` payloads to ``{base_url}/chat/completions``."""

    def __init__(
        self,
        session: requests.Session | None = None,
        *,
        api_key: str | None = None,
        base_url: str = OPENAI_BASE_URL,
        timeout: tuple[float, float] = (CONNECT_TIMEOUT_S, READ_TIMEOUT_S),
    ) -> None:
        self._session = session or get_session()
        self._api_key = api_key if api_key is not None else OPENAI_API_KEY
        self._url = f"{base_url.rstrip('/')}/chat/completions"
        self._timeout = timeout

    def chat_completion(self, request: CompletionRequest) -> TransportResponse:
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        logger.info("→ POST %s", self._url)
        started = time.perf_counter()
        try:
            response = self._session.post(
                self._url, headers=headers, json=request.to_dict(), timeout=self._timeout
            )
        except requests.Timeout as exc:
            raise TransportError(f"OpenAI request timed out: {exc}") from exc
        except requests.RequestException as exc:
            raise TransportError(f"OpenAI request failed: {exc}") from exc

        took_ms = (time.perf_counter() - started) * 1000
        logger.info("← %s %s (%dms)", response.status_code, response.reason, took_ms)
        logger.debug("Response body:\n%s", response.text)

        if not 200 <= response.status_code < 300:
            logger.error("Error from OpenAI API: %s - %s", response.status_code, response.text)
            return TransportResponse(status_code=response.status_code, error_text=response.text)

        if not response.content or not response.content.strip():
            return TransportResponse(status_code=response.status_code, body=None)

        try:
            payload = response.json()
        except ValueError as exc:
            raise TransportError(
                f"OpenAI returned an undecodable body: {response.status_code}\n{response.text[:200]}",
                status_code=response.status_code,
                body=response.text,
            ) from exc

        if payload is None:
            return TransportResponse(status_code=response.status_code, body=None)

        try:
            if not isinstance(payload, dict):
                raise TypeError(f"expected a JSON object, got {type(payload).__name__}")
            body = CompletionResponse.from_dict(payload)
        except (AttributeError, TypeError, ValueError) as exc:
            raise TransportError(
                f"OpenAI returned an unexpected body: {response.status_code} ({exc})\n{response.text[:200]}",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        return TransportResponse(status_code=response.status_code, body=body)


__all__ = ["get_session", "HttpCompletionTransport"]
