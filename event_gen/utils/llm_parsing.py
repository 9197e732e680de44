"""Utilities for extracting the JSON document returned by an LLM call.

The completion request carries a strict JSON schema, so the fast path almost
always succeeds. The fallbacks exist for replies that still wrap the object
in prose or in a fenced block.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict

from ..errors import MalformedPayloadError
from .text_cleaning import clean_llm_json

__all__ = ["extract_structured_json"]

_FENCED_RE = re.compile(r"```(?:json)?\s*([\[{].*?[\]}])\s*```", flags=re.DOTALL | re.IGNORECASE)
# `{` followed by a key, as opposed to a stray brace in prose
_OBJECT_START_RE = re.compile(r'\{\s*"')
_decoder = json.JSONDecoder()


def _as_object(parsed: Any) -> Dict[str, Any]:
    # A bare array is taken as the value of the "events" field
    if isinstance(parsed, list):
        return {"events": parsed}
    if isinstance(parsed, dict):
        return parsed
    raise MalformedPayloadError(f"Expected a JSON object, got {type(parsed).__name__}")


def extract_structured_json(response_text: str) -> Dict[str, Any]:
    """Robustly extract the top-level JSON object from an LLM response.

    Parameters
    ----------
    response_text
        The raw message content returned by the completion service.

    Returns
    -------
    dict[str, Any]
        The parsed JSON object. A top-level list is wrapped into
        ``{"events": <list>}``.

    Raises
    ------
    MalformedPayloadError
        If no valid JSON document can be located in *response_text*, or the
        document is neither an object nor an array. A reply whose outer
        object is cut off (e.g. by the token limit) is reported here too.
    """
    cleaned: str = clean_llm_json(response_text)

    # 1. Whole string (fast path)
    try:
        return _as_object(json.loads(cleaned))
    except json.JSONDecodeError:
        pass

    # 2. Fenced block somewhere inside surrounding prose
    fenced = _FENCED_RE.search(cleaned)
    if fenced:
        snippet = fenced.group(1).strip()
        try:
            return _as_object(json.loads(snippet))
        except json.JSONDecodeError:
            cleaned = snippet  # Narrow search space.

    # 3. First decodable object embedded in prose
    start = cleaned.find("{")
    while start != -1:
        try:
            parsed, _ = _decoder.raw_decode(cleaned, start)
            return _as_object(parsed)
        except json.JSONDecodeError as exc:
            # An outer document that starts like JSON but does not decode is
            # truncated or corrupt; its nested objects are not the reply.
            if _OBJECT_START_RE.match(cleaned, start):
                raise MalformedPayloadError(
                    f"Incomplete JSON in model response ({exc.msg} at char {exc.pos}): {cleaned[:200]!r}"
                ) from exc
            start = cleaned.find("{", start + 1)

    raise MalformedPayloadError(f"Could not locate JSON in model response: {cleaned[:200]!r}")
