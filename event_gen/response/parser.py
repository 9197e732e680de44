"""Lenient parsing of the model's reply into domain events.

Pipeline:

1. clean code fences and whitespace;
2. decode the root JSON object (:class:`MalformedPayloadError` otherwise);
3. require the ``events`` field (:class:`MissingEventsFieldError` otherwise);
4. decode every element into a :class:`CandidateRecord`;
5. validate each candidate independently, converting survivors to
   :class:`Event` and collecting the rest as :class:`ValidationFailure`.

One bad record never discards an otherwise good batch.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from ..config import AI_CREATOR
from ..errors import CandidateDecodeError, MissingEventsFieldError
from ..models.candidate import CandidateRecord, GenerationOutcome, ValidationFailure
from ..models.event import Event, Location
from ..models.tag import Tag
from ..utils.datetime_utils import parse_local_datetime
from ..utils.llm_parsing import extract_structured_json
from .validator import validate

__all__ = ["parse_events"]

logger = logging.getLogger(__name__)

TagResolver = Callable[[str], Optional[Tag]]


def _decode_candidates(events_value: Any) -> List[CandidateRecord]:
    if not isinstance(events_value, list):
        raise CandidateDecodeError(f"'events' must be an array, got {type(events_value).__name__}")
    return [CandidateRecord.from_dict(item) for item in events_value]


def _to_event(candidate: CandidateRecord, resolve_tag: TagResolver) -> Event:
    # Only called on validated candidates, so location and date are sound.
    resolved = (resolve_tag(name) for name in candidate.tags)
    return Event(
        id="",
        title=candidate.title,
        description=candidate.description,
        date=parse_local_datetime(candidate.date),
        tags=frozenset(tag for tag in resolved if tag is not None),
        creator=AI_CREATOR,
        participants=frozenset(),
        location=Location(candidate.location.latitude, candidate.location.longitude),
    )


def parse_events(raw_text: str, resolve_tag: TagResolver = Tag.from_display_name) -> GenerationOutcome:
    """Turn the raw model text into a :class:`GenerationOutcome`.

    Parameters
    ----------
    raw_text
        Message content of the first completion choice.
    resolve_tag
        Maps a tag display name to a :class:`Tag`; unresolvable names are dropped.

    Raises
    ------
    MalformedPayloadError
        The text is not JSON, or an ``events`` element cannot be decoded.
    MissingEventsFieldError
        The JSON object has no ``events`` field.
    """
    logger.debug("Parsing model reply (first 300 chars): %s", raw_text[:300])

    root = extract_structured_json(raw_text)
    if "events" not in root:
        raise MissingEventsFieldError("Missing 'events' field in OpenAI response")

    candidates = _decode_candidates(root["events"])
    logger.debug("Decoded %d candidate events", len(candidates))

    outcome = GenerationOutcome()
    for candidate in candidates:
        result = validate(candidate)
        if result.ok:
            outcome.events.append(_to_event(candidate, resolve_tag))
        else:
            logger.warning("Rejected generated event '%s': %s", candidate.title, result.reason)
            outcome.failures.append(ValidationFailure(candidate=candidate, reason=result.reason or ""))

    logger.info(
        "Parsed %d valid events, rejected %d", len(outcome.events), len(outcome.failures)
    )
    return outcome
