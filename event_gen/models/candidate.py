"""Pre-validation records decoded from the model's ``events`` array."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List

from ..errors import CandidateDecodeError
from .event import Event


def _require(data: dict, key: str, kind: type | tuple[type, ...]) -> Any:
    if key not in data:
        raise CandidateDecodeError(f"Missing field '{key}' in event: {data}")
    value = data[key]
    # bool is an int subclass; never accept it where a number is expected
    if isinstance(value, bool) or not isinstance(value, kind):
        raise CandidateDecodeError(f"Field '{key}' has unexpected type {type(value).__name__}: {value!r}")
    return value


@dataclass(frozen=True, slots=True)
class CandidateLocation:
    latitude: float
    longitude: float

    @classmethod
    def from_dict(cls, data: Any) -> CandidateLocation:
        if not isinstance(data, dict):
            raise CandidateDecodeError(f"'location' must be an object, got: {data!r}")
        return cls(
            latitude=float(_require(data, "latitude", (int, float))),
            longitude=float(_require(data, "longitude", (int, float))),
        )


@dataclass(frozen=True, slots=True)
class CandidateRecord:
    """An event as returned by the model, before validation.

    Unknown keys are ignored; ``id``, ``creator`` and participants are
    assigned by the application, never by the model.
    """

    title: str
    description: str
    date: str  # "2025-04-12T20:00"
    location: CandidateLocation | None
    tags: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> CandidateRecord:
        """Decode one ``events`` element.

        Raises
        ------
        CandidateDecodeError
            If a required key is absent or has the wrong type.
        """
        if not isinstance(data, dict):
            raise CandidateDecodeError(f"Event must be an object, got: {data!r}")

        tags = _require(data, "tags", list)
        if not all(isinstance(tag, str) for tag in tags):
            raise CandidateDecodeError(f"Field 'tags' must contain only strings: {tags!r}")

        raw_location = data.get("location")
        return cls(
            title=_require(data, "title", str),
            description=_require(data, "description", str),
            date=_require(data, "date", str),
            tags=list(tags),
            location=None if raw_location is None else CandidateLocation.from_dict(raw_location),
        )


@dataclass(frozen=True, slots=True)
class ValidationFailure:
    """A candidate that failed semantic validation, with the reason why."""

    candidate: CandidateRecord
    reason: str


@dataclass(slots=True)
class GenerationOutcome:
    """Partitioned result of parsing one model reply."""

    events: List[Event] = field(default_factory=list)
    failures: List[ValidationFailure] = field(default_factory=list)


__all__ = ["CandidateLocation", "CandidateRecord", "ValidationFailure", "GenerationOutcome"]
