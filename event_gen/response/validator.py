"""Sanity checks on a decoded :class:`CandidateRecord` before it becomes an Event.

Rules:

- ``title`` must not be blank.
- ``description`` must not be blank.
- ``location`` must be present.
- ``latitude`` must be within [-90, 90].
- ``longitude`` must be within [-180, 180].
- ``date`` must be an ISO-8601 local date-time (``YYYY-MM-DDTHH:mm[:ss]``).

Dates in the past are accepted. The validator never raises; it returns a
:class:`ValidationResult`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..models.candidate import CandidateRecord
from ..utils.datetime_utils import parse_local_datetime

__all__ = ["ValidationResult", "validate"]


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    reason: str | None = None

    @classmethod
    def success(cls) -> ValidationResult:
        return cls(ok=True)

    @classmethod
    def failure(cls, reason: str) -> ValidationResult:
        return cls(ok=False, reason=reason)


def validate(candidate: CandidateRecord) -> ValidationResult:
    """Check *candidate* against every rule, reporting the first one that fails."""
    if not candidate.title.strip():
        return ValidationResult.failure("Event title cannot be empty.")

    if not candidate.description.strip():
        return ValidationResult.failure("Event description cannot be empty.")

    location = candidate.location
    if location is None:
        return ValidationResult.failure("Event location is missing.")

    if not -90.0 <= location.latitude <= 90.0:
        return ValidationResult.failure(f"Invalid latitude: {location.latitude}")

    if not -180.0 <= location.longitude <= 180.0:
        return ValidationResult.failure(f"Invalid longitude: {location.longitude}")

    try:
        parse_local_datetime(candidate.date)
    except ValueError:
        return ValidationResult.failure(f"Invalid date format: {candidate.date}")

    return ValidationResult.success()
