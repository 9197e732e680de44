"""Prompt construction (strict JSON mode).

Produces two messages:

1. SYSTEM – a compact JSON object listing the output, realism, location, time
   and tag-relevance rules plus the expected fields.
2. USER – a compact JSON object with the task, the user and the context.

Both are pure functions of their inputs; only the user's age and the default
``currentDate`` depend on the current date.
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any, Dict, List

from ..models.profile import Profile
from ..models.query import ContextConfig, TaskConfig
from ..utils.datetime_utils import age_on

__all__ = ["build_system_message", "build_user_message"]

TASK_GOAL: str = (
    "generate public, drop-in, realistic events that match the environment and the user's "
    "interests when feasible."
)

_SYSTEM_RULES: List[str] = [
    # Output discipline
    'Always output a JSON object with a top-level "events" array that matches EXACTLY the provided JSON schema.',
    "No markdown, no commentary, no prose: ONLY the JSON object.",
    # Realism
    "All events must be public, open, casual, and drop-in friendly. They must NOT require an organizer, "
    "reservations, instructors, or paid facilities.",
    "Do NOT generate classes, workshops, lessons, tours, coached activities, or anything requiring staff, "
    "equipment rental, or venue booking.",
    "Events must represent spontaneous, community-friendly, self-organizable activities people can simply "
    "show up to, such as outdoor gatherings, walks, picnics, casual sports, local meetups, or open "
    "public-space activities.",
    "If the user's interest normally requires a facility, convert it into a realistic public variant "
    "appropriate for the environment (e.g. outdoor fitness meetup, sketching meetup, photography walk).",
    "Realism takes priority over user interests. If an interest is not feasible in the location, "
    "reinterpret it into a related, physically plausible public activity.",
    # Environment & location
    "Events must be consistent with the environment implied by the coordinates and radiusKm.",
    "Do NOT invent non-existent infrastructure (e.g. indoor gyms, beaches, ski slopes, concert halls).",
    "Use ONLY plausible public spaces: parks, lakesides, plazas, streets, promenades, small squares, "
    "viewpoints, playgrounds, trails, or known city areas typical for the region.",
    # Geography
    "Event coordinates must lie within radiusKm, but should not be identical to the user location unless "
    "no other plausible point exists.",
    # Time
    "All event dates must be strictly in the future relative to currentDate.",
    "Dates must fall between 1 hour from now and 60 days in the future.",
    # Tag relevance
    "When requireRelevantTags = true, integrate user interests ONLY when they can be expressed as public, "
    "open, organizer-free activities.",
    "Interests should inspire the theme, mood, or activity style, not the venue type.",
    # Schema
    "Do not add or omit fields. Do not include nulls.",
]

_OUTPUT_FIELDS: Dict[str, str] = {
    "title": "string, non-empty",
    "description": "string, non-empty",
    "date": "string, local date-time YYYY-MM-DDTHH:mm",
    "tags": "array of tag display names (strings)",
    "location": "object {latitude: number in [-90, 90], longitude: number in [-180, 180]}",
}


def _dumps(obj: Dict[str, Any]) -> str:
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))


def build_system_message() -> str:
    """Return the fixed system message describing output rules and fields."""
    return _dumps(
        {
            "role": "EventCuratorGPT",
            "rules": _SYSTEM_RULES,
            "output": {"events": [_OUTPUT_FIELDS]},
        }
    )


def build_user_message(
    profile: Profile,
    task: TaskConfig,
    context: ContextConfig,
    *,
    today: date | None = None,
) -> str:
    """Serialise task, user and context into one JSON user message.

    Optional fields are only emitted when present. *today* defaults to the
    current date and drives both the user's age and ``currentDate``.
    """
    today = today or date.today()

    task_obj: Dict[str, Any] = {"goal": TASK_GOAL}
    if task.event_count is not None:
        task_obj["eventsToGenerate"] = task.event_count
    task_obj["requireRelevantTags"] = task.require_relevant_tags

    user_obj: Dict[str, Any] = {
        "uid": profile.uid,
        "name": profile.full_name,
        "age": age_on(profile.date_of_birth, today),
        "country": profile.country,
    }
    if profile.description is not None:
        user_obj["description"] = profile.description
    user_obj["interests"] = sorted(tag.display_name for tag in profile.tags)

    context_obj: Dict[str, Any] = {}
    if context.location is not None:
        context_obj["location"] = context.location
    if context.coordinates is not None:
        lat, lon = context.coordinates
        context_obj["coordinates"] = {"lat": lat, "lon": lon}
    if context.radius_km is not None:
        context_obj["radiusKm"] = context.radius_km
    if context.time_frame is not None:
        context_obj["timeFrame"] = context.time_frame
    context_obj["currentDate"] = (context.current_date or today).isoformat()

    return _dumps({"task": task_obj, "user": user_obj, "context": context_obj})
