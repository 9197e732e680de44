"""Shared fixtures for the test-suite."""

from __future__ import annotations

import json
from datetime import date

from event_gen.models import Profile, Tag

HAPPY_PAYLOAD = json.dumps(
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
    }
)


def make_event_dict(**overrides):
    event = {
        "title": "Lakeside picnic",
        "description": "Bring something to share",
        "date": "2030-01-01T10:00",
        "tags": ["Cooking"],
        "location": {"latitude": 46.5, "longitude": 6.6},
    }
    event.update(overrides)
    return event


def make_profile(**overrides) -> Profile:
    fields = dict(
        uid="u1",
        username="johnny",
        first_name="John",
        last_name="Doe",
        country="CH",
        description="Example description",
        date_of_birth=date(2000, 1, 1),
        tags=frozenset({Tag.ROCK, Tag.MUSIC}),
    )
    fields.update(overrides)
    return Profile(**fields)
