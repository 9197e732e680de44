"""JSON Schema enforcing strict, structured output from the completion service.

The schema is embedded in the ``response_format`` field of the request:

* ``"strict": true`` keeps the model from introducing extra fields;
* ``"additionalProperties": false`` on every object;
* a regex pins the ``date`` format to ``YYYY-MM-DDTHH:mm``.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

from ..models.completion import ResponseFormat

__all__ = ["EVENT_SCHEMA", "event_response_format"]

EVENT_SCHEMA: Dict[str, Any] = {
    "name": "EventList",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["events"],
        "properties": {
            "events": {
                "type": "array",
                "items": {
                    "type": "object",
                    "additionalProperties": False,
                    "required": ["title", "description", "date", "tags", "location"],
                    "properties": {
                        "title": {"type": "string"},
                        "description": {"type": "string"},
                        "date": {
                            "type": "string",
                            "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}$",
                        },
                        "tags": {
                            "type": "array",
                            "items": {"type": "string"},
                        },
                        "location": {
                            "type": "object",
                            "additionalProperties": False,
                            "required": ["latitude", "longitude"],
                            "properties": {
                                "latitude": {"type": "number"},
                                "longitude": {"type": "number"},
                            },
                        },
                    },
                },
            }
        },
    },
}


def event_response_format() -> ResponseFormat:
    """Return the ``json_schema`` response format wrapping a copy of :data:`EVENT_SCHEMA`."""
    return ResponseFormat(type="json_schema", json_schema=copy.deepcopy(EVENT_SCHEMA))
