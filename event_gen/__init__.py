"""Top-level package for the event_gen project.

Exposes the pieces most callers need so they can do
`from event_gen import EventGenerator, GenerationOrchestrator`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("event-gen")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .models import ContextConfig, Event, GenerationOutcome, GenerationQuery, Profile, TaskConfig, Viewport  # noqa: E402
from .response import parse_events  # noqa: E402
from .services import EventGenerator  # noqa: E402
from .workflows import GenerationOrchestrator, GenerationPolicy, PolicyConfig  # noqa: E402

__all__ = [
    "__version__",
    "ContextConfig",
    "Event",
    "GenerationOutcome",
    "GenerationQuery",
    "Profile",
    "TaskConfig",
    "Viewport",
    "parse_events",
    "EventGenerator",
    "GenerationOrchestrator",
    "GenerationPolicy",
    "PolicyConfig",
]
