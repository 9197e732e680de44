"""Inputs of a single generation request: who asks, what to generate, where and when."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..config import DEFAULT_LOCATION, DEFAULT_TIME_FRAME, MAX_RADIUS_KM
from .profile import Profile
from .viewport import Viewport


@dataclass(frozen=True, slots=True)
class TaskConfig:
    """What to generate.

    ``event_count`` of ``None`` lets the model pick a suitable count.
    ``require_relevant_tags`` is forwarded to the model as a prompt flag.
    """

    event_count: int | None = None
    require_relevant_tags: bool = True


@dataclass(frozen=True, slots=True)
class ContextConfig:
    """Where and when events should be generated."""

    location: str | None = DEFAULT_LOCATION
    coordinates: tuple[float, float] | None = None
    radius_km: int | None = None
    time_frame: str | None = DEFAULT_TIME_FRAME
    current_date: date | None = None

    @classmethod
    def from_viewport(cls, viewport: Viewport, time_frame: str | None = DEFAULT_TIME_FRAME) -> ContextConfig:
        """Centre on the camera and bound the radius to ``[1, MAX_RADIUS_KM]`` km."""
        radius = viewport.estimate_radius_km()
        radius_km = None
        if radius is not None:
            radius_km = max(1, min(MAX_RADIUS_KM, round(radius)))
        center = viewport.camera_center
        return cls(
            location=None,
            coordinates=(center.latitude, center.longitude),
            radius_km=radius_km,
            time_frame=time_frame,
        )


@dataclass(frozen=True, slots=True)
class GenerationQuery:
    """The single input of the generator."""

    profile: Profile
    task: TaskConfig = field(default_factory=TaskConfig)
    context: ContextConfig = field(default_factory=ContextConfig)


__all__ = ["TaskConfig", "ContextConfig", "GenerationQuery"]
