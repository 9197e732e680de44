"""Policy deciding whether passive event generation should run right now.

Pure logic: no I/O, no clock access, no global state. Generation is only
attempted when the user

- has a known location,
- is zoomed in close enough,
- is outside the request cooldown,
- is looking at a sparse area,
- has not jumped the camera far away from where they are.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import MAX_CAMERA_OFFSET_DEG, MIN_EVENT_THRESHOLD, MIN_ZOOM_LEVEL, REQUEST_COOLDOWN_MS
from ..models.event import Location
from ..utils.geo import manhattan_degrees


@dataclass(frozen=True, slots=True)
class PolicyConfig:
    min_zoom_level: float = MIN_ZOOM_LEVEL
    cooldown_ms: int = REQUEST_COOLDOWN_MS
    min_event_threshold: int = MIN_EVENT_THRESHOLD
    max_camera_offset_deg: float = MAX_CAMERA_OFFSET_DEG


class GenerationPolicy:
    def __init__(self, config: PolicyConfig | None = None) -> None:
        self.config = config or PolicyConfig()

    def rejection_reason(
        self,
        user_location: Location | None,
        camera_center: Location,
        zoom_level: float,
        existing_event_count: int,
        last_generation_timestamp: int,
        now: int,
    ) -> str | None:
        """Describe the first rule that blocks generation, or ``None`` to approve."""
        cfg = self.config

        if user_location is None:
            return "user location unknown"

        # Avoid generating over unreasonably large areas
        if zoom_level < cfg.min_zoom_level:
            return f"zoom {zoom_level} below {cfg.min_zoom_level}"

        elapsed = now - last_generation_timestamp
        if elapsed < cfg.cooldown_ms:
            return f"cooldown active ({elapsed}ms < {cfg.cooldown_ms}ms)"

        # Only fill sparse areas
        if existing_event_count >= cfg.min_event_threshold:
            return f"{existing_event_count} events already in view (threshold {cfg.min_event_threshold})"

        offset = manhattan_degrees(
            camera_center.latitude,
            camera_center.longitude,
            user_location.latitude,
            user_location.longitude,
        )
        if offset > cfg.max_camera_offset_deg:
            return f"camera {offset:.3f} deg away from user (max {cfg.max_camera_offset_deg})"

        return None

    def should_generate(
        self,
        user_location: Location | None,
        camera_center: Location,
        zoom_level: float,
        existing_event_count: int,
        last_generation_timestamp: int,
        now: int,
    ) -> bool:
        """Return ``True`` if event generation should be triggered.

        Timestamps are epoch milliseconds.
        """
        return (
            self.rejection_reason(
                user_location,
                camera_center,
                zoom_level,
                existing_event_count,
                last_generation_timestamp,
                now,
            )
            is None
        )


__all__ = ["PolicyConfig", "GenerationPolicy"]
