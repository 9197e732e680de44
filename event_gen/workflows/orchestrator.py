"""End-to-end passive generation: policy gate, generation and persistence."""

from __future__ import annotations

import logging
import threading
from typing import List

from ..logging_config import logging as _  # noqa: F401  # ensure config applied early
from ..models.event import Event
from ..models.query import ContextConfig, GenerationQuery, TaskConfig
from ..models.viewport import Viewport
from ..services.generator import EventGenerator
from ..services.profiles import UserRepository
from ..services.storage import EventRepository
from ..utils.datetime_utils import current_millis
from .policy import GenerationPolicy

logger = logging.getLogger(__name__)


class GenerationOrchestrator:
    """Decides, generates and stores AI events for the current viewport.

    With ``single_flight`` enabled a call that arrives while another generation
    is still running returns an empty list instead of issuing a second request.
    """

    def __init__(
        self,
        generator: EventGenerator,
        events: EventRepository,
        users: UserRepository,
        policy: GenerationPolicy | None = None,
        *,
        single_flight: bool = True,
    ) -> None:
        self.generator = generator
        self.events = events
        self.users = users
        self.policy = policy or GenerationPolicy()
        self.single_flight = single_flight
        self._in_flight = threading.Lock()

    def maybe_generate(
        self,
        user_id: str,
        viewport: Viewport | None,
        existing_event_count: int,
        last_generation_timestamp: int,
        now: int | None = None,
    ) -> List[Event]:
        """Generate and persist events if the policy allows it.

        Timestamps are epoch milliseconds; *now* defaults to
        :func:`current_millis`. Returns the generated events (without the ids
        assigned on storage). Generator errors propagate unchanged.
        """
        if now is None:
            now = current_millis()

        if viewport is None:
            logger.debug("No viewport – nothing to generate for")
            return []

        reason = self.policy.rejection_reason(
            user_location=viewport.user_location,
            camera_center=viewport.camera_center,
            zoom_level=viewport.zoom,
            existing_event_count=existing_event_count,
            last_generation_timestamp=last_generation_timestamp,
            now=now,
        )
        if reason is not None:
            logger.debug("Generation skipped: %s", reason)
            return []

        if self.single_flight and not self._in_flight.acquire(blocking=False):
            logger.info("Generation already in flight – skipping")
            return []
        try:
            return self._generate_and_store(user_id, viewport)
        finally:
            if self.single_flight:
                self._in_flight.release()

    def _generate_and_store(self, user_id: str, viewport: Viewport) -> List[Event]:
        profile = self.users.get_user(user_id)

        query = GenerationQuery(
            profile=profile,
            task=TaskConfig(),
            context=ContextConfig.from_viewport(viewport),
        )

        generated = self.generator.generate_events(query)

        # Sequential, no transaction: a failure mid-loop leaves a partial batch stored
        for event in generated:
            self.events.add_event(event)

        logger.info("Generated and stored %d events for user %s", len(generated), user_id)
        return generated


__all__ = ["GenerationOrchestrator"]
