"""Centralised logging configuration.

Importing this module sets the default logging format/level. Other modules
should simply import `logging` and call `logging.getLogger(__name__)`.
The level can be overridden with the ``EVENT_GEN_LOG_LEVEL`` variable.
"""

import logging
import os

logging.basicConfig(
    level=os.getenv("EVENT_GEN_LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

__all__ = ["logging"]
