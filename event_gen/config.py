"""Centralised configuration for event_gen.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
OPENAI_API_KEY: str | None = os.getenv("OPENAI_API_KEY")
MONGODB_URI: str | None = os.getenv("MONGODB_URI")

# ---------------------------------------------------------------------------
# Completion service
# See https://platform.openai.com/docs/pricing for model costs.
# ---------------------------------------------------------------------------
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1").rstrip("/")
AI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o")
# Maximum number of tokens the model may produce
MAX_COMPLETION_TOKENS: int = 1500
# accepted values: "http", "sdk", "fake"
COMPLETION_TRANSPORT: str = os.getenv("COMPLETION_TRANSPORT", "http").lower()
CONNECT_TIMEOUT_S: float = 30.0
READ_TIMEOUT_S: float = 60.0

# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------
AI_CREATOR: str = "OpenAI"
# Max allowed radius within which events can be generated
MAX_RADIUS_KM: int = 5
DEFAULT_LOCATION: str = "Lausanne"
DEFAULT_TIME_FRAME: str = "today"

# ---------------------------------------------------------------------------
# Passive generation policy defaults
# ---------------------------------------------------------------------------
MIN_ZOOM_LEVEL: float = 13.0
REQUEST_COOLDOWN_MS: int = 60_000
MIN_EVENT_THRESHOLD: int = 5
# L1 distance (degrees) between camera centre and user beyond which a camera
# jump is not treated as the user's area of interest
MAX_CAMERA_OFFSET_DEG: float = 0.5

# ---------------------------------------------------------------------------
# Storage
# ---------------------------------------------------------------------------
MONGODB_DATABASE: str = os.getenv("MONGODB_DATABASE", "universe")
EVENTS_COLLECTION: str = "events"
USERS_COLLECTION: str = "users"

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "OPENAI_API_KEY",
    "MONGODB_URI",
    # completion service
    "OPENAI_BASE_URL",
    "AI_MODEL",
    "MAX_COMPLETION_TOKENS",
    "COMPLETION_TRANSPORT",
    "CONNECT_TIMEOUT_S",
    "READ_TIMEOUT_S",
    # generation
    "AI_CREATOR",
    "MAX_RADIUS_KM",
    "DEFAULT_LOCATION",
    "DEFAULT_TIME_FRAME",
    # policy
    "MIN_ZOOM_LEVEL",
    "REQUEST_COOLDOWN_MS",
    "MIN_EVENT_THRESHOLD",
    "MAX_CAMERA_OFFSET_DEG",
    # storage
    "MONGODB_DATABASE",
    "EVENTS_COLLECTION",
    "USERS_COLLECTION",
]
