"""Passive generation workflow: policy gate and orchestrator."""

from .orchestrator import GenerationOrchestrator  # noqa: F401
from .policy import GenerationPolicy, PolicyConfig  # noqa: F401

__all__ = ["GenerationOrchestrator", "GenerationPolicy", "PolicyConfig"]
