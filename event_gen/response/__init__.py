"""Parsing and validation of the model's structured reply."""

from .parser import parse_events  # noqa: F401
from .validator import ValidationResult, validate  # noqa: F401

__all__ = ["parse_events", "ValidationResult", "validate"]
