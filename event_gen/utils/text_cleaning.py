"""Shared helpers for cleaning raw LLM output before JSON decoding."""

from __future__ import annotations

from typing import Final

__all__ = ["strip_think_blocks", "strip_code_fences", "clean_llm_json"]


def strip_think_blocks(text: str) -> str:
    """Return the content after the last closing ``</think>`` tag, if any."""
    if not text:
        return text.strip()

    marker: Final[str] = "</think>"
    idx: int = text.rfind(marker)

    # Fallback to full text if marker is missing
    after: str = text if idx == -1 else text[idx + len(marker) :]
    return after.strip()


def strip_code_fences(text: str) -> str:
    """Remove surrounding Markdown code fences (```json / ```) and whitespace."""
    cleaned: str = text.strip()

    if cleaned.startswith("```json"):
        cleaned = cleaned[len("```json") :].strip()
    if cleaned.startswith("```"):
        cleaned = cleaned[3:].strip()
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3].strip()

    return cleaned


def clean_llm_json(text: str) -> str:
    """Standardise a model reply that is expected to be a bare JSON document."""
    return strip_code_fences(strip_think_blocks(text or ""))
