"""Utility functions for the event generation project.

Re-exports the text-cleaning, parsing, datetime and geo helpers so that imports
like `from ..utils import clean_llm_json` work as expected.
"""

from .text_cleaning import strip_think_blocks, strip_code_fences, clean_llm_json  # noqa: F401
from .datetime_utils import current_millis, parse_local_datetime, age_on  # noqa: F401
from .geo import distance_meters, manhattan_degrees  # noqa: F401
from .llm_parsing import extract_structured_json  # noqa: F401

__all__ = [
    "strip_think_blocks",
    "strip_code_fences",
    "clean_llm_json",
    "current_millis",
    "parse_local_datetime",
    "age_on",
    "distance_meters",
    "manhattan_degrees",
    "extract_structured_json",
]
