"""
utils package – small, pure‑function helpers.

We expose the unit helpers, the JSON extraction helpers and the logging
setup used throughout the app.
"""

# Re‑export the helpers for a clean import path
from .geo import c_to_f, is_zip_code, valid_coordinates  # noqa: F401
from .extract import (                        # noqa: F401
    expect_mapping,
    first_item,
    get_mapping,
    get_number,
    get_sequence,
    get_text,
)
from .logs import configure_logging           # noqa: F401

__all__ = [
    "c_to_f",
    "is_zip_code",
    "valid_coordinates",
    "expect_mapping",
    "first_item",
    "get_mapping",
    "get_number",
    "get_sequence",
    "get_text",
    "configure_logging",
]
