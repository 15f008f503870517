"""Utility functions for lcrview."""

from lcrview.utils.formatting import (
    format_age,
    format_bytes,
    format_timestamp,
    parse_timestamp,
)
from lcrview.utils.logging_setup import configure_logging

__all__ = [
    "configure_logging",
    "format_age",
    "format_bytes",
    "format_timestamp",
    "parse_timestamp",
]
