"""Limit and threshold constants for the TUI."""

from typing import Final

# ============================================================================
# Display limits
# ============================================================================

MAX_ROWS_DISPLAY: Final = 1000
IMAGE_ID_DISPLAY_LENGTH: Final = 20
ERROR_SUMMARY_MAX_LENGTH: Final = 200

# Lines taken by banner, tabs, title, instructions and status around the table.
CHROME_HEIGHT: Final = 15
MIN_TABLE_HEIGHT: Final = 1

# ============================================================================
# Validation limits
# ============================================================================

COMMIT_LIMIT_MIN: Final = 1
COMMIT_LIMIT_MAX: Final = 100

__all__ = [
    "CHROME_HEIGHT",
    "COMMIT_LIMIT_MAX",
    "COMMIT_LIMIT_MIN",
    "ERROR_SUMMARY_MAX_LENGTH",
    "IMAGE_ID_DISPLAY_LENGTH",
    "MAX_ROWS_DISPLAY",
    "MIN_TABLE_HEIGHT",
]
