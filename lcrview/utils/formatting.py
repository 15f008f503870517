"""Formatting utilities for sizes, ages and timestamps.

Provides helpers that turn raw collaborator values into display strings:
- Sizes: byte counts to "12.3 MB"
- Ages: creation timestamps to kubectl-style "3d4h"
- Timestamps: ISO-8601 strings to "2006-01-02 15:04:05"
"""

from __future__ import annotations

from datetime import datetime, timezone

from lcrview.constants.defaults import PUSHED_AT_FORMAT
from lcrview.constants.values import NOT_AVAILABLE

_SIZE_UNITS: tuple[str, ...] = ("B", "KB", "MB", "GB", "TB")


def format_bytes(size_bytes: int) -> str:
    """Format a byte count using binary multiples.

    Args:
        size_bytes: Size in bytes.

    Returns:
        "512 B" below one kilobyte, otherwise one decimal place ("1.5 KB").
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    unit_index = 0
    while size >= 1024 and unit_index < len(_SIZE_UNITS) - 1:
        size /= 1024
        unit_index += 1
    return f"{size:.1f} {_SIZE_UNITS[unit_index]}"


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an RFC 3339 timestamp; returns None when absent or malformed."""
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_age(created: str | None, now: datetime | None = None) -> str:
    """Return a compact age ("5d3h", "2h10m", "4m9s", "12s") for a timestamp."""
    started = parse_timestamp(created)
    if started is None:
        return NOT_AVAILABLE
    current = now or datetime.now(timezone.utc)
    seconds = max(0, int((current - started).total_seconds()))

    days, remainder = divmod(seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    if days:
        return f"{days}d{hours}h"
    if hours:
        return f"{hours}h{minutes}m"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def format_timestamp(value: str | None) -> str:
    """Format an RFC 3339 timestamp as UTC "YYYY-MM-DD HH:MM:SS"."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return NOT_AVAILABLE
    return parsed.astimezone(timezone.utc).strftime(PUSHED_AT_FORMAT)
