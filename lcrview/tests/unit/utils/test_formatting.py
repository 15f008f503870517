"""Tests for formatting utilities."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lcrview.utils.formatting import format_age, format_bytes, format_timestamp, parse_timestamp

NOW = datetime(2024, 5, 10, 12, 0, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("size", "expected"),
    [
        (0, "0 B"),
        (512, "512 B"),
        (1536, "1.5 KB"),
        (5 * 1024 * 1024, "5.0 MB"),
        (3 * 1024**4, "3.0 TB"),
        (2048 * 1024**4, "2048.0 TB"),
    ],
)
def test_format_bytes(size: int, expected: str) -> None:
    assert format_bytes(size) == expected


@pytest.mark.parametrize(
    ("created", "expected"),
    [
        ("2024-05-08T09:30:00Z", "2d2h"),
        ("2024-05-10T09:50:00Z", "2h10m"),
        ("2024-05-10T11:55:51Z", "4m9s"),
        ("2024-05-10T11:59:48Z", "12s"),
        ("2024-05-10T12:05:00Z", "0s"),
        (None, "N/A"),
        ("yesterday", "N/A"),
    ],
)
def test_format_age(created: str | None, expected: str) -> None:
    assert format_age(created, NOW) == expected


def test_format_timestamp_converts_to_utc() -> None:
    assert format_timestamp("2024-05-02T12:30:00+02:00") == "2024-05-02 10:30:00"
    assert format_timestamp("2024-05-02T12:30:00Z") == "2024-05-02 12:30:00"
    assert format_timestamp("") == "N/A"


def test_parse_timestamp_assumes_utc() -> None:
    parsed = parse_timestamp("2024-05-02T12:30:00")
    assert parsed is not None
    assert parsed.tzinfo is timezone.utc
    assert parse_timestamp("garbage") is None
