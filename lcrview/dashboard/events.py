"""Typed events consumed by the dashboard transition function."""

from __future__ import annotations

from dataclasses import dataclass

from lcrview.dashboard.commands import Completion
from lcrview.keyboard.keys import normalize_key


@dataclass(frozen=True)
class KeyPressed:
    key: str


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


@dataclass(frozen=True)
class RowHighlighted:
    """The table widget moved its cursor (mouse click or scroll)."""

    index: int


@dataclass(frozen=True)
class Completed:
    completion: Completion


Event = KeyPressed | Resized | RowHighlighted | Completed


def translate_input(raw_input: object) -> Event | None:
    """Turn host input into a typed event.

    Accepts a key name (``"ctrl+d"``), a ``(width, height)`` pair, a
    Completion, or an already typed event. Anything else maps to None.
    """
    if isinstance(raw_input, KeyPressed | Resized | RowHighlighted | Completed):
        return raw_input
    if isinstance(raw_input, Completion):
        return Completed(raw_input)
    if isinstance(raw_input, str):
        key = normalize_key(raw_input)
        return KeyPressed(key) if key else None
    if (
        isinstance(raw_input, tuple)
        and len(raw_input) == 2
        and all(isinstance(value, int) for value in raw_input)
    ):
        return Resized(raw_input[0], raw_input[1])
    return None
