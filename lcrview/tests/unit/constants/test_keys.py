"""Unit tests for key name constants."""

from __future__ import annotations

import pytest

from lcrview.keyboard.keys import (
    ADVANCE_KEYS,
    BACK_KEY,
    CLOSE_KEYS,
    DELETE_KEY,
    DOWN_KEYS,
    PULL_KEY,
    QUIT_KEYS,
    TAB_KEYS,
    UP_KEYS,
    normalize_key,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("esc", "escape"),
        ("return", "enter"),
        ("ctrl+m", "enter"),
        ("ctrl+i", "tab"),
        ("CTRL+D", "ctrl+d"),
        (" q ", "q"),
        ("Q", "Q"),
        ("up", "up"),
    ],
)
def test_normalize_key(raw: str, expected: str) -> None:
    assert normalize_key(raw) == expected


class TestKeySets:
    """Key groups do not collide where a mode must tell them apart."""

    def test_navigation_keys_disjoint(self) -> None:
        assert not UP_KEYS & DOWN_KEYS

    def test_close_keys_include_quit_and_escape(self) -> None:
        assert QUIT_KEYS < CLOSE_KEYS
        assert "escape" in CLOSE_KEYS

    def test_wizard_keys(self) -> None:
        assert "1" in ADVANCE_KEYS
        assert BACK_KEY not in ADVANCE_KEYS

    def test_action_keys(self) -> None:
        assert TAB_KEYS == ("1", "2", "3")
        assert DELETE_KEY == "ctrl+d"
        assert PULL_KEY == "ctrl+p"
