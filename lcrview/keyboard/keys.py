"""Key names understood by the dashboard controller.

Names follow Textual's key naming (``ctrl+d``, ``escape``, ``enter``).
"""

from typing import Final

# ============================================================================
# Normal mode
# ============================================================================

TAB_KEYS: Final[tuple[str, ...]] = ("1", "2", "3")
CYCLE_TAB_KEY: Final = "tab"
CONFIRM_KEY: Final = "enter"
DELETE_KEY: Final = "ctrl+d"
PULL_KEY: Final = "ctrl+p"
REFRESH_KEY: Final = "r"
QUIT_KEYS: Final[frozenset[str]] = frozenset({"q", "ctrl+c"})
ESCAPE_KEY: Final = "escape"

# ============================================================================
# Navigation
# ============================================================================

UP_KEYS: Final[frozenset[str]] = frozenset({"up", "k"})
DOWN_KEYS: Final[frozenset[str]] = frozenset({"down", "j"})

# ============================================================================
# Wizard
# ============================================================================

ADVANCE_KEYS: Final[frozenset[str]] = frozenset({"1", "enter"})
BACK_KEY: Final = "2"

# Keys that close whatever nested view is open, or quit from Normal.
CLOSE_KEYS: Final[frozenset[str]] = QUIT_KEYS | {ESCAPE_KEY}

_KEY_ALIASES: Final[dict[str, str]] = {
    "esc": "escape",
    "return": "enter",
    "ctrl+m": "enter",
    "ctrl+i": "tab",
}


def normalize_key(raw_key: str) -> str:
    """Map terminal key spellings onto the names above."""
    key = raw_key.strip()
    if len(key) != 1:
        key = key.lower()
    return _KEY_ALIASES.get(key, key)


__all__ = [
    "ADVANCE_KEYS",
    "BACK_KEY",
    "CLOSE_KEYS",
    "CONFIRM_KEY",
    "CYCLE_TAB_KEY",
    "DELETE_KEY",
    "DOWN_KEYS",
    "ESCAPE_KEY",
    "PULL_KEY",
    "QUIT_KEYS",
    "REFRESH_KEY",
    "TAB_KEYS",
    "UP_KEYS",
    "normalize_key",
]
