"""Key names understood by the dashboard controller."""

from lcrview.keyboard.keys import normalize_key

__all__ = [
    "normalize_key",
]
