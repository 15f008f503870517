"""File logging for the TUI (stdout belongs to Textual)."""

from __future__ import annotations

import logging
from pathlib import Path

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def configure_logging(log_file: str | Path, level: str = "INFO") -> logging.Handler:
    """Attach a file handler to the ``lcrview`` logger.

    Calling it again replaces the previously installed handler.
    """
    package_logger = logging.getLogger("lcrview")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_lcrview_handler", False):
            package_logger.removeHandler(handler)
            handler.close()

    path = Path(log_file)
    if path.parent != Path():
        path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._lcrview_handler = True  # type: ignore[attr-defined]

    package_logger.addHandler(handler)
    package_logger.setLevel(_resolve_level(level))
    package_logger.propagate = False
    return handler
