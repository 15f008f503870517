"""Base controller with async worker-friendly patterns for lcrview.

This module provides the foundation for background data loading using Textual Workers,
ensuring the UI remains responsive during kubectl/docker/registry operations.
"""

from __future__ import annotations

import asyncio
import logging
import subprocess
import time
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from lcrview.controllers.errors import CommandExecutionError

logger = logging.getLogger(__name__)


@dataclass
class WorkerResult:
    """Result wrapper for worker operations."""

    success: bool
    data: Any | None = None
    error: str | None = None
    duration_ms: float = 0.0


class AsyncControllerMixin:
    """Mixin providing worker-friendly async patterns for controllers.

    This mixin enables controllers to be used with Textual Workers for
    background data loading without blocking the UI.
    """

    def __init__(self) -> None:
        """Initialize the async controller mixin."""
        self._load_start_time: float | None = None

    @staticmethod
    def _run_command_sync(
        cmd: Sequence[str],
        timeout: float,
        input_text: str | None = None,
    ) -> str:
        """Run a CLI command synchronously (thread-safe wrapper target).

        Raises:
            CommandExecutionError: The binary is missing, timed out or exited non-zero.
        """
        name = cmd[0] if cmd else "command"
        try:
            result = subprocess.run(
                list(cmd),
                capture_output=True,
                text=True,
                timeout=timeout,
                input=input_text,
            )
        except FileNotFoundError as exc:
            raise CommandExecutionError(name, f"{name} not found in PATH") from exc
        except subprocess.TimeoutExpired as exc:
            raise CommandExecutionError(name, f"{name} timed out after {timeout:g}s") from exc
        if result.returncode != 0:
            stderr = (result.stderr or result.stdout or "").strip()
            raise CommandExecutionError(
                name, stderr or f"{name} command failed", result.returncode
            )
        return result.stdout

    async def _run_command(
        self,
        cmd: Sequence[str],
        timeout: float,
        input_text: str | None = None,
    ) -> str:
        return await asyncio.to_thread(self._run_command_sync, cmd, timeout, input_text)

    async def run_timed(self, coro: Any) -> WorkerResult:
        """Await a coroutine and wrap its outcome in a WorkerResult."""
        self._load_start_time = time.monotonic()
        try:
            data = await coro
        except Exception as exc:
            logger.exception("Controller operation failed")
            return WorkerResult(
                success=False,
                error=str(exc),
                duration_ms=self._elapsed_ms(),
            )
        return WorkerResult(success=True, data=data, duration_ms=self._elapsed_ms())

    def _elapsed_ms(self) -> float:
        if self._load_start_time is None:
            return 0.0
        return (time.monotonic() - self._load_start_time) * 1000


class BaseController(AsyncControllerMixin, ABC):
    """Base controller class with worker-friendly patterns.

    Subclasses should implement the abstract methods to provide
    specific data fetching functionality.
    """

    @abstractmethod
    async def check_connection(self) -> bool:
        """Check if the data source is available.

        Returns:
            True if connection is available, False otherwise
        """
        ...

    @abstractmethod
    async def fetch_all(self) -> dict[str, Any]:
        """Fetch all data from the source.

        Returns:
            Dictionary containing all fetched data
        """
        ...
