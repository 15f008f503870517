"""Tests for base controller module."""

from __future__ import annotations

import asyncio
import sys

import pytest

from lcrview.controllers.base.base_controller import (
    AsyncControllerMixin,
    BaseController,
    WorkerResult,
)
from lcrview.controllers.errors import CommandExecutionError


class TestWorkerResult:
    """Tests for WorkerResult dataclass."""

    def test_worker_result_defaults(self) -> None:
        """Test WorkerResult default values."""
        result = WorkerResult(success=True)
        assert result.data is None
        assert result.error is None
        assert result.duration_ms == 0.0


class TestAsyncControllerMixin:
    """Tests for AsyncControllerMixin class."""

    @pytest.fixture
    def mixin(self) -> AsyncControllerMixin:
        """Create mixin instance for testing."""
        return AsyncControllerMixin()

    def test_mixin_init(self, mixin: AsyncControllerMixin) -> None:
        """Test AsyncControllerMixin initialization."""
        assert mixin._load_start_time is None

    @pytest.mark.asyncio
    async def test_run_command_returns_stdout(self, mixin: AsyncControllerMixin) -> None:
        """Test that a successful command returns its standard output."""
        output = await mixin._run_command(
            (sys.executable, "-c", "import sys; print(sys.stdin.read().upper())"),
            10,
            input_text="manifest",
        )
        assert output.strip() == "MANIFEST"

    @pytest.mark.asyncio
    async def test_run_command_nonzero_exit(self, mixin: AsyncControllerMixin) -> None:
        """Test that a failing command raises with its stderr."""
        with pytest.raises(CommandExecutionError) as exc_info:
            await mixin._run_command(
                (sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"),
                10,
            )
        assert exc_info.value.detail == "boom"
        assert exc_info.value.returncode == 3

    def test_missing_binary(self) -> None:
        """Test that a missing binary is reported by name."""
        with pytest.raises(CommandExecutionError, match="not found in PATH"):
            AsyncControllerMixin._run_command_sync(("lcrview-no-such-binary",), 5)

    @pytest.mark.asyncio
    async def test_run_timed_success(self, mixin: AsyncControllerMixin) -> None:
        """Test that run_timed wraps a value."""

        async def produce() -> list[str]:
            await asyncio.sleep(0)
            return ["a"]

        result = await mixin.run_timed(produce())
        assert result.success is True
        assert result.data == ["a"]
        assert result.duration_ms >= 0

    @pytest.mark.asyncio
    async def test_run_timed_failure(self, mixin: AsyncControllerMixin) -> None:
        """Test that run_timed captures the exception message."""

        async def fail() -> None:
            raise RuntimeError("registry down")

        result = await mixin.run_timed(fail())
        assert result.success is False
        assert result.error == "registry down"


class TestBaseController:
    """Tests for BaseController abstract class."""

    def test_base_controller_is_abstract(self) -> None:
        """Test that BaseController cannot be instantiated directly."""
        with pytest.raises(TypeError):
            BaseController()
