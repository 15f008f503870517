"""WorkerMixin - runs dashboard commands on Textual workers.

Each dispatched command gets its own worker. The worker posts exactly one
``CommandCompleted`` back to the screen, so completions and key presses are
processed in arrival order on the screen's message queue.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from textual.message import Message
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

if TYPE_CHECKING:
    from lcrview.dashboard.commands import Command, Completion
    from lcrview.dashboard.dispatcher import CommandDispatcher

logger = logging.getLogger(__name__)


class CommandCompleted(Message):
    """A dispatched command finished.

    Attributes:
        completion: The outcome, successful or not.
    """

    def __init__(self, completion: Completion) -> None:
        super().__init__()
        self.completion = completion


class WorkerMixin:
    """Mixin for screens that dispatch commands in the background.

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_mount(self) -> None:
                self.dispatch_command(RefreshImages())

            def on_command_completed(self, message: CommandCompleted) -> None:
                ...
        ```
    """

    in_flight = reactive(0)

    def __init__(self) -> None:
        super().__init__()
        self._dispatcher: CommandDispatcher | None = None

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]],
        *,
        name: str | None = None,
        group: str = "default",
        exclusive: bool = False,
    ) -> Worker[Any]:
        """Start an async worker that must not bring the app down on error."""
        self.in_flight += 1
        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=name,
            group=group,
            exclusive=exclusive,
            exit_on_error=False,
        )

    def dispatch_command(self, command: Command) -> Worker[Any]:
        """Run ``command`` through the dispatcher on its own worker."""
        if self._dispatcher is None:
            raise RuntimeError("No command dispatcher attached")
        dispatcher = self._dispatcher

        async def _run() -> Completion:
            completion = await dispatcher.dispatch(command)
            self.post_message(CommandCompleted(completion))  # type: ignore[attr-defined]
            return completion

        logger.debug("Dispatching %s %s", command.kind.value, command.target)
        return self.start_worker(
            _run,
            name=f"{command.kind.value}:{command.target}",
            group=command.kind.value,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        if event.state not in (WorkerState.SUCCESS, WorkerState.ERROR, WorkerState.CANCELLED):
            return
        self.in_flight = max(0, self.in_flight - 1)
        if event.state == WorkerState.ERROR:
            logger.error("Worker '%s' error: %s", event.worker.name, event.worker.error)
        elif event.state == WorkerState.CANCELLED:
            logger.debug("Worker '%s' was cancelled", event.worker.name)
