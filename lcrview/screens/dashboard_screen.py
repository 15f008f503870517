"""DashboardScreen - paints DashboardController frames and feeds it input.

Every key press, resize, table highlight and command completion goes through
``DashboardController.handle_event``; the screen then schedules the returned
commands and repaints from ``current_frame()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from rich.text import Text
from textual import events
from textual.screen import Screen
from textual.widgets import DataTable

from lcrview.constants.enums import ViewMode
from lcrview.dashboard.events import RowHighlighted
from lcrview.screens.mixins.worker_mixin import CommandCompleted, WorkerMixin
from lcrview.widgets import CustomDataTable, CustomStatic, WizardPanel

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from lcrview.dashboard.controller import DashboardController
    from lcrview.dashboard.dispatcher import CommandDispatcher
    from lcrview.dashboard.renderer import Frame

logger = logging.getLogger(__name__)

_TABLE_HEADER_HEIGHT = 1


class DashboardScreen(WorkerMixin, Screen[None]):
    """The single screen of the app: tabs, table, wizard and detail view."""

    DEFAULT_CSS = """
    DashboardScreen {
        layers: base overlay;
        layout: vertical;
    }
    DashboardScreen #banner {
        color: $accent;
        text-style: bold;
    }
    DashboardScreen #tab-bar {
        margin-top: 1;
    }
    DashboardScreen #table-title {
        text-style: bold;
        background: $boost;
    }
    DashboardScreen #main-table {
        height: auto;
    }
    DashboardScreen #status-line {
        color: $warning;
    }
    DashboardScreen #activity {
        color: $text-muted;
        text-style: italic;
    }
    DashboardScreen #instructions {
        color: $text-muted;
    }
    """

    def __init__(
        self,
        controller: DashboardController,
        dispatcher: CommandDispatcher,
    ) -> None:
        super().__init__()
        self.controller = controller
        self._dispatcher = dispatcher
        self._last_frame: Frame | None = None

    def compose(self) -> ComposeResult:
        yield CustomStatic(id="banner")
        yield CustomStatic(id="tab-bar")
        yield CustomStatic(id="table-title")
        yield CustomDataTable(id="main-table")
        yield CustomStatic(id="status-line")
        yield CustomStatic(id="activity")
        yield CustomStatic(id="instructions")
        yield WizardPanel(id="wizard-panel")

    def on_mount(self) -> None:
        self._apply((self.app.size.width, self.app.size.height))

    def watch_in_flight(self, count: int) -> None:
        if self.is_mounted:
            self.query_one("#activity", CustomStatic).set_content(activity_text(count))

    # =========================================================================
    # Input
    # =========================================================================

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._apply(event.key)

    def on_resize(self, event: events.Resize) -> None:
        self._apply((event.size.width, event.size.height))

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        event.stop()
        if self.controller.state.mode is ViewMode.MODAL:
            return
        self._apply(RowHighlighted(event.cursor_row))

    def on_command_completed(self, message: CommandCompleted) -> None:
        completion = message.completion
        if not completion.success:
            logger.warning(
                "%s %s failed after %.0fms: %s",
                completion.kind.value,
                completion.command.target,
                completion.duration_ms,
                completion.error,
            )
        self._apply(completion)

    def _apply(self, raw_input: object) -> None:
        commands = self.controller.handle_event(raw_input)
        for command in commands:
            self.dispatch_command(command)
        if self.controller.quit_requested:
            self.app.exit()
            return
        self.paint(self.controller.current_frame())

    # =========================================================================
    # Output
    # =========================================================================

    def paint(self, frame: Frame) -> None:
        """Push ``frame`` onto the widgets."""
        if not self.is_mounted:
            return
        self.query_one("#banner", CustomStatic).set_content(frame.banner)
        self.query_one("#tab-bar", CustomStatic).set_content(_tab_bar(frame.tabs))
        self.query_one("#table-title", CustomStatic).set_content(frame.table_title)
        self.query_one("#status-line", CustomStatic).set_content(frame.status)
        self.query_one("#instructions", CustomStatic).set_content(frame.instructions)

        table = self.query_one("#main-table", CustomDataTable)
        table.styles.height = frame.table_height + _TABLE_HEADER_HEIGHT
        # Programmatic cursor moves must not echo back as highlight events.
        with self.prevent(DataTable.RowHighlighted):
            table.set_columns(frame.columns)
            table.set_rows(frame.rows, cursor=frame.cursor)

        self.query_one("#wizard-panel", WizardPanel).show(frame.modal)
        self._last_frame = frame

    @property
    def last_frame(self) -> Frame | None:
        return self._last_frame


def activity_text(count: int) -> str:
    """Status line suffix for commands still running on workers."""
    if count <= 0:
        return ""
    noun = "operation" if count == 1 else "operations"
    return f"{count} {noun} running..."


def _tab_bar(tabs: tuple[tuple[str, bool], ...]) -> Text:
    text = Text()
    for index, (label, active) in enumerate(tabs, start=1):
        if index > 1:
            text.append("  ")
        caption = f" {index}:{label} "
        text.append(caption, style="bold reverse" if active else "dim")
    return text
