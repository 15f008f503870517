"""Main application class for the lcrview TUI."""

from __future__ import annotations

from textual.app import App

from lcrview.constants import APP_TITLE
from lcrview.dashboard.controller import DashboardController
from lcrview.dashboard.dispatcher import CommandDispatcher
from lcrview.dashboard.view_state import ViewState, initial_state
from lcrview.models.state.app_settings import AppSettings, ConfigLoadError
from lcrview.models.state.config_manager import ConfigManager
from lcrview.screens import DashboardScreen


class LcrviewApp(App[None]):
    """Local container registry dashboard."""

    TITLE = APP_TITLE
    # ctrl+p is the pull key.
    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        background: $background;
    }
    """

    settings: AppSettings

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        state: ViewState | None = None,
        settings: AppSettings | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        if settings is None:
            self._load_settings()
        else:
            self.settings = settings
        self.dispatcher = dispatcher
        self.controller = DashboardController(
            state or initial_state(namespace=self.settings.namespace)
        )

    def _load_settings(self) -> None:
        try:
            self.settings = ConfigManager.load()
        except ConfigLoadError:
            self.settings = AppSettings()

    def on_mount(self) -> None:
        self.push_screen(DashboardScreen(self.controller, self.dispatcher))
