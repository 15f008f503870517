"""WizardPanel - overlay box showing one step of the deploy wizard."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.text import Text
from textual.containers import Container

from lcrview.widgets.custom_static import CustomStatic

if TYPE_CHECKING:
    from textual.app import ComposeResult

    from lcrview.dashboard.renderer import ModalFrame


class WizardPanel(Container):
    """Hidden until a ModalFrame is shown.

    CSS Classes: widget-wizard-panel
    """

    DEFAULT_CSS = """
    WizardPanel {
        layer: overlay;
        display: none;
        width: 80%;
        max-width: 100;
        height: auto;
        max-height: 80%;
        margin: 2 4;
        padding: 1 2;
        border: round $accent;
        background: $panel;
    }
    WizardPanel.visible {
        display: block;
    }
    WizardPanel .wizard-title {
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }
    WizardPanel .wizard-options {
        margin-top: 1;
    }
    WizardPanel .wizard-instructions {
        margin-top: 1;
        color: $text-muted;
    }
    """

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__(id=id, classes=f"widget-wizard-panel {classes}".strip())
        self._frame: ModalFrame | None = None

    def compose(self) -> ComposeResult:
        yield CustomStatic(id="wizard-title", classes="wizard-title")
        yield CustomStatic(id="wizard-body", classes="wizard-body")
        yield CustomStatic(id="wizard-options", classes="wizard-options")
        yield CustomStatic(id="wizard-instructions", classes="wizard-instructions")

    @property
    def frame(self) -> ModalFrame | None:
        return self._frame

    def show(self, frame: ModalFrame | None) -> None:
        """Paint ``frame``, or hide the panel when it is None."""
        if frame == self._frame:
            return
        self._frame = frame
        if frame is None:
            self.remove_class("visible")
            return
        self.query_one("#wizard-title", CustomStatic).set_content(frame.title)
        self.query_one("#wizard-body", CustomStatic).set_content("\n".join(frame.lines))
        self.query_one("#wizard-options", CustomStatic).set_content(_options_text(frame.options))
        self.query_one("#wizard-instructions", CustomStatic).set_content(frame.instructions)
        self.add_class("visible")


def _options_text(options: tuple[tuple[str, bool], ...]) -> Text:
    text = Text()
    for index, (label, selected) in enumerate(options):
        if index:
            text.append("\n")
        if selected:
            text.append(f"> {label}", style="bold reverse")
        else:
            text.append(f"  {label}")
    return text
