"""CustomStatic widget - Static text with the dashboard's CSS hooks."""

from __future__ import annotations

from rich.console import RenderableType
from textual.widgets import Static


class CustomStatic(Static):
    """Static wrapper carrying the ``widget-custom-static`` class.

    Example:
        ```python
        yield CustomStatic("lcrview", id="banner", classes="banner")
        ```
    """

    DEFAULT_CSS = """
    CustomStatic {
        width: 1fr;
        height: auto;
    }
    """

    def __init__(
        self,
        content: RenderableType = "",
        *,
        markup: bool = False,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        super().__init__(
            content,
            markup=markup,
            id=id,
            classes=f"widget-custom-static {classes}".strip(),
        )
        self._last_content: RenderableType = content

    def set_content(self, content: RenderableType) -> None:
        """Update only when the content changed, avoiding needless refreshes."""
        if isinstance(content, str) and content == self._last_content:
            return
        self._last_content = content
        self.update(content)

    @property
    def last_content(self) -> RenderableType:
        return self._last_content
