"""CustomDataTable widget - display-only wrapper around Textual's DataTable.

The dashboard owns the cursor: keys go to the screen, the screen moves the
cursor here. The inner table never takes focus.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from textual.containers import Container
from textual.coordinate import Coordinate
from textual.widgets import DataTable as TextualDataTable

from lcrview.constants.limits import MAX_ROWS_DISPLAY

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)

Columns = Sequence[tuple[str, int]]


class CustomDataTable(Container):
    """Standardized data table wrapper.

    CSS Classes: widget-custom-data-table

    Example:
        ```python
        table = CustomDataTable(id="main-table")
        table.set_columns((("Name", 40), ("Status", 12)))
        table.set_rows([("web-1", "Running")], cursor=0)
        ```
    """

    DEFAULT_CSS = """
    CustomDataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    CustomDataTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        overflow-x: auto;
        overflow-y: auto;
    }
    """

    def __init__(
        self,
        *,
        id: str | None = None,
        classes: str = "",
        zebra_stripes: bool = False,
    ) -> None:
        super().__init__(id=id, classes=f"widget-custom-data-table {classes}".strip())
        self._zebra_stripes = zebra_stripes
        self._inner_widget: TextualDataTable | None = None
        self._columns: tuple[tuple[str, int], ...] = ()
        self._rows: tuple[tuple[str, ...], ...] = ()

    def compose(self) -> ComposeResult:
        table = TextualDataTable(cursor_type="row")
        table.can_focus = False
        table.zebra_stripes = self._zebra_stripes
        table.styles.scrollbar_size_horizontal = 1
        table.styles.scrollbar_size_vertical = 2
        self._inner_widget = table
        yield table

    @property
    def data_table(self) -> TextualDataTable | None:
        """The composed Textual DataTable, or None before compose."""
        return self._inner_widget

    @property
    def row_count(self) -> int:
        if self._inner_widget is None:
            return 0
        return self._inner_widget.row_count

    def set_columns(self, columns: Columns) -> bool:
        """Replace the column set; returns True when it changed."""
        columns = tuple(columns)
        if columns == self._columns or self._inner_widget is None:
            return False
        self._inner_widget.clear(columns=True)
        for label, width in columns:
            self._inner_widget.add_column(label, width=width, key=label)
        self._columns = columns
        self._rows = ()
        return True

    def set_rows(self, rows: Sequence[tuple[str, ...]], cursor: int = 0) -> None:
        """Show ``rows`` and place the cursor; unchanged rows are not redrawn."""
        if self._inner_widget is None:
            return
        rows = tuple(rows)
        if rows != self._rows:
            materialized = list(rows)
            if len(materialized) > MAX_ROWS_DISPLAY:
                logger.warning("Truncating %d rows to %d", len(materialized), MAX_ROWS_DISPLAY)
                materialized = materialized[:MAX_ROWS_DISPLAY]
            self._inner_widget.clear()
            self._inner_widget.add_rows(materialized)
            self._rows = rows
        self.cursor_row = cursor

    @property
    def cursor_row(self) -> int | None:
        if self._inner_widget is None:
            return None
        return self._inner_widget.cursor_coordinate.row

    @cursor_row.setter
    def cursor_row(self, row: int | None) -> None:
        if self._inner_widget is None or row is None or self._inner_widget.row_count == 0:
            return
        safe_row = max(0, min(row, self._inner_widget.row_count - 1))
        if self._inner_widget.cursor_coordinate.row == safe_row:
            return
        self._inner_widget.cursor_coordinate = Coordinate(safe_row, 0)
