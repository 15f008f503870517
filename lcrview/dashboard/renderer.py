"""Renderer: pure mapping from a ViewState to a Frame.

The Frame is plain data; DashboardScreen paints it onto Textual widgets.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from lcrview.constants.defaults import WORKLOAD_CONTAINER_PORT, WORKLOAD_REPLICAS
from lcrview.constants.enums import ModalStep, Tab, ViewMode
from lcrview.constants.limits import CHROME_HEIGHT, MIN_TABLE_HEIGHT
from lcrview.constants.values import (
    BANNER,
    CREATE_INSTRUCTIONS,
    CREATE_NEW_LABEL,
    DETAIL_COLUMNS,
    DETAIL_INSTRUCTIONS,
    LOADING_WORKLOADS,
    MAIN_INSTRUCTIONS,
    SELECT_INSTRUCTIONS,
    UPDATE_INSTRUCTIONS,
)
from lcrview.dashboard.projector import TAB_COLUMNS, generate_workload_name, project_tab, truncate
from lcrview.dashboard.view_state import TAB_ORDER, ModalState, ViewState

Columns = tuple[tuple[str, int], ...]

_CELL_PADDING = 2
_BORDER_WIDTH = 2
_MIN_COLUMN_WIDTH = 4


@dataclass(frozen=True)
class RenderConfig:
    """Static presentation settings, fixed when the renderer is built."""

    banner: str = BANNER
    chrome_height: int = CHROME_HEIGHT
    min_table_height: int = MIN_TABLE_HEIGHT
    tab_columns: dict[Tab, Columns] = field(default_factory=lambda: dict(TAB_COLUMNS))
    detail_columns: Columns = DETAIL_COLUMNS


@dataclass(frozen=True)
class ModalFrame:
    title: str
    lines: tuple[str, ...]
    options: tuple[tuple[str, bool], ...]
    instructions: str


@dataclass(frozen=True)
class Frame:
    banner: str
    tabs: tuple[tuple[str, bool], ...]
    mode: ViewMode
    table_title: str
    columns: Columns
    rows: tuple[tuple[str, ...], ...]
    cursor: int
    window: tuple[int, int]
    table_height: int
    modal: ModalFrame | None
    status: str
    instructions: str

    @property
    def column_titles(self) -> tuple[str, ...]:
        return tuple(title for title, _width in self.columns)

    @property
    def visible_rows(self) -> tuple[tuple[str, ...], ...]:
        start, end = self.window
        return self.rows[start:end]


class Renderer:
    """Builds frames from view state using a fixed RenderConfig."""

    def __init__(self, config: RenderConfig | None = None) -> None:
        self.config = config or RenderConfig()

    def render(self, state: ViewState) -> Frame:
        table_height = max(
            self.config.min_table_height,
            state.viewport.height - self.config.chrome_height,
        )

        if state.mode is ViewMode.DETAIL and state.detail is not None:
            declared = self.config.detail_columns
            cells = tuple(row.cells() for row in state.detail.rows or ())
            cursor = state.detail.cursor
            table_title = f"Pod Definition: {state.detail.name}"
            instructions = DETAIL_INSTRUCTIONS
        else:
            declared = self.config.tab_columns[state.active_tab]
            records = state.records_for(state.active_tab)
            cells = tuple(row.cells() for row in project_tab(state.active_tab, records))
            cursor = min(state.cursor, len(cells) - 1)
            table_title = state.active_tab.value
            instructions = MAIN_INSTRUCTIONS

        columns = fit_columns(declared, state.viewport.width)
        widths = [width for _title, width in columns]
        rows = tuple(
            tuple(truncate(cell, width) for cell, width in zip(row, widths)) for row in cells
        )

        modal = None
        if state.modal is not None:
            modal = self._render_modal(state.modal, state.namespace)
        return Frame(
            banner=self.config.banner,
            tabs=tuple((tab.value, tab is state.active_tab) for tab in TAB_ORDER),
            mode=state.mode,
            table_title=table_title,
            columns=columns,
            rows=rows,
            cursor=cursor,
            window=row_window(cursor, len(rows), table_height),
            table_height=table_height,
            modal=modal,
            status=state.status_message,
            instructions=modal.instructions if modal is not None else instructions,
        )

    @staticmethod
    def _render_modal(modal: ModalState, namespace: str) -> ModalFrame:
        if modal.step is ModalStep.SELECT_TARGET:
            options = [(CREATE_NEW_LABEL, modal.candidate_index == -1)]
            options += [
                (
                    f"{workload.name} ({workload.namespace}) "
                    f"{workload.status} {workload.replica_fraction}",
                    index == modal.candidate_index,
                )
                for index, workload in enumerate(modal.candidates)
            ]
            lines = [f"Image: {modal.image_ref}", "", "Select deployment:"]
            if not modal.candidates_loaded:
                lines.append(LOADING_WORKLOADS)
            elif not modal.candidates:
                lines.append("No existing deployments found")
            return ModalFrame("Deploy Image", tuple(lines), tuple(options), SELECT_INSTRUCTIONS)

        if modal.step is ModalStep.CREATE_CONFIRM:
            name = generate_workload_name(modal.image_ref)
            lines = (
                f"Image: {modal.image_ref}",
                f"Deployment Name: {name}",
                f"Namespace: {namespace}",
                f"Port: {WORKLOAD_CONTAINER_PORT}",
                f"Replicas: {WORKLOAD_REPLICAS}",
                f"App label: {name}",
            )
            options = (("[1] Create Deployment", True), ("[2] Go Back", False))
            return ModalFrame("Create New Deployment", lines, options, CREATE_INSTRUCTIONS)

        target = modal.selected_candidate
        lines_list = [
            f"Image: {modal.image_ref}",
            f"Deployment: {target.name if target else ''}",
            f"Namespace: {target.namespace if target else ''}",
            "",
            "All pods in this deployment will be updated with the new image.",
        ]
        if not modal.target_pods_loaded:
            lines_list.append("Loading pods...")
        else:
            lines_list.append(f"Pods ({len(modal.target_pods)}):")
            lines_list += [f"  {pod.name} {pod.status}" for pod in modal.target_pods]
        options = (("[1] Confirm Deploy", True), ("[2] Go Back", False))
        return ModalFrame("Confirm Deployment", tuple(lines_list), options, UPDATE_INSTRUCTIONS)


def fit_columns(columns: Columns, viewport_width: int) -> Columns:
    """Shrink declared widths proportionally when the viewport is too narrow."""
    available = viewport_width - _BORDER_WIDTH - _CELL_PADDING * len(columns)
    total = sum(width for _title, width in columns)
    if total <= 0 or available >= total:
        return columns
    return tuple(
        (title, max(_MIN_COLUMN_WIDTH, width * max(available, 0) // total))
        for title, width in columns
    )


def row_window(cursor: int, row_count: int, height: int) -> tuple[int, int]:
    """First and past-the-end row indexes of the visible slice around ``cursor``."""
    if row_count <= 0:
        return (0, 0)
    height = max(1, height)
    start = max(0, min(cursor - height + 1, row_count - height))
    start = max(0, min(start, cursor))
    return (start, min(row_count, start + height))
