"""Tests for the frame renderer."""

from __future__ import annotations

from dataclasses import replace

import pytest

from lcrview.constants.enums import ModalStep, Tab, ViewMode
from lcrview.constants.values import (
    CREATE_NEW_LABEL,
    DETAIL_INSTRUCTIONS,
    LOADING_WORKLOADS,
    MAIN_INSTRUCTIONS,
    NO_DATA,
    SELECT_INSTRUCTIONS,
)
from lcrview.dashboard.renderer import RenderConfig, Renderer, fit_columns, row_window
from lcrview.dashboard.view_state import DetailState, ModalState, ViewState, Viewport, initial_state
from lcrview.models.rows import DetailRow


@pytest.fixture
def renderer() -> Renderer:
    return Renderer()


class TestMainFrame:
    """Frames for the three tabs."""

    def test_commits_frame(self, renderer: Renderer, state: ViewState) -> None:
        frame = renderer.render(state)
        assert frame.mode is ViewMode.NORMAL
        assert frame.tabs == (("Git", True), ("Docker", False), ("Kubernetes", False))
        assert frame.column_titles == ("Commit SHA", "PR Description", "PushedAt")
        assert len(frame.rows) == 2
        assert frame.modal is None
        assert frame.instructions == MAIN_INSTRUCTIONS

    def test_active_tab_marker_follows_state(self, renderer: Renderer, state: ViewState) -> None:
        frame = renderer.render(replace(state, active_tab=Tab.WORKLOADS))
        assert frame.tabs[2] == ("Kubernetes", True)
        assert frame.table_title == "Kubernetes"

    def test_empty_tab_shows_sentinel(self, renderer: Renderer) -> None:
        frame = renderer.render(replace(initial_state(), active_tab=Tab.IMAGES))
        assert frame.rows == ((NO_DATA, "", "", "", ""),)
        assert frame.cursor == 0

    def test_table_height_follows_viewport(self, renderer: Renderer, state: ViewState) -> None:
        frame = renderer.render(replace(state, viewport=Viewport(120, 40)))
        assert frame.table_height == 25
        tiny = renderer.render(replace(state, viewport=Viewport(120, 5)))
        assert tiny.table_height == 1

    def test_custom_config(self, state: ViewState) -> None:
        renderer = Renderer(RenderConfig(banner="X", chrome_height=10))
        frame = renderer.render(replace(state, viewport=Viewport(120, 40)))
        assert frame.banner == "X"
        assert frame.table_height == 30

    def test_status_is_passed_through(self, renderer: Renderer, state: ViewState) -> None:
        frame = renderer.render(replace(state, status_message="Delete failed: boom"))
        assert frame.status == "Delete failed: boom"


class TestModalFrame:
    """Wizard step frames."""

    def test_select_target_while_loading(self, renderer: Renderer, state: ViewState) -> None:
        modal = ModalState(step=ModalStep.SELECT_TARGET, image_ref="app:v1", image_id="abc")
        frame = renderer.render(replace(state, active_tab=Tab.IMAGES, modal=modal))
        assert frame.mode is ViewMode.MODAL
        assert frame.modal.title == "Deploy Image"
        assert LOADING_WORKLOADS in frame.modal.lines
        assert frame.modal.options == ((CREATE_NEW_LABEL, True),)
        assert frame.instructions == SELECT_INSTRUCTIONS

    def test_select_target_marks_candidate(
        self, renderer: Renderer, state: ViewState, workloads
    ) -> None:
        modal = ModalState(
            step=ModalStep.SELECT_TARGET,
            image_ref="app:v1",
            image_id="abc",
            candidates=tuple(workloads),
            candidates_loaded=True,
            candidate_index=1,
        )
        frame = renderer.render(replace(state, modal=modal))
        selected = [text for text, is_selected in frame.modal.options if is_selected]
        assert selected == ["api (apps) Partial 1/3"]

    def test_create_confirm_lists_generated_name(self, renderer: Renderer, state: ViewState) -> None:
        modal = ModalState(
            step=ModalStep.CREATE_CONFIRM, image_ref="localhost:5000/app:v1", image_id="abc"
        )
        frame = renderer.render(replace(state, modal=modal))
        assert "Deployment Name: app-v1" in frame.modal.lines
        assert "Namespace: default" in frame.modal.lines

    def test_update_confirm_waits_for_pods(
        self, renderer: Renderer, state: ViewState, workloads, pods
    ) -> None:
        modal = ModalState(
            step=ModalStep.UPDATE_CONFIRM,
            image_ref="app:v1",
            image_id="abc",
            candidates=tuple(workloads),
            candidates_loaded=True,
            candidate_index=0,
        )
        frame = renderer.render(replace(state, modal=modal))
        assert "Loading pods..." in frame.modal.lines
        loaded = replace(modal, target_pods=(pods[0],), target_pods_loaded=True)
        frame = renderer.render(replace(state, modal=loaded))
        assert "Pods (1):" in frame.modal.lines


class TestDetailFrame:
    """Pod definition frames."""

    def test_detail_frame(self, renderer: Renderer, state: ViewState) -> None:
        detail = DetailState(
            name="web-1",
            namespace="default",
            rows=(DetailRow("Name", "web-1"), DetailRow("Status", "Running")),
            cursor=1,
        )
        frame = renderer.render(replace(state, active_tab=Tab.WORKLOADS, detail=detail))
        assert frame.mode is ViewMode.DETAIL
        assert frame.table_title == "Pod Definition: web-1"
        assert frame.column_titles == ("Key", "Value")
        assert frame.rows == (("Name", "web-1"), ("Status", "Running"))
        assert frame.cursor == 1
        assert frame.instructions == DETAIL_INSTRUCTIONS

    def test_pending_detail_keeps_table(self, renderer: Renderer, state: ViewState) -> None:
        detail = DetailState(name="web-1", namespace="default")
        frame = renderer.render(replace(state, active_tab=Tab.WORKLOADS, detail=detail))
        assert frame.mode is ViewMode.NORMAL
        assert frame.column_titles[0] == "Pod Name"


class TestLayoutHelpers:
    """Column fitting and row windows."""

    def test_fit_columns_keeps_widths_when_room(self) -> None:
        columns = (("A", 10), ("B", 20))
        assert fit_columns(columns, 200) == columns

    def test_fit_columns_shrinks_proportionally(self) -> None:
        fitted = fit_columns((("A", 40), ("B", 40)), 46)
        assert fitted == (("A", 20), ("B", 20))

    def test_fit_columns_has_minimum(self) -> None:
        fitted = fit_columns((("A", 100), ("B", 2)), 20)
        assert all(width >= 4 for _title, width in fitted)

    def test_narrow_viewport_truncates_cells(self, renderer: Renderer, state: ViewState) -> None:
        frame = renderer.render(replace(state, viewport=Viewport(40, 30)))
        for row in frame.rows:
            for cell, (_title, width) in zip(row, frame.columns):
                assert len(cell) <= width

    @pytest.mark.parametrize(
        ("cursor", "count", "height", "expected"),
        [
            (0, 0, 5, (0, 0)),
            (0, 3, 5, (0, 3)),
            (0, 10, 4, (0, 4)),
            (9, 10, 4, (6, 10)),
            (5, 10, 4, (2, 6)),
            (3, 10, 1, (3, 4)),
        ],
    )
    def test_row_window(self, cursor, count, height, expected) -> None:
        start, end = row_window(cursor, count, height)
        assert (start, end) == expected
        if count:
            assert start <= cursor < end
