"""Interaction controller: the dashboard's state machine.

``transition(state, event)`` is a pure function returning the next
snapshot and the commands to dispatch. ``DashboardController`` holds the
current snapshot for the host and is the only place it is replaced.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from lcrview.constants.enums import ModalStep, OperationKind, Tab, ViewMode
from lcrview.constants.values import LOADING_WORKLOADS, NOT_AVAILABLE
from lcrview.dashboard.commands import (
    Command,
    Completion,
    CreateWorkload,
    DeleteImage,
    FetchDetail,
    ListWorkloadPods,
    ListWorkloads,
    PullImage,
    RefreshImages,
    RefreshWorkloads,
    UpdateWorkload,
)
from lcrview.dashboard.events import (
    Completed,
    Event,
    KeyPressed,
    Resized,
    RowHighlighted,
    translate_input,
)
from lcrview.dashboard.projector import (
    detail_error_rows,
    generate_workload_name,
    image_reference,
    project_detail,
)
from lcrview.dashboard.renderer import Frame, Renderer
from lcrview.dashboard.view_state import (
    CREATE_NEW_INDEX,
    TAB_ORDER,
    DetailState,
    Failure,
    ModalState,
    ViewState,
    Viewport,
)
from lcrview.keyboard.keys import (
    ADVANCE_KEYS,
    BACK_KEY,
    CLOSE_KEYS,
    CONFIRM_KEY,
    CYCLE_TAB_KEY,
    DELETE_KEY,
    DOWN_KEYS,
    PULL_KEY,
    REFRESH_KEY,
    TAB_KEYS,
    UP_KEYS,
)

logger = logging.getLogger(__name__)

Result = tuple[ViewState, tuple[Command, ...]]

_OPERATION_LABELS: dict[OperationKind, str] = {
    OperationKind.DELETE: "Delete",
    OperationKind.PULL: "Pull",
    OperationKind.DETAIL: "Pod detail",
    OperationKind.CREATE_WORKLOAD: "Create deployment",
    OperationKind.UPDATE_WORKLOAD: "Update deployment",
    OperationKind.REFRESH_IMAGES: "Image refresh",
    OperationKind.LIST_WORKLOADS: "Deployment list",
    OperationKind.REFRESH_WORKLOADS: "Pod refresh",
    OperationKind.LIST_WORKLOAD_PODS: "Deployment pods",
}


def _unchanged(state: ViewState) -> Result:
    return state, ()


def _issue(state: ViewState, *commands: Command, status: str | None = None) -> Result:
    """Record commands as pending and return them for dispatch."""
    pending = state.pending | {command.key for command in commands}
    changes: dict = {"pending": pending}
    if status is not None:
        changes["status_message"] = status
    return replace(state, **changes), commands


# ============================================================================
# Entry points
# ============================================================================


def transition(state: ViewState, event: Event) -> Result:
    """Return the next state and the commands the event triggers."""
    if isinstance(event, KeyPressed):
        return _on_key(state, event.key)
    if isinstance(event, Resized):
        viewport = Viewport(width=max(0, event.width), height=max(0, event.height))
        return replace(state, viewport=viewport), ()
    if isinstance(event, RowHighlighted):
        return _on_row_highlighted(state, event.index)
    if isinstance(event, Completed):
        return _on_completion(state, event.completion)
    return _unchanged(state)


def safe_transition(state: ViewState, event: Event) -> Result:
    """``transition`` with internal faults turned into no-ops."""
    try:
        return transition(state, event)
    except Exception:
        logger.exception("Transition failed for %r; keeping previous state", event)
        return _unchanged(state)


# ============================================================================
# Keys
# ============================================================================


def _on_key(state: ViewState, key: str) -> Result:
    mode = state.mode
    if mode is ViewMode.MODAL:
        return _on_modal_key(state, key)
    if mode is ViewMode.DETAIL:
        return _on_detail_key(state, key)
    return _on_normal_key(state, key)


def _on_normal_key(state: ViewState, key: str) -> Result:
    if key in CLOSE_KEYS:
        if state.detail is not None:
            # Abandon a detail request that has not rendered yet.
            return replace(state, detail=None, status_message=""), ()
        return replace(state, quit_requested=True), ()
    if key in TAB_KEYS:
        return _select_tab(state, TAB_ORDER[TAB_KEYS.index(key)])
    if key == CYCLE_TAB_KEY:
        next_index = (TAB_ORDER.index(state.active_tab) + 1) % len(TAB_ORDER)
        return _select_tab(state, TAB_ORDER[next_index])
    if key in UP_KEYS:
        return state.with_cursor(state.active_tab, state.cursor - 1), ()
    if key in DOWN_KEYS:
        return state.with_cursor(state.active_tab, state.cursor + 1), ()
    if key == CONFIRM_KEY:
        if state.active_tab is Tab.IMAGES:
            return _open_wizard(state)
        if state.active_tab is Tab.WORKLOADS:
            return _request_detail(state)
        return _unchanged(state)
    if key == DELETE_KEY:
        return _request_delete(state)
    if key == PULL_KEY:
        return _request_pull(state)
    if key == REFRESH_KEY:
        return _request_refresh(state)
    return _unchanged(state)


def _select_tab(state: ViewState, tab: Tab) -> Result:
    return replace(state, active_tab=tab, detail=None), ()


def _open_wizard(state: ViewState) -> Result:
    image = state.selected_image
    if image is None:
        return _unchanged(state)
    modal = ModalState(
        step=ModalStep.SELECT_TARGET,
        image_ref=image_reference(image),
        image_id=image.id,
    )
    return _issue(
        replace(state, modal=modal),
        ListWorkloads(state.namespace),
        status=LOADING_WORKLOADS,
    )


def _request_detail(state: ViewState) -> Result:
    pod = state.selected_pod
    if pod is None:
        return _unchanged(state)
    detail = DetailState(name=pod.name, namespace=pod.namespace)
    return _issue(
        replace(state, detail=detail),
        FetchDetail(pod.name, pod.namespace),
        status=f"Loading pod {pod.namespace}/{pod.name}...",
    )


def _request_delete(state: ViewState) -> Result:
    image = state.selected_image
    if state.active_tab is not Tab.IMAGES or image is None:
        return _unchanged(state)
    return _issue(state, DeleteImage(image.id), status=f"Deleting image {image.id}...")


def _request_pull(state: ViewState) -> Result:
    image = state.selected_image
    if state.active_tab is not Tab.IMAGES or image is None:
        return _unchanged(state)
    if not image.tag or image.tag == NOT_AVAILABLE:
        return _unchanged(state)
    return _issue(state, PullImage(image.tag), status=f"Pulling {image.tag}...")


def _request_refresh(state: ViewState) -> Result:
    if state.active_tab is Tab.IMAGES:
        return _issue(state, RefreshImages(), status="Refreshing images...")
    if state.active_tab is Tab.WORKLOADS:
        return _issue(state, RefreshWorkloads(), status="Refreshing pods...")
    return _unchanged(state)


def _on_modal_key(state: ViewState, key: str) -> Result:
    modal = state.modal
    if modal is None:
        return _unchanged(state)
    if key in CLOSE_KEYS:
        return _close_modal(state), ()

    if modal.step is ModalStep.SELECT_TARGET:
        if key in ADVANCE_KEYS:
            return _advance(state, modal)
        if key == BACK_KEY:
            return _close_modal(state), ()
        if key in UP_KEYS:
            index = max(CREATE_NEW_INDEX, modal.candidate_index - 1)
            return replace(state, modal=replace(modal, candidate_index=index)), ()
        if key in DOWN_KEYS:
            index = min(len(modal.candidates) - 1, modal.candidate_index + 1)
            index = max(CREATE_NEW_INDEX, index)
            return replace(state, modal=replace(modal, candidate_index=index)), ()
        return _unchanged(state)

    if key == BACK_KEY:
        back = replace(
            modal,
            step=ModalStep.SELECT_TARGET,
            target_pods=(),
            target_pods_loaded=False,
        )
        return replace(state, modal=back), ()
    if key in ADVANCE_KEYS:
        return _commit(state, modal)
    return _unchanged(state)


def _advance(state: ViewState, modal: ModalState) -> Result:
    target = modal.selected_candidate
    if target is None:
        advanced = replace(modal, step=ModalStep.CREATE_CONFIRM, candidate_index=CREATE_NEW_INDEX)
        return replace(state, modal=advanced), ()
    advanced = replace(modal, step=ModalStep.UPDATE_CONFIRM)
    return _issue(replace(state, modal=advanced), ListWorkloadPods(target.name, target.namespace))


def _commit(state: ViewState, modal: ModalState) -> Result:
    closed = _close_modal(state)
    if modal.step is ModalStep.CREATE_CONFIRM:
        name = generate_workload_name(modal.image_ref)
        return _issue(
            closed,
            CreateWorkload(modal.image_ref, name, state.namespace),
            status=f"Creating deployment {name}...",
        )
    target = modal.selected_candidate
    if target is None:
        return closed, ()
    return _issue(
        closed,
        UpdateWorkload(modal.image_ref, target.name, target.namespace),
        status=f"Updating deployment {target.name}...",
    )


def _close_modal(state: ViewState) -> ViewState:
    return replace(state, modal=None, status_message="")


def _on_detail_key(state: ViewState, key: str) -> Result:
    detail = state.detail
    if detail is None or detail.rows is None:
        return _unchanged(state)
    if key in CLOSE_KEYS:
        return replace(state, detail=None, status_message=""), ()
    if key in UP_KEYS:
        return replace(state, detail=replace(detail, cursor=max(0, detail.cursor - 1))), ()
    if key in DOWN_KEYS:
        cursor = min(len(detail.rows) - 1, detail.cursor + 1)
        return replace(state, detail=replace(detail, cursor=cursor)), ()
    return _unchanged(state)


def _on_row_highlighted(state: ViewState, index: int) -> Result:
    mode = state.mode
    if mode is ViewMode.NORMAL:
        return state.with_cursor(state.active_tab, index), ()
    if mode is ViewMode.DETAIL and state.detail is not None and state.detail.rows:
        cursor = max(0, min(index, len(state.detail.rows) - 1))
        return replace(state, detail=replace(state.detail, cursor=cursor)), ()
    return _unchanged(state)


# ============================================================================
# Completions
# ============================================================================


def _record_failure(state: ViewState, completion: Completion) -> ViewState:
    command = completion.command
    detail = completion.error or "unknown error"
    label = _OPERATION_LABELS.get(command.kind, command.kind.value)
    return replace(
        state,
        last_failure=Failure(command.kind, command.target, detail),
        status_message=f"{label} failed: {detail}",
    )


def _on_completion(state: ViewState, completion: Completion) -> Result:
    command = completion.command
    state = replace(state, pending=state.pending - {command.key})
    kind = command.kind

    if kind is OperationKind.LIST_WORKLOADS:
        return _on_workloads_listed(state, completion)
    if kind is OperationKind.LIST_WORKLOAD_PODS:
        return _on_workload_pods_listed(state, completion)
    if kind is OperationKind.DETAIL:
        return _on_detail_loaded(state, completion)

    if not completion.success:
        return _record_failure(state, completion), ()

    if kind is OperationKind.REFRESH_IMAGES:
        return _replace_images(state, tuple(completion.payload or ())), ()
    if kind is OperationKind.REFRESH_WORKLOADS:
        return _replace_workloads(state, tuple(completion.payload or ())), ()
    if kind in (OperationKind.DELETE, OperationKind.PULL):
        label = _OPERATION_LABELS[kind]
        return _issue(state, RefreshImages(), status=f"{label} of {command.target} finished")
    if kind in (OperationKind.CREATE_WORKLOAD, OperationKind.UPDATE_WORKLOAD):
        label = _OPERATION_LABELS[kind]
        reset = state.with_cursor(state.active_tab, 0)
        return _issue(
            reset,
            ListWorkloads(state.namespace),
            RefreshWorkloads(),
            status=f"{label} {command.target} succeeded",
        )
    return _unchanged(state)


def _on_workloads_listed(state: ViewState, completion: Completion) -> Result:
    modal = state.modal
    if not completion.success:
        state = _record_failure(state, completion)
        if modal is not None:
            state = replace(state, modal=replace(modal, candidates_loaded=True))
        return state, ()
    if modal is None:
        return _unchanged(state)
    candidates = tuple(completion.payload or ())
    index = min(modal.candidate_index, len(candidates) - 1)
    merged = replace(
        modal,
        candidates=candidates,
        candidates_loaded=True,
        candidate_index=max(CREATE_NEW_INDEX, index),
    )
    return replace(state, modal=merged, status_message=""), ()


def _on_workload_pods_listed(state: ViewState, completion: Completion) -> Result:
    modal = state.modal
    target = modal.selected_candidate if modal is not None else None
    stale = (
        modal is None
        or modal.step is not ModalStep.UPDATE_CONFIRM
        or target is None
        or f"{target.namespace}/{target.name}" != completion.command.target
    )
    if not completion.success:
        state = _record_failure(state, completion)
        if not stale:
            state = replace(state, modal=replace(modal, target_pods_loaded=True))
        return state, ()
    if stale:
        return _unchanged(state)
    merged = replace(
        modal,
        target_pods=tuple(completion.payload or ()),
        target_pods_loaded=True,
    )
    return replace(state, modal=merged), ()


def _on_detail_loaded(state: ViewState, completion: Completion) -> Result:
    detail = state.detail
    if detail is None or f"{detail.namespace}/{detail.name}" != completion.command.target:
        if not completion.success:
            return _record_failure(state, completion), ()
        return _unchanged(state)
    if completion.success:
        rows = project_detail(completion.payload or {})
        return replace(state, detail=replace(detail, rows=rows, cursor=0), status_message=""), ()
    failed = _record_failure(state, completion)
    rows = detail_error_rows(completion.error)
    return replace(failed, detail=replace(detail, rows=rows, cursor=0)), ()


def _replace_images(state: ViewState, images: tuple) -> ViewState:
    previous = state.selected_image
    updated = replace(state, images=images, status_message="")
    index = state.cursor_for(Tab.IMAGES)
    if previous is not None:
        for position, image in enumerate(images):
            if image.id == previous.id:
                index = position
                break
    return updated.with_cursor(Tab.IMAGES, index)


def _replace_workloads(state: ViewState, pods: tuple) -> ViewState:
    previous = state.selected_pod
    updated = replace(state, workloads=pods, status_message="")
    index = state.cursor_for(Tab.WORKLOADS)
    if previous is not None:
        previous_key = (previous.namespace, previous.name)
        for position, pod in enumerate(pods):
            if (pod.namespace, pod.name) == previous_key:
                index = position
                break
    return updated.with_cursor(Tab.WORKLOADS, index)


# ============================================================================
# Host-facing controller
# ============================================================================


class DashboardController:
    """Owns the current snapshot and renders it on request.

    Example:
        ```python
        controller = DashboardController(initial_state(images=images))
        commands = controller.handle_event("2")
        frame = controller.current_frame()
        ```
    """

    def __init__(self, state: ViewState | None = None, renderer: Renderer | None = None) -> None:
        self._state = state or ViewState()
        self._renderer = renderer or Renderer()

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def quit_requested(self) -> bool:
        return self._state.quit_requested

    def handle_event(self, raw_input: object) -> tuple[Command, ...]:
        """Apply one input or completion; returns the commands to dispatch."""
        event = translate_input(raw_input)
        if event is None:
            return ()
        self._state, commands = safe_transition(self._state, event)
        return commands

    def current_frame(self) -> Frame:
        return self._renderer.render(self._state)
