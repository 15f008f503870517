"""Immutable snapshot of everything the dashboard shows.

Only the transition function produces new snapshots, always through
``dataclasses.replace``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from lcrview.constants.defaults import NAMESPACE_DEFAULT
from lcrview.constants.enums import ModalStep, OperationKind, Tab, ViewMode
from lcrview.models.records import CommitRecord, ImageRecord, PodSummary, WorkloadSummary
from lcrview.models.rows import DetailRow

TAB_ORDER: tuple[Tab, ...] = (Tab.COMMITS, Tab.IMAGES, Tab.WORKLOADS)

# Candidate index meaning "create a new deployment".
CREATE_NEW_INDEX = -1


@dataclass(frozen=True)
class Viewport:
    width: int = 120
    height: int = 40


@dataclass(frozen=True)
class ModalState:
    """Deploy wizard state; discarded as a whole when the wizard closes."""

    step: ModalStep
    image_ref: str
    image_id: str = ""
    candidates: tuple[WorkloadSummary, ...] = ()
    candidates_loaded: bool = False
    candidate_index: int = CREATE_NEW_INDEX
    target_pods: tuple[PodSummary, ...] = ()
    target_pods_loaded: bool = False

    @property
    def selected_candidate(self) -> WorkloadSummary | None:
        if 0 <= self.candidate_index < len(self.candidates):
            return self.candidates[self.candidate_index]
        return None


@dataclass(frozen=True)
class DetailState:
    """A requested pod detail; ``rows`` stays None until the completion arrives."""

    name: str
    namespace: str
    rows: tuple[DetailRow, ...] | None = None
    cursor: int = 0

    @property
    def loaded(self) -> bool:
        return self.rows is not None


@dataclass(frozen=True)
class Failure:
    kind: OperationKind
    target: str
    detail: str


@dataclass(frozen=True)
class ViewState:
    active_tab: Tab = Tab.COMMITS
    commits: tuple[CommitRecord, ...] = ()
    images: tuple[ImageRecord, ...] = ()
    workloads: tuple[PodSummary, ...] = ()
    cursors: tuple[int, int, int] = (0, 0, 0)
    modal: ModalState | None = None
    detail: DetailState | None = None
    viewport: Viewport = field(default_factory=Viewport)
    pending: frozenset[tuple[OperationKind, str]] = frozenset()
    last_failure: Failure | None = None
    status_message: str = ""
    namespace: str = NAMESPACE_DEFAULT
    quit_requested: bool = False

    @property
    def mode(self) -> ViewMode:
        if self.modal is not None:
            return ViewMode.MODAL
        if self.detail is not None and self.detail.loaded:
            return ViewMode.DETAIL
        return ViewMode.NORMAL

    def records_for(self, tab: Tab) -> tuple:
        if tab is Tab.COMMITS:
            return self.commits
        if tab is Tab.IMAGES:
            return self.images
        return self.workloads

    def cursor_for(self, tab: Tab) -> int:
        return self.cursors[TAB_ORDER.index(tab)]

    def with_cursor(self, tab: Tab, index: int) -> ViewState:
        records = self.records_for(tab)
        clamped = max(0, min(index, len(records) - 1))
        cursors = list(self.cursors)
        cursors[TAB_ORDER.index(tab)] = clamped
        return replace(self, cursors=(cursors[0], cursors[1], cursors[2]))

    @property
    def cursor(self) -> int:
        return self.cursor_for(self.active_tab)

    @property
    def selected_image(self) -> ImageRecord | None:
        index = self.cursor_for(Tab.IMAGES)
        return self.images[index] if 0 <= index < len(self.images) else None

    @property
    def selected_pod(self) -> PodSummary | None:
        index = self.cursor_for(Tab.WORKLOADS)
        return self.workloads[index] if 0 <= index < len(self.workloads) else None


def initial_state(
    commits: tuple[CommitRecord, ...] | list[CommitRecord] = (),
    images: tuple[ImageRecord, ...] | list[ImageRecord] = (),
    workloads: tuple[PodSummary, ...] | list[PodSummary] = (),
    namespace: str = NAMESPACE_DEFAULT,
    viewport: Viewport | None = None,
) -> ViewState:
    """Build the startup snapshot from whatever the bootstrap loaded."""
    return ViewState(
        commits=tuple(commits),
        images=tuple(images),
        workloads=tuple(workloads),
        namespace=namespace,
        viewport=viewport or Viewport(),
    )
