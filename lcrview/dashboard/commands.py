"""Commands issued by the dashboard and the completions they produce.

Commands are frozen dataclasses so the arguments a worker sees are the
ones captured when the command was issued.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from lcrview.constants.enums import OperationKind


@dataclass(frozen=True)
class Command:
    """Base class for an asynchronous unit of work."""

    kind: ClassVar[OperationKind]

    @property
    def target(self) -> str:
        """Key that identifies what the command acts on."""
        return ""

    @property
    def key(self) -> tuple[OperationKind, str]:
        return (self.kind, self.target)


@dataclass(frozen=True)
class RefreshImages(Command):
    kind: ClassVar[OperationKind] = OperationKind.REFRESH_IMAGES


@dataclass(frozen=True)
class DeleteImage(Command):
    kind: ClassVar[OperationKind] = OperationKind.DELETE

    image_id: str

    @property
    def target(self) -> str:
        return self.image_id


@dataclass(frozen=True)
class PullImage(Command):
    kind: ClassVar[OperationKind] = OperationKind.PULL

    image_tag: str

    @property
    def target(self) -> str:
        return self.image_tag


@dataclass(frozen=True)
class ListWorkloads(Command):
    kind: ClassVar[OperationKind] = OperationKind.LIST_WORKLOADS

    namespace: str | None = None

    @property
    def target(self) -> str:
        return self.namespace or ""


@dataclass(frozen=True)
class RefreshWorkloads(Command):
    kind: ClassVar[OperationKind] = OperationKind.REFRESH_WORKLOADS


@dataclass(frozen=True)
class ListWorkloadPods(Command):
    kind: ClassVar[OperationKind] = OperationKind.LIST_WORKLOAD_PODS

    name: str
    namespace: str

    @property
    def target(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class FetchDetail(Command):
    kind: ClassVar[OperationKind] = OperationKind.DETAIL

    name: str
    namespace: str

    @property
    def target(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class CreateWorkload(Command):
    kind: ClassVar[OperationKind] = OperationKind.CREATE_WORKLOAD

    image_ref: str
    name: str
    namespace: str

    @property
    def target(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class UpdateWorkload(Command):
    kind: ClassVar[OperationKind] = OperationKind.UPDATE_WORKLOAD

    image_ref: str
    name: str
    namespace: str

    @property
    def target(self) -> str:
        return f"{self.namespace}/{self.name}"


@dataclass(frozen=True)
class Completion:
    """The single result of one dispatched command.

    Attributes:
        command: The command that was dispatched, for correlation.
        success: Whether the collaborator call succeeded.
        payload: Records (as a tuple), a detail mapping, or None.
        error: Human-readable failure detail.
        duration_ms: Time spent in the collaborator.
    """

    command: Command
    success: bool
    payload: Any = None
    error: str | None = None
    duration_ms: float = 0.0

    @property
    def kind(self) -> OperationKind:
        return self.command.kind


__all__ = [
    "Command",
    "Completion",
    "CreateWorkload",
    "DeleteImage",
    "FetchDetail",
    "ListWorkloadPods",
    "ListWorkloads",
    "PullImage",
    "RefreshImages",
    "RefreshWorkloads",
    "UpdateWorkload",
]
