"""Command dispatcher: runs one command against its collaborator.

Every call to ``dispatch`` returns exactly one Completion and never raises;
collaborator failures become failed completions.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from lcrview.constants.enums import OperationKind
from lcrview.controllers.errors import summarize_error
from lcrview.dashboard.commands import (
    Command,
    Completion,
    CreateWorkload,
    DeleteImage,
    FetchDetail,
    ListWorkloadPods,
    ListWorkloads,
    PullImage,
    UpdateWorkload,
)

logger = logging.getLogger(__name__)


class ImageOperations(Protocol):
    async def list_images(self) -> list: ...

    async def delete_image(self, image_id: str) -> None: ...

    async def pull_image(self, image_tag: str) -> None: ...


class WorkloadOperations(Protocol):
    async def list_pods(self) -> list: ...

    async def list_workloads(self, namespace: str | None = None) -> list: ...

    async def list_workload_pods(self, name: str, namespace: str) -> list: ...

    async def get_pod_detail(self, name: str, namespace: str) -> dict[str, str]: ...

    async def create_workload(self, image_ref: str, name: str, namespace: str) -> None: ...

    async def update_workload(self, image_ref: str, name: str, namespace: str) -> None: ...


Handler = Callable[[Any], Awaitable[Any]]


class CommandDispatcher:
    """Maps each command kind onto a collaborator call."""

    def __init__(self, images: ImageOperations, cluster: WorkloadOperations) -> None:
        self._images = images
        self._cluster = cluster
        self._handlers: dict[OperationKind, Handler] = {
            OperationKind.REFRESH_IMAGES: self._refresh_images,
            OperationKind.DELETE: self._delete_image,
            OperationKind.PULL: self._pull_image,
            OperationKind.LIST_WORKLOADS: self._list_workloads,
            OperationKind.REFRESH_WORKLOADS: self._refresh_workloads,
            OperationKind.LIST_WORKLOAD_PODS: self._list_workload_pods,
            OperationKind.DETAIL: self._fetch_detail,
            OperationKind.CREATE_WORKLOAD: self._create_workload,
            OperationKind.UPDATE_WORKLOAD: self._update_workload,
        }

    async def dispatch(self, command: Command) -> Completion:
        """Execute ``command`` and describe the outcome."""
        started = time.monotonic()
        handler = self._handlers.get(command.kind)
        if handler is None:
            return Completion(command, success=False, error=f"Unsupported command {command.kind}")
        try:
            payload = await handler(command)
        except Exception as exc:
            logger.warning("%s %s failed: %s", command.kind.value, command.target, exc)
            return Completion(
                command,
                success=False,
                error=summarize_error(exc, f"{command.kind.value} failed"),
                duration_ms=(time.monotonic() - started) * 1000,
            )
        duration_ms = (time.monotonic() - started) * 1000
        logger.debug("%s %s finished in %.0fms", command.kind.value, command.target, duration_ms)
        return Completion(command, success=True, payload=payload, duration_ms=duration_ms)

    async def _refresh_images(self, _command: Command) -> tuple:
        return tuple(await self._images.list_images())

    async def _delete_image(self, command: DeleteImage) -> None:
        await self._images.delete_image(command.image_id)

    async def _pull_image(self, command: PullImage) -> None:
        await self._images.pull_image(command.image_tag)

    async def _list_workloads(self, command: ListWorkloads) -> tuple:
        return tuple(await self._cluster.list_workloads(command.namespace))

    async def _refresh_workloads(self, _command: Command) -> tuple:
        return tuple(await self._cluster.list_pods())

    async def _list_workload_pods(self, command: ListWorkloadPods) -> tuple:
        return tuple(await self._cluster.list_workload_pods(command.name, command.namespace))

    async def _fetch_detail(self, command: FetchDetail) -> dict[str, str]:
        return dict(await self._cluster.get_pod_detail(command.name, command.namespace))

    async def _create_workload(self, command: CreateWorkload) -> None:
        await self._cluster.create_workload(command.image_ref, command.name, command.namespace)

    async def _update_workload(self, command: UpdateWorkload) -> None:
        await self._cluster.update_workload(command.image_ref, command.name, command.namespace)
