"""Startup wiring: build collaborators from settings and load the first snapshot."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from lcrview.constants.timeouts import STARTUP_LOAD_TIMEOUT
from lcrview.controllers import (
    BaseController,
    ClusterController,
    CommitController,
    ImageController,
    WorkerResult,
)
from lcrview.dashboard.dispatcher import CommandDispatcher
from lcrview.dashboard.view_state import ViewState, Viewport, initial_state
from lcrview.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)


@dataclass
class Services:
    """The three collaborators the dashboard talks to."""

    commits: CommitController
    images: ImageController
    cluster: ClusterController

    @classmethod
    def from_settings(cls, settings: AppSettings) -> Services:
        return cls(
            commits=CommitController(settings),
            images=ImageController(settings),
            cluster=ClusterController(settings),
        )

    def dispatcher(self) -> CommandDispatcher:
        return CommandDispatcher(self.images, self.cluster)

    def named(self) -> dict[str, BaseController]:
        return {"commits": self.commits, "images": self.images, "cluster": self.cluster}


async def load_initial_state(
    services: Services,
    namespace: str,
    viewport: Viewport | None = None,
    timeout: float = STARTUP_LOAD_TIMEOUT,
) -> ViewState:
    """Fetch commits, images and pods concurrently.

    A source that fails or times out contributes an empty collection, so the
    dashboard always starts.
    """
    results = await asyncio.gather(
        _load(services.commits, services.commits.list_commits(), timeout),
        _load(services.images, services.images.list_images(), timeout),
        _load(services.cluster, services.cluster.list_pods(), timeout),
    )
    for name, result in zip(("commits", "images", "workloads"), results):
        if result.success:
            logger.info("Loaded %d %s in %.0fms", len(result.data), name, result.duration_ms)
        else:
            logger.warning("Starting without %s: %s", name, result.error)
    commits, images, workloads = (
        result.data if result.success else [] for result in results
    )
    return initial_state(
        commits=commits,
        images=images,
        workloads=workloads,
        namespace=namespace,
        viewport=viewport,
    )


async def _load(controller: BaseController, coro, timeout: float) -> WorkerResult:
    return await controller.run_timed(asyncio.wait_for(coro, timeout=timeout))


async def check_connections(services: Services) -> dict[str, WorkerResult]:
    """Run every collaborator's connection check concurrently."""
    named = services.named()
    results = await asyncio.gather(
        *(controller.run_timed(controller.check_connection()) for controller in named.values())
    )
    return dict(zip(named, results))
