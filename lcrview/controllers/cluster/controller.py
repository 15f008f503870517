"""Cluster controller for Kubernetes workload operations.

This module serves as the orchestrator for cluster data operations,
delegating raw kubectl queries to WorkloadFetcher and JSON shaping to the
pod and deployment parsers.
"""

from __future__ import annotations

import asyncio
import logging
import os
import shutil
from typing import Any

from lcrview.constants.defaults import CLUSTER_REGISTRY_HOST_DEFAULT, MINIKUBE_REGISTRY_HOST
from lcrview.constants.timeouts import (
    CLUSTER_REQUEST_TIMEOUT,
    CONNECTION_CHECK_TIMEOUT,
    DOCKER_COMMAND_TIMEOUT,
    KUBECTL_COMMAND_TIMEOUT,
    MINIKUBE_STATUS_TIMEOUT,
)
from lcrview.controllers.base import BaseController
from lcrview.controllers.cluster.fetchers import WorkloadFetcher
from lcrview.controllers.cluster.manifests import (
    build_deployment_manifest,
    build_image_patch,
    render_manifest,
    resolve_image_reference,
)
from lcrview.controllers.cluster.parsers import DeploymentParser, PodParser
from lcrview.controllers.errors import CollaboratorError, summarize_error
from lcrview.models.records import PodSummary, WorkloadSummary
from lcrview.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

_KUBECTL_FALLBACK_PATHS = (
    "/usr/local/bin/kubectl",
    "/usr/bin/kubectl",
    "/opt/homebrew/bin/kubectl",
    "/snap/bin/kubectl",
)


def find_kubectl(configured: str = "kubectl") -> str:
    """Resolve the kubectl binary from PATH, then from common install locations."""
    resolved = shutil.which(configured)
    if resolved:
        return resolved
    for candidate in _KUBECTL_FALLBACK_PATHS:
        if os.access(candidate, os.X_OK):
            return candidate
    return configured


def api_server_url(host: str, port: str = "") -> str:
    """Build the kubectl ``--server`` URL for a control plane host.

    A bare host gets the https scheme; an explicit http:// or https:// is kept.
    """
    if not host:
        return ""
    address = f"{host}:{port}" if port else host
    if address.startswith(("http://", "https://")):
        return address
    return f"https://{address}"


class ClusterController(BaseController):
    """Kubernetes workload operations through kubectl.

    Reads:
    - list_pods: every pod in every namespace (Workloads tab)
    - list_workloads: deployments in one namespace (wizard targets)
    - list_workload_pods: pods selected by one deployment
    - get_pod_detail: flattened pod description (detail view)

    Writes:
    - create_workload: ``kubectl apply`` of a generated Deployment
    - update_workload: JSON patch of the first container's image

    When minikube is running, deploy targets default to its host registry
    alias and the image is loaded into the minikube node first.
    """

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self.context = self.settings.kube_context
        self._kubectl = find_kubectl(self.settings.kubectl_path)
        self._server = api_server_url(
            self.settings.control_plane, self.settings.control_plane_port
        )
        self._minikube_detected: bool | None = None
        self._workload_fetcher = WorkloadFetcher(self._run_kubectl)
        self._pod_parser = PodParser()
        self._deployment_parser = DeploymentParser()

    async def _run_kubectl(
        self,
        args: tuple[str, ...],
        input_text: str | None = None,
    ) -> str:
        cmd = [self._kubectl]
        if self.context:
            cmd.extend(["--context", self.context])
        if self._server:
            cmd.extend(["--server", self._server])
        cmd.extend(args)
        return await self._run_command(cmd, KUBECTL_COMMAND_TIMEOUT, input_text)

    # ------------------------------------------------------------------
    # BaseController
    # ------------------------------------------------------------------

    async def check_connection(self) -> bool:
        """Check that the API server answers within the check timeout."""
        try:
            await asyncio.wait_for(
                self._run_kubectl(
                    ("version", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}", "-o", "json")
                ),
                timeout=CONNECTION_CHECK_TIMEOUT,
            )
        except (CollaboratorError, asyncio.TimeoutError) as exc:
            logger.warning("Cluster connection check failed: %s", summarize_error(exc))
            return False
        return True

    async def fetch_all(self) -> dict[str, Any]:
        """Fetch pods and deployments in parallel."""
        pods, workloads = await asyncio.gather(
            self.list_pods(),
            self.list_workloads(self.settings.namespace),
        )
        return {"pods": pods, "workloads": workloads}

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_pods(self) -> list[PodSummary]:
        payload = await self._workload_fetcher.fetch_pods_raw()
        return self._pod_parser.parse_pod_list(payload)

    async def list_workloads(self, namespace: str | None = None) -> list[WorkloadSummary]:
        """List deployments; ``None`` lists every namespace."""
        payload = await self._workload_fetcher.fetch_deployments_raw(namespace)
        return self._deployment_parser.parse_workload_list(payload)

    async def list_workload_pods(self, name: str, namespace: str) -> list[PodSummary]:
        """List the pods managed by one deployment via its label selector."""
        deployment = await self._workload_fetcher.fetch_deployment_raw(name, namespace)
        selector = self._deployment_parser.label_selector(deployment)
        if not selector:
            return []
        payload = await self._workload_fetcher.fetch_pods_raw(namespace, selector)
        return self._pod_parser.parse_pod_list(payload)

    async def get_pod_detail(self, name: str, namespace: str) -> dict[str, str]:
        pod = await self._workload_fetcher.fetch_pod_raw(name, namespace)
        return self._pod_parser.parse_pod_detail(pod)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def minikube_running(self) -> bool:
        """Report whether ``minikube status`` succeeds. The answer is cached."""
        if self._minikube_detected is None:
            try:
                await self._run_command(
                    [self.settings.minikube_path, "status"], MINIKUBE_STATUS_TIMEOUT
                )
            except CollaboratorError as exc:
                logger.debug("minikube is not running: %s", summarize_error(exc))
                self._minikube_detected = False
            else:
                self._minikube_detected = True
        return self._minikube_detected

    async def registry_host(self) -> str:
        """Registry host the cluster pulls deploy images from."""
        if self.settings.cluster_registry_host:
            return self.settings.cluster_registry_host
        if await self.minikube_running():
            return MINIKUBE_REGISTRY_HOST
        return CLUSTER_REGISTRY_HOST_DEFAULT

    async def resolve_image(self, image_ref: str) -> str:
        return resolve_image_reference(image_ref, await self.registry_host())

    async def load_into_minikube(self, image: str) -> None:
        """Pull the image on the host and load it into the minikube node.

        Failures are logged and the deploy goes ahead; the pod then reports
        the pull error itself.
        """
        if not await self.minikube_running():
            return
        try:
            await self._run_command(
                [self.settings.docker_path, "pull", image], DOCKER_COMMAND_TIMEOUT
            )
            await self._run_command(
                [self.settings.minikube_path, "image", "load", image], DOCKER_COMMAND_TIMEOUT
            )
        except CollaboratorError as exc:
            logger.warning("Could not load %s into minikube: %s", image, summarize_error(exc))

    async def create_workload(self, image_ref: str, name: str, namespace: str) -> None:
        image = await self.resolve_image(image_ref)
        await self.load_into_minikube(image)
        manifest = build_deployment_manifest(
            name, namespace, image, self.settings.image_pull_policy
        )
        logger.info("Creating deployment %s/%s with image %s", namespace, name, image)
        try:
            await self._run_kubectl(("apply", "-f", "-"), input_text=render_manifest(manifest))
        except CollaboratorError as exc:
            message = summarize_error(exc, f"Failed to create deployment {name}")
            if "already exists" in message:
                message = f"deployment {name} already exists in namespace {namespace}"
            raise CollaboratorError(message) from exc

    async def update_workload(self, image_ref: str, name: str, namespace: str) -> None:
        image = await self.resolve_image(image_ref)
        await self.load_into_minikube(image)
        logger.info("Updating deployment %s/%s to image %s", namespace, name, image)
        try:
            await self._run_kubectl(
                (
                    "patch",
                    "deployment",
                    name,
                    "-n",
                    namespace,
                    "--type=json",
                    "-p",
                    build_image_patch(image, self.settings.image_pull_policy),
                )
            )
        except CollaboratorError as exc:
            raise CollaboratorError(
                summarize_error(exc, f"Failed to update deployment {name}")
            ) from exc
