"""Workload fetcher for cluster controller - fetches pod and deployment JSON."""

from __future__ import annotations

import json
import logging
from typing import Any

from lcrview.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from lcrview.controllers.errors import CollaboratorError

logger = logging.getLogger(__name__)


class WorkloadFetcher:
    """Fetches pod and deployment data from the Kubernetes cluster."""

    _QUERY_TIMEOUT = CLUSTER_REQUEST_TIMEOUT

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def _get_json(self, args: tuple[str, ...]) -> dict[str, Any]:
        output = await self._run_kubectl(
            (*args, "-o", "json", f"--request-timeout={self._QUERY_TIMEOUT}")
        )
        try:
            payload = json.loads(output or "{}")
        except json.JSONDecodeError as exc:
            logger.exception("kubectl returned malformed JSON for %s", " ".join(args))
            raise CollaboratorError("kubectl returned malformed JSON") from exc
        if not isinstance(payload, dict):
            raise CollaboratorError("kubectl returned an unexpected payload")
        return payload

    async def fetch_pods_raw(
        self,
        namespace: str | None = None,
        label_selector: str | None = None,
    ) -> dict[str, Any]:
        """Fetch pods in one namespace, or all namespaces when ``namespace`` is None."""
        args: tuple[str, ...] = ("get", "pods")
        args += ("-n", namespace) if namespace else ("--all-namespaces",)
        if label_selector:
            args += ("-l", label_selector)
        return await self._get_json(args)

    async def fetch_pod_raw(self, name: str, namespace: str) -> dict[str, Any]:
        return await self._get_json(("get", "pod", name, "-n", namespace))

    async def fetch_deployments_raw(self, namespace: str | None = None) -> dict[str, Any]:
        args: tuple[str, ...] = ("get", "deployments")
        args += ("-n", namespace) if namespace else ("--all-namespaces",)
        return await self._get_json(args)

    async def fetch_deployment_raw(self, name: str, namespace: str) -> dict[str, Any]:
        return await self._get_json(("get", "deployment", name, "-n", namespace))
