"""Deployment parser for cluster controller."""

from __future__ import annotations

from typing import Any

from lcrview.constants.enums import WorkloadStatus
from lcrview.models.records import WorkloadSummary


class DeploymentParser:
    """Parses deployment data into wizard targets."""

    def parse_workload_summary(self, deployment: dict[str, Any]) -> WorkloadSummary:
        """Parse one deployment; status is derived from ready vs desired replicas."""
        metadata = deployment.get("metadata", {})
        spec = deployment.get("spec", {})
        status = deployment.get("status", {})

        replicas = spec.get("replicas")
        desired = 1 if replicas is None else int(replicas)
        ready = int(status.get("readyReplicas", 0) or 0)

        return WorkloadSummary(
            name=metadata.get("name", "Unknown"),
            namespace=metadata.get("namespace", "default"),
            status=self.readiness(ready, desired).value,
            replica_fraction=f"{ready}/{desired}",
        )

    def parse_workload_list(self, payload: dict[str, Any]) -> list[WorkloadSummary]:
        """Parse a deployment list, sorted by name."""
        workloads = [self.parse_workload_summary(item) for item in payload.get("items") or []]
        return sorted(workloads, key=lambda workload: workload.name)

    @staticmethod
    def readiness(ready: int, desired: int) -> WorkloadStatus:
        if ready == desired:
            return WorkloadStatus.READY
        if ready > 0:
            return WorkloadStatus.PARTIAL
        return WorkloadStatus.NOT_READY

    @staticmethod
    def label_selector(deployment: dict[str, Any]) -> str:
        """Return the ``k=v,...`` selector built from ``spec.selector.matchLabels``."""
        match_labels = (
            deployment.get("spec", {}).get("selector", {}).get("matchLabels") or {}
        )
        return ",".join(f"{key}={value}" for key, value in sorted(match_labels.items()))
