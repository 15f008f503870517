"""Pod parser for cluster controller - parses pod JSON into summaries and detail maps."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from lcrview.constants.values import NOT_AVAILABLE
from lcrview.models.records import PodSummary
from lcrview.utils.formatting import format_age, format_timestamp


class PodParser:
    """Parses pod data into structured formats."""

    _CONDITION_KEYS = (
        ("Ready", "Ready Condition"),
        ("PodScheduled", "Scheduled Condition"),
        ("Initialized", "Initialized Condition"),
    )

    def parse_pod_summary(self, pod: dict[str, Any], now: datetime | None = None) -> PodSummary:
        """Parse a single pod into a PodSummary.

        Args:
            pod: Raw pod dictionary from ``kubectl get pods -o json``.
            now: Reference time for the age column.

        Returns:
            PodSummary object.
        """
        metadata = pod.get("metadata", {})
        status = pod.get("status", {})
        spec = pod.get("spec", {})

        restarts = sum(
            int(container.get("restartCount", 0) or 0)
            for container in status.get("containerStatuses") or []
        )
        return PodSummary(
            name=metadata.get("name", "Unknown"),
            namespace=metadata.get("namespace", "default"),
            status=self._display_status(pod),
            restarts=restarts,
            age=format_age(metadata.get("creationTimestamp"), now),
            node=spec.get("nodeName") or NOT_AVAILABLE,
        )

    def parse_pod_list(self, payload: dict[str, Any], now: datetime | None = None) -> list[PodSummary]:
        """Parse a pod list, sorted by namespace then name."""
        pods = [self.parse_pod_summary(item, now) for item in payload.get("items") or []]
        return sorted(pods, key=lambda pod: (pod.namespace, pod.name))

    @staticmethod
    def _display_status(pod: dict[str, Any]) -> str:
        """Return the phase, or the waiting reason of the first stuck container."""
        status = pod.get("status", {})
        if pod.get("metadata", {}).get("deletionTimestamp"):
            return "Terminating"
        for container in status.get("containerStatuses") or []:
            waiting = (container.get("state") or {}).get("waiting")
            if waiting and waiting.get("reason"):
                return str(waiting["reason"])
        return str(status.get("phase") or "Unknown")

    def parse_pod_detail(self, pod: dict[str, Any]) -> dict[str, str]:
        """Flatten a pod into the key/value map shown in the detail view.

        Only the first container is described. Missing values are left
        empty; the row projector drops them.
        """
        metadata = pod.get("metadata", {})
        status = pod.get("status", {})
        spec = pod.get("spec", {})

        details: dict[str, str] = {
            "Name": metadata.get("name", ""),
            "Namespace": metadata.get("namespace", ""),
            "Status": status.get("phase", ""),
            "Node": spec.get("nodeName", ""),
            "Created": self._timestamp(metadata.get("creationTimestamp")),
            "Start Time": self._timestamp(status.get("startTime")),
            "Pod IP": status.get("podIP", ""),
            "Host IP": status.get("hostIP", ""),
            "Service Account": spec.get("serviceAccountName", ""),
            "Restart Policy": spec.get("restartPolicy", ""),
            "DNS Policy": spec.get("dnsPolicy", ""),
        }

        labels = metadata.get("labels") or {}
        details["Labels"] = (
            ", ".join(f"{key}={value}" for key, value in sorted(labels.items()))
            if labels
            else "None"
        )
        annotations = metadata.get("annotations") or {}
        details["Annotations"] = f"{len(annotations)} annotations"

        containers = spec.get("containers") or []
        if containers:
            details.update(self._container_details(containers[0]))

        container_statuses = status.get("containerStatuses") or []
        if container_statuses:
            details.update(self._container_status_details(container_statuses[0]))

        conditions = {
            condition.get("type"): str(condition.get("status", "Unknown"))
            for condition in status.get("conditions") or []
        }
        for condition_type, key in self._CONDITION_KEYS:
            details[key] = conditions.get(condition_type, "Unknown")

        return details

    @staticmethod
    def _timestamp(value: str | None) -> str:
        formatted = format_timestamp(value)
        return "" if formatted == NOT_AVAILABLE else formatted

    @staticmethod
    def _container_details(container: dict[str, Any]) -> dict[str, str]:
        details = {
            "Container Name": container.get("name", ""),
            "Container Image": container.get("image", ""),
            "Image Pull Policy": container.get("imagePullPolicy", ""),
        }
        ports = container.get("ports") or []
        details["Container Ports"] = (
            ", ".join(
                f"{port.get('containerPort')}/{port.get('protocol', 'TCP')}" for port in ports
            )
            if ports
            else "None"
        )
        resources = container.get("resources") or {}
        requests = resources.get("requests") or {}
        limits = resources.get("limits") or {}
        details["CPU Request"] = str(requests.get("cpu", ""))
        details["Memory Request"] = str(requests.get("memory", ""))
        details["CPU Limit"] = str(limits.get("cpu", ""))
        details["Memory Limit"] = str(limits.get("memory", ""))
        return details

    @staticmethod
    def _container_status_details(container_status: dict[str, Any]) -> dict[str, str]:
        details = {
            "Container Ready": str(bool(container_status.get("ready", False))).lower(),
            "Restart Count": str(container_status.get("restartCount", 0)),
            "Container ID": container_status.get("containerID", ""),
        }
        terminated = (container_status.get("lastState") or {}).get("terminated")
        if terminated:
            details["Last Exit Code"] = str(terminated.get("exitCode", ""))
            details["Last Exit Reason"] = terminated.get("reason", "")
        return details
