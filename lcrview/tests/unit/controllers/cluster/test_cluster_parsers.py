"""Tests for the pod and deployment parsers."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from lcrview.constants.enums import WorkloadStatus
from lcrview.controllers.cluster.parsers import DeploymentParser, PodParser

NOW = datetime(2024, 5, 10, 12, 0, 0, tzinfo=timezone.utc)


def make_pod(
    name: str = "web-1",
    namespace: str = "default",
    phase: str = "Running",
    **extra,
) -> dict:
    pod = {
        "metadata": {
            "name": name,
            "namespace": namespace,
            "creationTimestamp": "2024-05-08T09:30:00Z",
            "labels": {"app": "web", "tier": "frontend"},
            "annotations": {"a": "1", "b": "2"},
        },
        "spec": {
            "nodeName": "node-1",
            "serviceAccountName": "default",
            "restartPolicy": "Always",
            "dnsPolicy": "ClusterFirst",
            "containers": [
                {
                    "name": "app",
                    "image": "localhost:5000/web:v1",
                    "imagePullPolicy": "Never",
                    "ports": [{"containerPort": 80, "protocol": "TCP"}],
                    "resources": {"requests": {"cpu": "100m"}, "limits": {"memory": "128Mi"}},
                }
            ],
        },
        "status": {
            "phase": phase,
            "podIP": "10.0.0.5",
            "hostIP": "192.168.1.2",
            "startTime": "2024-05-08T09:30:05Z",
            "containerStatuses": [
                {"ready": True, "restartCount": 2, "containerID": "containerd://abc"},
            ],
            "conditions": [
                {"type": "Ready", "status": "True"},
                {"type": "PodScheduled", "status": "True"},
            ],
        },
    }
    pod.update(extra)
    return pod


class TestPodParser:
    """Tests for PodParser."""

    @pytest.fixture
    def parser(self) -> PodParser:
        return PodParser()

    def test_parse_pod_summary(self, parser: PodParser) -> None:
        summary = parser.parse_pod_summary(make_pod(), NOW)
        assert summary.name == "web-1"
        assert summary.namespace == "default"
        assert summary.status == "Running"
        assert summary.restarts == 2
        assert summary.age == "2d2h"
        assert summary.node == "node-1"

    def test_waiting_reason_overrides_phase(self, parser: PodParser) -> None:
        pod = make_pod(phase="Pending")
        pod["status"]["containerStatuses"] = [
            {"restartCount": 0, "state": {"waiting": {"reason": "ImagePullBackOff"}}}
        ]
        assert parser.parse_pod_summary(pod, NOW).status == "ImagePullBackOff"

    def test_deleting_pod_is_terminating(self, parser: PodParser) -> None:
        pod = make_pod()
        pod["metadata"]["deletionTimestamp"] = "2024-05-10T11:59:00Z"
        assert parser.parse_pod_summary(pod, NOW).status == "Terminating"

    def test_missing_fields_use_defaults(self, parser: PodParser) -> None:
        summary = parser.parse_pod_summary({"metadata": {"name": "bare"}}, NOW)
        assert summary.namespace == "default"
        assert summary.status == "Unknown"
        assert summary.restarts == 0
        assert summary.age == "N/A"
        assert summary.node == "N/A"

    def test_pod_list_is_sorted(self, parser: PodParser) -> None:
        payload = {
            "items": [
                make_pod("b", "kube-system"),
                make_pod("z", "default"),
                make_pod("a", "default"),
            ]
        }
        pods = parser.parse_pod_list(payload, NOW)
        assert [(pod.namespace, pod.name) for pod in pods] == [
            ("default", "a"),
            ("default", "z"),
            ("kube-system", "b"),
        ]

    def test_empty_pod_list(self, parser: PodParser) -> None:
        assert parser.parse_pod_list({"items": []}) == []
        assert parser.parse_pod_list({}) == []

    def test_parse_pod_detail(self, parser: PodParser) -> None:
        details = parser.parse_pod_detail(make_pod())
        assert details["Name"] == "web-1"
        assert details["Pod IP"] == "10.0.0.5"
        assert details["Created"] == "2024-05-08 09:30:00"
        assert details["Container Image"] == "localhost:5000/web:v1"
        assert details["Container Ports"] == "80/TCP"
        assert details["CPU Request"] == "100m"
        assert details["Memory Limit"] == "128Mi"
        assert details["Memory Request"] == ""
        assert details["Container Ready"] == "true"
        assert details["Restart Count"] == "2"
        assert details["Labels"] == "app=web, tier=frontend"
        assert details["Annotations"] == "2 annotations"
        assert details["Ready Condition"] == "True"
        assert details["Initialized Condition"] == "Unknown"

    def test_pod_detail_last_termination(self, parser: PodParser) -> None:
        pod = make_pod()
        pod["status"]["containerStatuses"][0]["lastState"] = {
            "terminated": {"exitCode": 137, "reason": "OOMKilled"}
        }
        details = parser.parse_pod_detail(pod)
        assert details["Last Exit Code"] == "137"
        assert details["Last Exit Reason"] == "OOMKilled"


class TestDeploymentParser:
    """Tests for DeploymentParser."""

    @pytest.fixture
    def parser(self) -> DeploymentParser:
        return DeploymentParser()

    @pytest.mark.parametrize(
        ("ready", "desired", "expected"),
        [
            (3, 3, WorkloadStatus.READY),
            (0, 0, WorkloadStatus.READY),
            (1, 3, WorkloadStatus.PARTIAL),
            (0, 2, WorkloadStatus.NOT_READY),
        ],
    )
    def test_readiness(self, ready: int, desired: int, expected: WorkloadStatus) -> None:
        assert DeploymentParser.readiness(ready, desired) is expected

    def test_parse_workload_summary(self, parser: DeploymentParser) -> None:
        summary = parser.parse_workload_summary(
            {
                "metadata": {"name": "web", "namespace": "default"},
                "spec": {"replicas": 3},
                "status": {"readyReplicas": 1},
            }
        )
        assert summary.name == "web"
        assert summary.status == "Partial"
        assert summary.replica_fraction == "1/3"

    def test_missing_replicas_defaults_to_one(self, parser: DeploymentParser) -> None:
        summary = parser.parse_workload_summary({"metadata": {"name": "web"}, "status": {}})
        assert summary.replica_fraction == "0/1"
        assert summary.status == "NotReady"

    def test_scaled_to_zero(self, parser: DeploymentParser) -> None:
        summary = parser.parse_workload_summary(
            {"metadata": {"name": "idle"}, "spec": {"replicas": 0}, "status": {}}
        )
        assert summary.replica_fraction == "0/0"
        assert summary.status == "Ready"

    def test_workload_list_sorted_by_name(self, parser: DeploymentParser) -> None:
        payload = {"items": [{"metadata": {"name": "web"}}, {"metadata": {"name": "api"}}]}
        assert [w.name for w in parser.parse_workload_list(payload)] == ["api", "web"]

    def test_label_selector(self) -> None:
        deployment = {"spec": {"selector": {"matchLabels": {"tier": "fe", "app": "web"}}}}
        assert DeploymentParser.label_selector(deployment) == "app=web,tier=fe"
        assert DeploymentParser.label_selector({}) == ""
