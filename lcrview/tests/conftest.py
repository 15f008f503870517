"""Shared fixtures: sample records and mocked collaborators."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from lcrview.dashboard.view_state import ViewState, Viewport, initial_state
from lcrview.models.records import CommitRecord, ImageRecord, PodSummary, WorkloadSummary


@pytest.fixture
def commits() -> list[CommitRecord]:
    return [
        CommitRecord(sha="a" * 40, description="Add registry view", pushed_at="2024-05-01 10:00:00"),
        CommitRecord(sha="b" * 40, description="Fix pod age", pushed_at="2024-05-02 11:30:00"),
    ]


@pytest.fixture
def images() -> list[ImageRecord]:
    return [
        ImageRecord(
            id="abc123",
            repository="localhost:5000/app",
            tag="localhost:5000/app:v1",
            size="12.0MB",
            created_at="2024-05-01 10:00:00",
        ),
        ImageRecord(id="def456", repository="nginx", tag="nginx:1.25", size="180MB"),
        ImageRecord(id="0f0f0f", tag="N/A"),
    ]


@pytest.fixture
def pods() -> list[PodSummary]:
    return [
        PodSummary(name="web-7d9f-abcde", namespace="default", status="Running", age="2d", node="node-1"),
        PodSummary(name="api-5c8b-fghij", namespace="apps", status="Pending", restarts=3, age="5m"),
    ]


@pytest.fixture
def workloads() -> list[WorkloadSummary]:
    return [
        WorkloadSummary(name="web", namespace="default", status="Ready", replica_fraction="2/2"),
        WorkloadSummary(name="api", namespace="apps", status="Partial", replica_fraction="1/3"),
    ]


@pytest.fixture
def state(commits, images, pods) -> ViewState:
    return initial_state(
        commits=commits,
        images=images,
        workloads=pods,
        namespace="default",
        viewport=Viewport(width=160, height=48),
    )


@pytest.fixture
def image_ops(images) -> MagicMock:
    ops = MagicMock()
    ops.list_images = AsyncMock(return_value=list(images))
    ops.delete_image = AsyncMock(return_value=None)
    ops.pull_image = AsyncMock(return_value=None)
    return ops


@pytest.fixture
def cluster_ops(pods, workloads) -> MagicMock:
    ops = MagicMock()
    ops.list_pods = AsyncMock(return_value=list(pods))
    ops.list_workloads = AsyncMock(return_value=list(workloads))
    ops.list_workload_pods = AsyncMock(return_value=list(pods[:1]))
    ops.get_pod_detail = AsyncMock(
        return_value={"Name": pods[0].name, "Namespace": "default", "Status": "Running"}
    )
    ops.create_workload = AsyncMock(return_value=None)
    ops.update_workload = AsyncMock(return_value=None)
    return ops
