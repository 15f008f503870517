"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Navigation Enums
# =============================================================================


class Tab(Enum):
    """Top-level dashboard tabs, in display order."""

    COMMITS = "Git"
    IMAGES = "Docker"
    WORKLOADS = "Kubernetes"


class ModalStep(Enum):
    """Steps of the deploy wizard."""

    SELECT_TARGET = "select_target"
    CREATE_CONFIRM = "create_confirm"
    UPDATE_CONFIRM = "update_confirm"


class ViewMode(Enum):
    """Which surface currently receives input."""

    NORMAL = "normal"
    MODAL = "modal"
    DETAIL = "detail"


# =============================================================================
# Operation Enums
# =============================================================================


class OperationKind(Enum):
    """Kinds of asynchronous commands issued by the dashboard."""

    DELETE = "delete"
    PULL = "pull"
    DETAIL = "detail"
    CREATE_WORKLOAD = "create_workload"
    UPDATE_WORKLOAD = "update_workload"
    REFRESH_IMAGES = "refresh_images"
    LIST_WORKLOADS = "list_workloads"
    REFRESH_WORKLOADS = "refresh_workloads"
    LIST_WORKLOAD_PODS = "list_workload_pods"


# =============================================================================
# Status Enums
# =============================================================================


class WorkloadStatus(Enum):
    """Readiness of a deployment derived from its replica counts."""

    READY = "Ready"
    PARTIAL = "Partial"
    NOT_READY = "NotReady"


class ImageSource(Enum):
    """Where the image catalog was read from."""

    REGISTRY = "registry"
    DOCKER = "docker"


__all__ = [
    "ImageSource",
    "ModalStep",
    "OperationKind",
    "Tab",
    "ViewMode",
    "WorkloadStatus",
]
