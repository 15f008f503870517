"""Timeout constants for the TUI.

All timeout values for registry requests, subprocess calls and startup.
"""

from typing import Final

# ============================================================================
# API/Cluster timeouts (string format for kubectl)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT: Final = "30s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 45
DOCKER_COMMAND_TIMEOUT: Final = 120
GIT_COMMAND_TIMEOUT: Final = 15
MINIKUBE_STATUS_TIMEOUT: Final = 20

# ============================================================================
# HTTP timeouts (float, in seconds)
# ============================================================================

REGISTRY_REQUEST_TIMEOUT: Final = 10.0
GITHUB_REQUEST_TIMEOUT: Final = 15.0

# ============================================================================
# Async operation timeouts (float, in seconds)
# ============================================================================

CONNECTION_CHECK_TIMEOUT: Final = 12.0
STARTUP_LOAD_TIMEOUT: Final = 60.0

__all__ = [
    "CLUSTER_REQUEST_TIMEOUT",
    "CONNECTION_CHECK_TIMEOUT",
    "DOCKER_COMMAND_TIMEOUT",
    "GITHUB_REQUEST_TIMEOUT",
    "GIT_COMMAND_TIMEOUT",
    "KUBECTL_COMMAND_TIMEOUT",
    "MINIKUBE_STATUS_TIMEOUT",
    "REGISTRY_REQUEST_TIMEOUT",
    "STARTUP_LOAD_TIMEOUT",
]
