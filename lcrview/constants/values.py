"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "lcrview"

BANNER: Final = """\
██╗            ██████╗           ██████╗
██║           ██╔════╝           ██╔══██╗
██║           ██║                ██████╔╝
██║           ██║                ██╔══██╗
███████╗      ╚██████╗           ██║  ██║
╚══════╝ ocal  ╚═════╝ container ╚═╝  ╚═╝ egistry"""

# ============================================================================
# Sentinels
# ============================================================================

NO_DATA: Final = "No data available"
NOT_AVAILABLE: Final = "N/A"
ELLIPSIS: Final = "..."
DANGLING_IMAGE_REF: Final = "<none>:<none>"
CREATE_NEW_LABEL: Final = "[Create New Deployment]"
LOADING_WORKLOADS: Final = "Loading deployments..."

DETAIL_ERROR_KEY: Final = "Error"
DETAIL_ERROR_VALUE: Final = "Failed to load pod details"
DETAIL_REASON_KEY: Final = "Reason"

# ============================================================================
# Column schemas (title, width)
# ============================================================================

COMMIT_COLUMNS: Final[tuple[tuple[str, int], ...]] = (
    ("Commit SHA", 42),
    ("PR Description", 40),
    ("PushedAt", 20),
)

IMAGE_COLUMNS: Final[tuple[tuple[str, int], ...]] = (
    ("Image ID", 20),
    ("Repository", 30),
    ("Tag", 15),
    ("Size", 12),
    ("Created", 25),
)

WORKLOAD_COLUMNS: Final[tuple[tuple[str, int], ...]] = (
    ("Pod Name", 35),
    ("Namespace", 15),
    ("Status", 12),
    ("Restarts", 10),
    ("Age", 15),
    ("Node", 20),
)

DETAIL_COLUMNS: Final[tuple[tuple[str, int], ...]] = (
    ("Key", 35),
    ("Value", 70),
)

# Detail keys rendered first, in this order; anything else follows sorted.
DETAIL_KEY_ORDER: Final[tuple[str, ...]] = (
    "Name",
    "Namespace",
    "Status",
    "Node",
    "Pod IP",
    "Host IP",
    "Created",
    "Start Time",
    "Service Account",
    "Restart Policy",
    "DNS Policy",
    "Container Name",
    "Container Image",
    "Image Pull Policy",
    "Container Ports",
    "CPU Request",
    "Memory Request",
    "CPU Limit",
    "Memory Limit",
    "Container Ready",
    "Restart Count",
    "Container ID",
    "Ready Condition",
    "Scheduled Condition",
    "Initialized Condition",
    "Labels",
    "Annotations",
)

# ============================================================================
# Instructions
# ============================================================================

MAIN_INSTRUCTIONS: Final = (
    "1-3 switch tabs, Tab to cycle, Enter to deploy/view, Ctrl+D delete, "
    "Ctrl+P pull, r refresh, q or Esc to quit"
)
DETAIL_INSTRUCTIONS: Final = "Press Esc to go back to main view"
SELECT_INSTRUCTIONS: Final = "Up/Down to navigate, Enter/1 to select, 2 to cancel, Esc to close"
CREATE_INSTRUCTIONS: Final = "Press 1 to create, 2 to go back, or Esc to cancel"
UPDATE_INSTRUCTIONS: Final = "Press 1 to confirm, 2 to go back, or Esc to cancel"

# ============================================================================
# Image references
# ============================================================================

KNOWN_REGISTRY_HOSTS: Final[tuple[str, ...]] = (
    "localhost:5000",
    "host.minikube.internal:5000",
)
CONTAINER_MARKER_FILE: Final = "/.dockerenv"

__all__ = [
    "APP_TITLE",
    "BANNER",
    "COMMIT_COLUMNS",
    "CONTAINER_MARKER_FILE",
    "CREATE_INSTRUCTIONS",
    "CREATE_NEW_LABEL",
    "DANGLING_IMAGE_REF",
    "DETAIL_COLUMNS",
    "DETAIL_ERROR_KEY",
    "DETAIL_ERROR_VALUE",
    "DETAIL_INSTRUCTIONS",
    "DETAIL_KEY_ORDER",
    "DETAIL_REASON_KEY",
    "ELLIPSIS",
    "IMAGE_COLUMNS",
    "KNOWN_REGISTRY_HOSTS",
    "LOADING_WORKLOADS",
    "MAIN_INSTRUCTIONS",
    "NOT_AVAILABLE",
    "NO_DATA",
    "SELECT_INSTRUCTIONS",
    "UPDATE_INSTRUCTIONS",
    "WORKLOAD_COLUMNS",
]
