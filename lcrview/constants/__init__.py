"""Constants module for lcrview.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (sentinels, titles, column schemas)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in lcrview.keyboard module.
"""

from lcrview.constants.defaults import (
    IMAGE_PULL_POLICY_DEFAULT,
    NAMESPACE_DEFAULT,
    REGISTRY_HOST_DEFAULT,
    WORKLOAD_NAME_DEFAULT,
    WORKLOAD_NAME_PREFIX,
)
from lcrview.constants.enums import (
    ImageSource,
    ModalStep,
    OperationKind,
    Tab,
    ViewMode,
    WorkloadStatus,
)
from lcrview.constants.limits import CHROME_HEIGHT, MAX_ROWS_DISPLAY
from lcrview.constants.values import (
    APP_TITLE,
    BANNER,
    NO_DATA,
    NOT_AVAILABLE,
)

__all__ = [
    "APP_TITLE",
    "BANNER",
    "CHROME_HEIGHT",
    "IMAGE_PULL_POLICY_DEFAULT",
    "MAX_ROWS_DISPLAY",
    "NAMESPACE_DEFAULT",
    "NOT_AVAILABLE",
    "NO_DATA",
    "REGISTRY_HOST_DEFAULT",
    "WORKLOAD_NAME_DEFAULT",
    "WORKLOAD_NAME_PREFIX",
    "ImageSource",
    "ModalStep",
    "OperationKind",
    "Tab",
    "ViewMode",
    "WorkloadStatus",
]
