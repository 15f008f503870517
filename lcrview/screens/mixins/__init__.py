"""Screen mixins."""

from lcrview.screens.mixins.worker_mixin import CommandCompleted, WorkerMixin

__all__ = ["CommandCompleted", "WorkerMixin"]
