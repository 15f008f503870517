"""Data controllers: the external collaborators of the dashboard."""

from lcrview.controllers.base import BaseController, WorkerResult
from lcrview.controllers.cluster import ClusterController
from lcrview.controllers.commits import CommitController
from lcrview.controllers.errors import (
    CollaboratorError,
    CommandExecutionError,
    RegistryError,
    SourceControlError,
)
from lcrview.controllers.images import ImageController

__all__ = [
    "BaseController",
    "ClusterController",
    "CollaboratorError",
    "CommandExecutionError",
    "CommitController",
    "ImageController",
    "RegistryError",
    "SourceControlError",
    "WorkerResult",
]
