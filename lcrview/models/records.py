"""Domain records returned by the data controllers."""

from pydantic import BaseModel, ConfigDict

from lcrview.constants.values import NOT_AVAILABLE


class CommitRecord(BaseModel):
    """One commit from the source-control provider."""

    model_config = ConfigDict(frozen=True)

    sha: str
    description: str = ""
    pushed_at: str = NOT_AVAILABLE


class ImageRecord(BaseModel):
    """One image from the registry catalog or the local engine.

    ``tag`` holds the full reference (``localhost:5000/app:v1``) or
    ``N/A`` for untagged images.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    repository: str = NOT_AVAILABLE
    tag: str = NOT_AVAILABLE
    size: str = NOT_AVAILABLE
    created_at: str = NOT_AVAILABLE


class PodSummary(BaseModel):
    """One pod as listed on the Workloads tab."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    status: str = "Unknown"
    restarts: int = 0
    age: str = NOT_AVAILABLE
    node: str = NOT_AVAILABLE


class WorkloadSummary(BaseModel):
    """One deployment offered as a wizard target."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str
    status: str
    replica_fraction: str = "0/0"
