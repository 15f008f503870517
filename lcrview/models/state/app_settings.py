"""Application settings models."""

from pydantic import BaseModel, ConfigDict, Field

from lcrview.constants.defaults import (
    COMMIT_BRANCH_DEFAULT,
    COMMIT_LIMIT_DEFAULT,
    DOCKER_PATH_DEFAULT,
    GIT_PATH_DEFAULT,
    IMAGE_PULL_POLICY_DEFAULT,
    KUBECTL_PATH_DEFAULT,
    LOG_FILE_DEFAULT,
    LOG_LEVEL_DEFAULT,
    MINIKUBE_PATH_DEFAULT,
    NAMESPACE_DEFAULT,
    REGISTRY_HOST_DEFAULT,
)
from lcrview.constants.limits import COMMIT_LIMIT_MAX, COMMIT_LIMIT_MIN


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Image catalog
    registry_host: str = REGISTRY_HOST_DEFAULT
    docker_path: str = DOCKER_PATH_DEFAULT

    # Cluster
    namespace: str = NAMESPACE_DEFAULT
    kube_context: str | None = None
    kubectl_path: str = KUBECTL_PATH_DEFAULT
    # None picks the minikube or localhost registry at deploy time
    cluster_registry_host: str | None = None
    control_plane: str = ""
    control_plane_port: str = ""
    minikube_path: str = MINIKUBE_PATH_DEFAULT
    image_pull_policy: str = IMAGE_PULL_POLICY_DEFAULT

    # Source control
    github_owner: str = ""
    github_repo: str = ""
    github_token: str = Field(default="", repr=False)
    commit_branch: str = COMMIT_BRANCH_DEFAULT
    commit_limit: int = Field(
        default=COMMIT_LIMIT_DEFAULT, ge=COMMIT_LIMIT_MIN, le=COMMIT_LIMIT_MAX
    )
    git_path: str = GIT_PATH_DEFAULT
    repository_path: str = "."

    # Logging
    log_file: str = LOG_FILE_DEFAULT
    log_level: str = LOG_LEVEL_DEFAULT


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigSaveError(ConfigError):
    """Raised when settings fail to save."""
