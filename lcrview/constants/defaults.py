"""Default values for settings and generated resources."""

from typing import Final

# ============================================================================
# Registry / cluster defaults
# ============================================================================

REGISTRY_HOST_DEFAULT: Final = "localhost:5000"
REGISTRY_HOST_IN_CONTAINER: Final = "registry:5000"
CLUSTER_REGISTRY_HOST_DEFAULT: Final = "localhost:5000"
MINIKUBE_REGISTRY_HOST: Final = "host.minikube.internal:5000"
NAMESPACE_DEFAULT: Final = "default"
KUBECTL_PATH_DEFAULT: Final = "kubectl"
DOCKER_PATH_DEFAULT: Final = "docker"
GIT_PATH_DEFAULT: Final = "git"
MINIKUBE_PATH_DEFAULT: Final = "minikube"
ENV_FILE_DEFAULT: Final = ".env"

# ============================================================================
# Generated workloads
# ============================================================================

WORKLOAD_NAME_DEFAULT: Final = "new-deployment"
WORKLOAD_NAME_PREFIX: Final = "app-"
WORKLOAD_CONTAINER_NAME: Final = "app"
WORKLOAD_CONTAINER_PORT: Final = 80
WORKLOAD_REPLICAS: Final = 1
IMAGE_PULL_POLICY_DEFAULT: Final = "Never"

# ============================================================================
# Source control
# ============================================================================

GITHUB_API_URL: Final = "https://api.github.com"
COMMIT_BRANCH_DEFAULT: Final = "master"
COMMIT_LIMIT_DEFAULT: Final = 10
PUSHED_AT_FORMAT: Final = "%Y-%m-%d %H:%M:%S"

# ============================================================================
# Logging
# ============================================================================

LOG_FILE_DEFAULT: Final = "app.log"
LOG_LEVEL_DEFAULT: Final = "INFO"

__all__ = [
    "CLUSTER_REGISTRY_HOST_DEFAULT",
    "COMMIT_BRANCH_DEFAULT",
    "ENV_FILE_DEFAULT",
    "COMMIT_LIMIT_DEFAULT",
    "DOCKER_PATH_DEFAULT",
    "GITHUB_API_URL",
    "GIT_PATH_DEFAULT",
    "IMAGE_PULL_POLICY_DEFAULT",
    "KUBECTL_PATH_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "MINIKUBE_PATH_DEFAULT",
    "MINIKUBE_REGISTRY_HOST",
    "NAMESPACE_DEFAULT",
    "PUSHED_AT_FORMAT",
    "REGISTRY_HOST_DEFAULT",
    "REGISTRY_HOST_IN_CONTAINER",
    "WORKLOAD_CONTAINER_NAME",
    "WORKLOAD_CONTAINER_PORT",
    "WORKLOAD_NAME_DEFAULT",
    "WORKLOAD_NAME_PREFIX",
    "WORKLOAD_REPLICAS",
]
