"""Cluster controller package."""

from lcrview.controllers.cluster.controller import (
    ClusterController,
    api_server_url,
    find_kubectl,
)

__all__ = ["ClusterController", "api_server_url", "find_kubectl"]
