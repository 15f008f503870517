"""Deployment manifests and image patches applied by the cluster controller."""

from __future__ import annotations

import json
from typing import Any

import yaml

from lcrview.constants.defaults import (
    WORKLOAD_CONTAINER_NAME,
    WORKLOAD_CONTAINER_PORT,
    WORKLOAD_REPLICAS,
)
from lcrview.constants.values import KNOWN_REGISTRY_HOSTS


def resolve_image_reference(image_ref: str, cluster_registry_host: str) -> str:
    """Point an image reference at the registry the cluster pulls from.

    References already naming a known local registry are kept; anything else
    is rewritten to ``<cluster_registry_host>/<name:tag>``.
    """
    known_hosts = (*KNOWN_REGISTRY_HOSTS, cluster_registry_host)
    if any(host and host in image_ref for host in known_hosts):
        return image_ref
    name_and_tag = image_ref.rsplit("/", 1)[-1]
    return f"{cluster_registry_host}/{name_and_tag}"


def build_deployment_manifest(
    name: str,
    namespace: str,
    image: str,
    image_pull_policy: str,
) -> dict[str, Any]:
    """Return an ``apps/v1`` Deployment running one container of ``image``."""
    labels = {"app": name}
    return {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": name, "namespace": namespace, "labels": labels},
        "spec": {
            "replicas": WORKLOAD_REPLICAS,
            "selector": {"matchLabels": labels},
            "template": {
                "metadata": {"labels": labels},
                "spec": {
                    "containers": [
                        {
                            "name": WORKLOAD_CONTAINER_NAME,
                            "image": image,
                            "imagePullPolicy": image_pull_policy,
                            "ports": [{"containerPort": WORKLOAD_CONTAINER_PORT}],
                        }
                    ]
                },
            },
        },
    }


def render_manifest(manifest: dict[str, Any]) -> str:
    return yaml.safe_dump(manifest, sort_keys=False)


def build_image_patch(image: str, image_pull_policy: str) -> str:
    """JSON patch replacing the first container's image and pull policy."""
    container_path = "/spec/template/spec/containers/0"
    return json.dumps(
        [
            {"op": "replace", "path": f"{container_path}/image", "value": image},
            {
                "op": "replace",
                "path": f"{container_path}/imagePullPolicy",
                "value": image_pull_policy,
            },
        ]
    )
