"""Image controller package."""

from lcrview.controllers.images.controller import ImageController, parse_docker_images
from lcrview.controllers.images.registry_client import RegistryClient, registry_image_id

__all__ = [
    "ImageController",
    "RegistryClient",
    "parse_docker_images",
    "registry_image_id",
]
