"""Image controller for registry and local docker engine operations."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from lcrview.constants.enums import ImageSource
from lcrview.constants.timeouts import CONNECTION_CHECK_TIMEOUT, DOCKER_COMMAND_TIMEOUT
from lcrview.constants.limits import IMAGE_ID_DISPLAY_LENGTH
from lcrview.constants.values import DANGLING_IMAGE_REF, NOT_AVAILABLE
from lcrview.controllers.base import BaseController
from lcrview.controllers.errors import CollaboratorError, summarize_error
from lcrview.controllers.images.registry_client import REGISTRY_ID_PREFIX, RegistryClient
from lcrview.models.records import ImageRecord
from lcrview.models.state.app_settings import AppSettings

logger = logging.getLogger(__name__)

DOCKER_IMAGES_FORMAT = "{{.ID}},{{.Repository}}:{{.Tag}},{{.Size}},{{.CreatedAt}}"


def parse_docker_images(output: str) -> list[ImageRecord]:
    """Parse ``docker images --format`` lines into records."""
    images: list[ImageRecord] = []
    for line in output.splitlines():
        parts = [part.strip() for part in line.split(",", 3)]
        if len(parts) < 4 or not parts[0]:
            continue
        image_id, reference, size, created_at = parts
        tag = NOT_AVAILABLE if not reference or reference == DANGLING_IMAGE_REF else reference
        repository = NOT_AVAILABLE if tag == NOT_AVAILABLE else reference.rsplit(":", 1)[0]
        images.append(
            ImageRecord(
                id=image_id[:IMAGE_ID_DISPLAY_LENGTH],
                repository=repository,
                tag=tag,
                size=size or NOT_AVAILABLE,
                created_at=created_at or NOT_AVAILABLE,
            )
        )
    return images


class ImageController(BaseController):
    """Image catalog reads and image actions.

    The registry catalog is preferred; when it is unreachable or empty the
    local docker engine is listed instead.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        registry_client: RegistryClient | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self._registry = registry_client or RegistryClient(self.settings.registry_host)
        self._registry_refs: dict[str, tuple[str, str]] = {}
        self.last_source: ImageSource | None = None

    async def _run_docker(self, args: tuple[str, ...]) -> str:
        return await self._run_command(
            (self.settings.docker_path, *args), DOCKER_COMMAND_TIMEOUT
        )

    async def check_connection(self) -> bool:
        """Registry reachable, or the docker daemon answering, counts as available."""
        if await asyncio.to_thread(self._registry.ping):
            return True
        try:
            await asyncio.wait_for(
                self._run_docker(("version", "--format", "{{.Server.Version}}")),
                timeout=CONNECTION_CHECK_TIMEOUT,
            )
        except (CollaboratorError, asyncio.TimeoutError) as exc:
            logger.warning("Image source check failed: %s", summarize_error(exc))
            return False
        return True

    async def fetch_all(self) -> dict[str, Any]:
        return {"images": await self.list_images()}

    async def list_images(self) -> list[ImageRecord]:
        try:
            images = await asyncio.to_thread(self._registry.list_images)
        except CollaboratorError as exc:
            logger.warning("Registry catalog unavailable, using docker: %s", exc)
            images = []

        if images:
            self.last_source = ImageSource.REGISTRY
            self._registry_refs = {
                image.id: self._split_registry_reference(image.tag) for image in images
            }
            return images

        output = await self._run_docker(("images", "--format", DOCKER_IMAGES_FORMAT))
        self.last_source = ImageSource.DOCKER
        return parse_docker_images(output)

    def _split_registry_reference(self, reference: str) -> tuple[str, str]:
        path = reference.removeprefix(f"{self.settings.registry_host}/")
        repository, _, tag = path.rpartition(":")
        return repository, tag

    async def delete_image(self, image_id: str) -> None:
        """Delete a registry tag or a local image (``docker rmi -f``)."""
        registry_ref = self._registry_refs.get(image_id)
        if image_id.startswith(REGISTRY_ID_PREFIX) and registry_ref:
            repository, tag = registry_ref
            logger.info("Deleting %s:%s from registry", repository, tag)
            await asyncio.to_thread(self._registry.delete_image, repository, tag)
            return

        logger.info("Removing local image %s", image_id)
        try:
            await self._run_docker(("rmi", "-f", image_id))
        except CollaboratorError as exc:
            raise CollaboratorError(
                summarize_error(exc, f"Failed to delete image {image_id}")
            ) from exc

    async def pull_image(self, image_tag: str) -> None:
        logger.info("Pulling image %s", image_tag)
        try:
            await self._run_docker(("pull", image_tag))
        except CollaboratorError as exc:
            raise CollaboratorError(
                summarize_error(exc, f"Failed to pull image {image_tag}")
            ) from exc
