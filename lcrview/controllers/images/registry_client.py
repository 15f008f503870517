"""Docker registry v2 HTTP client."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lcrview.constants.timeouts import REGISTRY_REQUEST_TIMEOUT
from lcrview.controllers.errors import RegistryError
from lcrview.models.records import ImageRecord
from lcrview.utils.formatting import format_bytes, format_timestamp

logger = logging.getLogger(__name__)

MANIFEST_V2_MEDIA_TYPE = "application/vnd.docker.distribution.manifest.v2+json"
OCI_MANIFEST_MEDIA_TYPE = "application/vnd.oci.image.manifest.v1+json"
REGISTRY_ID_PREFIX = "registry-"


class RegistryClient:
    """Reads and deletes images through a registry's v2 API.

    Blocking; callers run it in a worker thread.
    """

    def __init__(
        self,
        registry_host: str,
        timeout: float = REGISTRY_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.registry_host = registry_host
        self.timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return f"http://{self.registry_host}/v2"

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.base_url,
            timeout=self.timeout,
            transport=self._transport,
        )

    @staticmethod
    def _get_json(client: httpx.Client, path: str, **kwargs: Any) -> dict[str, Any]:
        try:
            response = client.get(path, **kwargs)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise RegistryError(
                f"Registry returned {exc.response.status_code} for {path}"
            ) from exc
        except httpx.HTTPError as exc:
            raise RegistryError(f"Registry request failed for {path}: {exc}") from exc
        except ValueError as exc:
            raise RegistryError(f"Registry returned invalid JSON for {path}") from exc
        if not isinstance(payload, dict):
            raise RegistryError(f"Registry returned an unexpected payload for {path}")
        return payload

    def ping(self) -> bool:
        try:
            with self._client() as client:
                response = client.get("/")
        except httpx.HTTPError:
            return False
        return response.status_code in (200, 401)

    def list_images(self) -> list[ImageRecord]:
        """Return one record per repository tag in the catalog.

        Size and creation time are best effort; a failing manifest lookup
        yields ``Unknown`` instead of aborting the listing.

        Raises:
            RegistryError: The catalog itself could not be read.
        """
        images: list[ImageRecord] = []
        with self._client() as client:
            catalog = self._get_json(client, "/_catalog")
            for repository in catalog.get("repositories") or []:
                try:
                    tags_payload = self._get_json(client, f"/{repository}/tags/list")
                except RegistryError:
                    logger.warning("Skipping repository %s: tags unavailable", repository)
                    continue
                for tag in tags_payload.get("tags") or []:
                    size, created_at = self._describe(client, repository, tag)
                    images.append(
                        ImageRecord(
                            id=registry_image_id(repository, tag),
                            repository=f"{self.registry_host}/{repository}",
                            tag=f"{self.registry_host}/{repository}:{tag}",
                            size=size,
                            created_at=created_at,
                        )
                    )
        return images

    def _manifest(
        self, client: httpx.Client, repository: str, reference: str
    ) -> tuple[dict[str, Any], str]:
        try:
            response = client.get(
                f"/{repository}/manifests/{reference}",
                headers={"Accept": f"{MANIFEST_V2_MEDIA_TYPE}, {OCI_MANIFEST_MEDIA_TYPE}"},
            )
            response.raise_for_status()
            return response.json(), response.headers.get("Docker-Content-Digest", "")
        except (httpx.HTTPError, ValueError) as exc:
            raise RegistryError(f"Manifest unavailable for {repository}:{reference}") from exc

    def _describe(self, client: httpx.Client, repository: str, tag: str) -> tuple[str, str]:
        try:
            manifest, _digest = self._manifest(client, repository, tag)
        except RegistryError:
            logger.warning("No manifest for %s:%s", repository, tag)
            return "Unknown", "Unknown"

        config = manifest.get("config") or {}
        total = int(config.get("size", 0) or 0)
        total += sum(int(layer.get("size", 0) or 0) for layer in manifest.get("layers") or [])

        created_at = "Unknown"
        if config.get("digest"):
            try:
                blob = self._get_json(client, f"/{repository}/blobs/{config['digest']}")
            except RegistryError:
                logger.warning("No config blob for %s:%s", repository, tag)
            else:
                formatted = format_timestamp(blob.get("created"))
                if formatted != "N/A":
                    created_at = formatted
        return format_bytes(total), created_at

    def delete_image(self, repository: str, tag: str) -> None:
        """Delete a tag's manifest; the registry must allow deletes.

        Raises:
            RegistryError: The manifest could not be resolved or deleted.
        """
        with self._client() as client:
            _manifest, digest = self._manifest(client, repository, tag)
            if not digest:
                raise RegistryError(f"Registry did not report a digest for {repository}:{tag}")
            try:
                response = client.delete(f"/{repository}/manifests/{digest}")
                response.raise_for_status()
            except httpx.HTTPStatusError as exc:
                if exc.response.status_code == 405:
                    raise RegistryError("Registry does not allow deletes") from exc
                raise RegistryError(
                    f"Registry returned {exc.response.status_code} deleting {repository}:{tag}"
                ) from exc
            except httpx.HTTPError as exc:
                raise RegistryError(f"Delete failed for {repository}:{tag}: {exc}") from exc


def registry_image_id(repository: str, tag: str) -> str:
    return f"{REGISTRY_ID_PREFIX}{repository}-{tag}"
