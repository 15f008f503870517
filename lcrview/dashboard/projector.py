"""Row projector: pure mappings from domain records to fixed-width rows."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from lcrview.constants.defaults import WORKLOAD_NAME_DEFAULT, WORKLOAD_NAME_PREFIX
from lcrview.constants.enums import Tab
from lcrview.constants.values import (
    COMMIT_COLUMNS,
    DETAIL_COLUMNS,
    DETAIL_ERROR_KEY,
    DETAIL_ERROR_VALUE,
    DETAIL_KEY_ORDER,
    DETAIL_REASON_KEY,
    ELLIPSIS,
    IMAGE_COLUMNS,
    NO_DATA,
    NOT_AVAILABLE,
    WORKLOAD_COLUMNS,
)
from lcrview.models.records import CommitRecord, ImageRecord, PodSummary
from lcrview.models.rows import CommitRow, DetailRow, ImageRow, Row, WorkloadRow

TAB_COLUMNS: dict[Tab, tuple[tuple[str, int], ...]] = {
    Tab.COMMITS: COMMIT_COLUMNS,
    Tab.IMAGES: IMAGE_COLUMNS,
    Tab.WORKLOADS: WORKLOAD_COLUMNS,
}

_NAME_SEPARATORS = (":", "/", "_", ".")


def truncate(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` characters, the ellipsis included."""
    if width <= 0:
        return ""
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def _widths(columns: tuple[tuple[str, int], ...]) -> list[int]:
    return [width for _title, width in columns]


# ============================================================================
# Image references
# ============================================================================


def strip_registry_host(reference: str) -> str:
    """Drop a leading ``host[:port]/`` component, as docker defines one."""
    first, separator, rest = reference.partition("/")
    if separator and ("." in first or ":" in first or first == "localhost"):
        return rest
    return reference


def split_image_reference(reference: str) -> tuple[str, str]:
    """Return (repository, tag) for display; untagged references are ``latest``."""
    if not reference or reference == NOT_AVAILABLE:
        return NOT_AVAILABLE, NOT_AVAILABLE
    path = strip_registry_host(reference)
    colon = path.rfind(":")
    if colon > 0:
        return path[:colon], path[colon + 1 :]
    return path, "latest"


def image_reference(image: ImageRecord) -> str:
    """The reference the wizard deploys: the tag, else the image id."""
    if image.tag and image.tag != NOT_AVAILABLE:
        return image.tag
    return image.id


def generate_workload_name(image_ref: str) -> str:
    """Derive a Kubernetes-safe deployment name from an image reference.

    >>> generate_workload_name("localhost:5000/app:v1")
    'app-v1'
    """
    name = strip_registry_host(image_ref).lower()
    for separator in _NAME_SEPARATORS:
        name = name.replace(separator, "-")
    name = name.strip("-")
    if not name or name == "latest":
        name = WORKLOAD_NAME_DEFAULT
    if not ("a" <= name[0] <= "z"):
        name = WORKLOAD_NAME_PREFIX + name
    return name


# ============================================================================
# Tab rows
# ============================================================================


def project_commits(commits: Iterable[CommitRecord]) -> tuple[CommitRow, ...]:
    sha_w, desc_w, pushed_w = _widths(COMMIT_COLUMNS)
    rows = tuple(
        CommitRow(
            truncate(commit.sha, sha_w),
            truncate(commit.description, desc_w),
            truncate(commit.pushed_at, pushed_w),
        )
        for commit in commits
    )
    return rows or (CommitRow(NO_DATA, "", ""),)


def project_images(images: Iterable[ImageRecord]) -> tuple[ImageRow, ...]:
    id_w, repo_w, tag_w, size_w, created_w = _widths(IMAGE_COLUMNS)
    rows = []
    for image in images:
        repository, tag = split_image_reference(image.tag)
        rows.append(
            ImageRow(
                truncate(image.id, id_w),
                truncate(repository, repo_w),
                truncate(tag, tag_w),
                truncate(image.size, size_w),
                truncate(image.created_at, created_w),
            )
        )
    return tuple(rows) or (ImageRow(NO_DATA, "", "", "", ""),)


def project_workloads(pods: Iterable[PodSummary]) -> tuple[WorkloadRow, ...]:
    name_w, ns_w, status_w, restarts_w, age_w, node_w = _widths(WORKLOAD_COLUMNS)
    rows = tuple(
        WorkloadRow(
            truncate(pod.name, name_w),
            truncate(pod.namespace, ns_w),
            truncate(pod.status, status_w),
            truncate(str(pod.restarts), restarts_w),
            truncate(pod.age, age_w),
            truncate(pod.node or NOT_AVAILABLE, node_w),
        )
        for pod in pods
    )
    return rows or (WorkloadRow(NO_DATA, "", "", "", "", ""),)


def project_tab(tab: Tab, records: Iterable) -> tuple[Row, ...]:
    if tab is Tab.COMMITS:
        return project_commits(records)
    if tab is Tab.IMAGES:
        return project_images(records)
    return project_workloads(records)


# ============================================================================
# Detail rows
# ============================================================================


def project_detail(details: Mapping[str, str]) -> tuple[DetailRow, ...]:
    """Known keys first in their fixed order, the rest sorted; empty values dropped."""
    key_w, value_w = _widths(DETAIL_COLUMNS)
    present = {
        key: str(value).strip()
        for key, value in details.items()
        if value is not None and str(value).strip()
    }
    ordered = [key for key in DETAIL_KEY_ORDER if key in present]
    ordered += sorted(key for key in present if key not in DETAIL_KEY_ORDER)
    rows = tuple(
        DetailRow(truncate(key, key_w), truncate(present[key], value_w)) for key in ordered
    )
    return rows or (DetailRow(NO_DATA, ""),)


def detail_error_rows(error: str | None = None) -> tuple[DetailRow, ...]:
    rows = [DetailRow(DETAIL_ERROR_KEY, DETAIL_ERROR_VALUE)]
    if error:
        rows.append(DetailRow(DETAIL_REASON_KEY, truncate(error, _widths(DETAIL_COLUMNS)[1])))
    return tuple(rows)
