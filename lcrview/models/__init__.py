"""Data models for lcrview."""

from lcrview.models.records import (
    CommitRecord,
    ImageRecord,
    PodSummary,
    WorkloadSummary,
)
from lcrview.models.rows import CommitRow, DetailRow, ImageRow, Row, WorkloadRow

__all__ = [
    "CommitRecord",
    "CommitRow",
    "DetailRow",
    "ImageRecord",
    "ImageRow",
    "PodSummary",
    "Row",
    "WorkloadRow",
    "WorkloadSummary",
]
