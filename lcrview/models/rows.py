"""Display-ready table rows, one variant per tab."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class CommitRow:
    sha: str
    description: str
    pushed_at: str

    def cells(self) -> tuple[str, ...]:
        return astuple(self)


@dataclass(frozen=True)
class ImageRow:
    id: str
    repository: str
    tag: str
    size: str
    created_at: str

    def cells(self) -> tuple[str, ...]:
        return astuple(self)


@dataclass(frozen=True)
class WorkloadRow:
    name: str
    namespace: str
    status: str
    restarts: str
    age: str
    node: str

    def cells(self) -> tuple[str, ...]:
        return astuple(self)


@dataclass(frozen=True)
class DetailRow:
    key: str
    value: str

    def cells(self) -> tuple[str, ...]:
        return astuple(self)


Row = CommitRow | ImageRow | WorkloadRow | DetailRow
