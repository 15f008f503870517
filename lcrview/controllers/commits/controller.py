"""Commit controller: GitHub when configured, the local git log otherwise."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from lcrview.constants.timeouts import GIT_COMMAND_TIMEOUT
from lcrview.controllers.base import BaseController
from lcrview.controllers.commits.github_client import GitHubClient, first_line
from lcrview.controllers.errors import CollaboratorError, SourceControlError
from lcrview.models.records import CommitRecord
from lcrview.models.state.app_settings import AppSettings
from lcrview.utils.formatting import format_timestamp

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = "\x1f"
GIT_LOG_FORMAT = f"%H{_FIELD_SEPARATOR}%s{_FIELD_SEPARATOR}%cI"


def parse_git_log(output: str) -> list[CommitRecord]:
    commits: list[CommitRecord] = []
    for line in output.splitlines():
        parts = line.split(_FIELD_SEPARATOR)
        if len(parts) != 3 or not parts[0]:
            continue
        sha, subject, committed_at = parts
        commits.append(
            CommitRecord(
                sha=sha,
                description=first_line(subject),
                pushed_at=format_timestamp(committed_at),
            )
        )
    return commits


class CommitController(BaseController):
    """Commit history source, fetched once at startup."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        github_client: GitHubClient | None = None,
    ) -> None:
        super().__init__()
        self.settings = settings or AppSettings()
        self._github = github_client
        if self._github is None and self.settings.github_owner and self.settings.github_repo:
            self._github = GitHubClient(
                self.settings.github_owner,
                self.settings.github_repo,
                self.settings.github_token,
            )

    @property
    def uses_github(self) -> bool:
        return self._github is not None

    async def check_connection(self) -> bool:
        try:
            commits = await self.list_commits(limit=1)
        except CollaboratorError as exc:
            logger.warning("Commit source check failed: %s", exc)
            return False
        return bool(commits)

    async def fetch_all(self) -> dict[str, Any]:
        return {"commits": await self.list_commits()}

    async def list_commits(self, limit: int | None = None) -> list[CommitRecord]:
        count = limit or self.settings.commit_limit
        if self._github is not None:
            return await asyncio.to_thread(
                self._github.list_commits, self.settings.commit_branch, count
            )

        try:
            output = await self._run_command(
                (
                    self.settings.git_path,
                    "-C",
                    self.settings.repository_path,
                    "log",
                    "-n",
                    str(count),
                    f"--format={GIT_LOG_FORMAT}",
                ),
                GIT_COMMAND_TIMEOUT,
            )
        except CollaboratorError as exc:
            raise SourceControlError(f"git log failed: {exc}") from exc
        return parse_git_log(output)
