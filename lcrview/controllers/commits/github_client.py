"""GitHub REST client for commit history."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from lcrview.constants.defaults import GITHUB_API_URL
from lcrview.constants.timeouts import GITHUB_REQUEST_TIMEOUT
from lcrview.controllers.errors import SourceControlError
from lcrview.models.records import CommitRecord
from lcrview.utils.formatting import format_timestamp

logger = logging.getLogger(__name__)


def first_line(message: str) -> str:
    return message.strip().splitlines()[0].strip() if message.strip() else ""


class GitHubClient:
    """Lists the latest commits of one branch."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str = "",
        api_url: str = GITHUB_API_URL,
        timeout: float = GITHUB_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.owner = owner
        self.repo = repo
        self._token = token
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def list_commits(self, branch: str, limit: int) -> list[CommitRecord]:
        """Return up to ``limit`` commits of ``branch``, newest first.

        Raises:
            SourceControlError: The API call failed or returned bad data.
        """
        path = f"/repos/{self.owner}/{self.repo}/commits"
        try:
            with httpx.Client(
                base_url=self.api_url,
                headers=self._headers(),
                timeout=self.timeout,
                transport=self._transport,
            ) as client:
                response = client.get(path, params={"sha": branch, "per_page": limit})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPStatusError as exc:
            raise SourceControlError(
                f"GitHub returned {exc.response.status_code} for {self.owner}/{self.repo}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SourceControlError(f"GitHub request failed: {exc}") from exc
        except ValueError as exc:
            raise SourceControlError("GitHub returned invalid JSON") from exc

        if not isinstance(payload, list):
            raise SourceControlError("GitHub returned an unexpected payload")
        return [self._parse_commit(item) for item in payload[:limit]]

    @staticmethod
    def _parse_commit(item: dict[str, Any]) -> CommitRecord:
        commit = item.get("commit") or {}
        author = commit.get("author") or {}
        return CommitRecord(
            sha=item.get("sha", ""),
            description=first_line(commit.get("message", "")),
            pushed_at=format_timestamp(author.get("date")),
        )
