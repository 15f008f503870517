"""Commit controller package."""

from lcrview.controllers.commits.controller import CommitController, parse_git_log
from lcrview.controllers.commits.github_client import GitHubClient

__all__ = ["CommitController", "GitHubClient", "parse_git_log"]
