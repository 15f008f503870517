"""Exceptions raised by the data controllers."""

from __future__ import annotations

from lcrview.constants.limits import ERROR_SUMMARY_MAX_LENGTH


class CollaboratorError(Exception):
    """Base exception for failures of an external data source or action."""


class CommandExecutionError(CollaboratorError):
    """A subprocess (kubectl, docker, git) exited unsuccessfully."""

    def __init__(self, command: str, detail: str, returncode: int | None = None) -> None:
        self.command = command
        self.detail = detail
        self.returncode = returncode
        super().__init__(detail or f"{command} command failed")


class RegistryError(CollaboratorError):
    """The container registry HTTP API failed or returned bad data."""


class SourceControlError(CollaboratorError):
    """The source-control provider failed or returned bad data."""


_PREFERRED_TOKENS = (
    "unable to connect to the server",
    "you must be logged in",
    "context deadline exceeded",
    "timed out",
    "certificate",
    "no such host",
    "forbidden",
    "unauthorized",
    "not found",
    "already exists",
    "connection refused",
)


def summarize_error(error: BaseException | str, fallback: str = "Operation failed") -> str:
    """Extract a concise, user-facing line from multi-line tool output."""
    raw_message = str(error).strip()
    lines = [line.strip() for line in raw_message.splitlines() if line.strip()]
    if not lines:
        return fallback

    selected_line = lines[-1]
    for line in reversed(lines):
        lower_line = line.lower()
        if line.lower().startswith("error") or any(
            token in lower_line for token in _PREFERRED_TOKENS
        ):
            selected_line = line
            break

    cleaned = selected_line
    for prefix in ("Error from server", "error:", "Error:", "Error response from daemon:"):
        cleaned = cleaned.removeprefix(prefix).strip()
    cleaned = cleaned.lstrip(":").strip()
    if len(cleaned) > ERROR_SUMMARY_MAX_LENGTH:
        return f"{cleaned[: ERROR_SUMMARY_MAX_LENGTH - 3].rstrip()}..."
    return cleaned or fallback


__all__ = [
    "CollaboratorError",
    "CommandExecutionError",
    "RegistryError",
    "SourceControlError",
    "summarize_error",
]
