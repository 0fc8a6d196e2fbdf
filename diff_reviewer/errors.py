"""Error types raised by the review pipeline."""

from __future__ import annotations

from typing import Any


class DiffReviewerError(RuntimeError):
    """Base error for every failure that aborts a review run."""


class CommandError(DiffReviewerError):
    """Raised when a shell command exits non-zero or writes to stderr."""

    def __init__(
        self,
        message: str,
        *,
        command: str,
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @classmethod
    def from_command_error(cls, error: CommandError, message: str) -> CommandError:
        """Re-wrap a command failure with stage-specific context."""
        return cls(
            message,
            command=error.command,
            returncode=error.returncode,
            stdout=error.stdout,
            stderr=error.stderr,
        )


class DefaultBranchError(CommandError):
    """Raised when the remote's default branch cannot be resolved."""


class CurrentBranchError(CommandError):
    """Raised when the checked-out branch cannot be resolved."""


class DiffError(CommandError):
    """Raised when git fails to produce a diff."""


class NotAGitRepoError(DiffReviewerError):
    """Raised when the working directory is not inside a git work tree."""


class ReviewRequestError(DiffReviewerError):
    """Raised when the chat-completion request fails."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        error_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_body = error_body


class MissingApiKeyError(ReviewRequestError):
    """Raised when no API key is configured for the review endpoint."""
