"""Branch resolution and diff collection via the git CLI."""

from __future__ import annotations

import shlex

from diff_reviewer.errors import CommandError, CurrentBranchError, DefaultBranchError, DiffError
from diff_reviewer.output import report_error
from diff_reviewer.process import run_command

IS_INSIDE_WORK_TREE_COMMAND = "git rev-parse --is-inside-work-tree"
DEFAULT_BRANCH_COMMAND = "git remote show origin | grep 'HEAD branch' | cut -d' ' -f5"
CURRENT_BRANCH_COMMAND = "git rev-parse --abbrev-ref HEAD"
WORKING_TREE_DIFF_COMMAND = "git diff"


def is_inside_work_tree(*, strict_stderr: bool = True) -> bool:
    """Return whether git reports the working directory as inside a work tree.

    Command failures propagate as ``CommandError``.
    """
    return run_command(IS_INSIDE_WORK_TREE_COMMAND, strict_stderr=strict_stderr) == "true"


def get_default_branch(*, strict_stderr: bool = True) -> str:
    """Return the branch the ``origin`` remote advertises as its HEAD."""
    try:
        branch = run_command(DEFAULT_BRANCH_COMMAND, strict_stderr=strict_stderr)
    except CommandError as error:
        report_error("Failed to get default branch", error)
        raise DefaultBranchError.from_command_error(
            error, f"Failed to get default branch: {error}"
        ) from error

    if not branch:
        message = "Remote 'origin' did not report a HEAD branch."
        report_error("Failed to get default branch", message)
        raise DefaultBranchError(message, command=DEFAULT_BRANCH_COMMAND, returncode=0)
    return branch


def get_current_branch(*, strict_stderr: bool = True) -> str:
    """Return the checked-out branch name (``HEAD`` when detached)."""
    try:
        return run_command(CURRENT_BRANCH_COMMAND, strict_stderr=strict_stderr)
    except CommandError as error:
        report_error("Failed to get current branch", error)
        raise CurrentBranchError.from_command_error(
            error, f"Failed to get current branch: {error}"
        ) from error


def build_diff_command(default_branch: str, current_branch: str) -> str:
    """Pick the working-tree diff or the three-dot branch diff."""
    default_branch = default_branch.strip()
    current_branch = current_branch.strip()
    if default_branch == current_branch:
        return WORKING_TREE_DIFF_COMMAND
    # Branch names come from the remote and the shell runs this command.
    return f"git diff {shlex.quote(current_branch)}...{shlex.quote(default_branch)}"


def get_diff(default_branch: str, current_branch: str, *, strict_stderr: bool = True) -> str:
    """Collect the diff to review. An empty string means there is nothing to review."""
    command = build_diff_command(default_branch, current_branch)
    try:
        return run_command(command, strict_stderr=strict_stderr)
    except CommandError as error:
        report_error("Failed to get diff", error)
        raise DiffError.from_command_error(error, f"Failed to get diff: {error}") from error
