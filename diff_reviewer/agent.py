"""Review orchestration entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from diff_reviewer import git
from diff_reviewer.config import Settings
from diff_reviewer.errors import CommandError, NotAGitRepoError, ReviewRequestError
from diff_reviewer.output import report_error, report_info, report_progress, report_result
from diff_reviewer.reviewer import build_openai_client, request_code_review
from diff_reviewer.schema import ReviewStatus

NO_CHANGES_MESSAGE = "No changes found between the current branch and the default branch."


@dataclass(frozen=True, slots=True)
class ReviewOutcome:
    """Result of a completed run."""

    status: ReviewStatus
    diff: str
    review: str | None = None


def verify_git_repository(*, strict_stderr: bool = True) -> None:
    """Fail with ``NotAGitRepoError`` unless running inside a git work tree."""
    try:
        inside = git.is_inside_work_tree(strict_stderr=strict_stderr)
    except CommandError as error:
        raise NotAGitRepoError("Not a git repository") from error
    if not inside:
        raise NotAGitRepoError("Not a git repository")


def review_changes(settings: Settings, *, client: httpx.Client | None = None) -> ReviewOutcome:
    """Review the current branch's changes against the default branch.

    Stages run strictly in order and the first failure aborts the run. An empty
    diff ends the run without contacting the review endpoint.
    """
    strict = settings.strict_stderr
    verify_git_repository(strict_stderr=strict)

    default_branch = git.get_default_branch(strict_stderr=strict)
    current_branch = git.get_current_branch(strict_stderr=strict)
    diff = git.get_diff(default_branch, current_branch, strict_stderr=strict)

    if not diff:
        report_info(NO_CHANGES_MESSAGE)
        return ReviewOutcome(status=ReviewStatus.NO_CHANGES, diff=diff)

    report_info(diff)
    report_progress("Getting code review...")
    try:
        if client is not None:
            review = request_code_review(client=client, diff=diff, review=settings.review)
        else:
            with build_openai_client(settings) as owned_client:
                review = request_code_review(
                    client=owned_client, diff=diff, review=settings.review
                )
    except ReviewRequestError as error:
        report_error("Failed to get code review", error)
        raise

    report_result(review)
    return ReviewOutcome(status=ReviewStatus.REVIEWED, diff=diff, review=review)
