"""Typer CLI for the diff reviewer."""

from __future__ import annotations

import typer

from diff_reviewer.agent import review_changes
from diff_reviewer.config import load_settings
from diff_reviewer.errors import DiffReviewerError
from diff_reviewer.output import describe_failure, report_error, report_progress

app = typer.Typer(
    help="Review the current branch's git diff with a chat-completion model.",
    add_completion=False,
)


@app.command()
def review_command() -> None:
    """Review the changes on the current branch against the default branch."""
    settings = load_settings()
    if settings.api_key_source is not None:
        report_progress(f"Using API key from {settings.api_key_source}.")
    try:
        review_changes(settings)
    except DiffReviewerError as error:
        report_error("Failed to get code review for changes", describe_failure(error))
        raise typer.Exit(code=1) from error


def main() -> None:
    app()
