"""Coloured console reporting for review runs."""

from __future__ import annotations

import json

import typer

from diff_reviewer.errors import DiffReviewerError, ReviewRequestError

INFO_COLOR = typer.colors.YELLOW
PROGRESS_COLOR = typer.colors.GREEN
ERROR_COLOR = typer.colors.RED
RESULT_COLOR = typer.colors.BRIGHT_RED


def report_info(message: str) -> None:
    """Print informational text such as the collected diff."""
    typer.secho(message, fg=INFO_COLOR)


def report_progress(message: str) -> None:
    typer.secho(message, fg=PROGRESS_COLOR)


def report_error(message: str, detail: object | None = None) -> None:
    """Print a red diagnostic line to stderr, followed by optional detail."""
    typer.secho(message, fg=ERROR_COLOR, err=True)
    if detail is not None and str(detail).strip():
        typer.echo(str(detail).rstrip(), err=True)


def report_result(review: str) -> None:
    typer.secho(review, fg=RESULT_COLOR)


def describe_failure(error: DiffReviewerError) -> str:
    """Render a failure for the final diagnostic, keeping remote error payloads."""
    description = f"{type(error).__name__}: {error}"
    if isinstance(error, ReviewRequestError) and error.error_body is not None:
        formatted_body = format_error_body(error.error_body)
        if formatted_body not in description:
            description += f"\n{formatted_body}"
    return description


def format_error_body(error_body: object) -> str:
    """Pretty-print a structured error payload returned by the endpoint."""
    if isinstance(error_body, str):
        return error_body
    try:
        return json.dumps(error_body, indent=2, sort_keys=True)
    except (TypeError, ValueError):
        return repr(error_body)
