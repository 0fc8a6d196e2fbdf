"""Shell command execution for git queries."""

from __future__ import annotations

import subprocess

from diff_reviewer.errors import CommandError
from diff_reviewer.output import report_error


def run_command(command: str, *, strict_stderr: bool = True) -> str:
    """Run a shell command to completion and return its stripped stdout.

    With ``strict_stderr`` enabled, any output on stderr is treated as a failure
    even when the exit status is zero. Tools that print benign warnings to stderr
    will therefore abort the run. There is no timeout: a hanging command blocks
    the caller indefinitely.
    """
    if not command.strip():
        raise ValueError("Command must be a non-empty string.")

    try:
        completed = subprocess.run(
            command,
            shell=True,
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as error:
        report_error(f"Error running command: {command}", error)
        raise CommandError(
            f"Failed to start command '{command}': {error}",
            command=command,
        ) from error

    if completed.returncode != 0:
        report_error(f"Error running command: {command}", completed.stderr)
        raise CommandError(
            f"Command '{command}' exited with status {completed.returncode}.",
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    if strict_stderr and completed.stderr:
        report_error(f"Command resulted in stderr: {command}", completed.stderr)
        raise CommandError(
            f"Command '{command}' wrote to stderr: {completed.stderr.strip()}",
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )

    return completed.stdout.strip()
