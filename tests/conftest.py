"""Shared pytest fixtures and test-run configuration."""

from __future__ import annotations

import os
import shutil
import subprocess
from pathlib import Path

import pytest

GIT_AVAILABLE = shutil.which("git") is not None


def pytest_addoption(parser: pytest.Parser) -> None:
    """Add custom pytest options for integration test execution."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run tests marked as integration (external dependencies).",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly enabled."""
    run_integration = config.getoption("--run-integration")
    env_enabled = os.getenv("RUN_INTEGRATION_TESTS") == "1"
    if run_integration or env_enabled:
        return

    skip_marker = pytest.mark.skip(
        reason=(
            "Integration tests are disabled by default. "
            "Use --run-integration or set RUN_INTEGRATION_TESTS=1."
        )
    )
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_marker)


def _git(cwd: Path, *args: str) -> None:
    """Run a git setup command, failing the test on error."""
    subprocess.run(
        [
            "git",
            "-c",
            "user.name=Test User",
            "-c",
            "user.email=test@example.com",
            "-c",
            "init.defaultBranch=main",
            *args,
        ],
        cwd=cwd,
        check=True,
        capture_output=True,
    )


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty directory that git will not search above."""
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def git_repo(isolated_cwd: Path) -> Path:
    """Create a git repository with one committed file and chdir into it."""
    if not GIT_AVAILABLE:
        pytest.skip("git executable is not available.")
    _git(isolated_cwd, "init", "--quiet")
    (isolated_cwd / "app.py").write_text("print('hello')\n", encoding="utf-8")
    _git(isolated_cwd, "add", "app.py")
    _git(isolated_cwd, "commit", "--quiet", "-m", "Initial commit")
    return isolated_cwd


def _commit_file(repo: Path, name: str, content: str, message: str) -> None:
    (repo / name).write_text(content, encoding="utf-8")
    _git(repo, "add", name)
    _git(repo, "commit", "--quiet", "-m", message)


@pytest.fixture
def clone_upstream(isolated_cwd: Path, monkeypatch: pytest.MonkeyPatch):
    """Return a factory that clones a local upstream whose HEAD is ``branch``.

    Inside the clone, ``feature`` forks from the default branch with its own
    commit, then the default branch gets one more commit. The factory leaves
    ``feature`` checked out and chdirs into the clone.
    """
    if not GIT_AVAILABLE:
        pytest.skip("git executable is not available.")

    def _clone(branch: str) -> Path:
        upstream = isolated_cwd / "upstream"
        upstream.mkdir()
        _git(upstream, "init", "--quiet")
        _git(upstream, "symbolic-ref", "HEAD", f"refs/heads/{branch}")
        _commit_file(upstream, "app.py", "print('hello')\n", "Initial commit")

        clone = isolated_cwd / "clone"
        _git(isolated_cwd, "clone", "--quiet", str(upstream), str(clone))
        _git(clone, "checkout", "--quiet", "-b", "feature")
        _commit_file(clone, "feature.py", "FEATURE_FLAG = True\n", "Add feature flag")
        _git(clone, "checkout", "--quiet", branch)
        _commit_file(clone, "app.py", "print('hello from default')\n", "Update greeting")
        _git(clone, "checkout", "--quiet", "feature")
        monkeypatch.chdir(clone)
        return clone

    return _clone
