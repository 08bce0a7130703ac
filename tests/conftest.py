"""Shared test fixtures for devbranch tests."""

import os
import subprocess
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

WORKFLOW_CONTENT = """name: PCB
on: [push]
jobs:
  kibot:
    runs-on: ubuntu-latest
    env:
      kibot_variant: CHECKED
    steps:
      - uses: actions/checkout@v4
"""

TEMPLATE_CONTENT = """# Commit message template

Signed-off-by: Jane Doe <jane@example.com>
"""


def run_git_cmd(repo: Path, *args: str) -> str:
    """Run a git command in repo for test setup and assertions."""
    result = subprocess.run(
        ["git", *args],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return result.stdout.strip()


@pytest.fixture(name="git")
def git_fixture() -> Callable[..., str]:
    """Git command helper for tests."""
    return run_git_cmd


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def remote_repo(tmp_path: Path) -> Path:
    """Create a bare repository acting as origin."""
    remote = tmp_path / "origin.git"
    subprocess.run(
        ["git", "init", "--bare", str(remote)],
        check=True,
        capture_output=True,
    )
    return remote


@pytest.fixture
def temp_git_repo(tmp_path: Path, remote_repo: Path) -> Generator[Path, None, None]:
    """Create a mainboard-like repository tracking a bare origin.

    The repository is on master with the PCB workflow file (marker set to
    CHECKED), a commit template with a Signed-off-by line and a populated
    production folder, all committed and pushed to origin.
    Changes cwd to the repo directory for the duration of the test.
    """
    repo = tmp_path / "mainboard"
    repo.mkdir()
    run_git_cmd(repo, "init")
    run_git_cmd(repo, "symbolic-ref", "HEAD", "refs/heads/master")
    run_git_cmd(repo, "config", "user.email", "test@test.com")
    run_git_cmd(repo, "config", "user.name", "Test User")
    run_git_cmd(repo, "config", "commit.gpgsign", "false")

    (repo / "README.md").write_text("# Mainboard\n")
    workflows = repo / ".github" / "workflows"
    workflows.mkdir(parents=True)
    (workflows / "pcb.yml").write_text(WORKFLOW_CONTENT)
    (repo / ".github" / ".commit-msg-template").write_text(TEMPLATE_CONTENT)
    production = repo / "production"
    (production / "gerbers").mkdir(parents=True)
    (production / "gerbers" / "board.gbr").write_text("G04 gerber*\n")
    (production / "bom.csv").write_text("ref,value\nR1,10k\n")

    run_git_cmd(repo, "add", ".")
    run_git_cmd(repo, "commit", "-m", "Initial commit")
    run_git_cmd(repo, "remote", "add", "origin", str(remote_repo))
    run_git_cmd(repo, "push", "-u", "origin", "master")

    original_cwd = os.getcwd()
    os.chdir(repo)
    try:
        yield repo
    finally:
        os.chdir(original_cwd)
