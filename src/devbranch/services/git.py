"""Git operations for devbranch."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from ..constants import GIT_NETWORK_TIMEOUT, GIT_TIMEOUT

logger = logging.getLogger(__name__)


class GitError(Exception):
    """Git command failed."""

    pass


def run_git(
    *args: str,
    cwd: Path | None = None,
    check: bool = True,
    timeout: int | None = None,
    strip: bool = True,
) -> str:
    """Run git command and return stdout.

    Args:
        *args: Git subcommand and arguments
        cwd: Working directory
        check: Raise GitError on non-zero exit
        timeout: Optional timeout in seconds (default: GIT_TIMEOUT)
        strip: Strip surrounding whitespace from stdout

    Returns:
        Command stdout

    Raises:
        GitError: If the command fails, times out, or git is missing
    """
    timeout = timeout or GIT_TIMEOUT
    logger.debug("git %s", " ".join(args))
    try:
        result = subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except subprocess.TimeoutExpired as e:
        raise GitError(f"git {args[0]} timed out after {timeout} seconds") from e
    except FileNotFoundError:
        raise GitError("git executable not found in PATH") from None

    if check and result.returncode != 0:
        detail = result.stderr.strip() or result.stdout.strip()
        raise GitError(f"git {' '.join(args)} failed: {detail}")
    return result.stdout.strip() if strip else result.stdout


def get_repo_root(cwd: Path | None = None) -> Path:
    """Get git repository root directory.

    Raises:
        GitError: If not inside a git repository
    """
    try:
        return Path(run_git("rev-parse", "--show-toplevel", cwd=cwd))
    except GitError:
        raise GitError("Not a git repository") from None


def get_current_branch(cwd: Path | None = None) -> str:
    """Get current branch name (``HEAD`` when detached)."""
    return run_git("rev-parse", "--abbrev-ref", "HEAD", cwd=cwd)


def get_head_sha(cwd: Path | None = None) -> str:
    """Get full SHA of HEAD."""
    return run_git("rev-parse", "HEAD", cwd=cwd)


def get_status_porcelain(cwd: Path | None = None) -> str:
    """Get `git status --porcelain` output (staged, unstaged and untracked)."""
    return run_git("status", "--porcelain", cwd=cwd, strip=False).rstrip("\n")


def get_pending_paths(cwd: Path | None = None) -> list[str]:
    """Get paths with pending changes, parsed from porcelain status.

    Renames are reported by their new path.
    """
    paths = []
    for line in get_status_porcelain(cwd).splitlines():
        if len(line) < 4:
            continue
        path = line[3:]
        if " -> " in path:
            path = path.split(" -> ", 1)[1]
        paths.append(path)
    return paths


def checkout(branch: str, cwd: Path | None = None) -> None:
    """Switch to an existing branch."""
    run_git("checkout", branch, cwd=cwd)


def checkout_new_branch(name: str, cwd: Path | None = None) -> None:
    """Create a branch from HEAD and switch to it."""
    run_git("checkout", "-b", name, cwd=cwd)


def pull(remote: str, branch: str, cwd: Path | None = None) -> str:
    """Fetch and merge ``remote/branch`` into the current branch."""
    return run_git("pull", remote, branch, cwd=cwd, timeout=GIT_NETWORK_TIMEOUT)


def stage_all(cwd: Path | None = None) -> None:
    """Stage all changes including deletions and untracked files."""
    run_git("add", "-A", cwd=cwd)


def commit_message(message: str, cwd: Path | None = None) -> str:
    """Commit staged changes with the given message.

    Returns:
        New commit SHA
    """
    run_git("commit", "-m", message, cwd=cwd)
    return get_head_sha(cwd)


class VersionControl(Protocol):
    """Version-control operations consumed by branch initialization."""

    def is_repository(self) -> bool: ...

    def pending_paths(self) -> list[str]: ...

    def current_branch(self) -> str: ...

    def checkout(self, branch: str) -> None: ...

    def pull(self, remote: str, branch: str) -> None: ...

    def create_branch(self, name: str) -> None: ...

    def stage_all(self) -> None: ...

    def commit(self, message: str) -> str: ...


class GitCli:
    """VersionControl backed by the git executable, bound to one repository root."""

    def __init__(self, root: Path):
        self.root = root

    def is_repository(self) -> bool:
        return (self.root / ".git").exists()

    def pending_paths(self) -> list[str]:
        return get_pending_paths(self.root)

    def current_branch(self) -> str:
        return get_current_branch(self.root)

    def checkout(self, branch: str) -> None:
        checkout(branch, self.root)

    def pull(self, remote: str, branch: str) -> None:
        output = pull(remote, branch, self.root)
        if output:
            logger.debug(output)

    def create_branch(self, name: str) -> None:
        checkout_new_branch(name, self.root)

    def stage_all(self) -> None:
        stage_all(self.root)

    def commit(self, message: str) -> str:
        return commit_message(message, self.root)
