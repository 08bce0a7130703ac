"""Errors raised by branch initialization.

Every error is terminal for the run. ``kind`` names the failure for JSON
output and ``hint`` tells the operator what most likely went wrong.
"""

from pathlib import Path
from typing import Any, Literal

from ..models import BRANCH_NAME_EXAMPLE, InitStage


class InitError(Exception):
    """Base exception for branch initialization failures."""

    kind = "InitError"
    hint = ""

    def __init__(self, message: str, stage: InitStage = InitStage.START):
        super().__init__(message)
        self.message = message
        self.stage = stage

    def to_dict(self) -> dict[str, Any]:
        """Return error details for JSON output."""
        return {"kind": self.kind, "stage": self.stage.value, "hint": self.hint}


class InvalidFormatError(InitError):
    """Branch name doesn't follow Major.Minor.Revision_Dev."""

    kind = "InvalidFormat"
    hint = f"Expected format: Major.Minor.Rev_Dev (e.g., {BRANCH_NAME_EXAMPLE})"


class NotARepositoryError(InitError):
    """Working directory is not the root of a git repository."""

    kind = "NotARepository"
    hint = "Run the command from the repository root (the directory containing .git)."


class DirtyWorkingTreeError(InitError):
    """Working tree has staged, unstaged or untracked changes."""

    kind = "DirtyWorkingTree"
    hint = "Please commit or stash your changes first."

    def __init__(self, message: str, paths: list[str], stage: InitStage = InitStage.VALIDATED):
        super().__init__(message, stage)
        self.paths = paths

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "paths": self.paths}


class SyncFailedError(InitError):
    """Trunk branch could not be checked out or pulled."""

    kind = "SyncFailed"

    def __init__(
        self,
        message: str,
        step: Literal["checkout", "pull"],
        stage: InitStage = InitStage.PREFLIGHTED,
    ):
        super().__init__(message, stage)
        self.step = step

    @property
    def hint(self) -> str:  # type: ignore[override]
        if self.step == "pull":
            return "Check network access and that the remote trunk can be merged cleanly."
        return "Check that the trunk branch exists locally."

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "step": self.step}


class BranchCreateFailedError(InitError):
    """New branch could not be created."""

    kind = "BranchCreateFailed"
    hint = "A branch with this name may already exist: git branch --list <name>"


class ConfigFileMissingError(InitError):
    """Workflow configuration file holding the marker is missing."""

    kind = "ConfigFileMissing"
    hint = "The new branch was created and left checked out; fix the file and commit manually."

    def __init__(self, message: str, path: Path, stage: InitStage = InitStage.CLEANED):
        super().__init__(message, stage)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "path": str(self.path)}


class CommitFailedError(InitError):
    """Staging or committing the branch changes failed."""

    kind = "CommitFailed"
    hint = (
        "The new branch was created and left checked out. Inspect it with "
        "'git status' and commit manually (there may be nothing to commit)."
    )
