"""Development branch initialization.

Runs the fixed sequence that turns an up-to-date trunk into a new
``Major.Minor.Revision_Dev`` branch:

1. validate the branch name
2. preflight (repository present, working tree clean)
3. sync trunk (checkout + pull)
4. create the branch
5. remove the stale production directory
6. rewrite the build-variant marker in the workflow file
7. compose the commit message from the Signed-off-by template
8. stage and commit everything

Each step is a precondition for the next. Only a failed branch creation
is rolled back (best effort); later failures leave the new branch checked
out so the operator can inspect and recommit.

Runs are not safe against each other on the same working tree.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal

from ..config import DevBranchConfig
from ..models import InitStage, InitSummary, StepNote, VersionTag
from ..services import FileSystem, GitCli, GitError, LocalFileSystem, VersionControl
from .commit_handler import build_commit_message, extract_signed_off_by
from .errors import (
    BranchCreateFailedError,
    CommitFailedError,
    ConfigFileMissingError,
    DirtyWorkingTreeError,
    InvalidFormatError,
    NotARepositoryError,
    SyncFailedError,
)
from .marker import MarkerRewrite, rewrite_marker

logger = logging.getLogger(__name__)

# (level, message) where level is "info", "success" or "warning"
Reporter = Callable[[str, str], None]


def _no_report(level: str, message: str) -> None:
    pass


def _is_utf8(text: str) -> bool:
    # read_text carries undecodable bytes as surrogate escapes
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


@dataclass
class RepoContext:
    """Repository handle threaded through every initialization step.

    Attributes:
        root: Repository root; all configured paths are relative to it
        config: Loaded devbranch configuration
        vcs: Version-control capability (git CLI bound to root by default)
        fs: Filesystem capability
    """

    root: Path
    config: DevBranchConfig = field(default_factory=DevBranchConfig)
    vcs: VersionControl | None = None
    fs: FileSystem = field(default_factory=LocalFileSystem)

    def __post_init__(self) -> None:
        if self.vcs is None:
            self.vcs = GitCli(self.root)

    @property
    def git(self) -> VersionControl:
        assert self.vcs is not None
        return self.vcs

    def path(self, relative: str) -> Path:
        """Resolve a repository-relative path."""
        return self.root / relative


def parse_branch_name(raw_name: str) -> VersionTag:
    """Validate a development branch name.

    Raises:
        InvalidFormatError: If the name isn't Major.Minor.Revision_Dev
    """
    try:
        return VersionTag.from_branch_name(raw_name)
    except ValueError:
        raise InvalidFormatError(f"Invalid branch name format: {raw_name!r}") from None


class BranchInitializer:
    """Creates and prepares a development branch in one repository."""

    def __init__(self, ctx: RepoContext, report: Reporter | None = None):
        self.ctx = ctx
        self.report = report or _no_report
        self.stage = InitStage.START
        self.notes: list[StepNote] = []

    def _note(self, message: str, level: Literal["info", "warning"] = "info") -> None:
        self.notes.append(StepNote(level=level, message=message))
        self.report("warning" if level == "warning" else "info", message)

    def _advance(self, stage: InitStage, message: str) -> None:
        self.stage = stage
        logger.debug("Reached stage %s", stage.value)
        self.report("success", message)

    def _rewrite(self, content: str) -> MarkerRewrite:
        marker = self.ctx.config.marker
        return rewrite_marker(
            content, key=marker.key, from_token=marker.from_token, to_token=marker.to_token
        )

    def initialize(self, raw_name: str, dry_run: bool = False) -> InitSummary:
        """Run every step and commit the new branch.

        Args:
            raw_name: Branch name, e.g. ``1.0.1_Dev``
            dry_run: Stop after the read-only checks and describe the rest

        Returns:
            Summary of the run

        Raises:
            InitError: Subclass naming the step that failed
        """
        self.stage = InitStage.START
        self.notes = []

        self.report("info", "Validating branch name format...")
        version = parse_branch_name(raw_name)
        self._advance(InitStage.VALIDATED, f"Branch name is valid: {version.version}")

        self.report("info", "Checking for uncommitted changes...")
        self.preflight()
        self._advance(InitStage.PREFLIGHTED, "Working directory is clean")

        if dry_run:
            return self.plan(raw_name, version)

        previous_branch = self.sync_trunk()
        self.create_branch(raw_name, previous_branch)
        stale_removed = self.remove_stale_dir()
        marker_updated = self.update_marker()
        signed_off_by = self.read_signed_off_by()
        message = build_commit_message(version, signed_off_by, self.ctx.config.commit.subject)
        sha = self.commit(message)

        return InitSummary(
            branch=raw_name,
            version=version,
            previous_branch=previous_branch,
            stage=self.stage,
            stale_dir_removed=stale_removed,
            marker_updated=marker_updated,
            signed_off_by=signed_off_by,
            commit_message=message,
            commit_sha=sha,
            notes=list(self.notes),
        )

    def preflight(self) -> None:
        """Require a repository at the root and a clean working tree."""
        if not self.ctx.git.is_repository():
            raise NotARepositoryError(
                f"Not in a git repository: {self.ctx.root}", stage=self.stage
            )
        try:
            pending = self.ctx.git.pending_paths()
        except GitError as e:
            raise NotARepositoryError(str(e), stage=self.stage) from e
        if pending:
            raise DirtyWorkingTreeError(
                "You have uncommitted changes.", paths=pending, stage=self.stage
            )

    def sync_trunk(self) -> str:
        """Checkout and pull the trunk branch.

        Returns:
            Branch that was checked out before the sync
        """
        git_cfg = self.ctx.config.git
        try:
            previous_branch = self.ctx.git.current_branch()
        except GitError as e:
            raise SyncFailedError(
                f"Could not determine the current branch: {e}", step="checkout", stage=self.stage
            ) from e

        self.report("info", f"Pulling latest {git_cfg.trunk} branch...")
        try:
            self.ctx.git.checkout(git_cfg.trunk)
        except GitError as e:
            raise SyncFailedError(
                f"Failed to checkout {git_cfg.trunk} branch: {e}", step="checkout", stage=self.stage
            ) from e
        try:
            self.ctx.git.pull(git_cfg.remote, git_cfg.trunk)
        except GitError as e:
            raise SyncFailedError(
                f"Failed to pull from {git_cfg.remote}/{git_cfg.trunk}: {e}",
                step="pull",
                stage=self.stage,
            ) from e
        self._advance(InitStage.SYNCED, f"{git_cfg.trunk} branch is up to date")
        return previous_branch

    def create_branch(self, name: str, previous_branch: str) -> None:
        """Create the branch, restoring the previous one if that fails."""
        self.report("info", f"Creating new branch: {name}...")
        try:
            self.ctx.git.create_branch(name)
        except GitError as e:
            try:
                self.ctx.git.checkout(previous_branch)
            except GitError as restore_error:
                logger.warning("Could not restore branch %s: %s", previous_branch, restore_error)
            raise BranchCreateFailedError(
                f"Failed to create branch {name}: {e}", stage=self.stage
            ) from e
        self._advance(InitStage.BRANCH_CREATED, f"Branch {name} created")

    def remove_stale_dir(self) -> bool:
        """Delete the stale directory if present.

        Returns:
            True if it was removed, False if it did not exist
        """
        stale_dir = self.ctx.config.paths.stale_dir
        self.report("info", f"Deleting {stale_dir} folder...")
        removed = self.ctx.fs.remove_tree(self.ctx.path(stale_dir))
        if removed:
            self._advance(InitStage.CLEANED, f"{stale_dir} folder deleted")
        else:
            self.stage = InitStage.CLEANED
            self._note(f"{stale_dir} folder not found (already deleted?)", level="warning")
        return removed

    def update_marker(self) -> bool:
        """Rewrite the build-variant marker in the workflow file.

        Returns:
            True if the file changed, False if the marker was not found

        Raises:
            ConfigFileMissingError: If the workflow file doesn't exist
        """
        relative = self.ctx.config.paths.workflow_file
        marker = self.ctx.config.marker
        path = self.ctx.path(relative)
        self.report("info", f"Updating {relative}...")
        if not self.ctx.fs.file_exists(path):
            raise ConfigFileMissingError(f"File {relative} not found!", path=path, stage=self.stage)

        result = self._rewrite(self.ctx.fs.read_text(path))
        if result.changed:
            self.ctx.fs.write_text(path, result.content)
            self._advance(
                InitStage.CONFIG_UPDATED,
                f"Updated {marker.key} from {marker.from_token} to {marker.to_token}",
            )
        else:
            self.stage = InitStage.CONFIG_UPDATED
            self._note(
                f"No changes made to {relative} "
                f"(already set to {marker.to_token} or pattern not found)",
                level="warning",
            )
        return result.changed

    def read_signed_off_by(self) -> str:
        """Read the Signed-off-by line, falling back to the default signer."""
        relative = self.ctx.config.paths.commit_template
        path = self.ctx.path(relative)
        fallback = self.ctx.config.default_signed_off_by
        self.report("info", "Reading commit signature from template...")

        if not self.ctx.fs.file_exists(path):
            self._note(f"Commit message template not found at {relative}", level="warning")
            return fallback
        try:
            template = self.ctx.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            self._note(f"Could not read commit message template: {e}", level="warning")
            return fallback

        signed_off_by = extract_signed_off_by(template)
        if signed_off_by is None:
            self._note("Could not find Signed-off-by line in template", level="warning")
            return fallback
        if not _is_utf8(signed_off_by):
            self._note("Signed-off-by line in template is not valid UTF-8", level="warning")
            return fallback
        self.report("success", f"Signature: {signed_off_by}")
        return signed_off_by

    def commit(self, message: str) -> str:
        """Stage everything and commit.

        Returns:
            New commit SHA
        """
        self.report("info", "Committing changes...")
        try:
            self.ctx.git.stage_all()
            sha = self.ctx.git.commit(message)
        except GitError as e:
            raise CommitFailedError(f"Failed to commit changes: {e}", stage=self.stage) from e
        self._advance(InitStage.COMMITTED, "Changes committed")
        return sha

    def plan(self, raw_name: str, version: VersionTag) -> InitSummary:
        """Describe the mutations a real run would perform, without doing them."""
        cfg = self.ctx.config
        previous_branch = None
        try:
            previous_branch = self.ctx.git.current_branch()
        except GitError as e:
            logger.debug("Could not read current branch: %s", e)

        self._note(f"Would checkout {cfg.git.trunk} and pull {cfg.git.remote}/{cfg.git.trunk}")
        self._note(f"Would create branch {raw_name}")

        stale_exists = self.ctx.fs.dir_exists(self.ctx.path(cfg.paths.stale_dir))
        if stale_exists:
            self._note(f"Would delete {cfg.paths.stale_dir} folder")
        else:
            self._note(
                f"{cfg.paths.stale_dir} folder not found (already deleted?)", level="warning"
            )

        workflow = self.ctx.path(cfg.paths.workflow_file)
        marker_found = False
        if not self.ctx.fs.file_exists(workflow):
            self._note(
                f"File {cfg.paths.workflow_file} not found; a real run would fail here",
                level="warning",
            )
        else:
            marker_found = self._rewrite(self.ctx.fs.read_text(workflow)).changed
            if marker_found:
                self._note(
                    f"Would update {cfg.marker.key} from {cfg.marker.from_token} "
                    f"to {cfg.marker.to_token}"
                )
            else:
                self._note(
                    f"No changes would be made to {cfg.paths.workflow_file}", level="warning"
                )

        signed_off_by = self.read_signed_off_by()
        message = build_commit_message(version, signed_off_by, cfg.commit.subject)
        self._note("Would commit all changes")

        return InitSummary(
            branch=raw_name,
            version=version,
            previous_branch=previous_branch,
            stage=self.stage,
            stale_dir_removed=stale_exists,
            marker_updated=marker_found,
            signed_off_by=signed_off_by,
            commit_message=message,
            dry_run=True,
            notes=list(self.notes),
        )
