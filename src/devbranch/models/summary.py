"""Result model for a successful branch initialization."""

from typing import Literal

from pydantic import BaseModel, Field

from .stage import InitStage
from .version import VersionTag


class StepNote(BaseModel):
    """Informational or warning note collected while running a step."""

    level: Literal["info", "warning"] = "info"
    message: str


class InitSummary(BaseModel):
    """Outcome of branch initialization.

    Attributes:
        branch: Name of the created branch (the raw input)
        version: Parsed version triple
        previous_branch: Branch checked out before the run
        stage: Last stage reached (COMMITTED unless dry run)
        stale_dir_removed: Whether the stale directory existed and was deleted
        marker_updated: Whether the build-variant marker was rewritten
        signed_off_by: Signed-off-by line used in the commit
        commit_message: Full commit message
        commit_sha: SHA of the new commit (None on dry run)
        dry_run: True if no mutation was performed
        notes: Informational and warning notes in step order
    """

    branch: str
    version: VersionTag
    previous_branch: str | None = None
    stage: InitStage = InitStage.COMMITTED
    stale_dir_removed: bool = False
    marker_updated: bool = False
    signed_off_by: str = ""
    commit_message: str = ""
    commit_sha: str | None = None
    dry_run: bool = False
    notes: list[StepNote] = Field(default_factory=list)

    @property
    def warnings(self) -> list[str]:
        """Messages of warning-level notes."""
        return [n.message for n in self.notes if n.level == "warning"]
