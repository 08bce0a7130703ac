"""Progress stages of branch initialization."""

from enum import Enum


class InitStage(str, Enum):
    """Linear states reached by a branch initialization run."""

    START = "start"
    VALIDATED = "validated"
    PREFLIGHTED = "preflighted"
    SYNCED = "synced"
    BRANCH_CREATED = "branch_created"
    CLEANED = "cleaned"
    CONFIG_UPDATED = "config_updated"
    COMMITTED = "committed"
