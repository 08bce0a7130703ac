"""Pydantic data models for devbranch.

- VersionTag: Major.Minor.Revision parsed from a ``_Dev`` branch name
- InitStage: linear progress states of an initialization run
- InitSummary, StepNote: result of a successful run
"""

from .stage import InitStage
from .summary import InitSummary, StepNote
from .version import BRANCH_NAME_EXAMPLE, BRANCH_NAME_PATTERN, VersionTag

__all__ = [
    "BRANCH_NAME_EXAMPLE",
    "BRANCH_NAME_PATTERN",
    "InitStage",
    "InitSummary",
    "StepNote",
    "VersionTag",
]
