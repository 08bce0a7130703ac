"""Core business logic for devbranch.

This package contains the branch initialization sequence and its
pure helpers:
- initializer: BranchInitializer and the RepoContext handle
- errors: InitError taxonomy
- marker: build-variant marker rewriting
- commit_handler: Signed-off-by extraction and commit message building
"""

from .commit_handler import build_commit_message, extract_signed_off_by
from .errors import (
    BranchCreateFailedError,
    CommitFailedError,
    ConfigFileMissingError,
    DirtyWorkingTreeError,
    InitError,
    InvalidFormatError,
    NotARepositoryError,
    SyncFailedError,
)
from .initializer import BranchInitializer, RepoContext, parse_branch_name
from .marker import MarkerRewrite, rewrite_marker

__all__ = [
    "BranchCreateFailedError",
    "BranchInitializer",
    "CommitFailedError",
    "ConfigFileMissingError",
    "DirtyWorkingTreeError",
    "InitError",
    "InvalidFormatError",
    "MarkerRewrite",
    "NotARepositoryError",
    "RepoContext",
    "SyncFailedError",
    "build_commit_message",
    "extract_signed_off_by",
    "parse_branch_name",
    "rewrite_marker",
]
