"""External service integrations for devbranch.

This package provides interfaces to external tools:
- git: Git operations and the VersionControl capability
- filesystem: Common file I/O operations and the FileSystem capability
"""

from .filesystem import (
    FileSystem,
    LocalFileSystem,
    dir_exists,
    file_exists,
    read_file,
    remove_tree,
    write_file,
)
from .git import (
    GitCli,
    GitError,
    VersionControl,
    checkout,
    checkout_new_branch,
    commit_message,
    get_current_branch,
    get_head_sha,
    get_pending_paths,
    get_repo_root,
    get_status_porcelain,
    pull,
    run_git,
    stage_all,
)

__all__ = [
    "FileSystem",
    "GitCli",
    "GitError",
    "LocalFileSystem",
    "VersionControl",
    "checkout",
    "checkout_new_branch",
    "commit_message",
    "dir_exists",
    "file_exists",
    "get_current_branch",
    "get_head_sha",
    "get_pending_paths",
    "get_repo_root",
    "get_status_porcelain",
    "pull",
    "read_file",
    "remove_tree",
    "run_git",
    "stage_all",
    "write_file",
]
