"""Common file I/O operations for devbranch."""

import shutil
from pathlib import Path
from typing import Protocol


def file_exists(path: Path) -> bool:
    """Return True if path is an existing regular file."""
    return path.is_file()


def dir_exists(path: Path) -> bool:
    """Return True if path is an existing directory."""
    return path.is_dir()


def read_file(path: Path) -> str:
    """Read a text file, keeping its line endings as-is.

    Bytes that aren't valid UTF-8 are carried as surrogate escapes, so
    writing the text back with write_file reproduces the file exactly.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8", errors="surrogateescape", newline="") as f:
        return f.read()


def write_file(path: Path, content: str) -> None:
    """Write a text file without newline translation.

    Existing line endings in ``content`` are written back unchanged.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", errors="surrogateescape", newline="") as f:
        f.write(content)


def remove_tree(path: Path) -> bool:
    """Recursively delete a directory.

    Returns:
        True if the directory was removed, False if it did not exist
    """
    if not path.is_dir():
        return False
    shutil.rmtree(path)
    return True


class FileSystem(Protocol):
    """Filesystem operations consumed by branch initialization."""

    def file_exists(self, path: Path) -> bool: ...

    def dir_exists(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def remove_tree(self, path: Path) -> bool: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def file_exists(self, path: Path) -> bool:
        return file_exists(path)

    def dir_exists(self, path: Path) -> bool:
        return dir_exists(path)

    def read_text(self, path: Path) -> str:
        return read_file(path)

    def write_text(self, path: Path, content: str) -> None:
        write_file(path, content)

    def remove_tree(self, path: Path) -> bool:
        return remove_tree(path)
