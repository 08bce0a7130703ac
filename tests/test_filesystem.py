"""Tests for filesystem operations."""

from pathlib import Path

import pytest

from devbranch.services.filesystem import (
    LocalFileSystem,
    dir_exists,
    file_exists,
    read_file,
    remove_tree,
    write_file,
)


@pytest.mark.unit
class TestRemoveTree:
    """Tests for remove_tree."""

    def test_removes_nested_directory(self, tmp_path: Path) -> None:
        """remove_tree deletes a directory recursively."""
        target = tmp_path / "production"
        (target / "a" / "b").mkdir(parents=True)
        (target / "a" / "b" / "file.txt").write_text("x")

        assert remove_tree(target) is True
        assert not target.exists()

    def test_missing_directory_is_not_error(self, tmp_path: Path) -> None:
        """remove_tree on a missing directory returns False."""
        assert remove_tree(tmp_path / "production") is False

    def test_idempotent(self, tmp_path: Path) -> None:
        """Second removal reports nothing to do."""
        target = tmp_path / "production"
        target.mkdir()
        assert remove_tree(target) is True
        assert remove_tree(target) is False

    def test_file_is_left_alone(self, tmp_path: Path) -> None:
        """A regular file with the directory's name is not removed."""
        target = tmp_path / "production"
        target.write_text("not a dir")
        assert remove_tree(target) is False
        assert target.exists()


@pytest.mark.unit
class TestReadWrite:
    """Tests for read_file and write_file."""

    def test_round_trip_keeps_crlf(self, tmp_path: Path) -> None:
        """Line endings are preserved through read and write."""
        path = tmp_path / "pcb.yml"
        path.write_bytes(b"a: 1\r\nkibot_variant: CHECKED\r\n")

        content = read_file(path)
        assert "\r\n" in content
        write_file(path, content.replace("CHECKED", "PRELIMINARY"))
        assert path.read_bytes() == b"a: 1\r\nkibot_variant: PRELIMINARY\r\n"

    def test_round_trip_keeps_non_utf8_bytes(self, tmp_path: Path) -> None:
        """Latin-1 bytes survive read and write unchanged."""
        path = tmp_path / "pcb.yml"
        path.write_bytes(b"# caf\xe9\nkibot_variant: CHECKED\n")

        content = read_file(path)
        write_file(path, content.replace("CHECKED", "PRELIMINARY"))
        assert path.read_bytes() == b"# caf\xe9\nkibot_variant: PRELIMINARY\n"

    def test_write_creates_parents(self, tmp_path: Path) -> None:
        """write_file creates missing parent directories."""
        path = tmp_path / ".github" / "workflows" / "pcb.yml"
        write_file(path, "x")
        assert path.read_text() == "x"

    def test_read_missing_raises(self, tmp_path: Path) -> None:
        """read_file raises for a missing file."""
        with pytest.raises(FileNotFoundError):
            read_file(tmp_path / "missing.txt")

    def test_exists_helpers(self, tmp_path: Path) -> None:
        """file_exists and dir_exists distinguish files from directories."""
        (tmp_path / "f").write_text("x")
        assert file_exists(tmp_path / "f")
        assert not dir_exists(tmp_path / "f")
        assert dir_exists(tmp_path)
        assert not file_exists(tmp_path)


@pytest.mark.unit
def test_local_filesystem_delegates(tmp_path: Path) -> None:
    """LocalFileSystem exposes the module functions as a capability."""
    fs = LocalFileSystem()
    path = tmp_path / "dir" / "file.txt"
    fs.write_text(path, "hello")
    assert fs.file_exists(path)
    assert fs.read_text(path) == "hello"
    assert fs.dir_exists(tmp_path / "dir")
    assert fs.remove_tree(tmp_path / "dir")
    assert not fs.dir_exists(tmp_path / "dir")
