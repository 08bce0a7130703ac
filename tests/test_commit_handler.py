"""Tests for commit message building."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from devbranch.core.commit_handler import build_commit_message, extract_signed_off_by
from devbranch.models import VersionTag


@pytest.mark.unit
class TestExtractSignedOffBy:
    """Tests for extract_signed_off_by."""

    def test_finds_line(self) -> None:
        """The Signed-off-by line should be returned whole."""
        template = "Subject\n\nSigned-off-by: Jane Doe <jane@example.com>\n"
        assert extract_signed_off_by(template) == "Signed-off-by: Jane Doe <jane@example.com>"

    def test_first_line_wins(self) -> None:
        """Only the first Signed-off-by line is used."""
        template = "Signed-off-by: A <a@x>\nSigned-off-by: B <b@x>\n"
        assert extract_signed_off_by(template) == "Signed-off-by: A <a@x>"

    def test_strips_crlf(self) -> None:
        """Trailing carriage returns should not leak into the message."""
        assert extract_signed_off_by("Signed-off-by: A <a@x>\r\n") == "Signed-off-by: A <a@x>"

    def test_must_start_line(self) -> None:
        """Indented or quoted lines don't count."""
        assert extract_signed_off_by("  Signed-off-by: A <a@x>\n# Signed-off-by: B\n") is None

    def test_empty_value_ignored(self) -> None:
        """A bare key without a signer is treated as missing."""
        assert extract_signed_off_by("Signed-off-by:   \n") is None

    def test_missing(self) -> None:
        """Templates without the line return None."""
        assert extract_signed_off_by("Just a template\n") is None


@pytest.mark.unit
class TestBuildCommitMessage:
    """Tests for build_commit_message."""

    def test_format(self) -> None:
        """Message is subject, blank line, signature."""
        message = build_commit_message(
            VersionTag(major="1", minor="0", revision="1"),
            "Signed-off-by: Jane Doe <jane@example.com>",
        )
        assert message == (
            "Initialize development branch for version 1.0.1\n\n"
            "Signed-off-by: Jane Doe <jane@example.com>"
        )

    def test_custom_subject(self) -> None:
        """Subject template supports {version}."""
        message = build_commit_message(
            VersionTag(major="3", minor="2", revision="1"),
            "Signed-off-by: X <x@x>",
            "Start {version}",
        )
        assert message.splitlines()[0] == "Start 3.2.1"

    @given(
        st.integers(min_value=0, max_value=10**9),
        st.integers(min_value=0, max_value=10**9),
        st.integers(min_value=0, max_value=10**9),
    )
    def test_version_round_trips_into_subject(self, major: int, minor: int, revision: int) -> None:
        """Parsed triple appears exactly in the subject line."""
        tag = VersionTag.from_branch_name(f"{major}.{minor}.{revision}_Dev")
        subject = build_commit_message(tag, "Signed-off-by: X <x@x>").splitlines()[0]
        assert subject.endswith(f" {major}.{minor}.{revision}")

    @given(
        st.from_regex(r"[0-9]{1,6}", fullmatch=True),
        st.from_regex(r"[0-9]{1,6}", fullmatch=True),
        st.from_regex(r"[0-9]{1,6}", fullmatch=True),
    )
    def test_typed_digits_kept_in_subject(self, major: str, minor: str, revision: str) -> None:
        """Digits appear as typed, leading zeros included."""
        tag = VersionTag.from_branch_name(f"{major}.{minor}.{revision}_Dev")
        subject = build_commit_message(tag, "Signed-off-by: X <x@x>").splitlines()[0]
        assert subject == f"Initialize development branch for version {major}.{minor}.{revision}"
