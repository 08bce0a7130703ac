"""Commit message building for development branches."""

import re

from ..models import VersionTag

SIGNED_OFF_BY_PATTERN = re.compile(r"^Signed-off-by:[ \t]*(.+)$", re.MULTILINE)


def extract_signed_off_by(template: str) -> str | None:
    """Return the first Signed-off-by line of a commit template.

    Args:
        template: Commit message template content

    Returns:
        The full line (trailing whitespace removed), or None if absent
    """
    for match in SIGNED_OFF_BY_PATTERN.finditer(template):
        if match.group(1).strip():
            return match.group(0).rstrip()
    return None


def build_commit_message(
    version: VersionTag,
    signed_off_by: str,
    subject: str = "Initialize development branch for version {version}",
) -> str:
    """Build the initialization commit message.

    Args:
        version: Parsed development version
        signed_off_by: Signed-off-by trailer line
        subject: Subject template; ``{version}`` expands to Major.Minor.Revision

    Returns:
        Subject, blank line, then the Signed-off-by line
    """
    lines = [subject.replace("{version}", version.version), "", signed_off_by]
    return "\n".join(lines)
