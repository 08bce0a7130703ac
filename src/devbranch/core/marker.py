"""Build-variant marker rewriting for the PCB workflow file."""

import re
from typing import NamedTuple


class MarkerRewrite(NamedTuple):
    """Result of rewriting marker tokens in file content."""

    content: str
    replacements: int

    @property
    def changed(self) -> bool:
        return self.replacements > 0


def marker_pattern(key: str, from_token: str) -> re.Pattern[str]:
    """Compile the pattern matching ``key:`` followed by the token on one line.

    The key and the whitespace after it are captured so they can be kept
    byte-for-byte.
    """
    return re.compile(rf"({re.escape(key)}:[ \t]*){re.escape(from_token)}(?![\w-])")


def rewrite_marker(
    content: str,
    key: str = "kibot_variant",
    from_token: str = "CHECKED",
    to_token: str = "PRELIMINARY",
) -> MarkerRewrite:
    """Replace every ``key: FROM`` token with ``TO``.

    Content without a match is returned unchanged with zero replacements, so
    rewriting already-migrated content is a no-op.
    """
    new_content, count = marker_pattern(key, from_token).subn(
        lambda m: m.group(1) + to_token, content
    )
    return MarkerRewrite(new_content, count)
