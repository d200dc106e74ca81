"""Version arithmetic for the publish flow.

Only ``MAJOR.MINOR.PATCH`` with plain integer parts is understood.
Pre-release and build-metadata suffixes are rejected rather than guessed at.
"""

from __future__ import annotations

import re

VERSION_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def increment_patch(version: str) -> str:
    """Return *version* with only the patch component bumped.

    Examples:
        >>> increment_patch("1.2.3")
        '1.2.4'
        >>> increment_patch("0.0.9")
        '0.0.10'

    Raises:
        ValueError: If *version* is not three dot-separated integers.
    """
    match = VERSION_PATTERN.match(version.strip()) if isinstance(version, str) else None
    if match is None:
        msg = f"Unsupported version string: {version!r} (expected MAJOR.MINOR.PATCH)"
        raise ValueError(msg)
    major, minor, patch = (int(part) for part in match.groups())
    return f"{major}.{minor}.{patch + 1}"


def resolve_increment(increment: bool | None, *, auto_publish: bool) -> bool:
    """Decide whether this run bumps the version.

    An explicit ``--increment-version`` / ``--no-increment-version`` always
    wins. Otherwise the version is bumped only when auto-publishing.
    """
    if increment is not None:
        return increment
    return auto_publish
