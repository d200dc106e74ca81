"""Filesystem operations for staging a package.

Nothing here is transactional: a failure halfway through a copy leaves
whatever was already written in place.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from publish_easier.config.models import CopyRule

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


def clean_directory(path: Path, *, recreate: bool = False) -> bool:
    """Recursively remove *path*, optionally creating it again empty.

    Returns True if an existing directory was removed. A missing *path*
    is not an error.
    """
    removed = False
    if path.exists():
        shutil.rmtree(path)
        removed = True
    else:
        logger.debug("Directory not found, nothing to remove: %s", path)
    if recreate:
        path.mkdir(parents=True, exist_ok=True)
    return removed


def remove_matching(path: Path, pattern: str) -> tuple[list[str], list[str]]:
    """Delete files in *path* matching the glob *pattern*.

    Individual failures are logged and skipped. Returns
    ``(removed_names, failure_messages)``.
    """
    removed: list[str] = []
    failures: list[str] = []
    if not path.is_dir():
        return removed, failures
    for candidate in sorted(path.glob(pattern)):
        if not candidate.is_file():
            continue
        try:
            candidate.unlink()
            removed.append(candidate.name)
        except OSError as exc:
            msg = f"Could not remove {candidate.name}: {exc}"
            logger.warning(msg)
            failures.append(msg)
    return removed, failures


# ---------------------------------------------------------------------------
# Copy rules
# ---------------------------------------------------------------------------


def copy_item(rule: CopyRule, root: Path, publish_path: Path) -> bool:
    """Copy one file or directory tree from *root* into *publish_path*.

    Returns False (after logging a warning) when the source does not
    exist. Copy errors propagate as OSError.

    Raises:
        ValueError: If the target resolves outside *publish_path*, for
            example through a symlinked directory.
    """
    source = root / rule.source
    target = publish_path / rule.target
    if not target.resolve().is_relative_to(publish_path.resolve()):
        raise ValueError(f"Copy target escapes the publish directory: {rule.target}")

    if not source.exists():
        logger.warning("Source file/directory not found: %s", rule.source)
        return False

    if source.resolve() == target.resolve():
        logger.debug("Source and target are the same path, skipping: %s", rule.source)
        return True

    target.parent.mkdir(parents=True, exist_ok=True)
    if rule.type == "dir":
        shutil.copytree(source, target, dirs_exist_ok=True)
    else:
        shutil.copy2(source, target)
    return True


# ---------------------------------------------------------------------------
# Manifest I/O
# ---------------------------------------------------------------------------


def read_manifest(path: Path) -> dict[str, Any]:
    """Read a JSON manifest. Key order is preserved.

    Raises:
        FileNotFoundError: If *path* does not exist.
        ValueError: If the file is not a JSON object.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Manifest is not a JSON object: {path}"
        raise ValueError(msg)
    return data


def write_manifest(path: Path, manifest: dict[str, Any]) -> None:
    """Write *manifest* as 2-space indented JSON with a trailing newline."""
    path.parent.mkdir(parents=True, exist_ok=True)
    rendered = json.dumps(manifest, indent=2, ensure_ascii=False)
    path.write_text(rendered + "\n", encoding="utf-8")
