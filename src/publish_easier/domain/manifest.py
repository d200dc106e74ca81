"""Manifest transformation for the publish directory.

INVARIANT: The source manifest is never mutated here. Callers get a new
dict with the same key order as the input.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


def filter_fields(
    manifest: Mapping[str, Any],
    filters: Mapping[str, Sequence[str]],
) -> dict[str, Any]:
    """Strip the listed sub-keys from object-valued top-level fields.

    Filter keys that are missing from the manifest, or whose value is not
    an object (string, list, number), are ignored and the field is kept
    as-is.

    Examples:
        >>> filter_fields({"scripts": {"test": "jest", "build": "tsc"}}, {"scripts": ["test"]})
        {'scripts': {'build': 'tsc'}}
        >>> filter_fields({"files": ["dist"]}, {"files": ["dist"]})
        {'files': ['dist']}
    """
    result: dict[str, Any] = {}
    for key, value in manifest.items():
        excluded = filters.get(key)
        if excluded and isinstance(value, Mapping):
            drop = set(excluded)
            result[key] = {k: v for k, v in value.items() if k not in drop}
        else:
            result[key] = value
    return result


def build_publish_manifest(
    manifest: Mapping[str, Any],
    version: str | None,
    filters: Mapping[str, Sequence[str]],
) -> dict[str, Any]:
    """Produce the manifest written to the publish directory.

    ``version`` replaces the existing value in place. When the manifest has
    no ``version`` key and *version* is None, none is added.
    """
    published = filter_fields(manifest, filters)
    if version is not None:
        published["version"] = version
    return published
