"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``publish.toml`` only contains
overrides. A usable config needs nothing more than ``build_command``.
"""

from __future__ import annotations

from pathlib import PurePath
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationInfo, field_validator, model_validator

DEFAULT_PUBLISH_DIR = "publish"
DEFAULT_MANIFEST = "package.json"


def _check_relative(value: str, what: str) -> str:
    """Reject absolute paths and ``..`` segments so joins stay under their base."""
    path = PurePath(value)
    if path.is_absolute():
        raise ValueError(f"{what} must be a relative path, got {value!r}")
    if ".." in path.parts:
        raise ValueError(f"{what} must not contain '..', got {value!r}")
    return value


class CopyRule(BaseModel):
    """One ``[[copy]]`` entry: a file or directory copied into the publish dir."""

    model_config = {"frozen": True}

    type: Literal["file", "dir"] = "file"
    source: str
    target: str = ""
    description: str = ""

    @field_validator("type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> object:
        if isinstance(value, str) and value.lower() in ("dir", "directory"):
            return "dir"
        return value

    @field_validator("source", "target")
    @classmethod
    def _relative_paths(cls, value: str, info: ValidationInfo) -> str:
        return _check_relative(value, info.field_name or "path")

    @model_validator(mode="before")
    @classmethod
    def _fill_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("source"):
            data = dict(data)
            if not data.get("target"):
                data["target"] = data["source"]
            if not data.get("description"):
                data["description"] = data["source"]
        return data


class PublishConfig(BaseModel):
    """Root of ``publish.toml``.

    ``filter`` maps a top-level manifest key (``scripts``,
    ``devDependencies``...) to the sub-keys removed from the published copy.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    build_command: str | None = None
    publish_dir: str = DEFAULT_PUBLISH_DIR
    manifest: str = DEFAULT_MANIFEST
    copy_rules: list[CopyRule] = Field(default_factory=list, alias="copy")
    filters: dict[str, list[str]] = Field(default_factory=dict, alias="filter")
    pack_command: str = "npm pack"
    publish_command: str = "npm publish"
    artifact_pattern: str = "*.tgz"

    @field_validator("publish_dir")
    @classmethod
    def _publish_dir_inside_root(cls, value: str) -> str:
        if value.strip() and not PurePath(value).parts:
            raise ValueError('publish_dir must name a subdirectory; use "" to publish in place')
        return _check_relative(value, "publish_dir")

    @field_validator("manifest")
    @classmethod
    def _manifest_inside_root(cls, value: str) -> str:
        return _check_relative(value, "manifest")

    @field_validator("filters", mode="before")
    @classmethod
    def _coerce_filter_strings(cls, value: object) -> object:
        if isinstance(value, dict):
            return {k: [v] if isinstance(v, str) else v for k, v in value.items()}
        return value

    @property
    def is_empty(self) -> bool:
        """True when the config file set no keys (absent, blank, or unreadable)."""
        return not self.model_fields_set

    @property
    def in_place(self) -> bool:
        """True when publishing straight from the working directory."""
        return not self.publish_dir.strip()
