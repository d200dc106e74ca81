"""Workspace: the working directory plus its loaded publish config.

Constructed once by the CLI from :class:`PublishSettings` and handed to
every service through :class:`BaseService`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from publish_easier.config.discovery import load_config

if TYPE_CHECKING:
    from publish_easier.config.models import PublishConfig
    from publish_easier.config.settings import PublishSettings


class Workspace:
    """Path resolution for the source tree and the publish directory."""

    def __init__(self, root: Path, config: PublishConfig) -> None:
        self._root = root
        self._config = config

    @classmethod
    def from_settings(cls, settings: PublishSettings) -> Workspace:
        """Load ``publish.toml`` (or the ``--config`` override) for *settings.root*."""
        config = load_config(settings.config_path, root=settings.root)
        return cls(settings.root, config)

    @property
    def root(self) -> Path:
        """The working directory holding the source manifest."""
        return self._root

    @property
    def config(self) -> PublishConfig:
        return self._config

    @property
    def in_place(self) -> bool:
        """True when no publish directory is configured."""
        return self._config.in_place

    @property
    def publish_path(self) -> Path:
        """Absolute staging directory; the root itself when publishing in place."""
        if self.in_place:
            return self._root
        return self._root / self._config.publish_dir

    @property
    def manifest_path(self) -> Path:
        return self._root / self._config.manifest

    @property
    def publish_manifest_path(self) -> Path:
        return self.publish_path / Path(self._config.manifest).name
