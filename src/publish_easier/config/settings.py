"""Runtime settings: CLI flags and env vars in one frozen object.

Priority chain (highest to lowest):
  1. Init kwargs  - CLI flags passed by Click
  2. Env vars     - ``PUBLISH_EASIER_*`` prefix
  3. Code defaults

The package configuration itself (``publish.toml``) is loaded separately
by :func:`publish_easier.config.discovery.load_config`, because a broken
file must degrade to a warning rather than abort settings construction.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings


class PublishSettings(BaseSettings):
    """Unified runtime settings for the publish-easier CLI.

    Attributes:
        root: Working directory holding the manifest and ``publish.toml``.
        config_path: Explicit ``--config`` override, or None for discovery.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "PUBLISH_EASIER_",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> PublishSettings:
        """Construct settings from a CLI invocation.

        Only flags that were actually set are passed through so env vars
        can still fill the rest.
        """
        kwargs: dict[str, Any] = {k: v for k, v in cli_flags.items() if v}
        if root is not None:
            kwargs["root"] = root
        if config_path:
            kwargs["config_path"] = Path(config_path)
        return cls(**kwargs)
