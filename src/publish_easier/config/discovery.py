"""Config file discovery, loading, and bootstrap.

The config lives at a fixed name in the working directory. Unlike tools
that walk up to a project root, only ``<cwd>/publish.toml`` is considered,
unless the ``PUBLISH_EASIER_CONFIG`` env var or ``--config`` flag points
elsewhere.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from publish_easier.config.models import PublishConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "publish.toml"
CONFIG_ENV_VAR = "PUBLISH_EASIER_CONFIG"

DEFAULT_CONFIG_TEMPLATE = """\
# publish-easier configuration

# Command that builds the package before it is staged.
build_command = "npm run build"

# Staging directory. An empty string publishes from the current directory.
publish_dir = "publish"

# Manifest read from the working directory and written to publish_dir.
# manifest = "package.json"

# Registry commands run inside publish_dir when -y/--yes is passed.
# pack_command = "npm pack"
# publish_command = "npm publish"
# artifact_pattern = "*.tgz"

# Files and directories copied into publish_dir.
# [[copy]]
# type = "file"
# source = "LICENSE"
# target = "LICENSE"
# description = "LICENSE"
#
# [[copy]]
# type = "file"
# source = "README.md"
# target = "README.md"
# description = "README.md"
#
# [[copy]]
# type = "dir"
# source = "docs"
# target = "docs"
# description = "docs directory"

# Sub-keys removed from object fields of the published manifest.
[filter]
scripts = [
    # "test",
    # "dev",
]
devDependencies = [
    # "@types/jest",
    # "jest",
    # "typescript",
]
"""


def find_config(root: Path | None = None) -> Path | None:
    """Return ``<root>/publish.toml`` if it exists (default root: cwd).

    Checks the PUBLISH_EASIER_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        logger.warning("Config file named by %s not found: %s", CONFIG_ENV_VAR, p)
        return None

    candidate = (root or Path.cwd()) / CONFIG_FILENAME
    if candidate.is_file():
        return candidate
    return None


def load_config(path: Path | None = None, root: Path | None = None) -> PublishConfig:
    """Load and validate config from a TOML file.

    If *path* is None, uses find_config(*root*) to discover the file.
    Returns an empty PublishConfig if no file is found; an explicit *path*
    that does not exist is logged as a warning first. A file that cannot
    be parsed or validated is reported as a warning and also yields an
    empty config.
    """
    if path is None:
        path = find_config(root)
    elif not path.is_file():
        logger.warning("Config file not found: %s", path)
        return PublishConfig()

    if path is None:
        return PublishConfig()

    logger.info("Loading config from %s", path)
    try:
        raw = path.read_text(encoding="utf-8")
        data: dict[str, Any] = tomllib.loads(raw)
        return PublishConfig.model_validate(data)
    except (OSError, tomllib.TOMLDecodeError, ValidationError) as exc:
        logger.warning("Failed to load config from %s: %s", path, exc)
        return PublishConfig()


def write_default_config(root: Path) -> Path:
    """Write the commented template to ``<root>/publish.toml``.

    Raises:
        FileExistsError: If the config file already exists. It is left untouched.
    """
    path = root / CONFIG_FILENAME
    with path.open("x", encoding="utf-8") as fh:
        fh.write(DEFAULT_CONFIG_TEMPLATE)
    return path
