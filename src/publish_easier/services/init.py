"""InitService: bootstrap a commented ``publish.toml``."""

from __future__ import annotations

import logging
from pathlib import Path

from publish_easier.config.discovery import CONFIG_FILENAME, write_default_config
from publish_easier.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class InitService:
    """Creates the default config file. Needs no workspace or loaded config."""

    @staticmethod
    def create_config(root: Path) -> ServiceResult:
        """Write the template config into *root*.

        Fails without touching anything when the file already exists.
        """
        op = "init_config"
        path = root / CONFIG_FILENAME
        try:
            write_default_config(root)
        except FileExistsError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CONFIG_EXISTS",
                    message=(
                        f"Config file already exists: {CONFIG_FILENAME}. "
                        "Delete it first to re-initialize."
                    ),
                    detail={"path": str(path)},
                ),
            )
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="WRITE_FAILED",
                    message=f"Failed to create config file: {exc}",
                    detail={"path": str(path)},
                ),
            )

        logger.info("Created config file %s", path)
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "next_step": "Edit the config for your project, then run publish-easier again.",
            },
        )
