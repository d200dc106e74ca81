"""CleanService: remove the publish directory."""

from __future__ import annotations

import logging

from publish_easier.infrastructure.filesystem import clean_directory
from publish_easier.services.base import BaseService
from publish_easier.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class CleanService(BaseService):
    def clean(self) -> ServiceResult:
        """Delete the configured publish directory and everything in it.

        Refuses when publishing in place, since that would delete the
        working directory. A directory that does not exist is a warning.
        """
        op = "clean"
        ws = self._workspace

        if ws.in_place:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="PUBLISHING_IN_PLACE",
                    message=(
                        "No publish directory configured; "
                        "refusing to clean the working directory."
                    ),
                ),
            )

        path = ws.publish_path
        logger.info("Cleaning publish directory %s", ws.config.publish_dir)
        try:
            removed = clean_directory(path)
        except OSError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="CLEAN_FAILED",
                    message=f"Failed to remove {path}: {exc}",
                    detail={"path": str(path)},
                ),
            )

        warnings: list[str] = []
        if not removed:
            warnings.append(f"Publish directory not found: {ws.config.publish_dir}")

        return ServiceResult(
            ok=True,
            op=op,
            data={"publish_dir": str(path), "removed": removed},
            warnings=warnings,
        )
