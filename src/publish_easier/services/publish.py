"""PublishService: build, stage, and optionally publish a package.

Pipeline: PREPARE -> BUILD -> READ MANIFEST -> COPY -> VERSION
          -> WRITE MANIFEST(S) -> [PACK -> PUBLISH -> CLEAN ARTIFACTS]

Each step runs once. A failed step ends the run with ``ok=False``; work
already done (a half-populated publish directory) is left in place.
"""

from __future__ import annotations

from typing import Any

import structlog

from publish_easier.domain.manifest import build_publish_manifest
from publish_easier.domain.version import increment_patch, resolve_increment
from publish_easier.infrastructure.filesystem import (
    clean_directory,
    copy_item,
    read_manifest,
    remove_matching,
    write_manifest,
)
from publish_easier.infrastructure.process import CommandError, run_command
from publish_easier.services.base import BaseService
from publish_easier.services.result import ServiceError, ServiceResult

log = structlog.get_logger(__name__)

OP = "publish"


def _fail(
    code: str,
    message: str,
    *,
    data: dict[str, Any],
    warnings: list[str],
    **detail: Any,
) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=OP,
        data=data,
        warnings=warnings,
        error=ServiceError(code=code, message=message, detail=detail),
    )


class PublishService(BaseService):
    """Runs the full publish flow against the workspace."""

    def run(
        self,
        *,
        build_command: str | None = None,
        auto_publish: bool = False,
        increment: bool | None = None,
    ) -> ServiceResult:
        """Execute the pipeline.

        Args:
            build_command: Overrides ``build_command`` from the config.
            auto_publish: Run the pack and publish commands at the end.
            increment: Tri-state version bump override; None defers to
                *auto_publish*.
        """
        ws = self._workspace
        cfg = ws.config
        warnings: list[str] = []
        data: dict[str, Any] = {
            "root": str(ws.root),
            "publish_dir": str(ws.publish_path),
        }

        command = build_command or cfg.build_command
        if not command:
            return _fail(
                "NO_BUILD_COMMAND",
                'No build command configured. Set build_command in publish.toml, e.g. '
                'build_command = "npm run build"',
                data=data,
                warnings=warnings,
            )

        log.info(
            "Using config",
            build_command=command,
            publish_dir=cfg.publish_dir or "(current directory)",
            copy_rules=len(cfg.copy_rules),
            filters=len(cfg.filters),
        )

        # PREPARE
        if ws.in_place:
            log.info("Publishing in current directory")
        else:
            log.info("Cleaning publish directory", path=cfg.publish_dir)
            try:
                clean_directory(ws.publish_path, recreate=True)
            except OSError as exc:
                return _fail(
                    "PREPARE_FAILED",
                    f"Could not prepare publish directory: {exc}",
                    data=data,
                    warnings=warnings,
                )

        # BUILD
        log.info("Building project", command=command)
        try:
            run_command(command, ws.root)
        except CommandError as exc:
            return _fail(
                "BUILD_FAILED",
                str(exc),
                data=data,
                warnings=warnings,
                command=exc.command,
                returncode=exc.returncode,
            )
        log.info("Build completed")

        # READ MANIFEST
        try:
            manifest = read_manifest(ws.manifest_path)
        except FileNotFoundError:
            return _fail(
                "MANIFEST_NOT_FOUND",
                f"Manifest not found: {cfg.manifest}",
                data=data,
                warnings=warnings,
                path=str(ws.manifest_path),
            )
        except ValueError as exc:
            return _fail(
                "INVALID_MANIFEST",
                f"Could not parse {cfg.manifest}: {exc}",
                data=data,
                warnings=warnings,
                path=str(ws.manifest_path),
            )

        # COPY
        copied: list[str] = []
        skipped: list[str] = []
        data["copied"] = copied
        data["skipped"] = skipped
        for rule in cfg.copy_rules:
            log.info("Copying", item=rule.description)
            try:
                found = copy_item(rule, ws.root, ws.publish_path)
            except (OSError, ValueError) as exc:
                return _fail(
                    "COPY_FAILED",
                    f"Error copying {rule.description}: {exc}",
                    data=data,
                    warnings=warnings,
                    source=rule.source,
                    target=rule.target,
                )
            if found:
                copied.append(rule.target)
            else:
                skipped.append(rule.source)
                warnings.append(f"Source file/directory not found: {rule.source}")

        # VERSION
        should_increment = resolve_increment(increment, auto_publish=auto_publish)
        previous = manifest.get("version")
        version = previous
        if should_increment:
            try:
                version = increment_patch(previous)
            except ValueError as exc:
                return _fail("INVALID_VERSION", str(exc), data=data, warnings=warnings)
        data["previous_version"] = previous
        data["version"] = version
        if version != previous:
            log.info("Updating version", previous=previous, version=version)

        # WRITE MANIFEST(S)
        source_updated = False
        try:
            write_manifest(
                ws.publish_manifest_path,
                build_publish_manifest(manifest, version, cfg.filters),
            )
            log.info("Publish manifest created", path=str(ws.publish_manifest_path))
            if should_increment and version != previous:
                write_manifest(ws.manifest_path, {**manifest, "version": version})
                source_updated = True
                log.info("Source manifest updated", path=str(ws.manifest_path))
        except OSError as exc:
            return _fail(
                "WRITE_FAILED",
                f"Could not write manifest: {exc}",
                data=data,
                warnings=warnings,
            )
        data["source_manifest_updated"] = source_updated

        # PACK -> PUBLISH -> CLEAN ARTIFACTS
        data["published"] = False
        data["artifacts_removed"] = []
        if auto_publish:
            steps = (("pack", cfg.pack_command), ("publish", cfg.publish_command))
            for step, step_command in steps:
                if not step_command:
                    continue
                log.info("Running registry command", step=step, command=step_command)
                try:
                    run_command(step_command, ws.publish_path)
                except CommandError as exc:
                    return _fail(
                        "PUBLISH_FAILED",
                        str(exc),
                        data=data,
                        warnings=warnings,
                        step=step,
                        command=exc.command,
                        returncode=exc.returncode,
                    )
            data["published"] = True
            log.info("Package published")

            removed, failures = remove_matching(ws.publish_path, cfg.artifact_pattern)
            data["artifacts_removed"] = removed
            warnings.extend(failures)
            log.info("Temporary files cleaned", removed=len(removed))

        return ServiceResult(ok=True, op=OP, data=data, warnings=warnings)
