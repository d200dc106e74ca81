"""AppContext: per-invocation state for the CLI.

Created once by the root command. Provides lazy Workspace loading and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from publish_easier.output.formatters import OutputSettings, format_result
from publish_easier.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from publish_easier.config.settings import PublishSettings
    from publish_easier.infrastructure.workspace import Workspace


class AppContext:
    """Shared context for one CLI invocation.

    The workspace is loaded lazily so ``--init`` never reads the config.
    """

    def __init__(self, settings: PublishSettings) -> None:
        self.settings = settings
        self._workspace: Workspace | None = None

        from publish_easier.config.logging import configure_logging

        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def workspace(self) -> Workspace:
        """The workspace (config loaded on first access)."""
        if self._workspace is None:
            from publish_easier.infrastructure.workspace import Workspace

            self._workspace = Workspace.from_settings(self.settings)
        return self._workspace

    def require_config(self, op: str) -> Workspace:
        """Return the workspace, or exit 1 when no usable config was loaded."""
        ws = self.workspace
        if ws.config.is_empty:
            self.emit(
                ServiceResult(
                    ok=False,
                    op=op,
                    error=ServiceError(
                        code="NO_CONFIG",
                        message=(
                            "No config file found. Create one first with: publish-easier --init"
                        ),
                        detail={"root": str(ws.root)},
                    ),
                )
            )
        return ws

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
