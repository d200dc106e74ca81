"""Root CLI command for publish-easier: flags and dispatch."""

from __future__ import annotations

import logging

import click
from click.core import ParameterSource

from publish_easier import __version__
from publish_easier.commands._base import PublishCommand
from publish_easier.commands._context import AppContext
from publish_easier.config.settings import PublishSettings

logger = logging.getLogger(__name__)

_EXAMPLES = """\
  publish-easier --init                          # create publish.toml
  publish-easier                                 # build and stage only
  publish-easier -y                              # stage, bump patch version, publish
  publish-easier -y --no-increment-version       # publish without bumping
  publish-easier --increment-version             # bump version, don't publish
  publish-easier --build-command "npm run build" # override the build command
  publish-easier --clean                         # remove the publish directory"""


@click.command(
    "publish-easier",
    cls=PublishCommand,
    examples=_EXAMPLES,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="publish-easier")
@click.option("--init", "init_config", is_flag=True, help="Create publish.toml and exit.")
@click.option("--clean", is_flag=True, help="Remove the publish directory and exit.")
@click.option(
    "-y",
    "--yes",
    "auto_publish",
    is_flag=True,
    help="Publish to the registry (bumps the patch version by default).",
)
@click.option(
    "--increment-version/--no-increment-version",
    "increment",
    default=None,
    help="Force or suppress the patch version bump.",
)
@click.option("--build-command", default=None, metavar="CMD", help="Override the build command.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    init_config: bool,
    clean: bool,
    auto_publish: bool,
    increment: bool | None,
    build_command: str | None,
    config_path: str | None,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """Build a package, stage it in a publish directory, and optionally publish it."""
    if ctx.get_parameter_source("increment") in (None, ParameterSource.DEFAULT):
        increment = None

    settings = PublishSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    app = AppContext(settings)

    try:
        if init_config:
            from publish_easier.services.init import InitService

            app.emit(InitService.create_config(settings.root))
            return

        if clean:
            from publish_easier.services.clean import CleanService

            app.emit(CleanService(app.require_config("clean")).clean())
            return

        from publish_easier.services.publish import PublishService

        workspace = app.require_config("publish")
        app.emit(
            PublishService(workspace).run(
                build_command=build_command,
                auto_publish=auto_publish,
                increment=increment,
            )
        )
    except click.ClickException:
        raise
    except Exception as exc:
        logger.debug("Unhandled error", exc_info=True)
        msg = f"Error during publish process: {exc}"
        raise click.ClickException(msg) from exc


def main() -> None:
    """Console-script entry point."""
    cli()
