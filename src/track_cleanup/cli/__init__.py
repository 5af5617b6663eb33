"""CLI module for track-cleanup."""

import sys
from pathlib import Path

import click

from track_cleanup.cli.exit_codes import ExitCode
from track_cleanup.config import AppConfig, build_logging_config, get_config
from track_cleanup.logging import configure_logging
from track_cleanup.logging.config import LEVELS


def _configure_logging(
    config: AppConfig,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
) -> None:
    """Configure logging from the loaded config and CLI overrides."""
    configure_logging(
        build_logging_config(
            config.logging,
            level=log_level,
            file=log_file,
            format="json" if log_json else None,
        )
    )


@click.group()
@click.version_option(package_name="track-cleanup")
@click.option(
    "--log-level",
    type=click.Choice(list(LEVELS), case_sensitive=False),
    default=None,
    help="Log level, overriding the config file.",
)
@click.option(
    "--log-file",
    type=click.Path(path_type=Path),
    default=None,
    help="Write logs to this file instead of stderr.",
)
@click.option(
    "--log-json",
    is_flag=True,
    default=False,
    help="Emit one JSON object per log record.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Config file (default: ~/.track-cleanup/config.toml).",
)
@click.pass_context
def main(
    ctx: click.Context,
    log_level: str | None,
    log_file: Path | None,
    log_json: bool,
    config_path: Path | None,
) -> None:
    """Audio and subtitle track cleanup planner.

    Keeps the native, English and undefined-language audio tracks of a
    media file (plus an AAC copy of each), filters subtitles, and prints
    the ffmpeg arguments that perform the cleanup.
    """
    ctx.ensure_object(dict)

    # Preserve a config injected by tests
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = get_config(config_path=config_path)
        except ValueError as e:
            click.echo(f"Error: Invalid configuration: {e}", err=True)
            sys.exit(ExitCode.CONFIG_ERROR)

    try:
        _configure_logging(ctx.obj["config"], log_level, log_file, log_json)
    except ValueError as e:
        click.echo(f"Error: Invalid logging configuration: {e}", err=True)
        sys.exit(ExitCode.CONFIG_ERROR)


# Command modules import this package for ExitCode
def _register_commands():
    from track_cleanup.cli.plan import plan_command
    from track_cleanup.cli.resolve import resolve_command

    main.add_command(plan_command)
    main.add_command(resolve_command)


_register_commands()
