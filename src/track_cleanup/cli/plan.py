"""CLI plan command for track-cleanup."""

import json
import logging
import sys
from pathlib import Path
from typing import Any

import click

from track_cleanup.cli.exit_codes import ExitCode
from track_cleanup.config import AppConfig
from track_cleanup.executor import (
    build_ffmpeg_command,
    format_command_line,
    get_tool_path,
)
from track_cleanup.introspector import FFprobeIntrospector, MediaIntrospectionError
from track_cleanup.policy import (
    CleanupSettings,
    PolicyValidationError,
    cleanup_settings_from_dict,
    load_cleanup_settings,
)
from track_cleanup.policy.synthesis import format_directive
from track_cleanup.resolution import LanguageResolver
from track_cleanup.workflow import CleanupProcessor, CleanupResult

logger = logging.getLogger(__name__)


def _load_settings(config: AppConfig, policy_path: Path | None) -> CleanupSettings:
    """Load cleanup settings from a policy file or the config [cleanup] table.

    Raises:
        PolicyValidationError: If the settings are invalid.
        FileNotFoundError: If the policy file does not exist.
    """
    if policy_path is not None:
        return load_cleanup_settings(policy_path)
    return cleanup_settings_from_dict(config.cleanup)


def _format_text(result: CleanupResult, command: list[str] | None) -> str:
    lines = list(result.trace)
    lines.append("")
    if not result.process_file:
        lines.append(f"No processing needed ({result.outcome.value}).")
        return "\n".join(lines)

    lines.append("Directives:")
    for directive in result.directives:
        lines.append(f"  {format_directive(directive)}")
    lines.append("")
    if command is not None:
        lines.append(f"Command: {format_command_line(command)}")
    else:
        lines.append(f"ffmpeg arguments: {format_command_line(result.ffmpeg_args())}")
    return "\n".join(lines)


@click.command("plan")
@click.argument("file", type=click.Path(exists=False, path_type=Path))
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="YAML cleanup policy (replaces the [cleanup] config table).",
)
@click.option(
    "--language",
    "-l",
    default=None,
    help="Native language as a 2-letter code (skips metadata lookups).",
)
@click.option(
    "--identity",
    default=None,
    help="Title used for language lookups (default: the file name).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Output path; prints the full ffmpeg command line.",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def plan_command(
    ctx: click.Context,
    file: Path,
    policy_path: Path | None,
    language: str | None,
    identity: str | None,
    output_path: Path | None,
    output_format: str,
) -> None:
    """Plan the audio and subtitle cleanup of a media file.

    FILE is the path to the media file. Nothing is written: the decisions
    and the ffmpeg arguments that implement them are printed.
    """
    config: AppConfig = ctx.obj["config"]

    if not file.exists():
        click.echo(f"Error: File not found: {file}", err=True)
        sys.exit(ExitCode.TARGET_NOT_FOUND)

    try:
        settings = _load_settings(config, policy_path)
    except (PolicyValidationError, FileNotFoundError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(ExitCode.POLICY_VALIDATION_ERROR)

    if not FFprobeIntrospector.is_available(config.tools.ffprobe):
        click.echo(
            "Error: ffprobe is not installed or not in PATH.\n"
            "Install ffmpeg to use media introspection features.",
            err=True,
        )
        sys.exit(ExitCode.FFPROBE_NOT_FOUND)

    try:
        probe = FFprobeIntrospector(config.tools.ffprobe).get_file_info(file)
    except MediaIntrospectionError as e:
        click.echo(f"Error: Could not parse file: {file}", err=True)
        click.echo(f"Reason: {e}", err=True)
        sys.exit(ExitCode.ANALYSIS_ERROR)

    if language:
        result = CleanupProcessor(None, settings).process(
            probe, file_identity=identity, native_language=language
        )
    else:
        with LanguageResolver.from_config(config.metadata) as resolver:
            result = CleanupProcessor(resolver, settings).process(
                probe, file_identity=identity
            )

    command = None
    if output_path is not None and result.process_file:
        ffmpeg: Path | str | None = get_tool_path("ffmpeg", config.tools.ffmpeg)
        if ffmpeg is None:
            logger.warning("ffmpeg not found, printing the command with 'ffmpeg'")
            ffmpeg = "ffmpeg"
        command = build_ffmpeg_command(ffmpeg, file, output_path, result.directives)

    if output_format == "json":
        data: dict[str, Any] = result.to_dict()
        data["file"] = str(file)
        if command is not None:
            data["command"] = command
        click.echo(json.dumps(data, indent=2))
    else:
        click.echo(_format_text(result, command))
