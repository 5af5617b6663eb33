"""CLI resolve command for track-cleanup."""

import json
import sys

import click

from track_cleanup.cli.exit_codes import ExitCode
from track_cleanup.config import AppConfig
from track_cleanup.language import alpha2_to_alpha3, get_language_name
from track_cleanup.resolution import LanguageResolver
from track_cleanup.workflow import TraceLog


@click.command("resolve")
@click.argument("identity")
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)
@click.pass_context
def resolve_command(ctx: click.Context, identity: str, output_format: str) -> None:
    """Resolve the native language of a title.

    IDENTITY is a file name, release name or IMDB ID.
    """
    config: AppConfig = ctx.obj["config"]
    trace = TraceLog()

    with LanguageResolver.from_config(config.metadata) as resolver:
        if not resolver.strategies():
            click.echo(
                "Error: No metadata services configured. Set Radarr, Sonarr "
                "or TMDB credentials in the config file or environment.",
                err=True,
            )
            sys.exit(ExitCode.CONFIG_ERROR)
        code = resolver.resolve(identity, trace)

    alpha3 = alpha2_to_alpha3(code) if code else None
    if output_format == "json":
        click.echo(
            json.dumps(
                {
                    "identity": identity,
                    "language": code,
                    "alpha3": alpha3,
                    "trace": list(trace.lines),
                },
                indent=2,
            )
        )
    else:
        for line in trace:
            click.echo(line)
        if code is None:
            click.echo(f"Could not determine the original language of {identity}")
        else:
            click.echo(
                f"{identity}: {code} ({alpha3 or 'no ISO 639-2 code'}, "
                f"{get_language_name(code)})"
            )

    if code is None:
        sys.exit(ExitCode.LANGUAGE_UNRESOLVED)
