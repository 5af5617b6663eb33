"""Rendering of typed directives into ffmpeg arguments.

This is the only place that knows the ffmpeg wire format. Nothing here
runs ffmpeg.
"""

from __future__ import annotations

import shlex
from collections.abc import Iterable
from pathlib import Path

from track_cleanup.domain.enums import StreamType
from track_cleanup.policy.synthesis.models import (
    CopyStream,
    Directive,
    DisableSubtitles,
    RaiseMuxQueueLimit,
    TranscodeStream,
)


def _render_copy(directive: CopyStream) -> list[str]:
    spec = directive.stream_type.ffmpeg_specifier
    if directive.copies_all:
        return ["-map", f"0:{spec}", f"-c:{spec}", "copy"]
    return [
        "-map",
        f"0:{spec}:{directive.input_index}",
        f"-c:{spec}:{directive.output_index}",
        "copy",
    ]


def _render_transcode(directive: TranscodeStream) -> list[str]:
    spec = StreamType.AUDIO.ffmpeg_specifier
    out = f"{spec}:{directive.output_index}"
    args = [
        "-map",
        f"0:{spec}:{directive.input_index}",
        f"-c:{out}",
        directive.codec,
        f"-b:{out}",
        str(directive.bitrate),
    ]
    if directive.channels is not None:
        args.extend([f"-ac:{out}", str(directive.channels)])
    if directive.channel_layout is not None:
        args.extend([f"-channel_layout:{out}", directive.channel_layout])
    args.extend(
        [
            f"-metadata:s:{out}",
            f"language={directive.language}",
            f"-metadata:s:{out}",
            f"title={directive.title}",
        ]
    )
    return args


def render_directive(directive: Directive) -> list[str]:
    """Render one directive as ffmpeg arguments.

    Raises:
        TypeError: If the directive type is not recognized.
    """
    if isinstance(directive, CopyStream):
        return _render_copy(directive)
    if isinstance(directive, TranscodeStream):
        return _render_transcode(directive)
    if isinstance(directive, DisableSubtitles):
        return ["-sn"]
    if isinstance(directive, RaiseMuxQueueLimit):
        return ["-max_muxing_queue_size", str(directive.size)]
    raise TypeError(f"Unsupported directive: {directive!r}")


def render_directives(directives: Iterable[Directive]) -> list[str]:
    """Render a directive list as one flat ffmpeg argument list."""
    args: list[str] = []
    for directive in directives:
        args.extend(render_directive(directive))
    return args


def build_ffmpeg_command(
    ffmpeg: Path | str,
    input_path: Path | str,
    output_path: Path | str,
    directives: Iterable[Directive],
) -> list[str]:
    """Build the full ffmpeg command line for a directive list.

    Returns:
        List of command line arguments, ending with the output path.
    """
    return [
        str(ffmpeg),
        "-i",
        str(input_path),
        *render_directives(directives),
        "-y",
        str(output_path),
    ]


def format_command_line(args: Iterable[str]) -> str:
    """Shell-quote an argument list for display."""
    return shlex.join(list(args))
