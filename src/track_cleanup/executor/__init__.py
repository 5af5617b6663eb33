"""Execution boundary for track-cleanup.

- interface: External tool path resolution
- ffmpeg_args: Rendering of typed directives into ffmpeg arguments
"""

from track_cleanup.executor.ffmpeg_args import (
    build_ffmpeg_command,
    format_command_line,
    render_directive,
    render_directives,
)
from track_cleanup.executor.interface import get_tool_path

__all__ = [
    "build_ffmpeg_command",
    "format_command_line",
    "get_tool_path",
    "render_directive",
    "render_directives",
]
