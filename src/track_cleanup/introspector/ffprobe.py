"""Stream probing through the ffprobe binary."""

from __future__ import annotations

import json
import logging
import subprocess  # nosec B404 - ffprobe is run as a child process
from pathlib import Path
from typing import Any

from track_cleanup.domain.models import ProbeResult
from track_cleanup.executor.interface import get_tool_path
from track_cleanup.introspector.interface import MediaIntrospectionError
from track_cleanup.introspector.parsers import parse_ffprobe_output

logger = logging.getLogger(__name__)

FFPROBE_TIMEOUT_SECONDS = 120

# Only the fields the track classifier reads.
STREAM_ENTRIES = (
    "stream=index,codec_type,codec_name,channels"
    ":stream_tags=language,title"
    ":format=format_name"
)

MISSING_FFPROBE_HINT = (
    "ffprobe is not installed or not in PATH. Install ffmpeg, or set "
    "TRACK_CLEANUP_FFPROBE_PATH / [tools] ffprobe in the config file."
)


def build_probe_command(ffprobe: Path, media: Path) -> list[str]:
    """Argument vector that prints the stream entries of ``media`` as JSON."""
    return [
        str(ffprobe),
        "-v",
        "error",
        "-print_format",
        "json",
        "-show_entries",
        STREAM_ENTRIES,
        str(media),
    ]


class FFprobeIntrospector:
    """Read audio and subtitle stream metadata with ffprobe."""

    def __init__(self, ffprobe_path: Path | None = None) -> None:
        """Locate ffprobe.

        Args:
            ffprobe_path: Explicit binary; PATH is searched when None.

        Raises:
            MediaIntrospectionError: If no ffprobe binary can be found.
        """
        resolved = get_tool_path("ffprobe", ffprobe_path)
        if resolved is None:
            raise MediaIntrospectionError(MISSING_FFPROBE_HINT)
        self._ffprobe_path = resolved

    @staticmethod
    def is_available(ffprobe_path: Path | None = None) -> bool:
        return get_tool_path("ffprobe", ffprobe_path) is not None

    def get_file_info(self, path: Path) -> ProbeResult:
        """Probe ``path`` and parse its streams.

        Raises:
            MediaIntrospectionError: If the file is missing, ffprobe fails
                or times out, or its output is not JSON.
        """
        if not path.exists():
            raise MediaIntrospectionError(f"File not found: {path}")

        logger.debug("Probing %s", path)
        result = parse_ffprobe_output(path, self._probe(path))
        for warning in result.warnings:
            logger.warning("%s: %s", path, warning)
        return result

    def _probe(self, path: Path) -> dict[str, Any]:
        command = build_probe_command(self._ffprobe_path, path)
        try:
            completed = subprocess.run(  # nosec B603 - resolved binary, no shell
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=True,
                timeout=FFPROBE_TIMEOUT_SECONDS,
            )
        except subprocess.TimeoutExpired as e:
            raise MediaIntrospectionError(
                f"ffprobe timed out after {FFPROBE_TIMEOUT_SECONDS}s for {path}"
            ) from e
        except subprocess.CalledProcessError as e:
            detail = (e.stderr or "").strip() or f"exit code {e.returncode}"
            raise MediaIntrospectionError(f"ffprobe failed for {path}: {detail}") from e

        try:
            return json.loads(completed.stdout)
        except json.JSONDecodeError as e:
            raise MediaIntrospectionError(
                f"Invalid ffprobe output for {path}: {e}"
            ) from e
