"""Pure parsing functions for ffprobe JSON output.

These functions transform ffprobe JSON data into ProbedStream objects.
All functions are pure (no I/O, no side effects) for easy testing.
"""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Any

from track_cleanup.domain.enums import StreamType
from track_cleanup.domain.models import DEFAULT_LANGUAGE, ProbedStream, ProbeResult
from track_cleanup.introspector.mappings import map_stream_type

logger = logging.getLogger(__name__)


def sanitize_string(value: str | None) -> str | None:
    """Replace invalid UTF-8 characters in a tag value."""
    if value is None:
        return None
    return value.encode("utf-8", errors="replace").decode("utf-8")


def _lower_or_none(value: Any) -> str | None:
    if not isinstance(value, str) or not value.strip():
        return None
    return value.strip().lower()


def parse_channels(value: Any, file_path: str | None = None) -> int | None:
    """Validate an ffprobe channel count.

    Returns:
        The channel count, or None if missing or not a positive integer.
    """
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning(
            "Expected int for channels, got %s%s",
            type(value).__name__,
            f" in {file_path}" if file_path else "",
        )
        return None
    if value <= 0:
        logger.warning(
            "Invalid channel count %d%s",
            value,
            f" in {file_path}" if file_path else "",
        )
        return None
    return value


def parse_stream(
    stream: dict[str, Any],
    type_index: int,
    file_path: str | None = None,
) -> ProbedStream:
    """Parse a single ffprobe stream dict into a ProbedStream.

    Args:
        stream: Stream dictionary from ffprobe JSON.
        type_index: Position of the stream among streams of the same type.
        file_path: Optional file path for context in warning messages.
    """
    stream_type = map_stream_type(stream.get("codec_type"))
    tags = stream.get("tags") or {}

    channels = None
    if stream_type is StreamType.AUDIO:
        channels = parse_channels(stream.get("channels"), file_path)

    return ProbedStream(
        index=type_index,
        stream_type=stream_type,
        codec_name=_lower_or_none(stream.get("codec_name")),
        language=_lower_or_none(tags.get("language")) or DEFAULT_LANGUAGE,
        title=sanitize_string(tags.get("title")),
        channels=channels,
        global_index=stream.get("index"),
    )


def parse_streams(
    streams: list[dict[str, Any]],
    file_path: str | None = None,
) -> list[ProbedStream]:
    """Parse ffprobe streams, assigning type-relative indices in input order."""
    counters: Counter[StreamType] = Counter()
    parsed: list[ProbedStream] = []
    for stream in streams:
        stream_type = map_stream_type(stream.get("codec_type"))
        parsed.append(parse_stream(stream, counters[stream_type], file_path))
        counters[stream_type] += 1
    return parsed


def _container_from(path: Path, format_info: dict[str, Any]) -> str:
    """Container name: file extension, else first ffprobe format_name."""
    if path.suffix:
        return path.suffix.lstrip(".").lower()
    format_name = format_info.get("format_name") or ""
    return format_name.split(",")[0]


def parse_ffprobe_output(path: Path, data: dict[str, Any]) -> ProbeResult:
    """Parse ffprobe JSON output into a ProbeResult.

    Args:
        path: Path to the media file.
        data: Parsed ffprobe JSON output.
    """
    warnings: list[str] = []
    raw_streams = data.get("streams")
    if not isinstance(raw_streams, list):
        raw_streams = []
    streams = parse_streams(raw_streams, str(path))
    if not streams:
        warnings.append("No streams found in file")

    return ProbeResult(
        file_path=path,
        container=_container_from(path, data.get("format") or {}),
        streams=tuple(streams),
        warnings=tuple(warnings),
    )
