"""Domain models for probed media files.

These models represent a probe result independent of the tool that
produced it. They are immutable for the duration of one cleanup pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from track_cleanup.domain.enums import StreamType

DEFAULT_LANGUAGE = "und"
DEFAULT_CHANNELS = 2


@dataclass(frozen=True)
class ProbedStream:
    """One elementary stream as reported by the probe."""

    index: int
    """Position within its type-specific ordering (0-based, input order)."""

    stream_type: StreamType
    codec_name: str | None = None  # lowercase, None when the probe omits it
    language: str = DEFAULT_LANGUAGE  # lowercase 3-letter tag
    title: str | None = None
    channels: int | None = None  # audio only
    global_index: int | None = None  # container-wide index, diagnostics only

    @property
    def channel_count(self) -> int:
        """Channel count, defaulting to stereo when the probe omits it."""
        return self.channels or DEFAULT_CHANNELS


@dataclass(frozen=True)
class OriginalCounts:
    """Number of audio and subtitle streams in the source file."""

    audio: int
    subtitle: int


@dataclass(frozen=True)
class ProbeResult:
    """Probe result for one media file."""

    file_path: Path
    container: str
    """Source container extension without the dot (kept unchanged on output)."""

    streams: tuple[ProbedStream, ...] = ()
    warnings: tuple[str, ...] = ()

    def streams_of_type(self, stream_type: StreamType) -> list[ProbedStream]:
        return [s for s in self.streams if s.stream_type is stream_type]

    @property
    def audio_streams(self) -> list[ProbedStream]:
        return self.streams_of_type(StreamType.AUDIO)

    @property
    def subtitle_streams(self) -> list[ProbedStream]:
        return self.streams_of_type(StreamType.SUBTITLE)

    @property
    def original_counts(self) -> OriginalCounts:
        return OriginalCounts(
            audio=len(self.audio_streams),
            subtitle=len(self.subtitle_streams),
        )
