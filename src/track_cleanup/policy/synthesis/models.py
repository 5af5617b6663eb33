"""Typed remux/transcode directives and synthesis results.

Directives are declarative and encoder-agnostic. They are rendered into
ffmpeg arguments only at the executor boundary
(track_cleanup.executor.ffmpeg_args).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from track_cleanup.domain.enums import StreamType

DEFAULT_MUX_QUEUE_SIZE = 9999


@dataclass(frozen=True)
class CopyStream:
    """Map an input stream to an output slot without re-encoding.

    With input_index and output_index both None, every stream of the
    type is copied (used for video).
    """

    stream_type: StreamType
    input_index: int | None = None
    output_index: int | None = None

    @property
    def copies_all(self) -> bool:
        return self.input_index is None


@dataclass(frozen=True)
class TranscodeStream:
    """Encode an input audio stream into a new output slot."""

    input_index: int
    output_index: int
    codec: str
    bitrate: int
    """Target bitrate in bits/sec."""

    channels: int | None
    """Forced channel count, only set for multichannel sources."""

    channel_layout: str | None
    language: str
    title: str


@dataclass(frozen=True)
class DisableSubtitles:
    """Write no subtitle streams at all."""


@dataclass(frozen=True)
class RaiseMuxQueueLimit:
    """Raise the muxer's packet queue size for large multi-stream files."""

    size: int = DEFAULT_MUX_QUEUE_SIZE


Directive = CopyStream | TranscodeStream | DisableSubtitles | RaiseMuxQueueLimit


class Outcome(Enum):
    """Why a cleanup pass ended the way it did."""

    PROCESS = "process"
    NO_PROBE_DATA = "no_probe_data"
    LANGUAGE_UNRESOLVED = "language_unresolved"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    WOULD_REMOVE_ALL_AUDIO = "would_remove_all_audio"
    ALREADY_COMPLIANT = "already_compliant"


@dataclass(frozen=True)
class SynthesisResult:
    """Directive list plus the decision whether any work is needed.

    directives is empty whenever process_file is False.
    """

    directives: tuple[Directive, ...]
    process_file: bool
    outcome: Outcome
    audio_outputs: int = 0
    subtitle_outputs: int = 0

    @property
    def transcodes(self) -> list[TranscodeStream]:
        return [d for d in self.directives if isinstance(d, TranscodeStream)]
