"""Data models for stream classification."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from track_cleanup.domain.models import ProbedStream

# Reason given to subtitle streams dropped for having no usable codec
MISSING_CODEC = "missing codec"


class StreamAction(Enum):
    """What to do with one audio or subtitle stream."""

    KEEP = "keep"
    DROP = "drop"
    KEEP_AND_TRANSCODE = "keep_and_transcode"
    """Keep the original and add an AAC companion track (audio only)."""

    @property
    def is_kept(self) -> bool:
        return self is not StreamAction.DROP


@dataclass(frozen=True)
class StreamDecision:
    """Decision for one stream, with the rationale shown in the trace."""

    input_index: int
    """Type-relative input position of the stream."""

    action: StreamAction
    reason: str
    stream: ProbedStream


@dataclass(frozen=True)
class ClassificationResult:
    """Audio and subtitle decisions for one classification pass."""

    audio: tuple[StreamDecision, ...] = ()
    subtitles: tuple[StreamDecision, ...] = ()
    kept_languages: dict[str, bool] = field(default_factory=dict)
    """Audio languages kept during this pass (first-seen wins)."""

    @property
    def kept_audio(self) -> list[StreamDecision]:
        return [d for d in self.audio if d.action.is_kept]

    @property
    def kept_subtitles(self) -> list[StreamDecision]:
        return [d for d in self.subtitles if d.action.is_kept]
