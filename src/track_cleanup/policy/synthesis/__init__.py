"""Directive synthesis for the audio and subtitle cleanup.

Key Components:
    models: Typed directives and the synthesis result
    planner: Directive list generation from classifier decisions
"""

from track_cleanup.policy.synthesis.models import (
    DEFAULT_MUX_QUEUE_SIZE,
    CopyStream,
    Directive,
    DisableSubtitles,
    Outcome,
    RaiseMuxQueueLimit,
    SynthesisResult,
    TranscodeStream,
)
from track_cleanup.policy.synthesis.planner import (
    format_directive,
    synthesize_directives,
    transcode_title,
)

__all__ = [
    "DEFAULT_MUX_QUEUE_SIZE",
    "CopyStream",
    "Directive",
    "DisableSubtitles",
    "Outcome",
    "RaiseMuxQueueLimit",
    "SynthesisResult",
    "TranscodeStream",
    "format_directive",
    "synthesize_directives",
    "transcode_title",
]
