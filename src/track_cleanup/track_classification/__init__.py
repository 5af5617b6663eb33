"""Audio and subtitle stream classification."""

from .models import ClassificationResult, StreamAction, StreamDecision
from .service import (
    classify_audio_streams,
    classify_streams,
    classify_subtitle_streams,
)

__all__ = [
    "ClassificationResult",
    "StreamAction",
    "StreamDecision",
    "classify_audio_streams",
    "classify_streams",
    "classify_subtitle_streams",
]
