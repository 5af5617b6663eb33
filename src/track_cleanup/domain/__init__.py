"""Domain models shared across track-cleanup modules."""

from track_cleanup.domain.enums import StreamType
from track_cleanup.domain.models import OriginalCounts, ProbedStream, ProbeResult

__all__ = [
    "OriginalCounts",
    "ProbeResult",
    "ProbedStream",
    "StreamType",
]
