"""Domain enums for track-cleanup."""

from enum import Enum


class StreamType(Enum):
    """Elementary stream type as reported by the probe."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    OTHER = "other"  # attachments, data streams, anything unrecognized

    @property
    def ffmpeg_specifier(self) -> str:
        """Stream specifier letter used in ffmpeg -map/-c options."""
        return {
            StreamType.VIDEO: "v",
            StreamType.AUDIO: "a",
            StreamType.SUBTITLE: "s",
            StreamType.OTHER: "d",
        }[self]
