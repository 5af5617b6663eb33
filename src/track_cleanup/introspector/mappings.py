"""Pure mapping functions for ffprobe to track-cleanup type conversions.

These functions have no side effects and no external dependencies,
making them trivially testable.
"""

from track_cleanup.domain.enums import StreamType

FFPROBE_TO_STREAM_TYPE: dict[str, StreamType] = {
    "video": StreamType.VIDEO,
    "audio": StreamType.AUDIO,
    "subtitle": StreamType.SUBTITLE,
}

# Named layouts for standard channel counts
CHANNEL_LAYOUT_NAMES: dict[int, str] = {
    1: "mono",
    2: "stereo",
    6: "5.1",
    8: "7.1",
}


def map_stream_type(codec_type: str | None) -> StreamType:
    """Map ffprobe codec_type to a StreamType (unknown types map to OTHER)."""
    return FFPROBE_TO_STREAM_TYPE.get(codec_type or "", StreamType.OTHER)


def map_channel_layout(channels: int) -> str | None:
    """Map a channel count to its named ffmpeg layout.

    Returns:
        "mono", "stereo", "5.1" or "7.1", or None for other counts.
    """
    return CHANNEL_LAYOUT_NAMES.get(channels)
