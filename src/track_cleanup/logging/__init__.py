"""Logging setup for track-cleanup.

Text or JSON output to stderr and/or a rotating file, with every record
tagged with the media file being planned.
"""

from track_cleanup.logging.config import configure_logging
from track_cleanup.logging.context import (
    MediaFileFilter,
    get_media_file,
    media_file_context,
)
from track_cleanup.logging.handlers import JSONFormatter

__all__ = [
    "JSONFormatter",
    "MediaFileFilter",
    "configure_logging",
    "get_media_file",
    "media_file_context",
]
