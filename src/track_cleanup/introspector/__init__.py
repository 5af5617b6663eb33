"""Introspector module for track-cleanup.

- MediaIntrospector: Protocol defining the probe data source interface
- FFprobeIntrospector: Production implementation using ffprobe
- MediaIntrospectionError: Exception for introspection failures
- parse_ffprobe_output: Pure conversion of ffprobe JSON to a ProbeResult
"""

from track_cleanup.introspector.ffprobe import FFprobeIntrospector
from track_cleanup.introspector.interface import (
    MediaIntrospectionError,
    MediaIntrospector,
)
from track_cleanup.introspector.parsers import parse_ffprobe_output

__all__ = [
    "FFprobeIntrospector",
    "MediaIntrospectionError",
    "MediaIntrospector",
    "parse_ffprobe_output",
]
