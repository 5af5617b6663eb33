"""Radarr v3 API client (catalog system for movies)."""

from track_cleanup.clients.radarr.client import (
    RadarrAuthError,
    RadarrClient,
    RadarrConnectionError,
)
from track_cleanup.clients.radarr.models import (
    RadarrLanguage,
    RadarrMovie,
    RadarrParseResult,
)

__all__ = [
    "RadarrAuthError",
    "RadarrClient",
    "RadarrConnectionError",
    "RadarrLanguage",
    "RadarrMovie",
    "RadarrParseResult",
]
