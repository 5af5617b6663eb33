"""Sonarr v3 API client (catalog system for series)."""

from track_cleanup.clients.sonarr.client import (
    SonarrAuthError,
    SonarrClient,
    SonarrConnectionError,
)
from track_cleanup.clients.sonarr.models import (
    SonarrLanguage,
    SonarrParseResult,
    SonarrSeries,
)

__all__ = [
    "SonarrAuthError",
    "SonarrClient",
    "SonarrConnectionError",
    "SonarrLanguage",
    "SonarrParseResult",
    "SonarrSeries",
]
