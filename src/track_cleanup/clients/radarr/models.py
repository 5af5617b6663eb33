"""Radarr API response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RadarrLanguage:
    """Language object from Radarr API."""

    id: int
    name: str  # e.g., "English", "French"


@dataclass(frozen=True)
class RadarrMovie:
    """Movie object from Radarr API (subset of fields)."""

    id: int
    title: str
    year: int
    original_language: RadarrLanguage | None = None
    imdb_id: str | None = None
    tmdb_id: int | None = None


@dataclass(frozen=True)
class RadarrParseResult:
    """Result from the Radarr parse endpoint.

    movie is None when Radarr cannot match the title to a library entry.
    """

    movie: RadarrMovie | None
