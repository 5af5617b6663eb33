"""Sonarr API response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SonarrLanguage:
    """Language object from Sonarr API."""

    id: int
    name: str


@dataclass(frozen=True)
class SonarrSeries:
    """Series object from Sonarr API (subset of fields)."""

    id: int
    title: str
    year: int
    original_language: SonarrLanguage | None = None
    imdb_id: str | None = None
    tvdb_id: int | None = None


@dataclass(frozen=True)
class SonarrParseResult:
    """Result from the Sonarr parse endpoint."""

    series: SonarrSeries | None
    episode_ids: tuple[int, ...] = ()
