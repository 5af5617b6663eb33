"""TMDB API response models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TmdbTitle:
    """A movie or TV entry from a TMDB find response."""

    id: int
    media_type: str  # "movie" or "tv"
    original_language: str | None = None


@dataclass(frozen=True)
class TmdbFindResult:
    """Result of looking up an external identifier on TMDB.

    Movie results are preferred over TV results when both are present.
    """

    movies: tuple[TmdbTitle, ...] = ()
    tv: tuple[TmdbTitle, ...] = ()

    @property
    def best_match(self) -> TmdbTitle | None:
        if self.movies:
            return self.movies[0]
        if self.tv:
            return self.tv[0]
        return None

    @property
    def original_language(self) -> str | None:
        match = self.best_match
        return match.original_language if match else None
