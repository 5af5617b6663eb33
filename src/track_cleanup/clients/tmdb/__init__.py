"""TMDB v3 API client (metadata-lookup service)."""

from track_cleanup.clients.tmdb.client import (
    TmdbAuthError,
    TmdbClient,
    TmdbConnectionError,
    extract_imdb_id,
)
from track_cleanup.clients.tmdb.models import TmdbFindResult, TmdbTitle

__all__ = [
    "TmdbAuthError",
    "TmdbClient",
    "TmdbConnectionError",
    "TmdbFindResult",
    "TmdbTitle",
    "extract_imdb_id",
]
