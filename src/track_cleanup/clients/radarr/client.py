"""Radarr API client for title parsing.

This module provides an HTTP client for the Radarr v3 API. Only the parse
endpoint is used: it matches a release/file name to a library movie.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from track_cleanup.clients.exceptions import (
    MetadataResponseError,
    MetadataServiceError,
)
from track_cleanup.clients.payload import optional_str
from track_cleanup.clients.radarr.models import (
    RadarrLanguage,
    RadarrMovie,
    RadarrParseResult,
)
from track_cleanup.config.models import ServiceConnectionConfig

logger = logging.getLogger(__name__)


class RadarrConnectionError(MetadataServiceError):
    """Raised when connection to Radarr fails."""


class RadarrAuthError(RadarrConnectionError):
    """Raised when Radarr API key is invalid."""


class RadarrClient:
    """HTTP client for Radarr v3 API."""

    def __init__(self, config: ServiceConnectionConfig) -> None:
        """Initialize the client.

        Args:
            config: Connection configuration with URL and API key.
        """
        self._base_url = config.url.rstrip("/")
        self._api_key = config.api_key
        self._timeout = config.timeout_seconds
        self._client: httpx.Client | None = None

    def __enter__(self) -> RadarrClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers(),
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        """Get request headers with API key."""
        return {"X-Api-Key": self._api_key}

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def parse(self, title: str) -> RadarrParseResult:
        """Match a file or release name to a movie in the Radarr library.

        Args:
            title: File name or free-text identity.

        Returns:
            RadarrParseResult (movie is None when nothing matched).

        Raises:
            RadarrAuthError: If the API key is rejected (401).
            RadarrConnectionError: If the request fails.
            MetadataResponseError: If the response is not valid JSON.
        """
        logger.debug("Radarr parse lookup: %s", title)
        client = self._get_client()
        try:
            response = client.get("/api/v3/parse", params={"title": title})
            if response.status_code == 401:
                raise RadarrAuthError("Invalid API key")
            response.raise_for_status()
            data = response.json()
        except httpx.ConnectError as e:
            raise RadarrConnectionError(f"Cannot connect to Radarr: {e}") from e
        except httpx.TimeoutException as e:
            raise RadarrConnectionError(f"Connection timeout: {e}") from e
        except httpx.HTTPError as e:
            raise RadarrConnectionError(f"Failed to parse title: {e}") from e
        except ValueError as e:
            raise MetadataResponseError(f"Invalid Radarr response: {e}") from e

        if not isinstance(data, dict):
            raise MetadataResponseError("Radarr parse response is not an object")
        return self._parse_parse_result(data)

    def _parse_movie_response(self, data: dict[str, Any]) -> RadarrMovie:
        """Parse movie JSON to RadarrMovie."""
        original_language = None
        if lang_data := data.get("originalLanguage"):
            original_language = RadarrLanguage(
                id=lang_data.get("id", 0),
                name=optional_str(lang_data.get("name")) or "Unknown",
            )

        return RadarrMovie(
            id=data.get("id", 0),
            title=data.get("title", ""),
            year=data.get("year", 0),
            original_language=original_language,
            imdb_id=optional_str(data.get("imdbId")),
            tmdb_id=data.get("tmdbId"),
        )

    def _parse_parse_result(self, data: dict[str, Any]) -> RadarrParseResult:
        """Parse full parse response to RadarrParseResult."""
        movie = None
        if movie_data := data.get("movie"):
            try:
                movie = self._parse_movie_response(movie_data)
            except AttributeError as e:
                raise MetadataResponseError(
                    f"Unexpected Radarr movie payload: {e}"
                ) from e
        return RadarrParseResult(movie=movie)
