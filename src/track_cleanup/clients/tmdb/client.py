"""TMDB API client for external-ID lookups.

Only the /find endpoint is used: it maps an IMDB ID to the matching
movie or TV entry, whose original_language is an ISO 639-1 code.
"""

from __future__ import annotations

import logging
import re
from typing import Any

import httpx

from track_cleanup.clients.exceptions import (
    MetadataResponseError,
    MetadataServiceError,
)
from track_cleanup.clients.payload import optional_str
from track_cleanup.clients.tmdb.models import TmdbFindResult, TmdbTitle
from track_cleanup.config.models import TmdbConfig

logger = logging.getLogger(__name__)

IMDB_ID_PATTERN = re.compile(r"tt\d{7,8}")


def extract_imdb_id(identity: str) -> str | None:
    """Pull an IMDB ID out of a file name or free-text identity.

    Identities that already start with "tt" are returned unchanged.
    Returns None when no ID is embedded.
    """
    identity = identity.strip()
    if identity.startswith("tt"):
        return identity
    match = IMDB_ID_PATTERN.search(identity)
    return match.group(0) if match else None


class TmdbConnectionError(MetadataServiceError):
    """Raised when connection to TMDB fails."""


class TmdbAuthError(TmdbConnectionError):
    """Raised when the TMDB API key is invalid."""


class TmdbClient:
    """HTTP client for the TMDB v3 API."""

    def __init__(self, config: TmdbConfig) -> None:
        self._base_url = config.url.rstrip("/")
        self._api_key = config.api_key
        self._timeout = config.timeout_seconds
        self._client: httpx.Client | None = None

    def __enter__(self) -> TmdbClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def find_by_imdb_id(self, imdb_id: str) -> TmdbFindResult:
        """Look up a title by IMDB ID.

        Args:
            imdb_id: IMDB ID such as "tt0111161".

        Raises:
            TmdbAuthError: If the API key is rejected (401).
            TmdbConnectionError: If the request fails.
            MetadataResponseError: If the response is not valid JSON.
        """
        logger.debug("TMDB find: %s", imdb_id)
        client = self._get_client()
        try:
            response = client.get(
                f"/find/{imdb_id}",
                params={
                    "api_key": self._api_key,
                    "language": "en-US",
                    "external_source": "imdb_id",
                },
            )
            if response.status_code == 401:
                raise TmdbAuthError("Invalid API key")
            response.raise_for_status()
            data = response.json()
        except httpx.ConnectError as e:
            raise TmdbConnectionError(f"Cannot connect to TMDB: {e}") from e
        except httpx.TimeoutException as e:
            raise TmdbConnectionError(f"Connection timeout: {e}") from e
        except httpx.HTTPError as e:
            raise TmdbConnectionError(f"Lookup failed for {imdb_id}: {e}") from e
        except ValueError as e:
            raise MetadataResponseError(f"Invalid TMDB response: {e}") from e

        if not isinstance(data, dict):
            raise MetadataResponseError("TMDB find response is not an object")
        return TmdbFindResult(
            movies=self._parse_titles(data.get("movie_results"), "movie"),
            tv=self._parse_titles(data.get("tv_results"), "tv"),
        )

    def _parse_titles(self, items: Any, media_type: str) -> tuple[TmdbTitle, ...]:
        if not isinstance(items, list):
            return ()
        return tuple(
            TmdbTitle(
                id=item.get("id", 0),
                media_type=media_type,
                original_language=optional_str(item.get("original_language")),
            )
            for item in items
            if isinstance(item, dict)
        )
