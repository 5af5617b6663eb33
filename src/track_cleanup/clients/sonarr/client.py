"""Sonarr API client for title parsing."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from track_cleanup.clients.exceptions import (
    MetadataResponseError,
    MetadataServiceError,
)
from track_cleanup.clients.payload import optional_str
from track_cleanup.clients.sonarr.models import (
    SonarrLanguage,
    SonarrParseResult,
    SonarrSeries,
)
from track_cleanup.config.models import ServiceConnectionConfig

logger = logging.getLogger(__name__)


class SonarrConnectionError(MetadataServiceError):
    """Raised when connection to Sonarr fails."""


class SonarrAuthError(SonarrConnectionError):
    """Raised when Sonarr API key is invalid."""


class SonarrClient:
    """HTTP client for Sonarr v3 API."""

    def __init__(self, config: ServiceConnectionConfig) -> None:
        self._base_url = config.url.rstrip("/")
        self._api_key = config.api_key
        self._timeout = config.timeout_seconds
        self._client: httpx.Client | None = None

    def __enter__(self) -> SonarrClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                headers=self._headers(),
            )
        return self._client

    def _headers(self) -> dict[str, str]:
        return {"X-Api-Key": self._api_key}

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def parse(self, title: str) -> SonarrParseResult:
        """Match a file or release name to a series in the Sonarr library.

        Raises:
            SonarrAuthError: If the API key is rejected (401).
            SonarrConnectionError: If the request fails.
            MetadataResponseError: If the response is not valid JSON.
        """
        logger.debug("Sonarr parse lookup: %s", title)
        client = self._get_client()
        try:
            response = client.get("/api/v3/parse", params={"title": title})
            if response.status_code == 401:
                raise SonarrAuthError("Invalid API key")
            response.raise_for_status()
            data = response.json()
        except httpx.ConnectError as e:
            raise SonarrConnectionError(f"Cannot connect to Sonarr: {e}") from e
        except httpx.TimeoutException as e:
            raise SonarrConnectionError(f"Connection timeout: {e}") from e
        except httpx.HTTPError as e:
            raise SonarrConnectionError(f"Failed to parse title: {e}") from e
        except ValueError as e:
            raise MetadataResponseError(f"Invalid Sonarr response: {e}") from e

        if not isinstance(data, dict):
            raise MetadataResponseError("Sonarr parse response is not an object")
        return self._parse_parse_result(data)

    def _parse_series_response(self, data: dict[str, Any]) -> SonarrSeries:
        original_language = None
        if lang_data := data.get("originalLanguage"):
            original_language = SonarrLanguage(
                id=lang_data.get("id", 0),
                name=optional_str(lang_data.get("name")) or "Unknown",
            )

        return SonarrSeries(
            id=data.get("id", 0),
            title=data.get("title", ""),
            year=data.get("year", 0),
            original_language=original_language,
            imdb_id=optional_str(data.get("imdbId")),
            tvdb_id=data.get("tvdbId"),
        )

    def _parse_parse_result(self, data: dict[str, Any]) -> SonarrParseResult:
        series = None
        if series_data := data.get("series"):
            try:
                series = self._parse_series_response(series_data)
            except AttributeError as e:
                raise MetadataResponseError(
                    f"Unexpected Sonarr series payload: {e}"
                ) from e

        episode_ids = tuple(
            ep.get("id", 0)
            for ep in data.get("episodes") or []
            if isinstance(ep, dict)
        )
        return SonarrParseResult(series=series, episode_ids=episode_ids)
