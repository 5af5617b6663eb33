"""Language resolver.

Resolves the native (original production) language of a media file from
its file name. Sources are tried as an ordered list of strategies and the
first one that yields a code wins:

1. The higher-priority catalog system (Radarr or Sonarr). Its parse
   endpoint identifies the title; the reported original-language name is
   used directly, otherwise its IMDB ID is looked up on TMDB.
2. The lower-priority catalog system, the same way.
3. TMDB directly, with an IMDB ID embedded in the file name.

A failure in any source is recorded and treated as "nothing found". There
are no retries.
"""

from __future__ import annotations

import logging
from functools import partial
from collections.abc import Callable
from typing import TYPE_CHECKING

from track_cleanup.clients.exceptions import MetadataServiceError
from track_cleanup.clients.radarr import RadarrClient
from track_cleanup.clients.sonarr import SonarrClient
from track_cleanup.clients.tmdb import TmdbClient, extract_imdb_id
from track_cleanup.config.models import MetadataConfig
from track_cleanup.language import language_name_to_alpha2, normalize_alpha2

if TYPE_CHECKING:
    from track_cleanup.workflow.trace import TraceLog

logger = logging.getLogger(__name__)

Strategy = Callable[[str, "TraceLog | None"], "str | None"]
"""A resolution step: (identity, trace) -> 2-letter code or None."""


def _note(trace: TraceLog | None, message: str) -> None:
    if trace is not None:
        trace.add(message)
    else:
        logger.info(message)


class LanguageResolver:
    """Resolve a file identity to a 2-letter native-language code."""

    def __init__(
        self,
        radarr: RadarrClient | None = None,
        sonarr: SonarrClient | None = None,
        tmdb: TmdbClient | None = None,
        priority: str = "radarr",
    ) -> None:
        """Initialize the resolver.

        Args:
            radarr: Radarr client, or None when Radarr is not configured.
            sonarr: Sonarr client, or None when Sonarr is not configured.
            tmdb: TMDB client, or None when no TMDB API key is configured.
            priority: "sonarr" queries Sonarr first; any other value
                queries Radarr first.
        """
        self._radarr = radarr
        self._sonarr = sonarr
        self._tmdb = tmdb
        self._priority = priority

    @classmethod
    def from_config(cls, config: MetadataConfig) -> LanguageResolver:
        """Build a resolver with a client for every configured service."""
        return cls(
            radarr=RadarrClient(config.radarr) if config.radarr else None,
            sonarr=SonarrClient(config.sonarr) if config.sonarr else None,
            tmdb=TmdbClient(config.tmdb) if config.tmdb else None,
            priority=config.priority,
        )

    def __enter__(self) -> LanguageResolver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close every underlying HTTP client."""
        for client in (self._radarr, self._sonarr, self._tmdb):
            if client is not None:
                client.close()

    def strategies(self) -> list[tuple[str, Strategy]]:
        """Ordered (source name, strategy) pairs for the configured services."""
        catalogs: list[tuple[str, Strategy]] = []
        if self._radarr is not None:
            catalogs.append(("Radarr", partial(self._from_radarr, self._radarr)))
        if self._sonarr is not None:
            catalogs.append(("Sonarr", partial(self._from_sonarr, self._sonarr)))
        if self._priority == "sonarr":
            catalogs.sort(key=lambda item: item[0] != "Sonarr")

        if self._tmdb is not None:
            catalogs.append(("TMDB", self._from_identity))
        return catalogs

    def resolve(self, identity: str, trace: TraceLog | None = None) -> str | None:
        """Resolve the native language for a file identity.

        Args:
            identity: File name or equivalent free-text identity.
            trace: Optional trace receiving rationale lines.

        Returns:
            Normalized 2-letter code, or None when every source failed.
        """
        strategies = self.strategies()
        if not strategies:
            logger.warning("No metadata services configured, cannot resolve language")
            return None

        for source, strategy in strategies:
            try:
                code = normalize_alpha2(strategy(identity, trace))
            except MetadataServiceError as e:
                _note(trace, f"{source} lookup failed: {e}")
                continue
            if code is not None:
                logger.debug("Resolved '%s' to '%s' via %s", identity, code, source)
                return code
            logger.debug("%s yielded no language for '%s'", source, identity)
        return None

    def _from_radarr(
        self, radarr: RadarrClient, identity: str, trace: TraceLog | None
    ) -> str | None:
        movie = radarr.parse(identity).movie
        if movie is None:
            logger.debug("Radarr did not match '%s'", identity)
            return None
        if movie.imdb_id:
            _note(trace, f"Grabbed IMDB ID ({movie.imdb_id}) from Radarr")
        if movie.original_language is not None:
            code = language_name_to_alpha2(movie.original_language.name)
            if code is not None:
                return code
        if movie.imdb_id:
            return self._from_tmdb(movie.imdb_id)
        return None

    def _from_sonarr(
        self, sonarr: SonarrClient, identity: str, trace: TraceLog | None
    ) -> str | None:
        series = sonarr.parse(identity).series
        if series is None:
            logger.debug("Sonarr did not match '%s'", identity)
            return None
        if series.imdb_id:
            _note(trace, f"Grabbed IMDB ID ({series.imdb_id}) from Sonarr")
        if series.original_language is not None:
            code = language_name_to_alpha2(series.original_language.name)
            if code is not None:
                return code
        if series.imdb_id:
            return self._from_tmdb(series.imdb_id)
        return None

    def _from_identity(self, identity: str, trace: TraceLog | None) -> str | None:
        imdb_id = extract_imdb_id(identity)
        if imdb_id is None:
            logger.debug("No IMDB ID found in '%s'", identity)
            return None
        return self._from_tmdb(imdb_id)

    def _from_tmdb(self, imdb_id: str) -> str | None:
        if self._tmdb is None:
            logger.debug("TMDB is not configured, skipping lookup of %s", imdb_id)
            return None
        return self._tmdb.find_by_imdb_id(imdb_id).original_language
