"""Unit tests for the language resolver."""

from unittest.mock import MagicMock, patch

import pytest

from track_cleanup.clients.radarr import (
    RadarrClient,
    RadarrConnectionError,
    RadarrLanguage,
    RadarrMovie,
    RadarrParseResult,
)
from track_cleanup.clients.sonarr import (
    SonarrClient,
    SonarrLanguage,
    SonarrParseResult,
    SonarrSeries,
)
from track_cleanup.clients.tmdb import (
    TmdbClient,
    TmdbConnectionError,
    TmdbFindResult,
    TmdbTitle,
)
from track_cleanup.config.models import (
    MetadataConfig,
    ServiceConnectionConfig,
    TmdbConfig,
)
from track_cleanup.resolution import LanguageResolver
from track_cleanup.workflow import TraceLog


def _radarr(movie: RadarrMovie | None) -> MagicMock:
    client = MagicMock(spec=RadarrClient)
    client.parse.return_value = RadarrParseResult(movie=movie)
    return client


def _sonarr(series: SonarrSeries | None) -> MagicMock:
    client = MagicMock(spec=SonarrClient)
    client.parse.return_value = SonarrParseResult(series=series)
    return client


def _tmdb(language: str | None) -> MagicMock:
    client = MagicMock(spec=TmdbClient)
    client.find_by_imdb_id.return_value = TmdbFindResult(
        movies=(TmdbTitle(id=1, media_type="movie", original_language=language),)
    )
    return client


def _movie(imdb_id: str | None = "tt0245429", language: str | None = None):
    return RadarrMovie(
        id=1,
        title="Spirited Away",
        year=2001,
        imdb_id=imdb_id,
        original_language=RadarrLanguage(id=8, name=language) if language else None,
    )


def _series(imdb_id: str | None = "tt5753856", language: str | None = None):
    return SonarrSeries(
        id=1,
        title="Dark",
        year=2017,
        imdb_id=imdb_id,
        original_language=SonarrLanguage(id=4, name=language) if language else None,
    )


class TestStrategyOrder:
    """Tests for strategy ordering."""

    def test_radarr_first_by_default(self):
        """Test default order: Radarr, Sonarr, then TMDB."""
        resolver = LanguageResolver(
            radarr=_radarr(None), sonarr=_sonarr(None), tmdb=_tmdb(None)
        )
        assert [name for name, _ in resolver.strategies()] == [
            "Radarr",
            "Sonarr",
            "TMDB",
        ]

    def test_sonarr_priority(self):
        """Test that sonarr priority swaps the catalog order."""
        resolver = LanguageResolver(
            radarr=_radarr(None),
            sonarr=_sonarr(None),
            tmdb=_tmdb(None),
            priority="sonarr",
        )
        assert [name for name, _ in resolver.strategies()] == [
            "Sonarr",
            "Radarr",
            "TMDB",
        ]

    def test_unconfigured_services_are_skipped(self):
        """Test that only configured services get a strategy."""
        resolver = LanguageResolver(sonarr=_sonarr(None))
        assert [name for name, _ in resolver.strategies()] == ["Sonarr"]

    def test_no_services_resolves_unknown(self):
        """Test that a resolver without services returns None."""
        assert LanguageResolver().resolve("Movie (2001).mkv") is None

    def test_strategies_are_bound_to_their_client(self):
        """Test that a strategy can be called on its own."""
        radarr = _radarr(_movie(language="Japanese"))
        strategy = dict(LanguageResolver(radarr=radarr).strategies())["Radarr"]

        assert strategy("x.mkv", None) == "ja"
        radarr.parse.assert_called_once_with("x.mkv")


class TestResolve:
    """Tests for LanguageResolver.resolve."""

    def test_radarr_language_name(self):
        """Test that Radarr's original language name is used directly."""
        tmdb = _tmdb("en")
        resolver = LanguageResolver(
            radarr=_radarr(_movie(language="Japanese")), tmdb=tmdb
        )
        trace = TraceLog()

        assert resolver.resolve("Spirited Away (2001).mkv", trace) == "ja"
        tmdb.find_by_imdb_id.assert_not_called()
        assert "Grabbed IMDB ID (tt0245429) from Radarr" in trace.lines

    def test_radarr_imdb_id_through_tmdb(self):
        """Test TMDB lookup with the IMDB ID Radarr reported."""
        tmdb = _tmdb("ko")
        resolver = LanguageResolver(radarr=_radarr(_movie()), tmdb=tmdb)

        assert resolver.resolve("Parasite (2019).mkv") == "ko"
        tmdb.find_by_imdb_id.assert_called_once_with("tt0245429")

    def test_unmapped_language_name_falls_back_to_tmdb(self):
        """Test that an unknown language name triggers a TMDB lookup."""
        tmdb = _tmdb("ja")
        resolver = LanguageResolver(
            radarr=_radarr(_movie(language="Unknown")), tmdb=tmdb
        )

        assert resolver.resolve("x.mkv") == "ja"
        tmdb.find_by_imdb_id.assert_called_once_with("tt0245429")

    def test_falls_back_to_sonarr(self):
        """Test that Sonarr is tried when Radarr finds nothing."""
        sonarr = _sonarr(_series(language="German"))
        resolver = LanguageResolver(radarr=_radarr(None), sonarr=sonarr)
        trace = TraceLog()

        assert resolver.resolve("Dark.S01E01.mkv", trace) == "de"
        sonarr.parse.assert_called_once_with("Dark.S01E01.mkv")
        assert "Grabbed IMDB ID (tt5753856) from Sonarr" in trace.lines

    def test_transport_failure_moves_to_next_source(self):
        """Test that a failing catalog is logged and skipped."""
        radarr = MagicMock(spec=RadarrClient)
        radarr.parse.side_effect = RadarrConnectionError("Cannot connect to Radarr")
        sonarr = _sonarr(_series(language="German"))
        resolver = LanguageResolver(radarr=radarr, sonarr=sonarr)
        trace = TraceLog()

        assert resolver.resolve("Dark.S01E01.mkv", trace) == "de"
        assert "Radarr lookup failed: Cannot connect to Radarr" in trace.lines

    def test_tmdb_failure_inside_catalog_step(self):
        """Test that a TMDB failure during a catalog step is recoverable."""
        tmdb = MagicMock(spec=TmdbClient)
        tmdb.find_by_imdb_id.side_effect = [
            TmdbConnectionError("Lookup failed"),
            TmdbFindResult(
                tv=(TmdbTitle(id=2, media_type="tv", original_language="de"),)
            ),
        ]
        resolver = LanguageResolver(
            radarr=_radarr(_movie()), sonarr=_sonarr(_series()), tmdb=tmdb
        )
        trace = TraceLog()

        assert resolver.resolve("Dark.S01E01.mkv", trace) == "de"
        assert "Radarr lookup failed: Lookup failed" in trace.lines

    def test_filename_last_resort(self):
        """Test direct TMDB lookup with an ID embedded in the file name."""
        tmdb = _tmdb("fr")
        resolver = LanguageResolver(radarr=_radarr(None), tmdb=tmdb)

        assert resolver.resolve("Amelie (2001) [tt0211915].mkv") == "fr"
        tmdb.find_by_imdb_id.assert_called_once_with("tt0211915")

    def test_filename_without_id_makes_no_call(self):
        """Test that the last resort needs an ID in the name."""
        tmdb = _tmdb("fr")
        resolver = LanguageResolver(tmdb=tmdb)

        assert resolver.resolve("Amelie (2001).mkv") is None
        tmdb.find_by_imdb_id.assert_not_called()

    def test_catalog_without_tmdb(self):
        """Test that an IMDB ID alone is not enough without TMDB."""
        resolver = LanguageResolver(radarr=_radarr(_movie()))
        assert resolver.resolve("x.mkv") is None

    @pytest.mark.parametrize(("raw", "expected"), [("cn", "zh"), ("JA", "ja")])
    def test_output_normalized(self, raw, expected):
        """Test that TMDB codes are lowercased and aliases remapped."""
        resolver = LanguageResolver(radarr=_radarr(_movie()), tmdb=_tmdb(raw))
        assert resolver.resolve("x.mkv") == expected

    def test_blank_code_is_nothing(self):
        """Test that an empty TMDB language counts as no result."""
        resolver = LanguageResolver(radarr=_radarr(_movie()), tmdb=_tmdb(""))
        assert resolver.resolve("x.mkv") is None

    def test_first_success_short_circuits(self):
        """Test that later sources are not queried after a success."""
        sonarr = _sonarr(_series(language="German"))
        resolver = LanguageResolver(
            radarr=_radarr(_movie(language="Japanese")), sonarr=sonarr
        )

        assert resolver.resolve("x.mkv") == "ja"
        sonarr.parse.assert_not_called()

    @patch("track_cleanup.clients.tmdb.client.httpx.Client")
    def test_malformed_tmdb_language_is_nothing(self, mock_client_class: MagicMock):
        """Test that a numeric TMDB language resolves to nothing, not an error."""
        response = MagicMock(status_code=200)
        response.json.return_value = {
            "movie_results": [{"id": 1, "original_language": 123}]
        }
        mock_client_class.return_value.get.return_value = response
        resolver = LanguageResolver(tmdb=TmdbClient(TmdbConfig(api_key="t")))

        assert resolver.resolve("Movie tt1234567.mkv") is None


class TestFromConfig:
    """Tests for LanguageResolver.from_config."""

    def test_builds_configured_clients(self):
        """Test that clients exist only for configured services."""
        config = MetadataConfig(
            priority="sonarr",
            sonarr=ServiceConnectionConfig(url="http://nas:8989", api_key="k"),
            tmdb=TmdbConfig(api_key="t"),
        )

        with LanguageResolver.from_config(config) as resolver:
            assert [name for name, _ in resolver.strategies()] == ["Sonarr", "TMDB"]

    def test_close_closes_clients(self):
        """Test that close is forwarded to every client."""
        radarr, tmdb = _radarr(None), _tmdb(None)
        LanguageResolver(radarr=radarr, tmdb=tmdb).close()

        radarr.close.assert_called_once()
        tmdb.close.assert_called_once()
