"""Unit tests for the selection policy builder."""

import logging

import pytest

from track_cleanup.policy import (
    CleanupSettings,
    SubtitleFilter,
    UnknownLanguageError,
    build_policy,
    parse_bitrate,
    parse_subtitle_filter,
)


class TestParseBitrate:
    """Tests for parse_bitrate function."""

    def test_valid_string(self):
        """Test that integer strings are parsed."""
        assert parse_bitrate(" 96000 ", 64000, "aac_bitrate_per_channel") == 96000

    @pytest.mark.parametrize("value", ["fast", "", None, "64k", "0", "-1"])
    def test_invalid_falls_back(self, value, caplog):
        """Test that invalid values use the default with a warning."""
        with caplog.at_level(logging.WARNING):
            assert parse_bitrate(value, 64000, "aac_bitrate_per_channel") == 64000
        assert "using default 64000" in caplog.text


class TestParseSubtitleFilter:
    """Tests for parse_subtitle_filter function."""

    def test_language_set(self):
        """Test that a list of codes becomes a set."""
        assert parse_subtitle_filter("eng, FRE") == frozenset({"eng", "fre"})

    @pytest.mark.parametrize("value", [None, "", " ", ",", " , ,"])
    def test_empty_is_keep_all(self, value):
        """Test that empty values mean keep-all, never an empty set."""
        assert parse_subtitle_filter(value) is SubtitleFilter.KEEP_ALL


class TestBuildPolicy:
    """Tests for build_policy function."""

    def test_default_allowed_languages(self):
        """Test native, English and undefined are always allowed."""
        policy = build_policy("ja", CleanupSettings())

        assert policy.native_language == "ja"
        assert policy.allowed_audio_languages == frozenset({"jpn", "eng", "und"})

    def test_extra_languages(self):
        """Test that extra languages are trimmed, lowercased and added."""
        policy = build_policy("ja", CleanupSettings(extra_languages=" FRE, spa,, "))
        assert policy.allowed_audio_languages == frozenset(
            {"jpn", "eng", "und", "fre", "spa"}
        )

    def test_both_alpha3_forms_allowed(self):
        """Test that bibliographic and terminological codes are allowed."""
        policy = build_policy("de", CleanupSettings())
        assert {"ger", "deu"} <= policy.allowed_audio_languages

    def test_cn_remapped_to_chinese(self):
        """Test that 'cn' is remapped to 'zh' before conversion."""
        policy = build_policy("cn", CleanupSettings())

        assert policy.native_language == "zh"
        assert "zho" in policy.allowed_audio_languages
        assert "chi" in policy.allowed_audio_languages
        assert "cn" not in policy.allowed_audio_languages

    @pytest.mark.parametrize("code", ["xx", "", "klingon"])
    def test_unmapped_language_raises(self, code):
        """Test that unknown native languages are rejected."""
        with pytest.raises(UnknownLanguageError):
            build_policy(code, CleanupSettings())

    def test_english_native(self):
        """Test an English title keeps only eng and und by default."""
        policy = build_policy("en", CleanupSettings())
        assert policy.allowed_audio_languages == frozenset({"eng", "und"})

    def test_bitrates(self):
        """Test bitrate parsing and fallback."""
        policy = build_policy(
            "ja",
            CleanupSettings(
                aac_bitrate_per_channel="96000", lossless_default_bitrate="n/a"
            ),
        )

        assert policy.aac_bitrate_per_channel == 96000
        assert policy.lossless_fallback_bitrate == 640000
        assert policy.aac_bitrate(6) == 576000

    def test_subtitle_settings(self):
        """Test subtitle filter and commentary flag."""
        policy = build_policy(
            "ja",
            CleanupSettings(subtitle_languages=None, remove_commentary_subs=False),
        )

        assert policy.keeps_all_subtitle_languages
        assert policy.remove_commentary_subtitles is False
        assert policy.allows_subtitle_language("fre")


class TestSelectionPolicy:
    """Tests for SelectionPolicy helpers."""

    def test_undefined_subtitles_exempt(self, japanese_policy):
        """Test that 'und' subtitles pass any language filter."""
        assert japanese_policy.allows_subtitle_language("und")
        assert japanese_policy.allows_subtitle_language("eng")
        assert not japanese_policy.allows_subtitle_language("fre")

    def test_describe_subtitle_filter(self, japanese_policy):
        """Test the human-readable filter description."""
        assert japanese_policy.describe_subtitle_filter() == "eng"
        keep_all = build_policy("ja", CleanupSettings(subtitle_languages=""))
        assert keep_all.describe_subtitle_filter() == "all"
