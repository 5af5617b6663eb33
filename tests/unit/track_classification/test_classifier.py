"""Unit tests for audio and subtitle stream classification."""

from track_cleanup.policy import CleanupSettings, build_policy
from track_cleanup.track_classification import (
    StreamAction,
    classify_audio_streams,
    classify_streams,
    classify_subtitle_streams,
)
from track_cleanup.track_classification.models import MISSING_CODEC


class TestClassifyAudioStreams:
    """Tests for classify_audio_streams function."""

    def test_first_seen_language_wins(self, make_audio, japanese_policy):
        """Test that only the first stream of each language is kept."""
        streams = [
            make_audio(0, "jpn", "dts", 6),
            make_audio(1, "eng", "aac", 2),
            make_audio(2, "jpn", "aac", 2),
        ]

        decisions = classify_audio_streams(streams, japanese_policy)

        assert [d.action for d in decisions] == [
            StreamAction.KEEP_AND_TRANSCODE,
            StreamAction.KEEP,
            StreamAction.DROP,
        ]
        assert decisions[2].reason == "duplicate, keeping first only"

    def test_aac_is_kept_without_transcode(self, make_audio, japanese_policy):
        """Test that an AAC source never gets a companion track."""
        decisions = classify_audio_streams(
            [make_audio(0, "jpn", "aac", 6)], japanese_policy
        )
        assert decisions[0].action is StreamAction.KEEP
        assert decisions[0].reason == "allowed language, already AAC"

    def test_unwanted_language_dropped(self, make_audio, japanese_policy):
        """Test that languages outside the allowed set are dropped."""
        decisions = classify_audio_streams(
            [make_audio(0, "fre", "ac3", 6)], japanese_policy
        )
        assert decisions[0].action is StreamAction.DROP
        assert decisions[0].reason == "unwanted language"

    def test_undefined_language_allowed(self, make_audio, japanese_policy):
        """Test that untagged audio is treated as allowed 'und'."""
        decisions = classify_audio_streams(
            [make_audio(0, "und", "ac3", 2)], japanese_policy
        )
        assert decisions[0].action is StreamAction.KEEP_AND_TRANSCODE

    def test_missing_codec_treated_as_unknown(self, make_audio, japanese_policy):
        """Test that a missing codec is not AAC and gets a companion track."""
        decisions = classify_audio_streams(
            [make_audio(0, "eng", None, None)], japanese_policy
        )
        assert decisions[0].action is StreamAction.KEEP_AND_TRANSCODE

    def test_kept_languages_updated(self, make_audio, japanese_policy):
        """Test that the pass-scoped language record is updated in place."""
        kept: dict[str, bool] = {}
        classify_audio_streams(
            [make_audio(0, "jpn"), make_audio(1, "fre")], japanese_policy, kept
        )
        assert kept == {"jpn": True}

    def test_kept_languages_do_not_leak(self, make_audio, japanese_policy):
        """Test that separate passes do not share state."""
        streams = [make_audio(0, "jpn")]
        first = classify_audio_streams(streams, japanese_policy)
        second = classify_audio_streams(streams, japanese_policy)
        assert first[0].action is second[0].action is StreamAction.KEEP

    def test_drop_reasons(self, make_audio, japanese_policy):
        """Test the rationale attached to dropped streams."""
        decisions = classify_audio_streams(
            [
                make_audio(0, "jpn", "dts", 6),
                make_audio(1, "fre", "ac3", 6),
                make_audio(2, "jpn", "aac", 2),
            ],
            japanese_policy,
        )
        assert [d.reason for d in decisions[1:]] == [
            "unwanted language",
            "duplicate, keeping first only",
        ]


class TestClassifySubtitleStreams:
    """Tests for classify_subtitle_streams function."""

    def test_language_and_commentary(self, make_subtitle, japanese_policy):
        """Test the combined language and commentary filter."""
        streams = [
            make_subtitle(0, "eng", title="Commentary"),
            make_subtitle(1, "eng"),
            make_subtitle(2, "fre"),
        ]

        decisions = classify_subtitle_streams(streams, japanese_policy)

        assert [d.action for d in decisions] == [
            StreamAction.DROP,
            StreamAction.KEEP,
            StreamAction.DROP,
        ]
        assert decisions[0].reason == 'commentary/SDH: "commentary"'
        assert decisions[2].reason == "unwanted language [fre]"

    def test_undefined_language_exempt(self, make_subtitle, japanese_policy):
        """Test that 'und' subtitles pass the language filter."""
        decisions = classify_subtitle_streams(
            [make_subtitle(0, "und", "hdmv_pgs_subtitle")], japanese_policy
        )
        assert decisions[0].action is StreamAction.KEEP

    def test_missing_codec_always_dropped(self, make_subtitle):
        """Test that codec-less streams are dropped even with keep-all."""
        policy = build_policy("ja", CleanupSettings(subtitle_languages=""))
        decisions = classify_subtitle_streams(
            [make_subtitle(0, "eng", None), make_subtitle(1, "eng", "none")],
            policy,
        )

        assert all(d.action is StreamAction.DROP for d in decisions)
        assert {d.reason for d in decisions} == {MISSING_CODEC}

    def test_commentary_kept_when_disabled(self, make_subtitle):
        """Test that commentary removal can be switched off."""
        policy = build_policy(
            "ja", CleanupSettings(remove_commentary_subs=False)
        )
        decisions = classify_subtitle_streams(
            [make_subtitle(0, "eng", title="English SDH")], policy
        )
        assert decisions[0].action is StreamAction.KEEP

    def test_keep_all_languages(self, make_subtitle):
        """Test that an empty filter keeps every language."""
        policy = build_policy("ja", CleanupSettings(subtitle_languages=None))
        decisions = classify_subtitle_streams(
            [make_subtitle(0, "fre"), make_subtitle(1, "ger")], policy
        )
        assert all(d.action is StreamAction.KEEP for d in decisions)


class TestClassifyStreams:
    """Tests for classify_streams function."""

    def test_splits_by_type(
        self, make_probe, make_audio, make_subtitle, japanese_policy
    ):
        """Test that video is ignored and audio/subtitles are classified."""
        probe = make_probe(
            make_audio(0, "jpn", "dts", 6),
            make_audio(1, "jpn", "aac", 2),
            make_subtitle(0, "eng"),
        )

        result = classify_streams(probe.streams, japanese_policy)

        assert len(result.audio) == 2
        assert len(result.subtitles) == 1
        assert [d.input_index for d in result.kept_audio] == [0]
        assert len(result.kept_subtitles) == 1
        assert result.kept_languages == {"jpn": True}
