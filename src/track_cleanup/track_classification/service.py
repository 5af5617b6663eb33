"""Stream classification service.

Decides, in input order, which audio and subtitle streams to keep. Input
order is trusted as priority order: the first audio stream of each
allowed language wins and later ones are dropped as duplicates.

Decisions carry their rationale; the directive synthesizer writes them
to the trace once output slots are known.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from track_cleanup.domain.enums import StreamType
from track_cleanup.domain.models import DEFAULT_LANGUAGE, ProbedStream
from track_cleanup.policy.matchers import CommentaryMatcher
from track_cleanup.policy.models import SelectionPolicy
from track_cleanup.track_classification.models import (
    MISSING_CODEC,
    ClassificationResult,
    StreamAction,
    StreamDecision,
)

logger = logging.getLogger(__name__)

TARGET_AUDIO_CODEC = "aac"
UNKNOWN_CODEC = "unknown"

# Codec values ffprobe reports for subtitle streams it cannot decode
_INVALID_SUBTITLE_CODECS = frozenset({"", "none"})

_commentary_matcher = CommentaryMatcher()


def classify_audio_streams(
    streams: Iterable[ProbedStream],
    policy: SelectionPolicy,
    kept_languages: dict[str, bool] | None = None,
) -> list[StreamDecision]:
    """Decide KEEP, KEEP_AND_TRANSCODE or DROP for each audio stream.

    Args:
        streams: Audio streams in input order.
        policy: Selection policy for the file.
        kept_languages: Pass-scoped record of languages already kept;
            updated in place. A fresh mapping is used when omitted.

    Returns:
        One decision per stream, in input order.
    """
    if kept_languages is None:
        kept_languages = {}

    decisions: list[StreamDecision] = []
    for stream in streams:
        lang = stream.language or DEFAULT_LANGUAGE
        codec = stream.codec_name or UNKNOWN_CODEC

        if not policy.allows_audio_language(lang):
            action, reason = StreamAction.DROP, "unwanted language"
        elif kept_languages.get(lang):
            action, reason = StreamAction.DROP, "duplicate, keeping first only"
        else:
            kept_languages[lang] = True
            if codec == TARGET_AUDIO_CODEC:
                action, reason = StreamAction.KEEP, "allowed language, already AAC"
            else:
                action = StreamAction.KEEP_AND_TRANSCODE
                reason = "allowed language, adding AAC copy"

        logger.debug("Audio %d [%s]: %s (%s)", stream.index, lang, action.value, reason)
        decisions.append(StreamDecision(stream.index, action, reason, stream))
    return decisions


def classify_subtitle_streams(
    streams: Iterable[ProbedStream],
    policy: SelectionPolicy,
) -> list[StreamDecision]:
    """Decide KEEP or DROP for each subtitle stream.

    Streams without a usable codec are always dropped, whatever the
    language filter says.
    """
    decisions: list[StreamDecision] = []
    for stream in streams:
        if (stream.codec_name or "") in _INVALID_SUBTITLE_CODECS:
            decisions.append(
                StreamDecision(stream.index, StreamAction.DROP, MISSING_CODEC, stream)
            )
            continue

        lang = stream.language or DEFAULT_LANGUAGE
        title = (stream.title or "").lower()

        action, reason = StreamAction.KEEP, "allowed"
        if not policy.allows_subtitle_language(lang):
            action, reason = StreamAction.DROP, f"unwanted language [{lang}]"
        elif policy.remove_commentary_subtitles and _commentary_matcher.is_commentary(
            title
        ):
            action, reason = StreamAction.DROP, f'commentary/SDH: "{title}"'

        logger.debug(
            "Subtitle %d [%s]: %s (%s)", stream.index, lang, action.value, reason
        )
        decisions.append(StreamDecision(stream.index, action, reason, stream))
    return decisions


def classify_streams(
    streams: Iterable[ProbedStream],
    policy: SelectionPolicy,
) -> ClassificationResult:
    """Classify every audio and subtitle stream of a file.

    Video and other streams are ignored here; video is always copied.
    """
    streams = list(streams)
    kept_languages: dict[str, bool] = {}
    audio = classify_audio_streams(
        (s for s in streams if s.stream_type is StreamType.AUDIO),
        policy,
        kept_languages,
    )
    subtitles = classify_subtitle_streams(
        (s for s in streams if s.stream_type is StreamType.SUBTITLE),
        policy,
    )
    return ClassificationResult(
        audio=tuple(audio),
        subtitles=tuple(subtitles),
        kept_languages=kept_languages,
    )
