"""Selection policy builder.

Turns raw cleanup settings and a resolved native language into a
SelectionPolicy.
"""

from __future__ import annotations

import logging

from track_cleanup.language import (
    UNDEFINED,
    alpha3_variants,
    normalize_alpha2,
    parse_language_list,
)
from track_cleanup.policy.exceptions import UnknownLanguageError
from track_cleanup.policy.models import CleanupSettings, SelectionPolicy, SubtitleFilter

logger = logging.getLogger(__name__)

DEFAULT_AAC_BITRATE_PER_CHANNEL = 64000
DEFAULT_LOSSLESS_BITRATE = 640000

# Always kept alongside the native language
BASELINE_AUDIO_LANGUAGES = ("eng", UNDEFINED)


def parse_bitrate(value: str | int | None, default: int, name: str) -> int:
    """Parse a bitrate setting, falling back to the default.

    Non-integer and non-positive values are replaced by the default
    rather than rejected.
    """
    try:
        bitrate = int(str(value).strip())
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using default %d", name, value, default)
        return default
    if bitrate <= 0:
        logger.warning("Non-positive %s %d, using default %d", name, bitrate, default)
        return default
    return bitrate


def parse_subtitle_filter(value: str | None) -> frozenset[str] | SubtitleFilter:
    """Parse the subtitle language setting.

    An absent or empty value (including one made only of separators)
    yields the KEEP_ALL sentinel, never an empty set.
    """
    languages = parse_language_list(value)
    if not languages:
        return SubtitleFilter.KEEP_ALL
    return frozenset(languages)


def build_policy(native_language: str, settings: CleanupSettings) -> SelectionPolicy:
    """Build the selection policy for one file.

    Args:
        native_language: Resolved ISO 639-1 code ("cn" is accepted as an
            alias for "zh").
        settings: Validated cleanup settings.

    Returns:
        The immutable SelectionPolicy.

    Raises:
        UnknownLanguageError: If the code has no 3-letter mapping.
    """
    alpha2 = normalize_alpha2(native_language)
    native_forms = alpha3_variants(alpha2)
    if alpha2 is None or not native_forms:
        raise UnknownLanguageError(native_language)

    allowed = set(native_forms)
    allowed.update(BASELINE_AUDIO_LANGUAGES)
    allowed.update(parse_language_list(settings.extra_languages))

    return SelectionPolicy(
        native_language=alpha2,
        allowed_audio_languages=frozenset(allowed),
        subtitle_languages=parse_subtitle_filter(settings.subtitle_languages),
        remove_commentary_subtitles=settings.remove_commentary_subs,
        aac_bitrate_per_channel=parse_bitrate(
            settings.aac_bitrate_per_channel,
            DEFAULT_AAC_BITRATE_PER_CHANNEL,
            "aac_bitrate_per_channel",
        ),
        lossless_fallback_bitrate=parse_bitrate(
            settings.lossless_default_bitrate,
            DEFAULT_LOSSLESS_BITRATE,
            "lossless_default_bitrate",
        ),
    )
