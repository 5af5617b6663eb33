"""Cleanup policy data models.

CleanupSettings holds raw, user-supplied settings (config file or policy
file). SelectionPolicy is the concrete, immutable policy computed from
those settings and the file's native language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from track_cleanup.language import UNDEFINED


class SubtitleFilter(Enum):
    """Sentinel values for the subtitle language filter."""

    KEEP_ALL = "keep_all"
    """No language filter: every subtitle language is kept."""


@dataclass(frozen=True)
class CleanupSettings:
    """Raw cleanup settings, validated but not yet interpreted.

    Bitrates stay strings here. They are parsed (with fallback to the
    defaults) when the selection policy is built.
    """

    extra_languages: str = ""
    """Comma-separated 3-letter codes kept in addition to native/eng/und."""

    aac_bitrate_per_channel: str = "64000"
    lossless_default_bitrate: str = "640000"

    subtitle_languages: str | None = "eng"
    """Comma-separated 3-letter codes. Empty or None keeps all languages."""

    remove_commentary_subs: bool = True


@dataclass(frozen=True)
class SelectionPolicy:
    """Immutable stream-selection policy for one file."""

    native_language: str
    """ISO 639-1 code the policy was built for."""

    allowed_audio_languages: frozenset[str]
    subtitle_languages: frozenset[str] | SubtitleFilter
    remove_commentary_subtitles: bool
    aac_bitrate_per_channel: int
    lossless_fallback_bitrate: int
    """Reserved for streams that report no bitrate; not used by selection."""

    @property
    def keeps_all_subtitle_languages(self) -> bool:
        return self.subtitle_languages is SubtitleFilter.KEEP_ALL

    def allows_audio_language(self, language: str) -> bool:
        return language in self.allowed_audio_languages

    def allows_subtitle_language(self, language: str) -> bool:
        """Check a subtitle language against the filter.

        Undefined-language subtitles always pass.
        """
        if self.subtitle_languages is SubtitleFilter.KEEP_ALL:
            return True
        return language == UNDEFINED or language in self.subtitle_languages

    def aac_bitrate(self, channels: int) -> int:
        """Target AAC bitrate in bits/sec for a channel count."""
        return channels * self.aac_bitrate_per_channel

    def describe_subtitle_filter(self) -> str:
        if self.subtitle_languages is SubtitleFilter.KEEP_ALL:
            return "all"
        return ", ".join(sorted(self.subtitle_languages))
