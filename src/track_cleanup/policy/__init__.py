"""Cleanup policy: raw settings, validation and the selection policy."""

from track_cleanup.policy.builder import (
    DEFAULT_AAC_BITRATE_PER_CHANNEL,
    DEFAULT_LOSSLESS_BITRATE,
    build_policy,
    parse_bitrate,
    parse_subtitle_filter,
)
from track_cleanup.policy.exceptions import (
    PolicyError,
    PolicyValidationError,
    UnknownLanguageError,
)
from track_cleanup.policy.loader import (
    cleanup_settings_from_dict,
    load_cleanup_settings,
)
from track_cleanup.policy.matchers import CommentaryMatcher
from track_cleanup.policy.models import (
    CleanupSettings,
    SelectionPolicy,
    SubtitleFilter,
)

__all__ = [
    "DEFAULT_AAC_BITRATE_PER_CHANNEL",
    "DEFAULT_LOSSLESS_BITRATE",
    "CleanupSettings",
    "CommentaryMatcher",
    "PolicyError",
    "PolicyValidationError",
    "SelectionPolicy",
    "SubtitleFilter",
    "UnknownLanguageError",
    "build_policy",
    "cleanup_settings_from_dict",
    "load_cleanup_settings",
    "parse_bitrate",
    "parse_subtitle_filter",
]
