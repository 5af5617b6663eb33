"""Native language resolution from external metadata services."""

from track_cleanup.resolution.resolver import LanguageResolver, Strategy

__all__ = [
    "LanguageResolver",
    "Strategy",
]
