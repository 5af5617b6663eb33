"""HTTP clients for the external services used to resolve native language.

- Radarr (movies) and Sonarr (series) identify a file and report its
  IMDB ID and, when available, its original language name.
- TMDB maps an IMDB ID to the original-language code.
"""

from track_cleanup.clients.exceptions import (
    MetadataResponseError,
    MetadataServiceError,
)

__all__ = [
    "MetadataResponseError",
    "MetadataServiceError",
]
