"""MediaIntrospector interface for stream metadata extraction."""

from pathlib import Path
from typing import Protocol

from track_cleanup.domain.models import ProbeResult


class MediaIntrospectionError(Exception):
    """Raised when media introspection fails."""


class MediaIntrospector(Protocol):
    """Protocol for probe data sources.

    Implementations report streams in the container's own order, which the
    classifier treats as priority order.
    """

    def get_file_info(self, path: Path) -> ProbeResult:
        """Extract stream metadata from a media file.

        Raises:
            MediaIntrospectionError: If the file cannot be introspected.
        """
        ...
