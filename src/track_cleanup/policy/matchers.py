"""Title matching for commentary, audio-description and SDH subtitles."""

import re
from re import Pattern

DEFAULT_COMMENTARY_PATTERNS: tuple[str, ...] = (
    "commentary",
    "description",
    "sdh",
)


class CommentaryMatcher:
    """Case-insensitive search of subtitle titles against keyword patterns.

    A title matches when any pattern is found anywhere in it, so "English
    SDH" and "Director's Commentary" both match. Untitled tracks never do.
    """

    def __init__(
        self, patterns: tuple[str, ...] = DEFAULT_COMMENTARY_PATTERNS
    ) -> None:
        """Compile the patterns.

        Raises:
            ValueError: If a pattern is not a valid regex.
        """
        compiled: list[tuple[str, Pattern[str]]] = []
        for position, pattern in enumerate(patterns):
            try:
                compiled.append((pattern, re.compile(pattern, re.IGNORECASE)))
            except re.error as e:
                raise ValueError(
                    f"Invalid regex pattern at commentary_patterns[{position}]: {e}"
                ) from e
        self._compiled = tuple(compiled)

    def match(self, title: str | None) -> str | None:
        """First pattern found in ``title``, or None."""
        if not title:
            return None
        return next(
            (pattern for pattern, regex in self._compiled if regex.search(title)),
            None,
        )

    def is_commentary(self, title: str | None) -> bool:
        return self.match(title) is not None
