"""Append-only trace of the decisions made for one file."""

from __future__ import annotations

import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class TraceLog:
    """Ordered, append-only sequence of human-readable rationale lines.

    Every line is also emitted through this module's logger at INFO level,
    so a configured log file carries the same explanation the caller sees.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def add(self, message: str) -> None:
        """Append a line to the trace."""
        self._lines.append(message)
        logger.info(message)

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def render(self) -> str:
        return "\n".join(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
