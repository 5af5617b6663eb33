"""Per-file logging context.

The file currently being planned is held in a context variable and
injected into every log record by MediaFileFilter, so log lines from the
resolver, the clients and the planner can be attributed to one file.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_media_file: contextvars.ContextVar[Path | None] = contextvars.ContextVar(
    "media_file", default=None
)


def get_media_file() -> Path | None:
    """Get the file of the cleanup pass in progress, if any."""
    return _media_file.get()


@contextmanager
def media_file_context(path: Path | str) -> Generator[None, None, None]:
    """Attribute log records emitted inside the block to a media file.

    Example:
        with media_file_context("/media/Movie (2001).mkv"):
            logger.info("Resolving language")  # tagged [Movie (2001).mkv]
    """
    token = _media_file.set(Path(path))
    try:
        yield
    finally:
        _media_file.reset(token)


class MediaFileFilter(logging.Filter):
    """Inject the current media file into log records.

    Sets ``media_file`` (full path or None) for the JSON format and
    ``file_tag`` (``"[name] "`` or empty) for the text format. Never drops
    a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        path = get_media_file()
        record.media_file = str(path) if path is not None else None
        record.file_tag = f"[{path.name}] " if path is not None else ""
        return True
