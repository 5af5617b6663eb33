"""JSON log formatting for track-cleanup."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries, plus the ones Formatter adds
_RECORD_ATTRS: frozenset[str] = frozenset(vars(logging.makeLogRecord({}))) | {
    "message",
    "asctime",
    "taskName",
}

# Added by MediaFileFilter; media_file is promoted to a top-level key
_FILTER_ATTRS = frozenset({"media_file", "file_tag"})


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Values passed through ``extra=`` on the logging call."""
    return {
        key: value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRS
        and key not in _FILTER_ATTRS
        and not key.startswith("_")
    }


class JSONFormatter(logging.Formatter):
    """Render each record as one JSON object per line.

    Keys:
    - timestamp: ISO-8601 in UTC, taken from the record
    - level, message
    - logger: omitted for the root logger
    - file: media file of the cleanup pass, when one is active
    - context: values passed via ``extra``
    - exception: formatted traceback, when present
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
        }
        if record.name != "root":
            entry["logger"] = record.name

        media_file = getattr(record, "media_file", None)
        if media_file:
            entry["file"] = media_file

        context = _extra_fields(record)
        if context:
            entry["context"] = context

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str, ensure_ascii=False)
