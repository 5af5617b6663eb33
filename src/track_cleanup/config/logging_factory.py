"""Merging of CLI logging options into the loaded LoggingConfig."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from track_cleanup.config.models import LoggingConfig


def build_logging_config(
    base: LoggingConfig,
    *,
    level: str | None = None,
    file: Path | None = None,
    format: str | None = None,
    include_stderr: bool | None = None,
) -> LoggingConfig:
    """Return ``base`` with every option that is not None overridden.

    Rotation settings (max_bytes, backup_count) only come from the config
    file.

    Raises:
        ValueError: If an override fails LoggingConfig validation.
    """
    overrides = {
        name: value
        for name, value in (
            ("level", level),
            ("file", file),
            ("format", format),
            ("include_stderr", include_stderr),
        )
        if value is not None
    }
    return replace(base, **overrides)
