"""Typed access to TRACK_CLEANUP_* environment variables.

EnvReader takes an optional mapping in place of os.environ, so config
loading can be tested without touching the process environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "TRACK_CLEANUP_"

_TRUE_VALUES = frozenset({"true", "1", "yes", "on"})


class EnvReader:
    """Read prefixed environment variables with type conversion.

    Names are given without the prefix; empty values count as unset.

    Example:
        reader = EnvReader(env={"TRACK_CLEANUP_RADARR_URL": "radarr:7878"})
        reader.get_str("RADARR_URL")  # "radarr:7878"
    """

    def __init__(
        self, env: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX
    ) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ
        self._prefix = prefix

    def name(self, key: str) -> str:
        """Full variable name for a key."""
        return f"{self._prefix}{key}"

    def _raw(self, key: str) -> str | None:
        value = self._env.get(self.name(key))
        if value is None or not value.strip():
            return None
        return value.strip()

    def get_str(self, key: str, default: str | None = None) -> str | None:
        value = self._raw(key)
        return default if value is None else value

    def get_int(self, key: str, default: int | None = None) -> int | None:
        """Parse an integer; invalid values log a warning and yield the default."""
        value = self._raw(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", self.name(key), value)
            return default

    def get_bool(self, key: str, default: bool | None = None) -> bool | None:
        """Parse a flag: true/1/yes/on are true, anything else is false."""
        value = self._raw(key)
        if value is None:
            return default
        return value.casefold() in _TRUE_VALUES

    def get_choice(
        self, key: str, choices: Sequence[str], default: str | None = None
    ) -> str | None:
        """Read a case-insensitive value restricted to a set of choices.

        Values outside ``choices`` log a warning and yield the default.
        """
        value = self._raw(key)
        if value is None:
            return default
        value = value.casefold()
        if value not in choices:
            logger.warning(
                "Ignoring %s=%s, expected one of: %s",
                self.name(key),
                value,
                ", ".join(choices),
            )
            return default
        return value

    def get_path(
        self, key: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Read a path, expanding ``~``.

        Args:
            key: Variable name without the prefix.
            must_exist: Fall back to the default (with a warning) when
                the path does not exist.
            default: Value returned when unset or missing.
        """
        value = self._raw(key)
        if value is None:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "%s points to a non-existent path: %s", self.name(key), value
            )
            return default
        return path
