"""Configuration data models.

This module defines dataclasses for track-cleanup configuration options.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

TMDB_DEFAULT_URL = "https://api.themoviedb.org/3"

VALID_PRIORITIES = ("radarr", "sonarr")


def _normalize_url(url: str) -> str:
    """Prepend http:// to bare host:port values."""
    url = url.strip()
    if url and "://" not in url:
        return f"http://{url}"
    return url


@dataclass(frozen=True)
class ServiceConnectionConfig:
    """Configuration for connecting to a catalog system (Radarr or Sonarr)."""

    url: str
    """Base URL of the service (e.g., "http://localhost:7878").

    A bare "host:port" is accepted and treated as http.
    """

    api_key: str
    """API key for authentication (found in Settings > General > Security)."""

    timeout_seconds: int = 30
    """Request timeout in seconds (1-300)."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        object.__setattr__(self, "url", _normalize_url(self.url))
        if not self.url.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        if not self.api_key or not self.api_key.strip():
            raise ValueError("API key is required")
        if " " in self.api_key:
            raise ValueError("API key must not contain whitespace")
        if not 1 <= self.timeout_seconds <= 300:
            raise ValueError("Timeout must be between 1 and 300 seconds")


@dataclass(frozen=True)
class TmdbConfig:
    """Configuration for the TMDB v3 metadata-lookup service."""

    api_key: str
    url: str = TMDB_DEFAULT_URL
    timeout_seconds: int = 30

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.api_key or not self.api_key.strip():
            raise ValueError("TMDB API key is required")
        if not self.url.startswith(("http://", "https://")):
            raise ValueError("TMDB URL must start with http:// or https://")
        if not 1 <= self.timeout_seconds <= 300:
            raise ValueError("Timeout must be between 1 and 300 seconds")


@dataclass
class MetadataConfig:
    """Connections used to resolve a file's native language.

    Radarr and Sonarr identify the file; TMDB supplies the original
    language when the catalog system does not report it directly.
    """

    priority: Literal["radarr", "sonarr"] = "radarr"
    """Which catalog system to query first."""

    radarr: ServiceConnectionConfig | None = None
    sonarr: ServiceConnectionConfig | None = None
    tmdb: TmdbConfig | None = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.priority not in VALID_PRIORITIES:
            raise ValueError(
                f"priority must be one of {VALID_PRIORITIES}, got {self.priority}"
            )


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    All paths are optional. If not specified, tools are looked up in PATH.
    """

    ffmpeg: Path | None = None
    ffprobe: Path | None = None


@dataclass
class LoggingConfig:
    """Configuration for logging output."""

    level: str = "info"
    """Log level: debug, info, warning, error."""

    file: Path | None = None
    """Log file path. None logs to stderr only."""

    format: Literal["text", "json"] = "text"
    """Log line format."""

    include_stderr: bool = False
    """Also log to stderr when a log file is configured."""

    max_bytes: int = 10_485_760
    """Rotate the log file after this many bytes (10 MiB)."""

    backup_count: int = 5
    """Number of rotated log files to keep."""

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.casefold() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.casefold() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes <= 0:
            raise ValueError("max_bytes must be positive")
        if self.backup_count < 0:
            raise ValueError("backup_count must be non-negative")


@dataclass
class AppConfig:
    """Main configuration container for track-cleanup."""

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    metadata: MetadataConfig = field(default_factory=MetadataConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    cleanup: dict[str, Any] = field(default_factory=dict)
    """Raw [cleanup] table, validated by track_cleanup.policy.loader."""
