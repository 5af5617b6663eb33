"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (TRACK_CLEANUP_*)
3. Config file (~/.track-cleanup/config.toml)
4. Default values

Environment variables:
- TRACK_CLEANUP_CONFIG_PATH: Path to config file (overrides default location)
- TRACK_CLEANUP_FFPROBE_PATH / TRACK_CLEANUP_FFMPEG_PATH: Tool paths
- TRACK_CLEANUP_LOG_LEVEL / TRACK_CLEANUP_LOG_FILE / TRACK_CLEANUP_LOG_FORMAT
- TRACK_CLEANUP_PRIORITY: "radarr" or "sonarr"
- TRACK_CLEANUP_RADARR_URL / TRACK_CLEANUP_RADARR_API_KEY
- TRACK_CLEANUP_SONARR_URL / TRACK_CLEANUP_SONARR_API_KEY
- TRACK_CLEANUP_TMDB_API_KEY
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from track_cleanup.config.env import EnvReader
from track_cleanup.config.models import (
    TMDB_DEFAULT_URL,
    VALID_PRIORITIES,
    AppConfig,
    LoggingConfig,
    MetadataConfig,
    ServiceConnectionConfig,
    TmdbConfig,
    ToolPathsConfig,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path.home() / ".track-cleanup"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by the TRACK_CLEANUP_CONFIG_PATH environment variable.
    """
    reader = EnvReader(env)
    return reader.get_path(
        "CONFIG_PATH", must_exist=False, default=DEFAULT_CONFIG_FILE
    )  # type: ignore[return-value]


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from a TOML file.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Parsed configuration dict. Empty dict if the file doesn't exist
        or cannot be parsed.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with open(path, "rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _build_connection(
    reader: EnvReader,
    name: str,
    section: dict[str, Any],
) -> ServiceConnectionConfig | None:
    """Build a catalog connection if both URL and API key are available.

    Raises:
        ValueError: If the configured values are invalid.
    """
    upper = name.upper()
    url = reader.get_str(f"{upper}_URL", section.get("url"))
    api_key = reader.get_str(f"{upper}_API_KEY", section.get("api_key"))
    if not url or not api_key:
        logger.debug("%s is not configured, it will not be queried", name)
        return None
    return ServiceConnectionConfig(
        url=url,
        api_key=api_key,
        timeout_seconds=reader.get_int(
            f"{upper}_TIMEOUT", section.get("timeout_seconds", 30)
        ),
    )


def _build_tmdb(reader: EnvReader, section: dict[str, Any]) -> TmdbConfig | None:
    api_key = reader.get_str("TMDB_API_KEY", section.get("api_key"))
    if not api_key:
        logger.debug("TMDB API key is not configured")
        return None
    return TmdbConfig(
        api_key=api_key,
        url=section.get("url", TMDB_DEFAULT_URL),
        timeout_seconds=reader.get_int(
            "TMDB_TIMEOUT", section.get("timeout_seconds", 30)
        ),
    )


def get_config(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
    # CLI overrides (highest precedence)
    ffprobe_path: Path | None = None,
    ffmpeg_path: Path | None = None,
) -> AppConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides TRACK_CLEANUP_CONFIG_PATH).
        env: Environment mapping (defaults to os.environ).
        ffprobe_path: CLI override for ffprobe path.
        ffmpeg_path: CLI override for ffmpeg path.

    Returns:
        AppConfig with merged configuration.

    Raises:
        ValueError: If any configured value fails validation.
    """
    reader = EnvReader(env)
    file_config = load_config_file(config_path or get_default_config_path(env))

    tools_file = file_config.get("tools", {})
    tools = ToolPathsConfig(
        ffprobe=(
            ffprobe_path
            or reader.get_path("FFPROBE_PATH")
            or (Path(tools_file["ffprobe"]) if tools_file.get("ffprobe") else None)
        ),
        ffmpeg=(
            ffmpeg_path
            or reader.get_path("FFMPEG_PATH")
            or (Path(tools_file["ffmpeg"]) if tools_file.get("ffmpeg") else None)
        ),
    )

    logging_file = file_config.get("logging", {})
    log_file = reader.get_path("LOG_FILE", must_exist=False) or (
        Path(logging_file["file"]).expanduser() if logging_file.get("file") else None
    )
    logging_config = LoggingConfig(
        level=reader.get_str("LOG_LEVEL", logging_file.get("level", "info")),
        file=log_file,
        format=reader.get_str(
            "LOG_FORMAT", logging_file.get("format", "text")
        ),  # type: ignore[arg-type]
        include_stderr=reader.get_bool(
            "LOG_INCLUDE_STDERR", logging_file.get("include_stderr", False)
        ),
        max_bytes=logging_file.get("max_bytes", 10_485_760),
        backup_count=logging_file.get("backup_count", 5),
    )

    metadata_file = file_config.get("metadata", {})
    # An invalid env value is ignored; an invalid file value fails validation
    priority = reader.get_choice(
        "PRIORITY",
        VALID_PRIORITIES,
        str(metadata_file.get("priority", "radarr")).casefold(),
    )
    metadata = MetadataConfig(
        priority=priority,  # type: ignore[arg-type]
        radarr=_build_connection(reader, "radarr", metadata_file.get("radarr", {})),
        sonarr=_build_connection(reader, "sonarr", metadata_file.get("sonarr", {})),
        tmdb=_build_tmdb(reader, metadata_file.get("tmdb", {})),
    )

    return AppConfig(
        tools=tools,
        metadata=metadata,
        logging=logging_config,
        cleanup=dict(file_config.get("cleanup", {})),
    )
