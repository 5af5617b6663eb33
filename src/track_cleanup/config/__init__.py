"""Configuration management for track-cleanup.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (TRACK_CLEANUP_*)
3. Config file (~/.track-cleanup/config.toml)
4. Default values (lowest priority)
"""

from track_cleanup.config.env import EnvReader
from track_cleanup.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from track_cleanup.config.logging_factory import build_logging_config
from track_cleanup.config.models import (
    AppConfig,
    LoggingConfig,
    MetadataConfig,
    ServiceConnectionConfig,
    TmdbConfig,
    ToolPathsConfig,
)

__all__ = [
    # Models
    "AppConfig",
    "LoggingConfig",
    "MetadataConfig",
    "ServiceConnectionConfig",
    "TmdbConfig",
    "ToolPathsConfig",
    # Loader
    "EnvReader",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "build_logging_config",
]
