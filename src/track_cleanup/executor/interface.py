"""External tool path resolution.

Tools are resolved from an explicitly configured path first (config file,
environment variable or CLI option), then from the system PATH.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)


def get_tool_path(tool_name: str, configured: Path | None = None) -> Path | None:
    """Get path to a tool, or None if not available.

    Args:
        tool_name: Executable name ("ffmpeg", "ffprobe").
        configured: Explicitly configured path, tried before PATH.

    Returns:
        Path to the tool or None if not available.
    """
    if configured is not None:
        if configured.exists():
            return configured
        logger.warning(
            "Configured %s path does not exist: %s, falling back to PATH",
            tool_name,
            configured,
        )

    found = shutil.which(tool_name)
    return Path(found) if found else None
