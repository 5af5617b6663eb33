"""Cleanup settings loading and validation.

Settings come from the [cleanup] table of the TOML config file or from a
standalone YAML policy file, e.g.::

    extra_languages: fre, spa
    aac_bitrate_per_channel: 64000
    lossless_default_bitrate: 640000
    subtitle_languages: eng
    remove_commentary_subs: true
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from track_cleanup.policy.exceptions import PolicyValidationError
from track_cleanup.policy.models import CleanupSettings

logger = logging.getLogger(__name__)


class CleanupSettingsModel(BaseModel):
    """Pydantic model for raw cleanup settings."""

    model_config = ConfigDict(extra="forbid")

    extra_languages: str | list[str] = ""
    aac_bitrate_per_channel: str = "64000"
    lossless_default_bitrate: str = "640000"
    subtitle_languages: str | list[str] | None = "eng"
    remove_commentary_subs: bool = True

    @field_validator("extra_languages", "subtitle_languages")
    @classmethod
    def join_language_lists(cls, v: str | list[str] | None) -> str | None:
        """Accept YAML lists as well as comma-separated strings."""
        if isinstance(v, list):
            return ",".join(v)
        return v

    @field_validator(
        "aac_bitrate_per_channel", "lossless_default_bitrate", mode="before"
    )
    @classmethod
    def bitrate_as_string(cls, v: Any) -> str:
        """Keep any scalar as text; an empty YAML value (None) becomes "".

        Unparsable values fall back to the default when the policy is built.
        """
        return "" if v is None else str(v).strip()


def _format_validation_error(error: ValidationError) -> str:
    """Format a Pydantic validation error into a user-friendly message."""
    errors = error.errors()
    if errors:
        first_error = errors[0]
        loc = ".".join(str(x) for x in first_error.get("loc", []))
        msg = first_error.get("msg", str(error))
        if loc:
            return f"Cleanup settings validation failed: {loc}: {msg}"
        return f"Cleanup settings validation failed: {msg}"
    return f"Cleanup settings validation failed: {error}"


def cleanup_settings_from_dict(data: dict[str, Any]) -> CleanupSettings:
    """Validate raw cleanup settings.

    Args:
        data: Mapping of setting names to values; missing keys take
            their defaults.

    Raises:
        PolicyValidationError: If the settings are invalid.
    """
    try:
        model = CleanupSettingsModel.model_validate(data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        field = ".".join(str(x) for x in first.get("loc", [])) or None
        raise PolicyValidationError(_format_validation_error(e), field) from e

    return CleanupSettings(
        extra_languages=model.extra_languages,  # type: ignore[arg-type]
        aac_bitrate_per_channel=model.aac_bitrate_per_channel,
        lossless_default_bitrate=model.lossless_default_bitrate,
        subtitle_languages=model.subtitle_languages,  # type: ignore[arg-type]
        remove_commentary_subs=model.remove_commentary_subs,
    )


def load_cleanup_settings(path: Path) -> CleanupSettings:
    """Load and validate cleanup settings from a YAML policy file.

    Raises:
        PolicyValidationError: If the file is not valid YAML or the
            settings are invalid.
        FileNotFoundError: If the file does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Policy file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise PolicyValidationError(f"Invalid YAML syntax: {e}") from e

    if data is None:
        logger.debug("Policy file %s is empty, using defaults", path)
        data = {}
    if not isinstance(data, dict):
        raise PolicyValidationError("Policy file must be a YAML mapping")

    return cleanup_settings_from_dict(data)
