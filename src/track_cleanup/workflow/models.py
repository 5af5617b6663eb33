"""Result record returned by a cleanup pass."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from track_cleanup.executor.ffmpeg_args import render_directives
from track_cleanup.policy.models import SelectionPolicy
from track_cleanup.policy.synthesis.models import Directive, Outcome


def directive_to_dict(directive: Directive) -> dict[str, Any]:
    """Convert a directive to a JSON-serializable dict tagged by type."""
    data: dict[str, Any] = {"type": type(directive).__name__}
    for key, value in asdict(directive).items():
        data[key] = value.value if isinstance(value, Enum) else value
    return data


@dataclass(frozen=True)
class CleanupResult:
    """Outcome of one cleanup pass over one file.

    process_file is False for every abort and for files that already
    comply; directives is empty in those cases.
    """

    process_file: bool
    outcome: Outcome
    container: str
    """Output container, unchanged from the source."""

    directives: tuple[Directive, ...] = ()
    trace: tuple[str, ...] = ()
    native_language: str | None = None
    policy: SelectionPolicy | None = None
    audio_outputs: int = 0
    subtitle_outputs: int = 0

    def ffmpeg_args(self) -> list[str]:
        """Render the directives as ffmpeg arguments (empty when skipped)."""
        return render_directives(self.directives)

    def to_dict(self) -> dict[str, Any]:
        policy: dict[str, Any] | None = None
        if self.policy is not None:
            subtitle_filter = self.policy.subtitle_languages
            policy = {
                "native_language": self.policy.native_language,
                "allowed_audio_languages": sorted(
                    self.policy.allowed_audio_languages
                ),
                "subtitle_languages": (
                    sorted(subtitle_filter)
                    if isinstance(subtitle_filter, frozenset)
                    else None
                ),
                "remove_commentary_subtitles": (
                    self.policy.remove_commentary_subtitles
                ),
                "aac_bitrate_per_channel": self.policy.aac_bitrate_per_channel,
                "lossless_fallback_bitrate": self.policy.lossless_fallback_bitrate,
            }
        return {
            "process_file": self.process_file,
            "outcome": self.outcome.value,
            "container": self.container,
            "native_language": self.native_language,
            "policy": policy,
            "audio_outputs": self.audio_outputs,
            "subtitle_outputs": self.subtitle_outputs,
            "directives": [directive_to_dict(d) for d in self.directives],
            "ffmpeg_args": self.ffmpeg_args(),
            "trace": list(self.trace),
        }
