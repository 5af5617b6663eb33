"""Per-file cleanup processor.

This module provides the CleanupProcessor class that runs one file
through language resolution, policy building, stream classification and
directive synthesis. Every per-file failure ends as a skipped result with
a trace explaining why; nothing is raised for them.
"""

from __future__ import annotations

import logging

from track_cleanup.domain.models import ProbeResult
from track_cleanup.language import alpha2_to_alpha3, normalize_alpha2
from track_cleanup.logging.context import media_file_context
from track_cleanup.policy.builder import build_policy
from track_cleanup.policy.exceptions import UnknownLanguageError
from track_cleanup.policy.models import CleanupSettings
from track_cleanup.policy.synthesis.models import Outcome
from track_cleanup.policy.synthesis.planner import synthesize_directives
from track_cleanup.resolution.resolver import LanguageResolver
from track_cleanup.track_classification.service import classify_streams
from track_cleanup.workflow.models import CleanupResult
from track_cleanup.workflow.trace import TraceLog

logger = logging.getLogger(__name__)


class CleanupProcessor:
    """Decide the audio/subtitle cleanup for probed files."""

    def __init__(
        self,
        resolver: LanguageResolver | None = None,
        settings: CleanupSettings | None = None,
    ) -> None:
        """Initialize the processor.

        Args:
            resolver: Language resolver. May be None when callers always
                pass an explicit native language.
            settings: Validated cleanup settings (defaults when None).
        """
        self._resolver = resolver
        self._settings = settings or CleanupSettings()

    def process(
        self,
        probe: ProbeResult,
        file_identity: str | None = None,
        native_language: str | None = None,
    ) -> CleanupResult:
        """Run one cleanup pass.

        Args:
            probe: Probe result of the file.
            file_identity: Identity used for language resolution
                (defaults to the file name).
            native_language: Explicit 2-letter native language; skips
                resolution when given.

        Returns:
            CleanupResult with the directives and the trace.
        """
        with media_file_context(probe.file_path):
            return self._process(probe, file_identity, native_language)

    def _process(
        self,
        probe: ProbeResult,
        file_identity: str | None,
        native_language: str | None,
    ) -> CleanupResult:
        trace = TraceLog()
        trace.add("--- Consolidated Audio & Subtitle Cleanup ---")
        trace.add(f"File: {probe.file_path}")

        def skip(outcome: Outcome, language: str | None = None) -> CleanupResult:
            logger.debug("Skipping %s: %s", probe.file_path, outcome.value)
            return CleanupResult(
                process_file=False,
                outcome=outcome,
                container=probe.container,
                trace=trace.lines,
                native_language=language,
            )

        if not probe.streams:
            trace.add("No ffprobe data found. Skipping.")
            return skip(Outcome.NO_PROBE_DATA)

        language = self._resolve_language(probe, file_identity, native_language, trace)
        if language is None:
            trace.add(
                "Could not determine original language. Skipping file to be safe."
            )
            return skip(Outcome.LANGUAGE_UNRESOLVED)

        try:
            policy = build_policy(language, self._settings)
        except UnknownLanguageError:
            trace.add(
                f"Original language '{language}' has no ISO 639-2 code. "
                "Skipping file to be safe."
            )
            return skip(Outcome.UNSUPPORTED_LANGUAGE, language)

        trace.add(
            f"Original language: {policy.native_language} → "
            f"{alpha2_to_alpha3(policy.native_language)}"
        )
        trace.add(
            "Allowed audio languages: "
            + ", ".join(sorted(policy.allowed_audio_languages))
        )
        trace.add(f"Subtitle languages: {policy.describe_subtitle_filter()}")

        classification = classify_streams(probe.streams, policy)
        synthesis = synthesize_directives(
            classification.audio,
            classification.subtitles,
            policy,
            probe.original_counts,
            trace,
        )

        return CleanupResult(
            process_file=synthesis.process_file,
            outcome=synthesis.outcome,
            container=probe.container,
            directives=synthesis.directives,
            trace=trace.lines,
            native_language=policy.native_language,
            policy=policy,
            audio_outputs=synthesis.audio_outputs,
            subtitle_outputs=synthesis.subtitle_outputs,
        )

    def _resolve_language(
        self,
        probe: ProbeResult,
        file_identity: str | None,
        native_language: str | None,
        trace: TraceLog,
    ) -> str | None:
        if native_language:
            code = normalize_alpha2(native_language)
            trace.add(f"Using provided original language: {code}")
            return code

        if self._resolver is None:
            logger.warning("No language resolver available for %s", probe.file_path)
            return None

        identity = file_identity or probe.file_path.name
        return self._resolver.resolve(identity, trace)
