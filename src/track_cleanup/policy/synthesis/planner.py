"""Directive synthesis.

Turns classifier decisions into the ordered directive list and decides
whether the file needs processing at all.

Key Functions:
    synthesize_directives: Build the directive list for one file
    format_directive: Human-readable description of one directive
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from track_cleanup.domain.enums import StreamType
from track_cleanup.domain.models import DEFAULT_LANGUAGE, OriginalCounts, ProbedStream
from track_cleanup.introspector.mappings import map_channel_layout
from track_cleanup.policy.models import SelectionPolicy
from track_cleanup.policy.synthesis.models import (
    CopyStream,
    Directive,
    DisableSubtitles,
    Outcome,
    RaiseMuxQueueLimit,
    SynthesisResult,
    TranscodeStream,
)
from track_cleanup.track_classification.models import (
    MISSING_CODEC,
    StreamAction,
    StreamDecision,
)

if TYPE_CHECKING:
    from track_cleanup.workflow.trace import TraceLog

logger = logging.getLogger(__name__)

TRANSCODE_CODEC = "aac"


def _note(trace: TraceLog | None, message: str) -> None:
    if trace is not None:
        trace.add(message)
    else:
        logger.debug(message)


def _format_kbps(bitrate: int) -> str:
    kbps = bitrate / 1000
    return str(int(kbps)) if kbps.is_integer() else str(kbps)


def transcode_title(channels: int, bitrate: int) -> str:
    """Descriptive title attached to a generated AAC track."""
    return f"AAC {channels}ch {_format_kbps(bitrate)}kbps [Auto]"


def _audio_label(stream: ProbedStream) -> str:
    codec = stream.codec_name or "unknown"
    lang = stream.language or DEFAULT_LANGUAGE
    return f"Audio {stream.index}: {codec} {stream.channel_count}ch [{lang}]"


def _subtitle_removal(decision: StreamDecision) -> str:
    if decision.reason == MISSING_CODEC:
        return (
            f"Subtitle {decision.input_index}: missing codec, "
            "skipping to prevent crash"
        )
    lang = decision.stream.language or DEFAULT_LANGUAGE
    return f"Subtitle {decision.input_index} [{lang}]: REMOVE ({decision.reason})"


def _build_transcode(
    decision: StreamDecision,
    output_index: int,
    policy: SelectionPolicy,
) -> TranscodeStream:
    channels = decision.stream.channel_count
    bitrate = policy.aac_bitrate(channels)
    multichannel = channels > 2
    return TranscodeStream(
        input_index=decision.input_index,
        output_index=output_index,
        codec=TRANSCODE_CODEC,
        bitrate=bitrate,
        # Explicit layout keeps object-audio (Atmos/JOC) channel maps intact
        channels=channels if multichannel else None,
        channel_layout=map_channel_layout(channels) if multichannel else None,
        language=decision.stream.language,
        title=transcode_title(channels, bitrate),
    )


def synthesize_directives(
    audio_decisions: Sequence[StreamDecision],
    subtitle_decisions: Sequence[StreamDecision],
    policy: SelectionPolicy,
    original_counts: OriginalCounts,
    trace: TraceLog | None = None,
) -> SynthesisResult:
    """Build the ordered directive list for one file.

    Output slots are assigned sequentially per stream type and never
    reused. A generated AAC track takes the slot right after its source.

    Args:
        audio_decisions: Audio decisions in input order.
        subtitle_decisions: Subtitle decisions in input order.
        policy: Selection policy the decisions were made under.
        original_counts: Stream counts of the source file.
        trace: Optional trace receiving rationale lines.

    Returns:
        SynthesisResult. No directives are returned when every audio
        stream would be removed or when the file already complies.
    """
    directives: list[Directive] = [CopyStream(StreamType.VIDEO)]

    audio_out = 0
    kept = 0
    transcoded = 0
    for decision in audio_decisions:
        stream = decision.stream
        if not decision.action.is_kept:
            _note(trace, f"{_audio_label(stream)} → REMOVE ({decision.reason})")
            continue

        directives.append(
            CopyStream(StreamType.AUDIO, decision.input_index, audio_out)
        )
        _note(trace, f"{_audio_label(stream)} → KEEP (output a:{audio_out})")
        audio_out += 1
        kept += 1

        if decision.action is StreamAction.KEEP_AND_TRANSCODE:
            transcode = _build_transcode(decision, audio_out, policy)
            directives.append(transcode)
            _note(
                trace,
                f"  + AAC copy: {stream.channel_count}ch "
                f"{_format_kbps(transcode.bitrate)}kbps (output a:{audio_out})",
            )
            audio_out += 1
            transcoded += 1

    if kept == 0:
        _note(trace, "All audio tracks would be removed. Aborting to be safe.")
        return SynthesisResult((), False, Outcome.WOULD_REMOVE_ALL_AUDIO)

    subtitle_out = 0
    for decision in subtitle_decisions:
        if decision.action is StreamAction.DROP:
            _note(trace, _subtitle_removal(decision))
            continue
        directives.append(
            CopyStream(StreamType.SUBTITLE, decision.input_index, subtitle_out)
        )
        subtitle_out += 1

    if subtitle_out == 0 and original_counts.subtitle > 0:
        directives.append(DisableSubtitles())

    # Distinct kept languages equals kept audio count (one per language).
    # Duplicate-language inputs therefore always count as a removal.
    audio_removed = original_counts.audio != kept
    audio_transcoded = transcoded > 0
    subtitles_removed = subtitle_out < original_counts.subtitle

    if not (audio_removed or audio_transcoded or subtitles_removed):
        _note(trace, "Nothing to do, file already matches desired state.")
        return SynthesisResult(
            (), False, Outcome.ALREADY_COMPLIANT, audio_out, subtitle_out
        )

    directives.append(RaiseMuxQueueLimit())
    _note(
        trace,
        f"--- Done. Output: {audio_out} audio tracks, "
        f"{subtitle_out} subtitle tracks ---",
    )
    return SynthesisResult(
        tuple(directives), True, Outcome.PROCESS, audio_out, subtitle_out
    )


def format_directive(directive: Directive) -> str:
    """Format one directive for CLI output."""
    if isinstance(directive, CopyStream):
        kind = directive.stream_type.value
        if directive.copies_all:
            return f"copy all {kind} streams"
        return (
            f"copy {kind} #{directive.input_index} -> "
            f"{kind} output {directive.output_index}"
        )
    if isinstance(directive, TranscodeStream):
        text = (
            f"transcode audio #{directive.input_index} -> audio output "
            f"{directive.output_index} ({directive.codec} "
            f"{_format_kbps(directive.bitrate)}kbps"
        )
        if directive.channels is not None:
            text += f", {directive.channels}ch"
        if directive.channel_layout is not None:
            text += f", layout {directive.channel_layout}"
        return text + f", [{directive.language}] \"{directive.title}\")"
    if isinstance(directive, DisableSubtitles):
        return "disable subtitle output"
    return f"raise mux queue limit to {directive.size}"
