"""Shared test fixtures for track-cleanup."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from track_cleanup.domain import ProbedStream, ProbeResult, StreamType
from track_cleanup.policy import CleanupSettings, SelectionPolicy, build_policy

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def ffprobe_fixture() -> Callable[[str], dict[str, Any]]:
    """Load an ffprobe JSON fixture by name (without extension)."""

    def _load(name: str) -> dict[str, Any]:
        with open(FIXTURES_DIR / "ffprobe" / f"{name}.json") as f:
            return json.load(f)

    return _load


@pytest.fixture
def make_audio() -> Callable[..., ProbedStream]:
    """Factory for audio ProbedStreams."""

    def _make(
        index: int,
        language: str = "eng",
        codec: str | None = "aac",
        channels: int | None = 2,
        title: str | None = None,
    ) -> ProbedStream:
        return ProbedStream(
            index=index,
            stream_type=StreamType.AUDIO,
            codec_name=codec,
            language=language,
            title=title,
            channels=channels,
        )

    return _make


@pytest.fixture
def make_subtitle() -> Callable[..., ProbedStream]:
    """Factory for subtitle ProbedStreams."""

    def _make(
        index: int,
        language: str = "eng",
        codec: str | None = "subrip",
        title: str | None = None,
    ) -> ProbedStream:
        return ProbedStream(
            index=index,
            stream_type=StreamType.SUBTITLE,
            codec_name=codec,
            language=language,
            title=title,
        )

    return _make


@pytest.fixture
def make_probe() -> Callable[..., ProbeResult]:
    """Factory for ProbeResults with a leading h264 video stream."""

    def _make(
        *streams: ProbedStream,
        path: str = "/media/Movie (2001).mkv",
        with_video: bool = True,
    ) -> ProbeResult:
        all_streams: list[ProbedStream] = []
        if with_video:
            all_streams.append(
                ProbedStream(index=0, stream_type=StreamType.VIDEO, codec_name="h264")
            )
        all_streams.extend(streams)
        return ProbeResult(
            file_path=Path(path),
            container="mkv",
            streams=tuple(all_streams),
        )

    return _make


@pytest.fixture
def default_settings() -> CleanupSettings:
    return CleanupSettings()


@pytest.fixture
def japanese_policy(default_settings: CleanupSettings) -> SelectionPolicy:
    """Policy for a Japanese-language title with default settings."""
    return build_policy("ja", default_settings)
