"""Unit tests for logging configuration and the JSON formatter."""

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from track_cleanup.config.models import LoggingConfig
from track_cleanup.logging import (
    JSONFormatter,
    MediaFileFilter,
    configure_logging,
    get_media_file,
    media_file_context,
)


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


class TestConfigureLogging:
    """Tests for configure_logging()."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("debug", logging.DEBUG),
            ("info", logging.INFO),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
        ],
    )
    def test_levels(self, level: str, expected: int) -> None:
        """Should set the root level, case-insensitively."""
        configure_logging(LoggingConfig(level=level))
        assert logging.getLogger().level == expected

    def test_stderr_only_without_file(self) -> None:
        """Should log to stderr when no file is configured."""
        configure_logging(LoggingConfig())

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_file_handler(self, tmp_path: Path) -> None:
        """Should add a rotating file handler, creating parent dirs."""
        log_file = tmp_path / "logs" / "cleanup.log"
        configure_logging(LoggingConfig(file=log_file, max_bytes=1024))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)
        assert handlers[0].maxBytes == 1024
        assert log_file.parent.exists()

    def test_file_with_stderr(self, tmp_path: Path) -> None:
        """Should add both handlers when include_stderr is set."""
        configure_logging(
            LoggingConfig(file=tmp_path / "cleanup.log", include_stderr=True)
        )
        assert len(logging.getLogger().handlers) == 2

    def test_json_format(self) -> None:
        """Should use JSONFormatter for the json format."""
        configure_logging(LoggingConfig(format="json"))
        handler = logging.getLogger().handlers[0]
        assert isinstance(handler.formatter, JSONFormatter)


class TestJSONFormatter:
    """Tests for JSONFormatter output."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="track_cleanup.test",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Audio %d kept",
            args=(0,),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_fields(self) -> None:
        """Should emit timestamp, level, message and logger."""
        data = json.loads(JSONFormatter().format(self._record()))

        assert data["level"] == "INFO"
        assert data["message"] == "Audio 0 kept"
        assert data["logger"] == "track_cleanup.test"
        assert "timestamp" in data
        assert "context" not in data

    def test_extra_context(self) -> None:
        """Should include extra attributes under context."""
        data = json.loads(JSONFormatter().format(self._record(file="a.mkv")))
        assert data["context"] == {"file": "a.mkv"}

    def test_exception(self) -> None:
        """Should include the formatted traceback."""
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "RuntimeError: boom" in data["exception"]

    def test_media_file_key(self) -> None:
        """Should promote the filter's media_file to a top-level key."""
        record = self._record(media_file="/media/a.mkv", file_tag="[a.mkv] ")

        data = json.loads(JSONFormatter().format(record))

        assert data["file"] == "/media/a.mkv"
        assert "context" not in data

    def test_non_ascii_message(self) -> None:
        """Should keep trace arrows readable."""
        record = self._record()
        record.msg = "Original language: ja → jpn"
        record.args = ()
        assert "→" in JSONFormatter().format(record)


class TestMediaFileContext:
    """Tests for the per-file logging context."""

    def test_context_sets_and_restores(self) -> None:
        assert get_media_file() is None
        with media_file_context("/media/Movie (2001).mkv"):
            assert get_media_file() == Path("/media/Movie (2001).mkv")
        assert get_media_file() is None

    def test_filter_tags_records(self) -> None:
        """Should add media_file and file_tag without dropping records."""
        record = logging.makeLogRecord({"msg": "hello"})

        with media_file_context("/media/Movie (2001).mkv"):
            assert MediaFileFilter().filter(record) is True

        assert record.media_file == "/media/Movie (2001).mkv"
        assert record.file_tag == "[Movie (2001).mkv] "

    def test_filter_outside_context(self) -> None:
        record = logging.makeLogRecord({"msg": "hello"})
        MediaFileFilter().filter(record)
        assert record.media_file is None
        assert record.file_tag == ""

    def test_text_output_tagged(self, tmp_path: Path) -> None:
        """Should write the file tag into text log lines."""
        log_file = tmp_path / "cleanup.log"
        configure_logging(LoggingConfig(file=log_file))

        with media_file_context("/media/Movie (2001).mkv"):
            logging.getLogger("track_cleanup.test").info("Audio 0 kept")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert "[Movie (2001).mkv] track_cleanup.test - INFO - Audio 0 kept" in (
            log_file.read_text(encoding="utf-8")
        )
