# tests/test_logging_conf.py
"""
Logging Configuration Tests - Log Path and Handler Selection

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- jalali_calendars.shared.logging_conf (resolve_log_path, build_handlers, setup_logging)
- unittest.mock (patching logging.basicConfig)
"""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from unittest.mock import patch  # Keep the root logger untouched

from jalali_calendars.shared.logging_conf import build_handlers, resolve_log_path, setup_logging


class TestResolveLogPath:
    def test_log_dir_wins(self, tmp_path):
        assert resolve_log_path("other.log", tmp_path) == tmp_path / "jalali_calendars.log"

    def test_log_file(self):
        assert resolve_log_path("logs/app.log", None) == Path("logs/app.log")

    def test_no_file(self):
        assert resolve_log_path(None, None) is None


class TestBuildHandlers:
    def test_stdout_only_without_file(self):
        handlers = build_handlers(None, log_to_stdout=False, max_bytes=1024, backup_count=1)
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_file_only(self, tmp_path):
        log_path = tmp_path / "nested" / "jalali_calendars.log"
        handlers = build_handlers(log_path, log_to_stdout=False, max_bytes=1024, backup_count=3)
        try:
            assert len(handlers) == 1
            assert isinstance(handlers[0], RotatingFileHandler)
            assert handlers[0].backupCount == 3
            assert log_path.parent.is_dir()
        finally:
            for handler in handlers:
                handler.close()

    def test_file_and_stdout(self, tmp_path):
        handlers = build_handlers(tmp_path / "a.log", log_to_stdout=True, max_bytes=1024, backup_count=1)
        try:
            assert len(handlers) == 2
        finally:
            for handler in handlers:
                handler.close()


class TestSetupLogging:
    def test_passes_handlers_to_basic_config(self, tmp_path):
        with patch("jalali_calendars.shared.logging_conf.logging.basicConfig") as mock_config:
            setup_logging(level=logging.DEBUG, log_dir=tmp_path, log_to_stdout=False)
        kwargs = mock_config.call_args.kwargs
        assert kwargs["level"] == logging.DEBUG
        assert [type(h) for h in kwargs["handlers"]] == [RotatingFileHandler]
        for handler in kwargs["handlers"]:
            handler.close()
