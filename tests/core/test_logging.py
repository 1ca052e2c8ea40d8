"""
Tests for the logging module.

Tests verify:
- configure_logging builds the expected processor chain
- Context helpers bind and unbind contextvars
- Module loggers emit snake_case events with key/value fields
"""

import logging
from unittest.mock import patch

import structlog
from structlog.testing import capture_logs

from medialib.core.logging import (
    LogContext,
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from medialib.core.settings import MediaLibSettings


class TestConfigureLogging:
    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_json_renderer(self, mock_configure, mock_basic):
        configure_logging(level="DEBUG", json_format=True)

        kwargs = mock_configure.call_args.kwargs
        assert isinstance(kwargs["processors"][-1], structlog.processors.JSONRenderer)
        assert isinstance(kwargs["processors"][0], structlog.processors.TimeStamper)
        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG

    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_console_renderer_without_timestamp(self, mock_configure, mock_basic):
        configure_logging(level="INFO", json_format=False, add_timestamp=False)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_unknown_level_falls_back_to_info(self, mock_configure, mock_basic):
        configure_logging(level="chatty", json_format=True)
        assert mock_basic.call_args.kwargs["level"] == logging.INFO

    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_defaults_come_from_settings(self, mock_configure, mock_basic):
        settings = MediaLibSettings(log_level="DEBUG", log_json=True, _env_file=None)
        configure_logging(settings=settings)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert mock_basic.call_args.kwargs["level"] == logging.DEBUG

    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_arguments_override_settings(self, mock_configure, mock_basic):
        settings = MediaLibSettings(log_level="DEBUG", log_json=True, _env_file=None)
        configure_logging(level="WARNING", json_format=False, settings=settings)

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert mock_basic.call_args.kwargs["level"] == logging.WARNING

    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_environment_drives_defaults(self, mock_configure, mock_basic, monkeypatch):
        monkeypatch.setenv("MEDIALIB_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("MEDIALIB_LOG_JSON", "false")
        configure_logging(settings=MediaLibSettings(_env_file=None))

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert mock_basic.call_args.kwargs["level"] == logging.ERROR

    @patch("sys.stdout")
    @patch("logging.basicConfig")
    @patch("structlog.configure")
    def test_unset_json_falls_back_to_tty_detection(self, mock_configure, mock_basic, mock_stdout):
        mock_stdout.isatty.return_value = False
        configure_logging(settings=MediaLibSettings(log_json=None, _env_file=None))

        processors = mock_configure.call_args.kwargs["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestContextHelpers:
    def teardown_method(self):
        clear_context()

    def test_bind_and_unbind(self):
        bind_context(backend="sqlite", database="CLDB")
        assert structlog.contextvars.get_contextvars() == {"backend": "sqlite", "database": "CLDB"}
        unbind_context("database")
        assert structlog.contextvars.get_contextvars() == {"backend": "sqlite"}

    def test_log_context_scoped(self):
        with LogContext(database="Playlist"):
            assert structlog.contextvars.get_contextvars()["database"] == "Playlist"
        assert "database" not in structlog.contextvars.get_contextvars()


class TestGetLogger:
    def test_emits_key_values(self):
        logger = get_logger("medialib.test")
        with capture_logs() as logs:
            logger.info("table_dump", label="TABLE CLDB.PersonInfo:", rows=0)
        assert logs == [
            {"event": "table_dump", "label": "TABLE CLDB.PersonInfo:", "rows": 0, "log_level": "info"}
        ]
