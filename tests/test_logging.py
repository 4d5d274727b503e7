"""
Tests for logging functionality.
"""

import logging
from io import StringIO

import pytest

from srvdisco import DiscoverySettings, ServiceTarget, StaticResolver, discover
from srvdisco.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers installed by configure_logging() after each test."""
    yield
    log = logging.getLogger("srvdisco")
    log.handlers.clear()
    log.setLevel(logging.NOTSET)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_default_level(self):
        """Test default logging configuration."""
        log = configure_logging()
        assert log.level == logging.INFO

    def test_configure_debug_level(self):
        """Test debug level configuration."""
        log = configure_logging(level=logging.DEBUG)
        assert log.level == logging.DEBUG

    def test_configure_custom_handler(self):
        """Test custom handler configuration."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)

        log = configure_logging(level=logging.INFO, handler=handler)

        log.info("Test message")
        output = stream.getvalue()

        assert "Test message" in output
        assert " | srvdisco | " in output

    def test_configure_without_timestamps(self):
        """Test configuration without timestamps."""
        stream = StringIO()
        handler = logging.StreamHandler(stream)

        log = configure_logging(level=logging.INFO, handler=handler, format_timestamps=False)

        log.info("Test message")
        output = stream.getvalue()

        assert output.startswith("INFO")
        assert "Test message" in output

    def test_level_from_environment(self, monkeypatch):
        """Without an explicit level, SRVDISCO_LOG_LEVEL is applied."""
        monkeypatch.setenv("SRVDISCO_LOG_LEVEL", "DEBUG")

        log = configure_logging()

        assert log.level == logging.DEBUG
        assert log.handlers[0].level == logging.DEBUG

    def test_level_from_settings(self):
        """A DiscoverySettings instance supplies the level."""
        log = configure_logging(DiscoverySettings(log_level="error"))
        assert log.level == logging.ERROR

    def test_explicit_level_overrides_settings(self, monkeypatch):
        monkeypatch.setenv("SRVDISCO_LOG_LEVEL", "DEBUG")

        log = configure_logging(DiscoverySettings(log_level="ERROR"), level=logging.WARNING)

        assert log.level == logging.WARNING

    def test_configure_replaces_handlers(self):
        """Repeated configuration does not stack handlers."""
        configure_logging()
        log = configure_logging()

        assert len(log.handlers) == 1


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_child_logger(self):
        """Child loggers live under the srvdisco logger."""
        log = get_logger("stream")
        assert log.name == "srvdisco.stream"


class TestDiscoveryLogging:
    """Tests for log output produced during discovery."""

    @pytest.mark.asyncio
    async def test_lookup_failure_logged_as_warning(self, caplog):
        """Failed lookups are logged at WARNING with the query name."""
        resolver = StaticResolver(error=OSError("no such host"))

        with caplog.at_level(logging.WARNING, logger="srvdisco"):
            await discover("example.com", "api", "http", resolver=resolver)

        records = [r for r in caplog.records if r.name == "srvdisco.stream"]
        assert records
        assert records[0].levelno == logging.WARNING
        assert "_api._tcp.example.com" in records[0].getMessage()

    @pytest.mark.asyncio
    async def test_successful_lookup_logged_at_debug(self, caplog):
        """Successful discovery only produces DEBUG output."""
        resolver = StaticResolver()
        resolver.add("api", "tcp", "example.com", ServiceTarget("a.example.com", 1))

        with caplog.at_level(logging.DEBUG, logger="srvdisco"):
            await discover("example.com", "api", "http", resolver=resolver)

        stream_records = [r for r in caplog.records if r.name == "srvdisco.stream"]
        assert stream_records
        assert all(r.levelno == logging.DEBUG for r in stream_records)
