"""Tests for logging configuration and settings."""

import json
import logging

import pytest

from cooktree.config import Settings
from cooktree.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    clear_context,
    configure_logging,
    get_logger,
    ingredient_ctx,
    recipe_ctx,
    set_context,
)


def make_record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="cooktree.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def reset_context():
    """Ensure each test starts without logging context."""
    clear_context()
    yield
    clear_context()


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        """Test default settings values."""
        monkeypatch.delenv("COOKTREE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("COOKTREE_LOG_FORMAT", raising=False)
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.json_logs is None
        assert settings.is_development

    def test_env_prefix(self, monkeypatch):
        """Test settings are read from COOKTREE_ variables."""
        monkeypatch.setenv("COOKTREE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("COOKTREE_LOG_FORMAT", "json")
        monkeypatch.setenv("COOKTREE_ENVIRONMENT", "production")
        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True
        assert not settings.is_development


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter_includes_context(self):
        """Test JSON output carries recipe and ingredient context."""
        with LoggingContext(recipe="pancakes", ingredient="flour"):
            output = json.loads(StructuredJsonFormatter().format(make_record()))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["recipe"] == "pancakes"
        assert output["ingredient"] == "flour"
        assert "location" in output

    def test_contextual_formatter(self):
        """Test text output shows the context block."""
        set_context(recipe="pancakes")
        output = ContextualFormatter().format(make_record("added"))

        assert "[recipe=pancakes]" in output
        assert output.endswith("| added")

    def test_contextual_formatter_without_context(self):
        """Test text output has no context block when nothing is set."""
        output = ContextualFormatter().format(make_record())
        assert "[" not in output


class TestLoggingContext:
    """Tests for LoggingContext."""

    def test_context_restored_on_exit(self):
        """Test nested contexts restore the previous values."""
        with LoggingContext(recipe="outer"):
            with LoggingContext(recipe="inner", ingredient="egg"):
                assert recipe_ctx.get() == "inner"
                assert ingredient_ctx.get() == "egg"
            assert recipe_ctx.get() == "outer"
            assert ingredient_ctx.get() is None

        assert recipe_ctx.get() is None

    def test_logger_adapter_adds_context(self, caplog):
        """Test the context logger attaches context to records."""
        logger = get_logger("cooktree.test")

        with caplog.at_level(logging.INFO, logger="cooktree.test"):
            with LoggingContext(ingredient="salt"):
                logger.info("seasoning")

        assert caplog.records[-1].ingredient == "salt"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_configures_root_logger(self, tmp_path):
        """Test level, formatter and file handler setup."""
        log_file = tmp_path / "cooktree.log"
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level

        try:
            configure_logging(log_level="debug", json_format=True, log_file=str(log_file))

            assert root.level == logging.DEBUG
            assert len(root.handlers) == 2
            assert all(isinstance(h.formatter, StructuredJsonFormatter) for h in root.handlers)
            assert log_file.exists()
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
