"""Tests for logging configuration."""

import io
import json
import logging

import pytest

from nl_payroll.shared.logging_config import (
    LOG_LEVEL_ENV,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def clean_logging():
    """Start and end every test unconfigured."""
    reset_logging()
    yield
    reset_logging()


class TestGetLogger:
    """Tests for logger naming."""

    def test_prefixes_namespace(self):
        """Short names are placed under nl_payroll."""
        assert get_logger("cli").name == "nl_payroll.cli"

    def test_module_name_not_doubled(self):
        """Module names already in the namespace are kept."""
        assert get_logger("nl_payroll.core.services").name == "nl_payroll.core.services"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self):
        """Structured records carry extra fields."""
        stream = io.StringIO()
        configure_logging(level=logging.INFO, json_format=True, stream=stream)

        get_logger("test").info("Tax return built", extra={"employees": 2})

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "Tax return built"
        assert payload["level"] == "INFO"
        assert payload["employees"] == 2

    def test_idempotent(self):
        """A second call does not add handlers."""
        configure_logging(stream=io.StringIO())
        configure_logging(stream=io.StringIO())

        assert len(logging.getLogger("nl_payroll").handlers) == 1

    def test_force_replaces_handler(self):
        """A forced call applies the new level, format and stream."""
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(stream=first)
        configure_logging(level=logging.INFO, json_format=True, stream=second, force=True)

        get_logger("test").info("Tax return built")

        root = logging.getLogger("nl_payroll")
        assert len(root.handlers) == 1
        assert root.level == logging.INFO
        assert first.getvalue() == ""
        assert json.loads(second.getvalue().strip())["message"] == "Tax return built"

    def test_level_from_environment(self, monkeypatch):
        """The environment sets the level when none is given."""
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
        configure_logging(stream=io.StringIO())

        assert logging.getLogger("nl_payroll").level == logging.DEBUG

    def test_default_level_is_warning(self, monkeypatch):
        """Without configuration only warnings are emitted."""
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        stream = io.StringIO()
        configure_logging(stream=stream)

        get_logger("test").info("hidden")
        get_logger("test").warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()
