"""Tests for CssBuilderConfig and logging setup."""

import logging

import pytest

from cssbuilder.config import CssBuilderConfig
from cssbuilder.log import configure_logging


class TestConfig:
    def test_defaults(self):
        config = CssBuilderConfig()
        assert config.log_level == "WARNING"
        assert config.json_indent is None

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CSSBUILDER_LOG_LEVEL", "debug")
        monkeypatch.setenv("CSSBUILDER_JSON_INDENT", "4")
        config = CssBuilderConfig.from_env()
        assert config.log_level == "DEBUG"
        assert config.json_indent == 4

    def test_from_env_without_variables(self, monkeypatch):
        monkeypatch.delenv("CSSBUILDER_LOG_LEVEL", raising=False)
        monkeypatch.delenv("CSSBUILDER_JSON_INDENT", raising=False)
        assert CssBuilderConfig.from_env() == CssBuilderConfig()

    def test_from_env_rejects_bad_indent(self, monkeypatch):
        monkeypatch.setenv("CSSBUILDER_JSON_INDENT", "abc")
        with pytest.raises(ValueError):
            CssBuilderConfig.from_env()

    def test_is_frozen(self):
        config = CssBuilderConfig()
        with pytest.raises(AttributeError):
            config.log_level = "INFO"  # type: ignore[misc]


class TestLogging:
    def test_sets_package_level(self):
        configure_logging("debug")
        assert logging.getLogger("cssbuilder").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("cssbuilder").level == logging.WARNING

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging("chatty")

    def test_builder_logs_rejections(self, caplog):
        from cssbuilder.builder import SelectorBuilder
        from cssbuilder.errors import DuplicateError

        configure_logging("DEBUG")
        with caplog.at_level(logging.DEBUG, logger="cssbuilder"):
            with pytest.raises(DuplicateError):
                SelectorBuilder().id("a").id("b")
        assert "Rejected duplicate id" in caplog.text
        configure_logging("WARNING")
