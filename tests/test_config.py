"""Tests for settings, logging and the YAML template loader."""

import logging

import pytest

from query_filters import FilterKind, UnsupportedType


class TestSettings:
    """Tests for environment-driven settings."""

    def test_typed_decoding_defaults_off(self, monkeypatch):
        """Test typed decoding is opt-in."""
        from config.settings import FilterConfig

        monkeypatch.delenv("QF_TYPED_DECODING", raising=False)

        assert FilterConfig().typed_decoding is False

    @pytest.mark.parametrize("value", ["true", "1", "YES", "on"])
    def test_typed_decoding_from_env(self, monkeypatch, value):
        """Test truthy environment values enable typed decoding."""
        from config.settings import FilterConfig

        monkeypatch.setenv("QF_TYPED_DECODING", value)

        assert FilterConfig().typed_decoding is True

    def test_template_settings_from_env(self, monkeypatch):
        """Test template file and name come from the environment."""
        from config.settings import FilterConfig

        monkeypatch.setenv("QF_TEMPLATE_FILE", "custom.yaml")
        monkeypatch.setenv("QF_DEFAULT_TEMPLATE", "tickets")

        filter_config = FilterConfig()

        assert filter_config.template_file == "custom.yaml"
        assert filter_config.default_template == "tickets"

    def test_app_config(self, monkeypatch):
        """Test application settings."""
        from config.settings import AppConfig

        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        assert AppConfig().log_level == "DEBUG"

    def test_log_to_file_flag(self, monkeypatch):
        """Test file logging is off unless LOG_TO_FILE is set."""
        from config.settings import AppConfig

        monkeypatch.delenv("LOG_TO_FILE", raising=False)
        assert AppConfig().log_to_file is False

        monkeypatch.setenv("LOG_TO_FILE", "true")
        assert AppConfig().log_to_file is True


class TestLogging:
    """Tests for logging configuration."""

    def test_get_logger_names(self):
        """Test module loggers hang off the package logger."""
        from config.logging_config import get_logger

        assert get_logger().name == "query_filters"
        assert get_logger("codec").name == "query_filters.codec"

    def test_setup_logging_with_file(self, tmp_path):
        """Test console and file handlers are installed."""
        from config.logging_config import setup_logging

        log_file = tmp_path / "logs" / "filters.log"
        logger = setup_logging("DEBUG", log_file=log_file, log_to_console=False)

        try:
            assert logger.level == logging.DEBUG
            assert len(logger.handlers) == 1
            assert isinstance(logger.handlers[0], logging.FileHandler)

            logger.info("hello")
            logger.handlers[0].flush()

            assert "hello" in log_file.read_text()
        finally:
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def test_default_log_file_location(self):
        """Test the dated default log file lives under logs/."""
        from config.logging_config import DEFAULT_LOG_FILE
        from config.settings import PROJECT_ROOT

        assert DEFAULT_LOG_FILE.parent == PROJECT_ROOT / "logs"
        assert DEFAULT_LOG_FILE.name.startswith("query_filters_")
        assert DEFAULT_LOG_FILE.suffix == ".log"


class TestConfigLoader:
    """Tests for YAML filter templates."""

    def test_load_yaml_file(self, tmp_path):
        """Test loading a YAML file from a directory."""
        from config.config_loader import _load_yaml_file

        (tmp_path / "filters.yaml").write_text("templates:\n  t:\n    defaults:\n      a: 1\n")

        data = _load_yaml_file("filters.yaml", tmp_path)

        assert data["templates"]["t"]["defaults"] == {"a": 1}

    def test_missing_file_raises(self, tmp_path):
        """Test a missing file is a configuration error."""
        from config.config_loader import ConfigurationError, _load_yaml_file

        with pytest.raises(ConfigurationError):
            _load_yaml_file("missing.yaml", tmp_path)

    def test_invalid_yaml_raises(self, tmp_path):
        """Test malformed YAML is a configuration error."""
        from config.config_loader import ConfigurationError, _load_yaml_file

        (tmp_path / "bad.yaml").write_text("templates: [unclosed\n")

        with pytest.raises(ConfigurationError):
            _load_yaml_file("bad.yaml", tmp_path)

    def test_build_filter_template(self):
        """Test lists become sets and kinds are detected."""
        from config.config_loader import build_filter_template

        data = {
            "templates": {
                "tickets": {
                    "defaults": {"owner": None, "priority": 0, "labels": ["bug"]},
                }
            }
        }

        template = build_filter_template(data, "tickets")

        assert list(template) == ["owner", "priority", "labels"]
        assert template["labels"] == {"bug"}
        assert template.kind("owner") == FilterKind.NULL
        assert template.kind("labels") == FilterKind.SET

    def test_unknown_template_raises(self):
        """Test requesting a template that is not configured."""
        from config.config_loader import ConfigurationError, build_filter_template

        with pytest.raises(ConfigurationError):
            build_filter_template({"templates": {}}, "orders")

    def test_unsupported_default_raises(self):
        """Test defaults that are not filter values are rejected."""
        from config.config_loader import build_filter_template

        data = {"templates": {"t": {"defaults": {"range": {"from": 1, "to": 2}}}}}

        with pytest.raises(UnsupportedType):
            build_filter_template(data, "t")

    def test_load_shipped_orders_template(self):
        """Test the bundled orders template."""
        from config.config_loader import load_filter_template

        template = load_filter_template("orders")

        assert dict(template) == {"name": "", "age": 0, "is_paid": False, "statuses": set()}

    def test_get_option_values(self):
        """Test option lists for set filters."""
        from config.config_loader import get_option_values, load_filter_config

        data = load_filter_config()

        assert get_option_values("orders", "statuses", data) == [
            "completed",
            "canceled",
            "delivered",
        ]
        assert get_option_values("orders", "name", data) == []

    def test_missing_config_falls_back(self):
        """Test a missing template file falls back to built-in templates."""
        from config.config_loader import FALLBACK_FILTER_CONFIG, load_filter_config

        assert load_filter_config("does_not_exist.yaml") == FALLBACK_FILTER_CONFIG
