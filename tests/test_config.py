"""Tests for library configuration and initialization."""

from __future__ import annotations

import dataclasses
import logging

import pytest
import structlog

import fallible._config as config_module
from fallible import FallibleConfig, IllegalStateError, get_config, init, none


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test with no configuration and no logging env vars."""
    monkeypatch.delenv("FALLIBLE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FALLIBLE_LOG_FORMAT", raising=False)
    monkeypatch.setattr(config_module, "_config", None)
    loggers = [logging.getLogger(), logging.getLogger("fallible")]
    saved = [(list(lg.handlers), lg.level, lg.propagate) for lg in loggers]
    yield
    for lg, (handlers, level, propagate) in zip(loggers, saved, strict=True):
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate
    structlog.reset_defaults()


class TestFallibleConfig:
    """Tests for the FallibleConfig dataclass."""

    def test_default_values(self) -> None:
        config = FallibleConfig()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = FallibleConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.log_level = "DEBUG"  # type: ignore[misc]


class TestInit:
    """Tests for init()."""

    def test_init_defaults_to_silent(self) -> None:
        config = init()
        assert config == FallibleConfig()
        assert get_config() is config

    def test_init_explicit_values(self) -> None:
        config = init(log_level="debug", json_output=False)
        assert config.log_level == "DEBUG"
        assert config.json_output is False

    def test_init_configures_library_logger(self) -> None:
        init(log_level="WARNING")
        library = logging.getLogger("fallible")
        assert library.level == logging.WARNING
        assert library.propagate is False
        assert len(library.handlers) == 1
        assert isinstance(library.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_init_keeps_host_root_logging(self) -> None:
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.ERROR)

        init(log_level="DEBUG")

        assert host_handler in root.handlers
        assert root.level == logging.ERROR

    def test_repeated_init_keeps_one_handler(self) -> None:
        init(log_level="INFO")
        init(log_level="DEBUG")
        assert len(logging.getLogger("fallible").handlers) == 1

    def test_init_without_level_leaves_logging_alone(self) -> None:
        root = logging.getLogger()
        before = list(root.handlers)
        init()
        assert root.handlers == before

    def test_init_reads_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "info")
        monkeypatch.setenv("FALLIBLE_LOG_FORMAT", "console")
        config = init()
        assert config.log_level == "INFO"
        assert config.json_output is False

    def test_explicit_values_override_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "info")
        config = init(log_level="ERROR", json_output=True)
        assert config.log_level == "ERROR"

    def test_unknown_format_warns_and_uses_json(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv("FALLIBLE_LOG_FORMAT", "xml")
        with caplog.at_level(logging.WARNING):
            config = init()
        assert config.json_output is True
        assert "Unknown FALLIBLE_LOG_FORMAT value 'xml'" in caplog.text


class TestGetConfig:
    """Tests for get_config()."""

    def test_lazy_resolution(self) -> None:
        assert config_module._config is None
        config = get_config()
        assert config == FallibleConfig()
        assert get_config() is config

    def test_lazy_resolution_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "debug")
        assert get_config().log_level == "DEBUG"

    def test_fault_with_environment_level_keeps_host_root_logging(self, monkeypatch) -> None:
        monkeypatch.setenv("FALLIBLE_LOG_LEVEL", "debug")
        root = logging.getLogger()
        host_handler = logging.NullHandler()
        root.addHandler(host_handler)
        root.setLevel(logging.WARNING)

        with pytest.raises(IllegalStateError):
            none().unwrap()

        assert get_config().log_level == "DEBUG"
        assert host_handler in root.handlers
        assert root.level == logging.WARNING

    def test_returns_last_init(self) -> None:
        init(log_level="ERROR")
        assert get_config().log_level == "ERROR"
