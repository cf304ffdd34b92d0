"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

import logging

from tablecast.core.config import DecodeSettings
from tablecast.core.logging import configure_logging


def test_default_settings():
    settings = DecodeSettings()
    assert settings.log_level == "INFO"
    assert settings.strict is False
    assert settings.encoding == "utf-8"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TABLECAST_STRICT", "true")
    monkeypatch.setenv("TABLECAST_LOG_LEVEL", "DEBUG")
    settings = DecodeSettings()
    assert settings.strict is True
    assert settings.log_level == "DEBUG"


def test_configure_logging_sets_level_once():
    logger = configure_logging(DecodeSettings(log_level="warning"))
    handlers = list(logger.handlers)
    configure_logging(DecodeSettings(log_level="debug"))
    assert logger.level == logging.DEBUG
    assert logger.handlers == handlers
