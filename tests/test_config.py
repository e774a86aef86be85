# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for configuration module."""

import logging

import pytest
from pydantic import ValidationError

from modelcollection.config import AppSettings, settings


class TestAppSettings:
    def test_defaults(self, monkeypatch):
        for var in (
            "MODELCOLLECTION_LOG_LEVEL",
            "MODELCOLLECTION_EMITTER_SUPPRESS_HANDLER_ERRORS",
            "MODELCOLLECTION_EMITTER_WARN_LISTENERS",
        ):
            monkeypatch.delenv(var, raising=False)
        config = AppSettings(_env_file=None)
        assert config.LOG_LEVEL == "INFO"
        assert config.EMITTER_SUPPRESS_HANDLER_ERRORS is False
        assert config.EMITTER_WARN_LISTENERS == 0

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv(
            "MODELCOLLECTION_EMITTER_SUPPRESS_HANDLER_ERRORS", "true"
        )
        monkeypatch.setenv("MODELCOLLECTION_EMITTER_WARN_LISTENERS", "5")
        config = AppSettings(_env_file=None)
        assert config.EMITTER_SUPPRESS_HANDLER_ERRORS is True
        assert config.EMITTER_WARN_LISTENERS == 5

    def test_log_level_is_normalized(self):
        config = AppSettings(_env_file=None, LOG_LEVEL="debug")
        assert config.LOG_LEVEL == "DEBUG"
        assert config.log_level == logging.DEBUG

    def test_log_level_accepts_int(self):
        config = AppSettings(_env_file=None, LOG_LEVEL=logging.WARNING)
        assert config.LOG_LEVEL == "WARNING"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, LOG_LEVEL="chatty")

    def test_negative_warn_listeners_rejected(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, EMITTER_WARN_LISTENERS=-1)

    def test_settings_are_frozen(self):
        config = AppSettings(_env_file=None)
        with pytest.raises(ValidationError):
            config.LOG_LEVEL = "DEBUG"

    def test_singleton_instance(self):
        assert AppSettings._instance is settings
