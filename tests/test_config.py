"""Tests for CLI configuration."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from sophone.config import LOG_LEVEL_ENV, CLIConfig


class TestCLIConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
        cfg = CLIConfig.from_env()
        assert cfg.json_output is False
        assert cfg.log_level == "WARNING"

    def test_env_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert CLIConfig.from_env().log_level == "INFO"

    def test_override_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        cfg = CLIConfig.from_env(log_level="DEBUG", json_output=True)
        assert cfg.log_level == "DEBUG"
        assert cfg.json_output is True

    def test_none_override_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert CLIConfig.from_env(log_level=None).log_level == "ERROR"

    def test_unknown_level(self) -> None:
        with pytest.raises(ValidationError):
            CLIConfig(log_level="LOUD")
