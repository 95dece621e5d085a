from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from config import ConfigurationSet

from pitch_analytics.config import create_config, load_feed_settings

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove all PITCH_ANALYTICS__ env vars so tests are isolated from the shell."""
    for key in list(os.environ):
        if key.startswith("PITCH_ANALYTICS__"):
            monkeypatch.delenv(key)


def test_create_config_returns_defaults() -> None:
    cfg = create_config(yaml_path="/nonexistent/config.yaml")
    assert isinstance(cfg, ConfigurationSet)
    assert cfg["savant.base_url"] == "https://baseballsavant.mlb.com"
    assert cfg["savant.timeout"] == 60.0
    assert cfg["season.default"] == 2025
    assert cfg["requests.delay_seconds"] == 1.2


def test_yaml_overrides_defaults(tmp_path: Path) -> None:
    yaml_file = tmp_path / "pitch_analytics.yaml"
    yaml_file.write_text("savant:\n  timeout: 30\nseason:\n  default: 2024\n")
    cfg = create_config(yaml_path=str(yaml_file))
    assert cfg["savant.timeout"] == 30
    assert cfg["season.default"] == 2024
    assert cfg["savant.user_agent"] == "Mozilla/5.0"


def test_env_overrides_yaml(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    yaml_file = tmp_path / "pitch_analytics.yaml"
    yaml_file.write_text("season:\n  default: 2024\n")
    monkeypatch.setenv("PITCH_ANALYTICS__SEASON__DEFAULT", "2023")
    cfg = create_config(yaml_path=str(yaml_file))
    assert str(cfg["season.default"]) == "2023"


def test_load_feed_settings_defaults() -> None:
    settings = load_feed_settings(create_config(yaml_path="/nonexistent/config.yaml"))
    assert settings.base_url == "https://baseballsavant.mlb.com"
    assert settings.timeout == 60.0
    assert settings.connect_timeout == 10.0
    assert settings.user_agent == "Mozilla/5.0"
    assert settings.default_season == 2025
    assert settings.delay_seconds == 1.2
    assert settings.retry_attempts == 3
    assert settings.retry_max_wait == 10.0


def test_load_feed_settings_coerces_env_strings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PITCH_ANALYTICS__SAVANT__TIMEOUT", "15")
    monkeypatch.setenv("PITCH_ANALYTICS__SAVANT__BASE_URL", "http://localhost:8000/")
    monkeypatch.setenv("PITCH_ANALYTICS__REQUESTS__DELAY_SECONDS", "0")
    settings = load_feed_settings(create_config(yaml_path="/nonexistent/config.yaml"))
    assert settings.timeout == 15.0
    assert settings.base_url == "http://localhost:8000"
    assert settings.delay_seconds == 0.0


def test_retry_settings_from_yaml(tmp_path: Path) -> None:
    yaml_file = tmp_path / "pitch_analytics.yaml"
    yaml_file.write_text("retry:\n  attempts: 5\n  max_wait_seconds: 2.5\n")
    settings = load_feed_settings(create_config(yaml_path=str(yaml_file)))
    assert settings.retry_attempts == 5
    assert settings.retry_max_wait == 2.5
