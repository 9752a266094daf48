"""Tests for settings loaded from the environment."""

import pytest
from fastapi.testclient import TestClient

from task_tracker.config import ConfigError, Settings
from task_tracker.main import create_app


def test_defaults() -> None:
    """Test the settings used when nothing is configured."""
    settings = Settings.from_env({})
    assert settings == Settings(host="0.0.0.0", port=4000, seed_tasks=0, log_level="INFO")


def test_overrides() -> None:
    """Test that environment variables replace the defaults."""
    settings = Settings.from_env(
        {"PORT": "8080", "HOST": "127.0.0.1", "SEED_TASKS": "2", "LOG_LEVEL": "debug"}
    )
    assert settings.port == 8080
    assert settings.host == "127.0.0.1"
    assert settings.seed_tasks == 2
    assert settings.log_level == "DEBUG"


def test_blank_port_uses_default() -> None:
    """Test that an empty PORT falls back to the default."""
    assert Settings.from_env({"PORT": ""}).port == 4000


def test_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that os.environ is read when no mapping is given."""
    monkeypatch.setenv("PORT", "5001")
    assert Settings.from_env().port == 5001


@pytest.mark.parametrize("port", ["abc", "-1", "70000"])
def test_invalid_port(port: str) -> None:
    """Test that unusable ports are rejected."""
    with pytest.raises(ConfigError):
        Settings.from_env({"PORT": port})


def test_invalid_seed_count() -> None:
    """Test that a negative seed count is rejected."""
    with pytest.raises(ConfigError):
        Settings.from_env({"SEED_TASKS": "-3"})


def test_app_seeded_from_settings() -> None:
    """Test that the app seeds its own store when asked to."""
    client = TestClient(create_app(settings=Settings(seed_tasks=2)))
    tasks = client.get("/tasks").json()
    assert [t["id"] for t in tasks] == [1, 2]
    assert tasks[0]["description"] == "Lorem ipsum dolor sit amet"


@pytest.mark.parametrize("level", ["verbose", "warn", "fatal", "notset"])
def test_invalid_log_level(level: str) -> None:
    """Test that log levels uvicorn does not know are rejected."""
    with pytest.raises(ConfigError):
        Settings.from_env({"LOG_LEVEL": level})


@pytest.mark.parametrize("level", ["critical", "error", "warning", "info", "debug", "trace"])
def test_valid_log_levels(level: str) -> None:
    """Test that every uvicorn log level is accepted."""
    assert Settings.from_env({"LOG_LEVEL": level}).log_level == level.upper()
