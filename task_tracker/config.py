"""Runtime configuration read from the environment.

A ``.env`` file in the working directory is loaded first, so local overrides
do not need to be exported in the shell.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 4000
DEFAULT_LOG_LEVEL = "INFO"

# level names uvicorn accepts for its own loggers
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "TRACE")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ConfigError(ValueError):
    """Raised when an environment variable holds an unusable value."""


def _int_setting(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    """Settings for one server process."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    seed_tasks: int = 0
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build settings from ``environ`` (``os.environ`` by default)."""
        if environ is None:
            environ = os.environ

        port = _int_setting(environ, "PORT", DEFAULT_PORT)
        if not 0 <= port <= 65535:
            raise ConfigError(f"PORT must be between 0 and 65535, got {port}")

        seed_tasks = _int_setting(environ, "SEED_TASKS", 0)
        if seed_tasks < 0:
            raise ConfigError(f"SEED_TASKS must not be negative, got {seed_tasks}")

        log_level = (environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()
        if log_level not in LOG_LEVELS:
            raise ConfigError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}"
            )

        return cls(
            host=environ.get("HOST") or DEFAULT_HOST,
            port=port,
            seed_tasks=seed_tasks,
            log_level=log_level,
        )


def load_settings() -> Settings:
    """Load ``.env`` into the process environment, then read settings."""
    load_dotenv()
    return Settings.from_env()


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Set up root logging for the service."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
