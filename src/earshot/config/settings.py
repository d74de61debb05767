from dataclasses import dataclass, field, fields
from enum import Enum
from pathlib import Path
from typing import Any


class Environment(Enum):
    """Runtime environment for the application.

    Kept small and explicit to support simple environment-driven behavior
    without introducing configuration dependencies.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogLevel(str, Enum):
    """Log levels understood by loguru."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    SUCCESS = "SUCCESS"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass(frozen=True)
class Settings:
    """Settings container used to bootstrap the client.

    The CLI layer decides how values are populated (flags now, env vars or a
    config file later); core code only depends on this shape.
    """

    environment: Environment = Environment.PRODUCTION
    log_level: LogLevel = LogLevel.INFO
    listener_dir: Path = field(default_factory=lambda: Path("./listeners"))


def build_settings(**overrides: Any) -> Settings:
    """Build Settings, ignoring overrides that are None.

    Lets CLI options left unset fall through to the dataclass defaults.
    """
    known = {f.name for f in fields(Settings)}
    values = {
        key: value
        for key, value in overrides.items()
        if value is not None and key in known
    }
    return Settings(**values)
