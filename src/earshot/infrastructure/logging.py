"""Logging setup built on loguru.

Call `setup_logging()` (or `configure_logger()`) once at boot. Modules obtain
their logger through `get_logger(__name__)`, which configures loguru with
defaults if nobody has done so yet.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import Environment, LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEV_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)
_PROD_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[name]} - {message}"

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Replace loguru's default sink with one matching the environment."""
    global _configured

    level_name = level.value if isinstance(level, LogLevel) else str(level)
    is_dev = environment == Environment.DEVELOPMENT

    logger.remove()
    logger.configure(extra={"name": "earshot"})
    logger.add(
        sys.stderr,
        level=level_name,
        format=_DEV_FORMAT if is_dev else _PROD_FORMAT,
        colorize=is_dev,
        backtrace=is_dev,
        diagnose=is_dev,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to `name`, configuring defaults on first use."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def is_configured() -> bool:
    return _configured


def reset_logging() -> None:
    """Drop all sinks and forget configuration. Used by tests."""
    global _configured
    logger.remove()
    _configured = False
