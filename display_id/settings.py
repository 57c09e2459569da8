"""
Configuration management for display ids.

Loads configuration from environment variables with sensible defaults.
A ``.env`` file is only read by ``Config.load()`` or ``configure_logging()``,
never on import.
"""

import logging
import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_level(name: str, default: str) -> str:
    return os.getenv(name, default).upper()


class Config:
    """Library configuration."""

    # Logging Configuration
    LOG_LEVEL: LogLevel = _env_level("DISPLAY_ID_LOG_LEVEL", "INFO")  # type: ignore

    # Level of the diagnostic logged when str() of a decorated value fails
    DIAGNOSTIC_LEVEL: LogLevel = _env_level("DISPLAY_ID_DIAGNOSTIC_LEVEL", "ERROR")  # type: ignore

    # Application Metadata
    APP_NAME: str = "display-id"
    VERSION: str = "0.1.0"

    @classmethod
    def load(cls, env_path: Optional[Path] = None) -> None:
        """
        Load a ``.env`` file into the environment and re-read the levels.

        Args:
            env_path: File to load, defaults to ``.env`` in the working
                directory. A missing file is skipped.
        """
        env_path = env_path or Path.cwd() / ".env"
        if env_path.exists():
            load_dotenv(env_path)

        cls.LOG_LEVEL = _env_level("DISPLAY_ID_LOG_LEVEL", "INFO")  # type: ignore
        cls.DIAGNOSTIC_LEVEL = _env_level("DISPLAY_ID_DIAGNOSTIC_LEVEL", "ERROR")  # type: ignore

    @classmethod
    def validate(cls) -> None:
        """
        Validate configuration.

        Raises:
            ValueError: If a level is not a standard logging level name.
        """
        for name in ("LOG_LEVEL", "DIAGNOSTIC_LEVEL"):
            level = getattr(cls, name)
            if level not in LOG_LEVELS:
                raise ValueError(
                    f"Invalid {name} {level!r}. Expected one of: {', '.join(sorted(LOG_LEVELS))}"
                )

    @classmethod
    def diagnostic_level(cls) -> int:
        """Numeric level for serialization diagnostics, ERROR when misconfigured."""
        if cls.DIAGNOSTIC_LEVEL not in LOG_LEVELS:
            return logging.ERROR
        return getattr(logging, cls.DIAGNOSTIC_LEVEL)


def configure_logging(level: Optional[str] = None, env_path: Optional[Path] = None) -> None:
    """Load ``.env`` and configure root logging for applications using display ids."""

    config.load(env_path)
    level_name = (level or config.LOG_LEVEL).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(
            f"Invalid log level {level_name!r}. Expected one of: {', '.join(sorted(LOG_LEVELS))}"
        )
    logging.basicConfig(level=getattr(logging, level_name), format=LOG_FORMAT)


# Global config instance
config = Config()
