"""Ambient configuration for the loader itself, using Pydantic Settings (v2).

This is *not* the settings file the package parses; it only controls how the
package behaves (environment flag, log level). Values come from:
- Real environment variables (highest precedence)
- `.env` files in the working directory: .env, .env.local
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Typed package configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `PLAINSETTINGS_ENV`.
    log_level : LogLevelName
        Level for loggers returned by :func:`get_logger`; maps from `LOG_LEVEL`.
    """

    environment: EnvName = Field(default="dev", alias="PLAINSETTINGS_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests can force a rebuild via `load_settings.cache_clear()` after
    mutating `os.environ`.
    """
    os.environ.setdefault("PLAINSETTINGS_ENV", "dev")
    return Settings()


def get_logger(name: str = "plainsettings") -> logging.Logger:
    """Return a process-global logger writing to stderr at the configured level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
