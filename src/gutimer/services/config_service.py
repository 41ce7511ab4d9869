"""Configuration service for gutimer.

Reads ``config.json`` from the platform config directory. The file is
optional and never written by gutimer; a missing file means defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from platformdirs import user_config_dir
from pydantic import ValidationError

from gutimer.commands.decorators import AppError
from gutimer.models.config_models import AppConfig
from gutimer.utils.exit_codes import ERROR_INVALID_ARGS
from gutimer.utils.logger import get_logger


class ConfigError(AppError):
    """The config file exists but cannot be used."""

    def __init__(self, message: str):
        super().__init__(message, exit_code=ERROR_INVALID_ARGS)


class ConfigService:
    """Service for loading application configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("gutimer"))
        self.config_path = self.config_dir / "config.json"
        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        logger = get_logger()
        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
            logger.debug("loaded config from %s", self.config_path)
        except FileNotFoundError:
            # First run, or the user never created one
            self._config = AppConfig()
        except ValidationError as e:
            raise ConfigError(f"Invalid config file {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to read config {self.config_path}: {e}") from e

        return self._config


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    return ConfigService()
