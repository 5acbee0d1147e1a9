"""Configuration service for managing TodoQueue CLI configuration.

This module provides the ConfigService class, the single source of truth for
configuration. It handles:

- Loading and saving config.json
- Dot-separated key access (``storage.data_file``)
- Resolving where the directory snapshot lives
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel

from todoqueue_cli.models.config_models import AppConfig
from todoqueue_cli.models.exceptions import ConfigError

_APP_NAME = "todoqueue_cli"
DEFAULT_DATA_FILE = "todo_data.json"


class ConfigService:
    """Service for loading, saving and editing the application configuration."""

    def __init__(self):
        """Initialize the config service."""

        self.config_dir = Path(user_config_dir(_APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(user_data_dir(_APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

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

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # Expected on first run
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise ConfigError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except Exception as e:
            raise ConfigError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
        """
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name a configuration field
            pydantic.ValidationError: If the value is rejected by the model
        """
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise KeyError(key)
            current = current[k]
        if keys[-1] not in current:
            raise KeyError(key)

        current[keys[-1]] = value

        self._config = AppConfig(**config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset the whole configuration, or one key, to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
            return
        default_value = self._lookup(AppConfig(), key)
        if isinstance(default_value, BaseModel):
            default_value = default_value.model_dump()
        self.set(key, default_value)

    def resolve_data_file(self, override: str | Path | None = None) -> Path:
        """Return the snapshot path: explicit override, then config, then default."""
        if override is not None:
            return Path(override).expanduser()
        configured = self.config.storage.data_file
        if configured:
            return Path(configured).expanduser()
        return self.data_dir / DEFAULT_DATA_FILE

    @staticmethod
    def _lookup(config: BaseModel, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            if not (isinstance(value, BaseModel) and k in type(value).model_fields):
                raise KeyError(key)
            value = getattr(value, k)
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
