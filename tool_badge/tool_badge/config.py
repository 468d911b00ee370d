"""
Configuration management for tool_badge.
Handles loading, saving, and accessing configuration from a JSON file and environment variables.
"""
import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Optional

from .constants import (
    CONFIG_FILE,
    DEFAULT_SPINNER,
    DEFAULT_THEME,
    ENV_PLAIN,
    ENV_SHOW_PATH,
    ENV_THEME,
    TRUTHY_VALUES,
)


logger = logging.getLogger(__name__)


@dataclass
class BadgeConfig:
    """Badge display configuration."""
    theme: str = DEFAULT_THEME
    show_path: bool = False
    spinner: str = DEFAULT_SPINNER
    plain: bool = False


@dataclass
class AppConfig:
    """Main application configuration."""
    badge: BadgeConfig = field(default_factory=BadgeConfig)


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in TRUTHY_VALUES


class ConfigManager:
    """
    Manages badge configuration from a JSON file and environment variables.

    Environment variables take precedence over config file values.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        self._config_file = Path(config_file) if config_file is not None else CONFIG_FILE
        self._config: AppConfig = AppConfig()
        self._load_config()
        self._load_env_vars()

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self._config_file.exists():
            return

        try:
            with open(self._config_file, "r", encoding="utf-8") as f:
                data = json.load(f)

            if "badge" in data:
                self._config.badge = BadgeConfig(**data["badge"])
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to load config file {self._config_file}: {e}")
            self._config = AppConfig()

    def _load_env_vars(self) -> None:
        """Apply overrides from environment variables."""
        theme = os.environ.get(ENV_THEME)
        if theme:
            self._config.badge.theme = theme.strip()

        show_path = os.environ.get(ENV_SHOW_PATH)
        if show_path is not None:
            self._config.badge.show_path = _is_truthy(show_path)

        plain = os.environ.get(ENV_PLAIN)
        if plain is not None:
            self._config.badge.plain = _is_truthy(plain)

    def _save_config(self) -> None:
        """Save current configuration to JSON file."""
        self._config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_file, "w", encoding="utf-8") as f:
            json.dump({"badge": asdict(self._config.badge)}, f, indent=2)

    @property
    def config(self) -> AppConfig:
        return self._config

    @property
    def badge(self) -> BadgeConfig:
        """Get badge configuration."""
        return self._config.badge

    def update(self, **kwargs: Any) -> None:
        """Update badge configuration; unknown keys are ignored."""
        for key, value in kwargs.items():
            if hasattr(self._config.badge, key):
                setattr(self._config.badge, key, value)
            else:
                logger.debug(f"Ignoring unknown badge setting: {key}")

    def save(self) -> None:
        """Explicitly save configuration."""
        self._save_config()

    def reload(self) -> None:
        """Reload configuration from file."""
        self._config = AppConfig()
        self._load_config()
        self._load_env_vars()

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._config = AppConfig()


_config_manager: Optional[ConfigManager] = None


def get_config() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
