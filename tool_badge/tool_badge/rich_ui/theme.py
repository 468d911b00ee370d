"""
Theme management for tool badges.
Provides built-in badge themes and loads custom ones from JSON files.
"""
import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from rich.errors import StyleSyntaxError
from rich.theme import Theme as RichTheme

from ..constants import DEFAULT_THEME, THEMES_DIR


logger = logging.getLogger(__name__)


@dataclass
class BadgeTheme:
    """Style definitions for a badge.

    In-progress badges use a blue accent; completed badges are neutral
    with an emerald icon.
    """
    name: str = "default"
    description: str = "Default badge theme"
    busy_text: str = "#1d4ed8"
    done_text: str = "#404040"
    icon: str = "#059669"
    spinner: str = "#2563eb"
    path: str = "dim"

    def to_rich_theme(self) -> RichTheme:
        """Convert to Rich Theme object."""
        return RichTheme({
            "badge.busy": self.busy_text,
            "badge.done": self.done_text,
            "badge.icon": self.icon,
            "badge.spinner": self.spinner,
            "badge.path": self.path,
        })

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BadgeTheme":
        """Create BadgeTheme from dictionary, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values.setdefault("name", "custom")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class ThemeManager:
    """
    Holds the available badge themes and the active one.

    Built-in themes are always present; custom themes are read from
    ``*.json`` files in the themes directory.
    """

    def __init__(self, themes_dir: Optional[Path] = None) -> None:
        self._themes: Dict[str, BadgeTheme] = {}
        self._themes_dir = themes_dir if themes_dir is not None else THEMES_DIR
        self._load_builtin_themes()
        self._load_custom_themes()
        self._current_theme: BadgeTheme = self._themes[DEFAULT_THEME]

    def _load_builtin_themes(self) -> None:
        """Load built-in themes."""
        self._themes["default"] = BadgeTheme()
        self._themes["mono"] = BadgeTheme(
            name="mono",
            description="Monochrome theme for limited terminals",
            busy_text="bold",
            done_text="default",
            icon="default",
            spinner="bold",
            path="dim",
        )

    def _load_custom_themes(self) -> None:
        """Load custom themes from JSON files."""
        if not self._themes_dir.exists():
            return

        for theme_file in sorted(self._themes_dir.glob("*.json")):
            try:
                with open(theme_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                theme = BadgeTheme.from_dict(data)
                theme.to_rich_theme()
                self._themes[theme.name] = theme
            except (json.JSONDecodeError, UnicodeDecodeError, TypeError, AttributeError, StyleSyntaxError) as e:
                logger.warning(f"Failed to load theme {theme_file}: {e}")

    @property
    def current_theme(self) -> BadgeTheme:
        return self._current_theme

    @property
    def available_themes(self) -> list[str]:
        return list(self._themes.keys())

    def get_theme(self, name: str) -> BadgeTheme:
        """
        Get a theme by name.

        Unknown names fall back to the default theme.
        """
        theme = self._themes.get(name)
        if theme is None:
            logger.warning(f"Theme '{name}' not found, falling back to '{DEFAULT_THEME}'")
            return self._themes[DEFAULT_THEME]
        return theme

    def set_theme(self, name: str) -> bool:
        """
        Set the active theme.

        Returns:
            True if theme was set, False if not found
        """
        if name in self._themes:
            self._current_theme = self._themes[name]
            return True
        return False


_theme_manager: Optional[ThemeManager] = None


def get_theme_manager() -> ThemeManager:
    """Get the global theme manager instance."""
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager
