"""
Constants and configuration defaults for tool_badge.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "tool_badge"
APP_VERSION: Final[str] = "1.0.0"
APP_DESCRIPTION: Final[str] = "Live status badges for assistant tool invocations"

CONFIG_DIR: Final[Path] = Path.home() / ".tool_badge"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"
THEMES_DIR: Final[Path] = CONFIG_DIR / "themes"

DEFAULT_THEME: Final[str] = "default"
DEFAULT_SPINNER: Final[str] = "dots"

# Tool identifiers emitted by the assistant backend
EDITOR_TOOL: Final[str] = "str_replace_editor"
FILE_MANAGER_TOOL: Final[str] = "file_manager"

# Fallback literals
UNKNOWN_FILE: Final[str] = "Unknown file"
UNKNOWN_TOOL: Final[str] = "Unknown tool"

IN_PROGRESS_PREFIX: Final[str] = "In progress"
COMPLETED_PREFIX: Final[str] = "Completed"

ENV_THEME: Final[str] = "TOOL_BADGE_THEME"
ENV_SHOW_PATH: Final[str] = "TOOL_BADGE_SHOW_PATH"
ENV_PLAIN: Final[str] = "TOOL_BADGE_PLAIN"
TRUTHY_VALUES: Final[tuple] = ("1", "true", "yes", "on")
