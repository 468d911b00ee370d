"""
Icon styling for tool badges.

Maps each badge icon to the glyph drawn in the terminal and a short
label used for plain output.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from ..constants import DEFAULT_SPINNER
from .invocation_models import Icon


@dataclass(frozen=True)
class IconStyle:
    """
    Terminal rendering for an icon.

    Attributes:
        glyph: Unicode glyph shown before the message
        label: Plain-text name of the icon
        spinner_name: Rich spinner to animate instead of the glyph, if any
    """
    glyph: str
    label: str
    spinner_name: Optional[str] = None


ICON_STYLES: Dict[Icon, IconStyle] = {
    Icon.CREATE: IconStyle(glyph="✚", label="file-plus"),
    Icon.EDIT: IconStyle(glyph="✎", label="file-edit"),
    Icon.VIEW: IconStyle(glyph="👁", label="eye"),
    Icon.DELETE: IconStyle(glyph="🗑", label="trash"),
    Icon.MOVE: IconStyle(glyph="⇄", label="move"),
    Icon.SETTINGS: IconStyle(glyph="⚙", label="settings"),
    Icon.SPINNER: IconStyle(glyph="⠋", label="loader", spinner_name=DEFAULT_SPINNER),
}


def get_icon_style(icon: Icon) -> IconStyle:
    """
    Get the IconStyle for an icon.

    Args:
        icon: The icon to look up

    Returns:
        IconStyle for the icon, or the settings style if not found
    """
    return ICON_STYLES.get(icon, ICON_STYLES[Icon.SETTINGS])
