"""Rich UI components for tool_badge."""
from .invocation_models import (
    InvalidInvocationError,
    InvocationState,
    ToolKind,
    EditorCommand,
    FileManagerCommand,
    Icon,
    DisplayDescriptor,
    InvocationArgs,
    ToolInvocation,
)
from .invocation_mapper import extract_filename, classify
from .lifecycle import Treatment, BadgeView, select_treatment, build_badge
from .icon_styles import IconStyle, ICON_STYLES, get_icon_style
from .theme import BadgeTheme, ThemeManager, get_theme_manager
from .badge_renderer import BadgeRenderer, BadgeLive

__all__ = [
    # Invocation models
    'InvalidInvocationError',
    'InvocationState',
    'ToolKind',
    'EditorCommand',
    'FileManagerCommand',
    'Icon',
    'DisplayDescriptor',
    'InvocationArgs',
    'ToolInvocation',
    # Classification
    'extract_filename', 'classify',
    # Lifecycle
    'Treatment', 'BadgeView', 'select_treatment', 'build_badge',
    # Icon styles
    'IconStyle', 'ICON_STYLES', 'get_icon_style',
    # Themes
    'BadgeTheme', 'ThemeManager', 'get_theme_manager',
    # Rendering
    'BadgeRenderer', 'BadgeLive',
]
