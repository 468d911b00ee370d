"""
Badge renderer for tool invocations.

This module provides the BadgeRenderer class that turns tool invocations
into one-line Rich renderables: a spinner while the call is running and
the operation icon once it has completed.
"""
import logging
from typing import Optional

from rich.console import Console, RenderableType
from rich.live import Live
from rich.spinner import Spinner
from rich.text import Text

from ..constants import DEFAULT_SPINNER
from .icon_styles import get_icon_style
from .invocation_models import ToolInvocation
from .lifecycle import BadgeView, build_badge
from .theme import BadgeTheme


logger = logging.getLogger(__name__)


class BadgeRenderer:
    """
    Renderer that converts tool invocations to Rich output.

    Attributes:
        console: Rich Console instance for output
        theme: BadgeTheme used for colours
        show_path: Whether to append the raw path after the message
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        theme: Optional[BadgeTheme] = None,
        show_path: bool = False,
        spinner: str = DEFAULT_SPINNER,
    ) -> None:
        self._console = console or Console()
        self._theme = theme or BadgeTheme()
        self._show_path = show_path
        self._spinner = spinner
        # badge.* style names resolve through the console theme
        self._console.push_theme(self._theme.to_rich_theme())

    @property
    def console(self) -> Console:
        return self._console

    @property
    def theme(self) -> BadgeTheme:
        return self._theme

    def _message_text(self, view: BadgeView) -> Text:
        text = Text(view.message, style="badge.busy" if view.busy else "badge.done")
        if view.class_name:
            text.stylize(view.class_name)
        if self._show_path and view.title:
            text.append(f"  {view.title}", style="badge.path")
        return text

    def to_renderable(self, view: BadgeView) -> RenderableType:
        """
        Convert a badge view to a Rich renderable.

        Args:
            view: Badge view built from an invocation

        Returns:
            Spinner while busy, icon and message text once completed
        """
        style = get_icon_style(view.display_icon)
        if view.busy:
            return Spinner(
                self._spinner or style.spinner_name or DEFAULT_SPINNER,
                text=self._message_text(view),
                style="badge.spinner",
            )

        text = Text()
        text.append(f"{style.glyph} ", style="badge.icon")
        text.append_text(self._message_text(view))
        return text

    def plain_text(self, view: BadgeView) -> str:
        """Render a badge as unstyled ASCII text, e.g. "[file-plus] Created App.jsx"."""
        return f"[{get_icon_style(view.display_icon).label}] {view.message}"

    def render(self, invocation: ToolInvocation, class_name: Optional[str] = None) -> BadgeView:
        """
        Print the badge for an invocation.

        Falls back to the plain assistive label if rendering fails, so a
        badge is always shown.

        Returns:
            The BadgeView that was rendered
        """
        view = build_badge(invocation, class_name=class_name)
        try:
            self._console.print(self.to_renderable(view))
        except Exception as e:
            logger.warning(f"Error rendering badge for {invocation.tool_name!r}: {e}")
            self._render_fallback(view)
        return view

    def _render_fallback(self, view: BadgeView) -> None:
        self._console.print(Text(view.aria_label, style="dim"))

    def live(self, invocation: ToolInvocation, class_name: Optional[str] = None) -> "BadgeLive":
        """Create a live badge that re-renders in place as the invocation advances."""
        return BadgeLive(self, invocation, class_name=class_name)


class BadgeLive:
    """
    In-place badge display driven by invocation updates.

    Usage:
        with renderer.live(invocation) as badge:
            badge.update(invocation.advance("result"))
    """

    def __init__(
        self,
        renderer: BadgeRenderer,
        invocation: ToolInvocation,
        class_name: Optional[str] = None,
        refresh_per_second: int = 10,
    ) -> None:
        self._renderer = renderer
        self._class_name = class_name
        self._refresh_per_second = refresh_per_second
        self._invocation = invocation
        self._view = build_badge(invocation, class_name=class_name)
        self._live: Optional[Live] = None

    @property
    def view(self) -> BadgeView:
        return self._view

    def __enter__(self) -> "BadgeLive":
        self._live = Live(
            self._renderer.to_renderable(self._view),
            console=self._renderer.console,
            refresh_per_second=self._refresh_per_second,
        )
        self._live.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def update(self, invocation: ToolInvocation) -> BadgeView:
        """Re-classify the invocation and refresh the display."""
        self._invocation = invocation
        self._view = build_badge(invocation, class_name=self._class_name)
        if self._live is not None:
            self._live.update(self._renderer.to_renderable(self._view), refresh=True)
        return self._view

    def stop(self) -> None:
        if self._live is not None:
            try:
                self._live.stop()
            except Exception as e:
                logger.warning(f"Error stopping live badge: {e}")
            finally:
                self._live = None
