"""
Lifecycle treatment for tool badges.

Selects the in-progress or completed treatment for an invocation state
and combines it with the classifier output into the view model that
renderers consume.
"""
from dataclasses import dataclass
from typing import Any, Optional

from ..constants import COMPLETED_PREFIX, IN_PROGRESS_PREFIX
from .invocation_mapper import classify
from .invocation_models import Icon, InvocationState, ToolInvocation


@dataclass(frozen=True)
class Treatment:
    """
    Visual treatment for a lifecycle state.

    Attributes:
        busy: Whether the invocation is still running
        icon_override: Icon shown instead of the classified one, if any
        label_prefix: Assistive text prefix placed before the message
    """
    busy: bool
    icon_override: Optional[Icon]
    label_prefix: str

    def effective_icon(self, icon: Icon) -> Icon:
        return self.icon_override if self.icon_override is not None else icon


IN_PROGRESS = Treatment(busy=True, icon_override=Icon.SPINNER, label_prefix=IN_PROGRESS_PREFIX)
COMPLETED = Treatment(busy=False, icon_override=None, label_prefix=COMPLETED_PREFIX)


def select_treatment(state: Any) -> Treatment:
    """
    Select the treatment for a lifecycle state.

    Args:
        state: InvocationState or its wire value

    Returns:
        IN_PROGRESS for partial-call and call, COMPLETED for result

    Raises:
        InvalidInvocationError: If the state is not a known value
    """
    if InvocationState.parse(state) is InvocationState.RESULT:
        return COMPLETED
    return IN_PROGRESS


@dataclass(frozen=True)
class BadgeView:
    """
    Everything a renderer needs to draw one badge.

    Attributes:
        message: Classified status sentence
        icon: Classified icon
        display_icon: Icon to draw (spinner while busy)
        busy: Whether the invocation is in progress
        title: Raw path argument, empty when absent
        role: "status" while busy, None once completed
        aria_label: Message framed with the lifecycle prefix
        class_name: Optional extra style for the badge
    """
    message: str
    icon: Icon
    display_icon: Icon
    busy: bool
    title: str
    role: Optional[str]
    aria_label: str
    class_name: Optional[str] = None


def build_badge(invocation: ToolInvocation, class_name: Optional[str] = None) -> BadgeView:
    """Classify an invocation and apply its lifecycle treatment."""
    descriptor = classify(invocation.tool_name, invocation.args)
    treatment = select_treatment(invocation.state)
    path = invocation.args.get("path")

    return BadgeView(
        message=descriptor.message,
        icon=descriptor.icon,
        display_icon=treatment.effective_icon(descriptor.icon),
        busy=treatment.busy,
        title=path if isinstance(path, str) else "",
        role="status" if treatment.busy else None,
        aria_label=f"{treatment.label_prefix}: {descriptor.message}",
        class_name=class_name,
    )
