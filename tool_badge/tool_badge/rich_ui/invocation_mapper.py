"""
Tool invocation to badge message mapper.

This module turns a tool name and its arguments into the short status
sentence and icon shown on a tool badge. Dispatch is two-level (tool
family, then command) and every level ends in a default branch, so any
input produces a descriptor.
"""
import logging
import re
from typing import Any, Callable, Dict, Mapping, Optional

from ..constants import UNKNOWN_FILE, UNKNOWN_TOOL
from .invocation_models import (
    DisplayDescriptor,
    EditorCommand,
    FileManagerCommand,
    Icon,
    InvocationArgs,
    ToolKind,
)


logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[\\/]+")


def extract_filename(path: Optional[str]) -> str:
    """
    Extract the display filename from a slash or backslash separated path.

    Args:
        path: File path, may be None or empty

    Returns:
        Last non-empty path segment, or "Unknown file" if there is none
    """
    if not path or not isinstance(path, str):
        return UNKNOWN_FILE
    for segment in reversed(_SEPARATORS.split(path)):
        if segment:
            return segment
    return UNKNOWN_FILE


# Editor tool: command -> (verb, icon)
EDITOR_MESSAGES: Dict[EditorCommand, tuple] = {
    EditorCommand.CREATE: ("Created", Icon.CREATE),
    EditorCommand.STR_REPLACE: ("Updated", Icon.EDIT),
    EditorCommand.INSERT: ("Updated", Icon.EDIT),
    EditorCommand.VIEW: ("Viewing", Icon.VIEW),
    EditorCommand.UNDO_EDIT: ("Reverted", Icon.EDIT),
    EditorCommand.OTHER: ("Edited", Icon.EDIT),
}


def _describe_editor(args: InvocationArgs) -> DisplayDescriptor:
    verb, icon = EDITOR_MESSAGES[EditorCommand.from_value(args.command)]
    return DisplayDescriptor(message=f"{verb} {extract_filename(args.path)}", icon=icon)


def _describe_file_manager(args: InvocationArgs) -> DisplayDescriptor:
    command = FileManagerCommand.from_value(args.command)
    filename = extract_filename(args.path)

    if command is FileManagerCommand.DELETE:
        return DisplayDescriptor(message=f"Deleted {filename}", icon=Icon.DELETE)

    if command is FileManagerCommand.RENAME:
        # An empty new_path counts as absent
        if not args.new_path:
            return DisplayDescriptor(message=f"Renamed {filename}", icon=Icon.MOVE)
        return DisplayDescriptor(
            message=f"Renamed {filename} to {extract_filename(args.new_path)}",
            icon=Icon.MOVE,
        )

    return DisplayDescriptor(message=f"Modified {filename}", icon=Icon.SETTINGS)


TOOL_DESCRIBERS: Dict[ToolKind, Callable[[InvocationArgs], DisplayDescriptor]] = {
    ToolKind.EDITOR: _describe_editor,
    ToolKind.FILE_MANAGER: _describe_file_manager,
}


def classify(tool_name: str, args: Optional[Mapping[str, Any]] = None) -> DisplayDescriptor:
    """
    Classify a tool invocation into a display message and icon.

    The result depends only on the tool name and arguments; lifecycle
    state plays no part in it.

    Args:
        tool_name: Identifier of the invoked tool
        args: Tool arguments; only command, path and new_path are read

    Returns:
        DisplayDescriptor with a non-empty message
    """
    kind = ToolKind.from_name(tool_name)
    describer = TOOL_DESCRIBERS.get(kind)

    if describer is None:
        # Unknown tools show their raw name
        message = tool_name if isinstance(tool_name, str) and tool_name else UNKNOWN_TOOL
        descriptor = DisplayDescriptor(message=message, icon=Icon.SETTINGS)
    else:
        descriptor = describer(InvocationArgs.from_mapping(args))

    logger.debug(f"Classified {tool_name!r} as {kind.name}: {descriptor.message!r}")
    return descriptor
