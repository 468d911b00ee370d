"""
Invocation models for the tool badge system.

This module defines the data structures that describe a tool invocation
as it arrives from the assistant backend, and the display descriptor the
classifier produces for it.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..constants import EDITOR_TOOL, FILE_MANAGER_TOOL


class InvalidInvocationError(ValueError):
    """Raised when a raw invocation record cannot be turned into a ToolInvocation."""


class InvocationState(Enum):
    """Lifecycle of a single tool invocation."""
    PARTIAL_CALL = "partial-call"
    CALL = "call"
    RESULT = "result"

    @classmethod
    def parse(cls, value: Any) -> "InvocationState":
        """
        Resolve a state from an enum member or its wire value.

        Args:
            value: InvocationState member or one of "partial-call", "call", "result"

        Returns:
            The matching InvocationState

        Raises:
            InvalidInvocationError: If the value is not a known state
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise InvalidInvocationError(f"Unknown invocation state: {value!r}") from None


class ToolKind(Enum):
    """Tool families the classifier knows how to describe."""
    EDITOR = EDITOR_TOOL
    FILE_MANAGER = FILE_MANAGER_TOOL
    UNKNOWN = "unknown"

    @classmethod
    def from_name(cls, tool_name: Any) -> "ToolKind":
        """Map a tool identifier to its family, UNKNOWN for anything else."""
        for kind in (cls.EDITOR, cls.FILE_MANAGER):
            if tool_name == kind.value:
                return kind
        return cls.UNKNOWN


class EditorCommand(Enum):
    """Commands of the text editor tool."""
    CREATE = "create"
    STR_REPLACE = "str_replace"
    INSERT = "insert"
    VIEW = "view"
    UNDO_EDIT = "undo_edit"
    OTHER = None

    @classmethod
    def from_value(cls, command: Optional[str]) -> "EditorCommand":
        for member in cls:
            if member is not cls.OTHER and member.value == command:
                return member
        return cls.OTHER


class FileManagerCommand(Enum):
    """Commands of the file manager tool."""
    DELETE = "delete"
    RENAME = "rename"
    OTHER = None

    @classmethod
    def from_value(cls, command: Optional[str]) -> "FileManagerCommand":
        for member in cls:
            if member is not cls.OTHER and member.value == command:
                return member
        return cls.OTHER


class Icon(Enum):
    """Fixed icon set a badge can show."""
    CREATE = "create"
    EDIT = "edit"
    VIEW = "view"
    DELETE = "delete"
    MOVE = "move"
    SETTINGS = "settings"
    SPINNER = "spinner"


@dataclass(frozen=True)
class DisplayDescriptor:
    """
    Classifier output for one invocation.

    Attributes:
        message: Short human-readable status sentence, never empty
        icon: Icon representing the operation
    """
    message: str
    icon: Icon


def _optional_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(frozen=True)
class InvocationArgs:
    """
    Typed view over the few argument fields the classifier reads.

    Any field that is missing, None or not a string is None here.
    """
    command: Optional[str] = None
    path: Optional[str] = None
    new_path: Optional[str] = None

    @classmethod
    def from_mapping(cls, args: Optional[Mapping[str, Any]]) -> "InvocationArgs":
        if not isinstance(args, Mapping):
            return cls()
        return cls(
            command=_optional_str(args.get("command")),
            path=_optional_str(args.get("path")),
            new_path=_optional_str(args.get("new_path")),
        )


@dataclass
class ToolInvocation:
    """
    A single tool call tracked through its lifecycle.

    Attributes:
        tool_call_id: Opaque identifier used by the caller for reconciliation
        tool_name: Identifier of the invoked tool
        args: Open argument mapping; unknown keys are kept untouched
        state: Lifecycle state
        result: Optional result payload, never inspected for display
    """
    tool_call_id: str
    tool_name: str
    args: Dict[str, Any] = field(default_factory=dict)
    state: InvocationState = InvocationState.CALL
    result: Any = None

    def __post_init__(self) -> None:
        self.state = InvocationState.parse(self.state)
        if self.args is None:
            self.args = {}

    @property
    def is_complete(self) -> bool:
        return self.state is InvocationState.RESULT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolInvocation":
        """
        Build an invocation from a raw record.

        Accepts the camelCase keys used on the wire (toolCallId, toolName)
        as well as their snake_case equivalents.

        Raises:
            InvalidInvocationError: If the record is not usable
        """
        if not isinstance(data, Mapping):
            raise InvalidInvocationError(f"Invocation record must be an object, got {type(data).__name__}")

        tool_name = data.get("toolName", data.get("tool_name"))
        if not isinstance(tool_name, str):
            raise InvalidInvocationError("Invocation record is missing 'toolName'")

        args = data.get("args")
        if args is None:
            args = {}
        elif not isinstance(args, Mapping):
            raise InvalidInvocationError(f"'args' must be an object, got {type(args).__name__}")

        if "state" not in data:
            raise InvalidInvocationError("Invocation record is missing 'state'")

        return cls(
            tool_call_id=str(data.get("toolCallId", data.get("tool_call_id", ""))),
            tool_name=tool_name,
            args=dict(args),
            state=InvocationState.parse(data["state"]),
            result=data.get("result"),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "toolCallId": self.tool_call_id,
            "toolName": self.tool_name,
            "args": dict(self.args),
            "state": self.state.value,
        }
        if self.result is not None:
            data["result"] = self.result
        return data

    def advance(self, state: Any, result: Any = None) -> "ToolInvocation":
        """Return a copy of this invocation moved to another lifecycle state."""
        return ToolInvocation(
            tool_call_id=self.tool_call_id,
            tool_name=self.tool_name,
            args=dict(self.args),
            state=InvocationState.parse(state),
            result=result if result is not None else self.result,
        )
