"""
Property-based tests for the invocation classifier.

Tests the tool/command dispatch tables and their fallbacks using hypothesis.
"""

import allure
import pytest
from hypothesis import given, settings, strategies as st

from tool_badge.constants import EDITOR_TOOL, FILE_MANAGER_TOOL, UNKNOWN_TOOL
from tool_badge.rich_ui.invocation_mapper import classify
from tool_badge.rich_ui.invocation_models import DisplayDescriptor, Icon


KNOWN_TOOLS = (EDITOR_TOOL, FILE_MANAGER_TOOL)


# Strategies for generating test data

unknown_tool_strategy = st.text(min_size=1, max_size=30).filter(lambda name: name not in KNOWN_TOOLS)

arg_value_strategy = st.one_of(
    st.none(),
    st.integers(),
    st.booleans(),
    st.text(max_size=30),
    st.lists(st.text(max_size=5), max_size=3),
)


@st.composite
def args_strategy(draw):
    """Generate argument mappings with arbitrary extra keys and value types."""
    args = draw(st.dictionaries(st.text(max_size=10), arg_value_strategy, max_size=5))
    for key in ("command", "path", "new_path"):
        if draw(st.booleans()):
            args[key] = draw(arg_value_strategy)
    return args


# Editor tool table

@pytest.mark.parametrize(
    "command,message,icon",
    [
        ("create", "Created Button.tsx", Icon.CREATE),
        ("str_replace", "Updated Button.tsx", Icon.EDIT),
        ("insert", "Updated Button.tsx", Icon.EDIT),
        ("view", "Viewing Button.tsx", Icon.VIEW),
        ("undo_edit", "Reverted Button.tsx", Icon.EDIT),
        ("unknown_command", "Edited Button.tsx", Icon.EDIT),
        (None, "Edited Button.tsx", Icon.EDIT),
    ],
)
def test_editor_commands(command, message, icon):
    args = {"path": "src/components/Button.tsx"}
    if command is not None:
        args["command"] = command

    assert classify(EDITOR_TOOL, args) == DisplayDescriptor(message=message, icon=icon)


def test_editor_create_nested_path():
    assert classify(EDITOR_TOOL, {"command": "create", "path": "src/a/B.tsx"}).message == "Created B.tsx"


def test_editor_without_args():
    descriptor = classify(EDITOR_TOOL, {})
    assert descriptor.message == "Edited Unknown file"
    assert descriptor.icon is Icon.EDIT


def test_editor_with_none_args():
    assert classify(EDITOR_TOOL, None).message == "Edited Unknown file"


def test_editor_empty_path_matches_absent_path():
    assert classify(EDITOR_TOOL, {"command": "view", "path": ""}) == classify(EDITOR_TOOL, {"command": "view"})


# File manager table

def test_file_manager_delete():
    descriptor = classify(FILE_MANAGER_TOOL, {"command": "delete", "path": "src/components/OldButton.tsx"})
    assert descriptor == DisplayDescriptor(message="Deleted OldButton.tsx", icon=Icon.DELETE)


def test_file_manager_rename_with_new_path():
    descriptor = classify(
        FILE_MANAGER_TOOL,
        {"command": "rename", "path": "Header.tsx", "new_path": "Navbar.tsx"},
    )
    assert descriptor == DisplayDescriptor(message="Renamed Header.tsx to Navbar.tsx", icon=Icon.MOVE)


def test_file_manager_rename_with_nested_paths():
    descriptor = classify(
        FILE_MANAGER_TOOL,
        {"command": "rename", "path": "src/components/Header.tsx", "new_path": "src\\layout\\Navbar.tsx"},
    )
    assert descriptor.message == "Renamed Header.tsx to Navbar.tsx"


@pytest.mark.parametrize("new_path", [None, ""])
def test_file_manager_rename_without_new_path(new_path):
    args = {"command": "rename", "path": "Button.tsx"}
    if new_path is not None:
        args["new_path"] = new_path

    assert classify(FILE_MANAGER_TOOL, args) == DisplayDescriptor(message="Renamed Button.tsx", icon=Icon.MOVE)


@pytest.mark.parametrize("command", ["copy", "", None])
def test_file_manager_other_commands(command):
    args = {"path": "config.json"}
    if command is not None:
        args["command"] = command

    assert classify(FILE_MANAGER_TOOL, args) == DisplayDescriptor(message="Modified config.json", icon=Icon.SETTINGS)


def test_file_manager_without_args():
    assert classify(FILE_MANAGER_TOOL, {}).message == "Modified Unknown file"


def test_empty_tool_name_still_has_message():
    assert classify("", {"command": "create"}) == DisplayDescriptor(message=UNKNOWN_TOOL, icon=Icon.SETTINGS)


# **Property 3: Unknown tools pass their name through**
@allure.feature("Invocation Classifier")
@allure.story("Unknown tool passthrough")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=100)
@given(tool_name=unknown_tool_strategy, args=args_strategy())
def test_unknown_tool_passthrough(tool_name, args):
    """
    Property 3: Unknown tools pass their name through

    For any tool name outside the known families, the message SHALL be
    the tool name verbatim and the icon SHALL be settings.
    """
    descriptor = classify(tool_name, args)
    assert descriptor.message == tool_name
    assert descriptor.icon is Icon.SETTINGS


def test_unknown_tool_example():
    assert classify("anything-unrecognized", {"command": "x", "path": "y"}).message == "anything-unrecognized"


# **Property 4: Classification is total and idempotent**
@allure.feature("Invocation Classifier")
@allure.story("Total and idempotent")
@allure.severity(allure.severity_level.CRITICAL)
@settings(max_examples=200)
@given(tool_name=st.one_of(st.sampled_from(KNOWN_TOOLS), st.text(max_size=20)), args=args_strategy())
def test_classify_total_and_idempotent(tool_name, args):
    """
    Property 4: Classification is total and idempotent

    For any tool name and argument mapping, classify SHALL return a
    descriptor with a non-empty message, and calling it twice with the
    same input SHALL give the same result.
    """
    first = classify(tool_name, args)
    second = classify(tool_name, args)

    assert isinstance(first, DisplayDescriptor)
    assert first.message
    assert first.icon is not Icon.SPINNER
    assert first == second


@allure.feature("Invocation Classifier")
@allure.story("Extra arguments are ignored")
@settings(max_examples=50)
@given(extra=st.dictionaries(
    st.text(max_size=10).filter(lambda k: k not in ("command", "path", "new_path")),
    arg_value_strategy,
    max_size=5,
))
def test_extra_keys_do_not_change_result(extra):
    base = {"command": "create", "path": "src/App.jsx"}
    assert classify(EDITOR_TOOL, {**extra, **base}) == classify(EDITOR_TOOL, base)
