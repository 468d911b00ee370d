#!/usr/bin/env python3
"""
Demo script showcasing tool_badge rendering.
"""
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))


SAMPLE_INVOCATIONS = [
    ("str_replace_editor", {"command": "create", "path": "/components/Button.jsx"}),
    ("str_replace_editor", {"command": "str_replace", "path": "/App.jsx"}),
    ("str_replace_editor", {"command": "view", "path": "src\\lib\\utils.js"}),
    ("file_manager", {"command": "rename", "path": "/Header.jsx", "new_path": "/Navbar.jsx"}),
    ("file_manager", {"command": "delete", "path": "/old/Card.jsx"}),
    ("web_search", {"query": "tailwind gradients"}),
]


def demo_static():
    """Render every sample invocation in each lifecycle state."""
    from tool_badge.rich_ui import BadgeRenderer, InvocationState, ToolInvocation

    print("\n" + "=" * 50)
    print("Static Badge Demo")
    print("=" * 50)

    renderer = BadgeRenderer(show_path=True)
    for index, (tool_name, args) in enumerate(SAMPLE_INVOCATIONS):
        for state in InvocationState:
            view = renderer.render(ToolInvocation(
                tool_call_id=f"demo-{index}",
                tool_name=tool_name,
                args=args,
                state=state,
            ))
            print(f"    plain: {renderer.plain_text(view)}")


def demo_live():
    """Advance one invocation through its lifecycle in place."""
    from tool_badge.rich_ui import BadgeRenderer, ToolInvocation

    print("\n" + "=" * 50)
    print("Live Badge Demo")
    print("=" * 50)

    renderer = BadgeRenderer()
    invocation = ToolInvocation(
        tool_call_id="demo-live",
        tool_name="str_replace_editor",
        args={"command": "create", "path": "/components/Button.jsx"},
        state="partial-call",
    )
    with renderer.live(invocation) as badge:
        time.sleep(1.0)
        badge.update(invocation.advance("call"))
        time.sleep(1.0)
        badge.update(invocation.advance("result", result="Success"))


def main():
    demo_static()
    demo_live()


if __name__ == "__main__":
    main()
