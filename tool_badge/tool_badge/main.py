"""
Main entry point for tool_badge.

Reads one tool invocation record, or a list of them, as JSON and prints
a status badge for each.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich.console import Console

from .config import ConfigManager, get_config
from .constants import APP_DESCRIPTION, APP_NAME, APP_VERSION
from .rich_ui.badge_renderer import BadgeRenderer
from .rich_ui.invocation_models import InvalidInvocationError, ToolInvocation
from .rich_ui.lifecycle import build_badge
from .rich_ui.theme import ThemeManager


EXIT_OK = 0
EXIT_BAD_INPUT = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=APP_DESCRIPTION
    )

    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{APP_NAME} {APP_VERSION}"
    )

    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file with an invocation or a list of invocations ('-' for stdin)"
    )

    parser.add_argument(
        "-t", "--theme",
        type=str,
        help="Badge theme (default, mono, or a custom theme name)"
    )

    parser.add_argument(
        "--plain",
        action="store_true",
        help="Print assistive labels without styling"
    )

    parser.add_argument(
        "--show-path",
        action="store_true",
        help="Append the raw path to each badge"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to config file"
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )

    return parser.parse_args(argv)


def load_invocations(source: str) -> List[ToolInvocation]:
    """
    Load invocation records from a file path or stdin.

    Raises:
        InvalidInvocationError: If the JSON is malformed or a record is invalid
    """
    try:
        if source == "-":
            data: Any = json.load(sys.stdin)
        else:
            with open(source, "r", encoding="utf-8") as f:
                data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidInvocationError(f"Invalid JSON: {e}") from e

    records = data if isinstance(data, list) else [data]
    return [ToolInvocation.from_dict(record) for record in records]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = ConfigManager(Path(args.config)) if args.config else get_config()
    settings = config.badge
    plain = args.plain or settings.plain

    try:
        invocations = load_invocations(args.input)
    except (InvalidInvocationError, OSError) as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if plain:
        for invocation in invocations:
            print(build_badge(invocation).aria_label)
        return EXIT_OK

    theme = ThemeManager().get_theme(args.theme or settings.theme)
    renderer = BadgeRenderer(
        console=Console(),
        theme=theme,
        show_path=args.show_path or settings.show_path,
        spinner=settings.spinner,
    )
    for invocation in invocations:
        renderer.render(invocation)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
