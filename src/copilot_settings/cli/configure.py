"""`copilot-settings configure` command implementation."""

import argparse
import json
import logging
import sys
from typing import Any

from copilot_settings.config import config_file, load_settings, persist_on_change
from copilot_settings.models import CopilotSettings
from copilot_settings.sanitize import sanitize_settings
from copilot_settings.store import SettingsStore

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="copilot-settings configure",
        description="Change or reset copilot settings",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--set",
        dest="assignments",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help=(
            "Set a setting; text settings take VALUE as is, "
            "others parse it as JSON (repeatable)"
        ),
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Restore default settings with every built-in model enabled",
    )
    return parser


def parse_value(key: str, text: str) -> Any:
    """Parse a command-line value for ``key``.

    Text settings take the raw string. Other settings are parsed as JSON,
    falling back to the raw string.
    """
    name = CopilotSettings.field_name(key)
    if name is not None and CopilotSettings.model_fields[name].annotation is str:
        return text
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Turn ``KEY=VALUE`` strings into a partial settings mapping."""
    partial: dict[str, Any] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {assignment!r}")
        partial[key] = parse_value(key, value)
    log.debug("parsed assignments: %s", ", ".join(partial))
    return partial


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    if args.reset and args.assignments:
        print("Error: --set and --reset cannot be used together", file=sys.stderr)
        return 2
    if not args.reset and not args.assignments:
        print("Error: nothing to do, pass --set KEY=VALUE or --reset", file=sys.stderr)
        return 2

    store = SettingsStore(load_settings())
    persist_on_change(store)

    try:
        if args.reset:
            store.reset()
        else:
            store.set(sanitize_settings(parse_assignments(args.assignments)))
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nConfiguration saved to {config_file()}")
    if args.reset:
        print("  all settings restored to defaults")
    else:
        for assignment in args.assignments:
            print(f"  {assignment.partition('=')[0].strip()}: updated")
    print("")
    return 0
