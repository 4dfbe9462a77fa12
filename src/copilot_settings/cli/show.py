"""Settings display CLI implementation."""

import argparse
import json
import logging
import sys

from copilot_settings import __version__
from copilot_settings.cli.shared import format_model, format_setting
from copilot_settings.config import load_settings
from copilot_settings.models import CopilotSettings
from copilot_settings.store import SettingsStore


def build_parser() -> argparse.ArgumentParser:
    """Build parser for show mode."""
    parser = argparse.ArgumentParser(
        prog="copilot-settings",
        description="Show copilot settings, active models, and the system prompt",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--json", action="store_true", help="Print settings as JSON")
    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--prompt",
        action="store_true",
        help="Print the effective system prompt",
    )
    output_group.add_argument(
        "--models",
        action="store_true",
        help="List the active chat and embedding models",
    )
    parser.add_argument(
        "keys",
        nargs="*",
        metavar="KEY",
        help="Only show these settings (camelCase or snake_case names)",
    )
    return parser


def _print_models(store: SettingsStore) -> None:
    settings = store.get()
    print("Chat models:")
    for model in settings.active_models:
        print(f"  {format_model(model)}")
    print("Embedding models:")
    for model in settings.active_embedding_models:
        print(f"  {format_model(model)}")


def run(argv: list[str]) -> int:
    """Execute show mode."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    store = SettingsStore(load_settings())

    if args.prompt:
        print(store.get_system_prompt())
        return 0
    if args.models:
        _print_models(store)
        return 0

    data = store.get().model_dump(mode="json", by_alias=True)
    if args.keys:
        selected = {}
        for key in args.keys:
            name = CopilotSettings.field_name(key)
            if name is None:
                print(f"Error: unknown setting {key!r}", file=sys.stderr)
                return 1
            alias = CopilotSettings.alias_for(name)
            selected[alias] = data[alias]
        data = selected

    if args.json:
        print(json.dumps(data, indent=2))
        return 0

    for key, value in data.items():
        print(f"  {key}: {format_setting(key, value)}")
    return 0
