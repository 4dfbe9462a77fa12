"""Entry point for the ``copilot-settings`` command."""

import sys

from . import configure as configure_cmd
from . import show as show_cmd


def main(argv: list[str] | None = None) -> int:
    """Run ``configure`` when it is the first argument, otherwise show settings."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "configure":
        return configure_cmd.run(args[1:])
    return show_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
