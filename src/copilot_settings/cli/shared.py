"""Shared CLI presentation helpers."""

import os
import sys
from typing import Any

from copilot_settings.constants import BOLD, CYAN, DIM, RESET
from copilot_settings.models import CustomModel

SECRET_SUFFIXES = ("ApiKey", "LicenseKey")


def supports_color() -> bool:
    """Return whether ANSI color output should be used."""
    if os.getenv("NO_COLOR") is not None:
        return False
    if os.getenv("TERM", "").lower() == "dumb":
        return False
    return sys.stdout.isatty()


def is_secret(key: str) -> bool:
    return key.endswith(SECRET_SUFFIXES)


def format_setting(key: str, value: Any) -> str:
    """Return a one-line human-readable rendering of a setting value."""
    if is_secret(key):
        return "set" if value else "not set"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, list) and key in ("activeModels", "activeEmbeddingModels"):
        return f"{len(value)} models (see --models)"
    if isinstance(value, (list, dict)):
        return f"{len(value)} entries"
    if value == "":
        return "(not set)"
    return str(value)


def format_model(model: CustomModel) -> str:
    """Return a listing line for an active model."""
    flags = []
    if model.core:
        flags.append("core")
    if model.is_built_in:
        flags.append("built-in")
    if not model.enabled:
        flags.append("disabled")
    suffix = f" ({', '.join(flags)})" if flags else ""
    if supports_color():
        return f"{BOLD}{CYAN}{model.key}{RESET}{DIM}{suffix}{RESET}"
    return f"{model.key}{suffix}"
