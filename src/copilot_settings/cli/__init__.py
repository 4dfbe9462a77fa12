"""Command-line interface for copilot_settings."""

from .app import entrypoint, main

__all__ = ["entrypoint", "main"]
