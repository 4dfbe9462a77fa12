"""Settings store for the copilot note assistant."""

__version__ = "0.1.0"
