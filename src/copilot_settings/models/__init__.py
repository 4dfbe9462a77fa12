"""Model package for copilot_settings."""

from copilot_settings.models.copilot_settings import (
    ChainType,
    CopilotSettings,
    DefaultOpenArea,
    EnabledCommand,
)
from copilot_settings.models.custom_model import CustomModel

__all__ = [
    "ChainType",
    "CopilotSettings",
    "CustomModel",
    "DefaultOpenArea",
    "EnabledCommand",
]
