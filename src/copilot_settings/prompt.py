"""System prompt resolution for copilot_settings."""

from copilot_settings.constants import DEFAULT_SYSTEM_PROMPT
from copilot_settings.models import CopilotSettings


def get_system_prompt(settings: CopilotSettings) -> str:
    """Return the user's system prompt, or the default one when it is empty."""
    return settings.user_system_prompt or DEFAULT_SYSTEM_PROMPT
