"""Observable settings store."""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from copilot_settings.constants import (
    BUILTIN_CHAT_MODELS,
    BUILTIN_EMBEDDING_MODELS,
    DEFAULT_SETTINGS,
)
from copilot_settings.merge import merge_all_active_models_with_core_models
from copilot_settings.models import CopilotSettings, CustomModel
from copilot_settings.prompt import get_system_prompt

log = logging.getLogger(__name__)

Listener = Callable[[], None]


class SettingsStore:
    """Holds the current settings value and notifies listeners on change.

    The application creates one store and hands it to whatever needs
    settings. Every write reconciles both active model lists with the
    store's built-in catalogs before the value is replaced, and listeners
    run synchronously, in subscription order, once the new value is in
    place.
    """

    def __init__(
        self,
        initial: CopilotSettings | None = None,
        *,
        chat_models: Iterable[CustomModel] = BUILTIN_CHAT_MODELS,
        embedding_models: Iterable[CustomModel] = BUILTIN_EMBEDDING_MODELS,
    ) -> None:
        self._chat_models = tuple(chat_models)
        self._embedding_models = tuple(embedding_models)
        self._listeners: dict[object, Listener] = {}
        self._value = self._reconcile(DEFAULT_SETTINGS if initial is None else initial)

    def _reconcile(self, settings: CopilotSettings) -> CopilotSettings:
        return merge_all_active_models_with_core_models(
            settings, self._chat_models, self._embedding_models
        )

    def _notify(self) -> None:
        # Listeners added during this round wait for the next change; listeners
        # removed during it are skipped.
        subscriptions = list(self._listeners.items())
        log.debug("notifying %d settings listeners", len(subscriptions))
        for token, listener in subscriptions:
            if token in self._listeners:
                listener()

    def get(self) -> CopilotSettings:
        """Return the current settings value. Do not mutate its contents."""
        return self._value

    def set(self, partial: Mapping[str, Any]) -> None:
        """Overlay ``partial`` on the current value and store the result.

        Keys may be field names or camelCase aliases. Keys not present in
        ``partial`` keep their current value.
        """
        overlay = dict(self._value)
        for key, value in partial.items():
            name = CopilotSettings.field_name(key)
            if name is None:
                raise ValueError(f"Unknown setting: {key!r}")
            overlay[name] = value

        self._value = self._reconcile(CopilotSettings.model_validate(overlay))
        log.debug("settings updated: %s", ", ".join(partial) or "(no fields)")
        self._notify()

    def update(self, key: str, value: Any) -> None:
        """Set a single setting."""
        self.set({key: value})

    def reset(self) -> None:
        """Restore the defaults, with every built-in model enabled."""
        self.set(
            {
                **dict(DEFAULT_SETTINGS),
                "active_models": [
                    model.model_copy(update={"enabled": True}) for model in self._chat_models
                ],
                "active_embedding_models": [
                    model.model_copy(update={"enabled": True})
                    for model in self._embedding_models
                ],
            }
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` after every change. Returns an unsubscribe function."""
        token = object()
        self._listeners[token] = listener

        def unsubscribe() -> None:
            self._listeners.pop(token, None)

        return unsubscribe

    def get_system_prompt(self) -> str:
        """Return the effective system prompt for the current settings."""
        return get_system_prompt(self._value)
