"""Reconcile active model lists with the built-in catalogs."""

import logging
from collections.abc import Iterable

from copilot_settings.models import CopilotSettings, CustomModel

log = logging.getLogger(__name__)


def merge_active_models(
    existing_active_models: Iterable[CustomModel],
    built_in_models: Iterable[CustomModel],
) -> list[CustomModel]:
    """Merge a user's active models with a built-in catalog.

    Core built-ins are always present and always ``core``. Other built-ins
    only appear when the user list already has them. An entry that has been
    built-in once keeps ``is_built_in`` through every later merge. The result
    lists core built-ins in catalog order, followed by the remaining user
    entries in their original order, with duplicates collapsed onto the
    position of their first occurrence.
    """
    model_map: dict[tuple[str, str], CustomModel] = {}
    core_identities: set[tuple[str, str]] = set()

    for model in built_in_models:
        if not model.core:
            continue
        model_map[model.identity] = model.model_copy(update={"core": True})
        core_identities.add(model.identity)

    for model in existing_active_models:
        identity = model.identity
        stored = model_map.get(identity)
        if stored is None:
            model_map[identity] = model
            continue
        update = {"is_built_in": stored.is_built_in or model.is_built_in}
        if identity in core_identities:
            update["core"] = True
        model_map[identity] = model.model_copy(update=update)

    merged = list(model_map.values())
    log.debug("merged active models: %d entries, %d core", len(merged), len(core_identities))
    return merged


def merge_all_active_models_with_core_models(
    settings: CopilotSettings,
    chat_models: Iterable[CustomModel],
    embedding_models: Iterable[CustomModel],
) -> CopilotSettings:
    """Return ``settings`` with both active model lists reconciled."""
    return settings.model_copy(
        update={
            "active_models": merge_active_models(settings.active_models, chat_models),
            "active_embedding_models": merge_active_models(
                settings.active_embedding_models, embedding_models
            ),
        }
    )
