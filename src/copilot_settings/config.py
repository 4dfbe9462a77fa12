"""Settings file loading and saving for copilot_settings."""

import json
import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from copilot_settings.constants import DEFAULT_SETTINGS
from copilot_settings.models import CopilotSettings
from copilot_settings.sanitize import sanitize_settings
from copilot_settings.store import SettingsStore

log = logging.getLogger(__name__)

HOME_ENV_VAR = "COPILOT_SETTINGS_HOME"
DEFAULT_CONFIG_DIR = Path.home() / ".copilot-settings"
CONFIG_FILENAME = "settings.json"


def config_dir() -> Path:
    """Return the directory holding the settings file."""
    override = os.environ.get(HOME_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_DIR


def config_file() -> Path:
    """Return the path of the settings file."""
    return config_dir() / CONFIG_FILENAME


def load_settings(path: Path | None = None) -> CopilotSettings:
    """Load settings from disk, falling back to the defaults.

    Numeric fields are sanitized before validation. A missing file gives the
    defaults silently; an unreadable or invalid one is logged and ignored.
    """
    path = config_file() if path is None else path
    if not path.exists():
        log.debug("no settings file at %s, using defaults", path)
        return DEFAULT_SETTINGS

    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        log.warning("could not read settings from %s: %s", path, e)
        return DEFAULT_SETTINGS

    if not isinstance(payload, dict):
        log.warning("settings file %s does not contain an object, using defaults", path)
        return DEFAULT_SETTINGS

    data = dict(DEFAULT_SETTINGS)
    for key, value in sanitize_settings(payload).items():
        name = CopilotSettings.field_name(key)
        if name is None:
            log.debug("ignoring unknown setting %r in %s", key, path)
            continue
        data[name] = value

    try:
        settings = CopilotSettings.model_validate(data)
    except ValidationError as e:
        log.warning("invalid settings in %s, using defaults: %s", path, e)
        return DEFAULT_SETTINGS
    log.debug("loaded settings from %s", path)
    return settings


def save_settings(settings: CopilotSettings, path: Path | None = None) -> None:
    """Atomically write ``settings`` to disk. The file is readable by the owner only."""
    path = config_file() if path is None else path
    os.makedirs(path.parent, mode=0o700, exist_ok=True)
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.{time.time_ns()}.tmp")
    fd = os.open(temp_file, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(settings.model_dump(mode="json", by_alias=True), f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise
    log.debug("saved settings to %s", path)


def persist_on_change(store: SettingsStore, path: Path | None = None) -> Callable[[], None]:
    """Save the store's value after every change. Returns the unsubscribe function."""

    def _save() -> None:
        save_settings(store.get(), path)

    return store.subscribe(_save)
