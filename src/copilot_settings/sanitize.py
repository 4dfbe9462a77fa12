"""Coerce loosely typed persisted settings back into numbers."""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from copilot_settings.constants import DEFAULT_SETTINGS
from copilot_settings.models import CopilotSettings

log = logging.getLogger(__name__)

FLOAT_FIELDS = ("temperature",)
INT_FIELDS = (
    "max_tokens",
    "context_turns",
    "max_source_chunks",
    "embedding_requests_per_second",
)


# Accepted spellings: decimals with an optional exponent, signed Infinity,
# and 0x/0o/0b integers. Underscores, "inf" and "nan" are not numbers.
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _to_number(value: Any) -> float:
    """Convert a stored value to a float, returning NaN when it is not numeric."""
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if _PREFIXED_INT_RE.fullmatch(text):
            try:
                return float(int(text, 0))
            except OverflowError:
                return math.inf
        if _DECIMAL_RE.fullmatch(text):
            return float(text.replace("Infinity", "inf"))
        return math.nan
    return math.nan


def _coerce_float(value: Any, default: float) -> float:
    number = _to_number(value)
    return default if math.isnan(number) else number


def _coerce_int(value: Any, default: int) -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _to_number(value)
    if not math.isfinite(number) or not number.is_integer():
        return default
    return int(number)


def sanitize_settings(settings: Mapping[str, Any] | CopilotSettings) -> dict[str, Any]:
    """Return a copy of ``settings`` with every numeric field re-coerced.

    Stored settings may have gone through a form store that turns numbers
    into strings. Values that do not parse fall back to the field default.
    Keys may be field names or camelCase aliases; all other keys are passed
    through unchanged.
    """
    if isinstance(settings, CopilotSettings):
        sanitized = settings.model_dump()
    else:
        sanitized = dict(settings)

    for key, value in sanitized.items():
        name = CopilotSettings.field_name(key)
        if name in FLOAT_FIELDS:
            coerced: float | int = _coerce_float(value, getattr(DEFAULT_SETTINGS, name))
        elif name in INT_FIELDS:
            coerced = _coerce_int(value, getattr(DEFAULT_SETTINGS, name))
        else:
            continue
        log.debug("sanitized %s: %r -> %r", key, value, coerced)
        sanitized[key] = coerced

    return sanitized
