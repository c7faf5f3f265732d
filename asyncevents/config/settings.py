"""
asyncevents Config — Dispatch Settings
=========================================
Host-configurable dispatch defaults.

Source: the Django setting ASYNC_EVENTS (a dict), read on every call
so override_settings() is honored. Without a configured Django project
the defaults apply.

    ASYNC_EVENTS = {
        "DEFAULT_POLICY": "PROPAGATE_FIRST_FAILURE",
        "SWALLOWED_FAILURE_LOG_LEVEL": "ERROR",
    }
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from asyncevents.events.policy import InvocationPolicy

SETTINGS_NAME = "ASYNC_EVENTS"

KNOWN_KEYS = frozenset({"DEFAULT_POLICY", "SWALLOWED_FAILURE_LOG_LEVEL"})


# ══════════════════════════════════════════════════════════════
# DISPATCH SETTINGS
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DispatchSettings:
    """
    Effective dispatch configuration.

    Fields:
        default_policy:              Policy used when a raise names none.
        swallowed_failure_log_level: Level for failures discarded under
                                     CONTINUE_ON_FAILURE.
    """

    default_policy: InvocationPolicy = InvocationPolicy.PROPAGATE_FIRST_FAILURE
    swallowed_failure_log_level: int = logging.ERROR

    def __post_init__(self) -> None:
        if not isinstance(self.default_policy, InvocationPolicy):
            raise ImproperlyConfigured(
                f"default_policy must be an InvocationPolicy, "
                f"got {self.default_policy!r}."
            )
        if self.swallowed_failure_log_level not in _LEVELS.values():
            raise ImproperlyConfigured(
                f"Unknown log level {self.swallowed_failure_log_level!r}."
            )

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "DispatchSettings":
        """Build settings from an ASYNC_EVENTS-style dict."""
        if raw is None:
            return cls()
        if not isinstance(raw, Mapping):
            raise ImproperlyConfigured(
                f"{SETTINGS_NAME} must be a dict, got {type(raw).__name__}."
            )

        unknown = set(raw) - KNOWN_KEYS
        if unknown:
            raise ImproperlyConfigured(
                f"Unknown {SETTINGS_NAME} keys: {', '.join(sorted(unknown))}."
            )

        kwargs = {}
        if "DEFAULT_POLICY" in raw:
            try:
                kwargs["default_policy"] = InvocationPolicy.parse(
                    raw["DEFAULT_POLICY"]
                )
            except ValueError as exc:
                raise ImproperlyConfigured(
                    f"{SETTINGS_NAME}['DEFAULT_POLICY']: {exc}"
                ) from exc
        if "SWALLOWED_FAILURE_LOG_LEVEL" in raw:
            kwargs["swallowed_failure_log_level"] = _parse_level(
                raw["SWALLOWED_FAILURE_LOG_LEVEL"]
            )
        return cls(**kwargs)


_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(value: Any) -> int:
    if isinstance(value, int) and value in _LEVELS.values():
        return value
    if isinstance(value, str) and value.strip().upper() in _LEVELS:
        return _LEVELS[value.strip().upper()]
    raise ImproperlyConfigured(
        f"{SETTINGS_NAME}['SWALLOWED_FAILURE_LOG_LEVEL']: unknown level "
        f"{value!r}. Expected one of: {', '.join(_LEVELS)}."
    )


# ══════════════════════════════════════════════════════════════
# LOOKUP
# ══════════════════════════════════════════════════════════════

def get_dispatch_settings() -> DispatchSettings:
    """Effective settings from Django, or defaults outside a project."""
    if not settings.configured:
        return DispatchSettings()
    return DispatchSettings.from_mapping(getattr(settings, SETTINGS_NAME, None))
