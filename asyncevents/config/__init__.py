"""
asyncevents Config — Public API
==================================
Dispatch defaults sourced from Django settings.
"""

from asyncevents.config.settings import (
    SETTINGS_NAME,
    DispatchSettings,
    get_dispatch_settings,
)

__all__ = [
    "SETTINGS_NAME",
    "DispatchSettings",
    "get_dispatch_settings",
]
