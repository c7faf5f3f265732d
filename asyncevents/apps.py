"""
asyncevents — App Configuration
==================================
Django integration for hosts that run inside a Django project.

This app:
- Validates the ASYNC_EVENTS setting at startup

This app does NOT:
- Define models or migrations
- Register channels (publishers own their channels)
"""

import logging

from django.apps import AppConfig

from asyncevents.config.settings import get_dispatch_settings

logger = logging.getLogger("asyncevents.config")


class AsyncEventsConfig(AppConfig):
    name = "asyncevents"
    label = "asyncevents"
    verbose_name = "Async Events"

    def ready(self):
        # ImproperlyConfigured surfaces here rather than on the first raise.
        dispatch_settings = get_dispatch_settings()
        logger.info(
            f"asyncevents ready — default policy "
            f"{dispatch_settings.default_policy.value}"
        )
