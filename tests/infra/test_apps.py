"""
Tests for asyncevents.apps — Django integration.
"""

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from asyncevents.apps import AsyncEventsConfig


class TestAsyncEventsConfig:
    def test_installed(self):
        config = apps.get_app_config("asyncevents")
        assert isinstance(config, AsyncEventsConfig)
        assert config.verbose_name == "Async Events"

    def test_ready_validates_settings(self):
        config = apps.get_app_config("asyncevents")
        with override_settings(ASYNC_EVENTS={"DEFAULT_POLICY": "NOPE"}):
            with pytest.raises(ImproperlyConfigured):
                config.ready()

    def test_ready_logs_default_policy(self, caplog):
        caplog.set_level("INFO", logger="asyncevents.config")
        apps.get_app_config("asyncevents").ready()
        assert "PROPAGATE_FIRST_FAILURE" in caplog.text
