"""
Tests for asyncevents.config — dispatch settings from Django.
"""

import logging

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.test import override_settings

from asyncevents.config.settings import DispatchSettings, get_dispatch_settings
from asyncevents.events.policy import InvocationPolicy


# ── DispatchSettings ─────────────────────────────────────────

class TestDispatchSettings:
    def test_defaults(self):
        config = DispatchSettings()
        assert config.default_policy is InvocationPolicy.PROPAGATE_FIRST_FAILURE
        assert config.swallowed_failure_log_level == logging.ERROR

    def test_from_none(self):
        assert DispatchSettings.from_mapping(None) == DispatchSettings()

    def test_from_mapping(self):
        config = DispatchSettings.from_mapping({
            "DEFAULT_POLICY": "continue_on_failure",
            "SWALLOWED_FAILURE_LOG_LEVEL": "warning",
        })
        assert config.default_policy is InvocationPolicy.CONTINUE_ON_FAILURE
        assert config.swallowed_failure_log_level == logging.WARNING

    def test_numeric_log_level(self):
        config = DispatchSettings.from_mapping(
            {"SWALLOWED_FAILURE_LOG_LEVEL": logging.INFO}
        )
        assert config.swallowed_failure_log_level == logging.INFO

    def test_rejects_non_mapping(self):
        with pytest.raises(ImproperlyConfigured, match="must be a dict"):
            DispatchSettings.from_mapping(["DEFAULT_POLICY"])

    def test_rejects_unknown_keys(self):
        with pytest.raises(ImproperlyConfigured, match="RETRIES"):
            DispatchSettings.from_mapping({"RETRIES": 3})

    def test_rejects_unknown_policy(self):
        with pytest.raises(ImproperlyConfigured, match="DEFAULT_POLICY"):
            DispatchSettings.from_mapping({"DEFAULT_POLICY": "FIRE_AND_FORGET"})

    def test_rejects_unknown_level(self):
        with pytest.raises(ImproperlyConfigured, match="unknown level"):
            DispatchSettings.from_mapping({"SWALLOWED_FAILURE_LOG_LEVEL": "LOUD"})

    def test_rejects_bad_policy_type(self):
        with pytest.raises(ImproperlyConfigured):
            DispatchSettings(default_policy="CONTINUE_ON_FAILURE")

    def test_frozen_immutability(self):
        config = DispatchSettings()
        with pytest.raises(AttributeError):
            config.default_policy = InvocationPolicy.CONTINUE_ON_FAILURE


# ── Lookup ───────────────────────────────────────────────────

class TestGetDispatchSettings:
    def test_reads_project_settings(self):
        config = get_dispatch_settings()
        assert config.default_policy is InvocationPolicy.PROPAGATE_FIRST_FAILURE

    def test_honors_override_settings(self):
        with override_settings(
            ASYNC_EVENTS={"DEFAULT_POLICY": "CONTINUE_ON_FAILURE"}
        ):
            config = get_dispatch_settings()
        assert config.default_policy is InvocationPolicy.CONTINUE_ON_FAILURE

    def test_missing_setting_uses_defaults(self):
        with override_settings():
            from django.conf import settings

            del settings.ASYNC_EVENTS
            assert get_dispatch_settings() == DispatchSettings()

    def test_invalid_setting_raises(self):
        with override_settings(ASYNC_EVENTS={"DEFAULT_POLICY": "NOPE"}):
            with pytest.raises(ImproperlyConfigured):
                get_dispatch_settings()
