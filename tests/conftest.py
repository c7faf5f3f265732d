"""
Shared fixtures for asyncevents tests.

Django is set up once against config.settings so the library reads
ASYNC_EVENTS the same way it does inside a host project.
"""

import asyncio
import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
django.setup()

from asyncevents.time.delay import get_default_sleeper, set_default_sleeper  # noqa: E402


class Journal:
    """Ordered record of handler starts, ends and received arguments."""

    def __init__(self):
        self.entries: list[tuple[str, str]] = []
        self.calls: list[tuple] = []

    def started(self, name: str) -> list[str]:
        return [n for kind, n in self.entries if kind == "start" and n == name]

    @property
    def start_order(self) -> list[str]:
        return [n for kind, n in self.entries if kind == "start"]

    @property
    def end_order(self) -> list[str]:
        return [n for kind, n in self.entries if kind == "end"]


@pytest.fixture
def journal():
    return Journal()


@pytest.fixture
def make_handler(journal):
    """
    Build an async payload handler named `name`.

    delay: seconds of asynchronous work before completing
    error: exception raised after the work (None → success)
    """

    def factory(name, delay=0.0, error=None):
        async def handler(sender, payload, cancellation):
            journal.entries.append(("start", name))
            journal.calls.append((name, sender, payload, cancellation))
            await asyncio.sleep(delay)
            if error is not None:
                journal.entries.append(("fail", name))
                raise error
            journal.entries.append(("end", name))

        handler.__qualname__ = name
        return handler

    return factory


@pytest.fixture
def restore_default_sleeper():
    original = get_default_sleeper()
    yield
    set_default_sleeper(original)
