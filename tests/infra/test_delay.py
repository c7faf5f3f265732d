"""
Tests for asyncevents.time — delay protocol used by deferred raises.
"""

import asyncio
import time

import pytest

from asyncevents.time.delay import (
    AsyncioSleeper,
    RecordingSleeper,
    get_default_sleeper,
    set_default_sleeper,
    validate_delay,
)


class TestAsyncioSleeper:
    def test_sleeps(self):
        started = time.monotonic()
        asyncio.run(AsyncioSleeper().sleep(0.02))
        assert time.monotonic() - started >= 0.015


class TestRecordingSleeper:
    def test_records_without_waiting(self):
        sleeper = RecordingSleeper()

        async def main():
            await sleeper.sleep(3600)
            await sleeper.sleep(1.5)

        started = time.monotonic()
        asyncio.run(main())

        assert time.monotonic() - started < 1
        assert sleeper.requested == [3600, 1.5]
        assert sleeper.total == 3601.5


class TestDefaultSleeper:
    def test_production_default(self):
        assert isinstance(get_default_sleeper(), AsyncioSleeper)

    def test_set_and_get_default(self, restore_default_sleeper):
        sleeper = RecordingSleeper()
        set_default_sleeper(sleeper)
        assert get_default_sleeper() is sleeper


class TestValidateDelay:
    def test_accepts_int_and_float(self):
        assert validate_delay(3) == 3.0
        assert validate_delay(0) == 0.0
        assert validate_delay(0.25) == 0.25

    def test_rejects_negative(self):
        with pytest.raises(ValueError, match=">= 0"):
            validate_delay(-0.1)

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, bad):
        with pytest.raises(ValueError, match="finite"):
            validate_delay(bad)

    @pytest.mark.parametrize("bad", ["3", None, True])
    def test_rejects_non_numbers(self, bad):
        with pytest.raises(TypeError, match="number of seconds"):
            validate_delay(bad)
