"""
asyncevents Time — Delay Protocol
====================================
Injectable delay source for deferred raises.

Channels never call asyncio.sleep() directly for scheduling. They go
through a Sleeper so tests can run deferred raises without waiting.
"""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Protocol

logger = logging.getLogger("asyncevents.time")


# ══════════════════════════════════════════════════════════════
# SLEEPER PROTOCOL
# ══════════════════════════════════════════════════════════════

class Sleeper(Protocol):
    """Injectable delay primitive."""

    async def sleep(self, seconds: float) -> None:
        """Suspend the caller for `seconds`."""
        ...  # pragma: no cover


# ══════════════════════════════════════════════════════════════
# IMPLEMENTATIONS
# ══════════════════════════════════════════════════════════════

class AsyncioSleeper:
    """Production sleeper — real event loop time."""

    async def sleep(self, seconds: float) -> None:
        await asyncio.sleep(seconds)


class RecordingSleeper:
    """
    Test sleeper — records each requested delay and returns at once.

    Usage:
        sleeper = RecordingSleeper()
        await channel.raise_after(3.0, sleeper=sleeper)
        assert sleeper.requested == [3.0]
    """

    def __init__(self) -> None:
        self.requested: list[float] = []

    async def sleep(self, seconds: float) -> None:
        self.requested.append(seconds)
        # Still yield once so other tasks interleave as they would.
        await asyncio.sleep(0)

    @property
    def total(self) -> float:
        return sum(self.requested)


# ══════════════════════════════════════════════════════════════
# DEFAULT SLEEPER
# ══════════════════════════════════════════════════════════════

_default_sleeper: Sleeper = AsyncioSleeper()


def set_default_sleeper(sleeper: Sleeper) -> None:
    """Override the default sleeper (testing only)."""
    global _default_sleeper
    logger.debug(f"Default sleeper set to {type(sleeper).__name__}")
    _default_sleeper = sleeper


def get_default_sleeper() -> Sleeper:
    """Get the current default sleeper."""
    return _default_sleeper


def validate_delay(seconds: float) -> float:
    """Reject negative, non-finite or non-numeric delays."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(
            f"Delay must be a number of seconds, got {type(seconds).__name__}."
        )
    if not math.isfinite(seconds):
        raise ValueError(f"Delay must be a finite number of seconds, got {seconds}.")
    if seconds < 0:
        raise ValueError(f"Delay must be >= 0 seconds, got {seconds}.")
    return float(seconds)
