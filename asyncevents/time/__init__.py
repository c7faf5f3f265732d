"""
asyncevents Time — Public API
================================
Delay protocol used by deferred raises.
"""

from asyncevents.time.delay import (
    AsyncioSleeper,
    RecordingSleeper,
    Sleeper,
    get_default_sleeper,
    set_default_sleeper,
    validate_delay,
)

__all__ = [
    "Sleeper",
    "AsyncioSleeper",
    "RecordingSleeper",
    "get_default_sleeper",
    "set_default_sleeper",
    "validate_delay",
]
