"""
asyncevents — Invocation Policy
==================================
Decides what a handler failure does to the rest of a dispatch.
"""

from __future__ import annotations

from enum import Enum


class InvocationPolicy(Enum):
    """Failure handling rule for one dispatch."""

    # First failure stops the dispatch and is surfaced to the raiser.
    # Every handler after the failing one loses this notification.
    PROPAGATE_FIRST_FAILURE = "PROPAGATE_FIRST_FAILURE"

    # Every handler runs. Failures are logged and discarded;
    # the raiser always observes success.
    CONTINUE_ON_FAILURE = "CONTINUE_ON_FAILURE"

    @classmethod
    def from_ignore_exceptions(cls, ignore_exceptions: bool) -> "InvocationPolicy":
        """Map a boolean 'swallow handler errors' flag onto a policy."""
        if ignore_exceptions:
            return cls.CONTINUE_ON_FAILURE
        return cls.PROPAGATE_FIRST_FAILURE

    @classmethod
    def parse(cls, value) -> "InvocationPolicy":
        """Accept a policy member or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        valid = ", ".join(member.name for member in cls)
        raise ValueError(
            f"Unknown invocation policy {value!r}. Expected one of: {valid}."
        )
