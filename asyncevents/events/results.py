"""
asyncevents — Dispatch Results
=================================
Values produced by one dispatch.

HandlerOutcome is built for every invocation and folded by the
dispatch loop. DispatchResult is what the raiser observes:

- succeeded                 → AllSucceeded
- failed_at / error set     → FailedAt(index, error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


# ══════════════════════════════════════════════════════════════
# PER-HANDLER OUTCOME
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class HandlerOutcome:
    """Outcome of invoking one handler."""

    index: int
    handler_name: str
    error: Optional[BaseException] = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "handler": self.handler_name,
            "error": None if self.error is None else str(self.error),
            "error_type": (
                None if self.error is None else type(self.error).__name__
            ),
        }


# ══════════════════════════════════════════════════════════════
# DISPATCH RESULT
# ══════════════════════════════════════════════════════════════

@dataclass(frozen=True)
class DispatchResult:
    """
    Aggregate outcome of one raise.

    Fields:
        channel_name:   Channel that was raised.
        handler_count:  Size of the snapshot that was dispatched.
        invoked:        Handlers actually invoked.
        failed_at:      Index of the failing handler (first-failure policy only).
        failed_handler: Name of that handler.
        error:          The failing handler's error.
        swallowed:      Failures discarded under the continue policy.
    """

    channel_name: str
    handler_count: int
    invoked: int
    failed_at: Optional[int] = None
    failed_handler: Optional[str] = None
    error: Optional[BaseException] = None
    swallowed: tuple[HandlerOutcome, ...] = ()

    @classmethod
    def all_succeeded(
        cls,
        channel_name: str,
        handler_count: int,
        swallowed: tuple[HandlerOutcome, ...] = (),
    ) -> "DispatchResult":
        return cls(
            channel_name=channel_name,
            handler_count=handler_count,
            invoked=handler_count,
            swallowed=swallowed,
        )

    @classmethod
    def failed(
        cls,
        channel_name: str,
        handler_count: int,
        outcome: HandlerOutcome,
    ) -> "DispatchResult":
        return cls(
            channel_name=channel_name,
            handler_count=handler_count,
            invoked=outcome.index + 1,
            failed_at=outcome.index,
            failed_handler=outcome.handler_name,
            error=outcome.error,
        )

    @property
    def succeeded(self) -> bool:
        return self.failed_at is None

    @property
    def skipped(self) -> int:
        """Handlers that never saw this raise."""
        return self.handler_count - self.invoked

    @property
    def swallowed_count(self) -> int:
        return len(self.swallowed)

    def to_dict(self) -> dict:
        return {
            "channel": self.channel_name,
            "handler_count": self.handler_count,
            "invoked": self.invoked,
            "succeeded": self.succeeded,
            "failed_at": self.failed_at,
            "failed_handler": self.failed_handler,
            "error": None if self.error is None else str(self.error),
            "swallowed": [o.to_dict() for o in self.swallowed],
        }
