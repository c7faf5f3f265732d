"""
asyncevents — Cancellation Signal
====================================
Shared advisory flag passed explicitly into every handler of a dispatch.

Rules:
- Once cancelled, a signal never resets
- Handlers read it; only the owner calls cancel()
- The dispatcher never consults it (cancellation is advisory)
- Safe to cancel from another thread
"""

from __future__ import annotations

import threading
from typing import Optional

from asyncevents.events.errors import (
    DispatchCancelledError,
    SignalNotCancellableError,
)


class CancellationSignal:
    """
    One-shot cancellation token.

    Usage:
        signal = CancellationSignal()
        await channel.raise_event(100, cancellation=signal)

        # inside a handler
        cancellation.raise_if_cancelled()
    """

    _none: Optional["CancellationSignal"] = None

    def __init__(self, cancellable: bool = True) -> None:
        self._event = threading.Event()
        self._cancellable = cancellable
        self._reason: Optional[str] = None

    @classmethod
    def none(cls) -> "CancellationSignal":
        """Shared signal that is never cancelled."""
        return cls._none

    @property
    def cancellable(self) -> bool:
        return self._cancellable

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> Optional[str]:
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Signal cancellation. Repeated calls keep the first reason."""
        if not self._cancellable:
            raise SignalNotCancellableError()
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    def raise_if_cancelled(self) -> None:
        """Raise DispatchCancelledError if cancellation was requested."""
        if self._event.is_set():
            raise DispatchCancelledError(self._reason)

    def __repr__(self) -> str:
        state = "cancelled" if self.is_cancelled else "active"
        if not self._cancellable:
            state = "none"
        return f"<CancellationSignal {state}>"


CancellationSignal._none = CancellationSignal(cancellable=False)
