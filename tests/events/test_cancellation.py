"""
Tests for asyncevents.events.cancellation — one-shot cancellation signal.
"""

import threading

import pytest

from asyncevents.events.cancellation import CancellationSignal
from asyncevents.events.errors import (
    DispatchCancelledError,
    SignalNotCancellableError,
)


class TestCancellationSignal:
    def test_starts_active(self):
        signal = CancellationSignal()
        assert not signal.is_cancelled
        signal.raise_if_cancelled()  # no-op

    def test_cancel_is_permanent(self):
        signal = CancellationSignal()
        signal.cancel("shutdown")
        assert signal.is_cancelled
        assert signal.reason == "shutdown"

    def test_first_reason_wins(self):
        signal = CancellationSignal()
        signal.cancel("first")
        signal.cancel("second")
        assert signal.reason == "first"

    def test_raise_if_cancelled(self):
        signal = CancellationSignal()
        signal.cancel("user abort")
        with pytest.raises(DispatchCancelledError, match="user abort"):
            signal.raise_if_cancelled()

    def test_default_message(self):
        signal = CancellationSignal()
        signal.cancel()
        with pytest.raises(DispatchCancelledError, match="Cancellation was requested"):
            signal.raise_if_cancelled()

    def test_cancel_from_another_thread(self):
        signal = CancellationSignal()
        worker = threading.Thread(target=signal.cancel)
        worker.start()
        worker.join()
        assert signal.is_cancelled

    def test_repr(self):
        signal = CancellationSignal()
        assert "active" in repr(signal)
        signal.cancel()
        assert "cancelled" in repr(signal)


class TestNoneSignal:
    def test_is_shared(self):
        assert CancellationSignal.none() is CancellationSignal.none()

    def test_same_token_from_many_threads(self):
        seen = []
        threads = [
            threading.Thread(target=lambda: seen.append(CancellationSignal.none()))
            for _ in range(8)
        ]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(signal) for signal in seen}) == 1
        assert seen[0] is CancellationSignal.none()

    def test_never_cancelled(self):
        signal = CancellationSignal.none()
        assert not signal.cancellable
        assert not signal.is_cancelled

    def test_cancel_rejected(self):
        with pytest.raises(SignalNotCancellableError):
            CancellationSignal.none().cancel()
        assert not CancellationSignal.none().is_cancelled
