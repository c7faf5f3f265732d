"""
asyncevents — Errors
======================
Error types for the subscription and dispatch layer.
"""


class EventBusError(Exception):
    """Base error for all asyncevents operations."""
    pass


class InvalidHandlerError(EventBusError, TypeError):
    """Attempt to attach something that cannot be called."""

    def __init__(self, handler):
        self.handler = handler
        super().__init__(
            f"Handler must be callable, got {type(handler).__name__}."
        )


class HandlerFailure(EventBusError):
    """
    A handler failed and the first-failure policy stopped the dispatch.

    Handlers before `index` completed. Handlers after `index` were
    never invoked for that raise.
    """

    def __init__(self, result):
        self.result = result
        self.index = result.failed_at
        self.error = result.error
        self.handler_name = result.failed_handler
        self.channel_name = result.channel_name
        super().__init__(
            f"Handler '{self.handler_name}' (index {self.index}) failed "
            f"on channel '{self.channel_name}': {self.error!r}"
        )


class DispatchCancelledError(EventBusError):
    """Raised by a handler that observed a cancelled signal."""

    def __init__(self, message: str = None):
        super().__init__(message or "Cancellation was requested.")


class SignalNotCancellableError(EventBusError):
    """cancel() called on the shared never-cancelled signal."""

    def __init__(self):
        super().__init__(
            "CancellationSignal.none() can never be cancelled. "
            "Create a CancellationSignal() to obtain a cancellable one."
        )
