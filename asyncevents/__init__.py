"""
asyncevents — Public API
==========================
Sequential asynchronous multicast events.

Every subscriber of a channel is notified in subscription order, and
each one's asynchronous work completes before the next one starts.
The invocation policy decides whether a failing subscriber stops the
remaining notifications or is isolated.
"""

from asyncevents.events import (
    NO_PAYLOAD,
    AsyncDispatcher,
    AsyncEventHandler,
    AsyncPayloadEventHandler,
    CancellationSignal,
    DispatchCancelledError,
    DispatchResult,
    EventBusError,
    EventChannel,
    Handler,
    HandlerFailure,
    HandlerOutcome,
    InvalidHandlerError,
    InvocationPolicy,
    SignalNotCancellableError,
    SubscriberList,
    Subscription,
    dispatch,
    event_channel,
)
from asyncevents.config import DispatchSettings, get_dispatch_settings

__version__ = "1.0.0"

__all__ = [
    "AsyncDispatcher",
    "AsyncEventHandler",
    "AsyncPayloadEventHandler",
    "CancellationSignal",
    "DispatchCancelledError",
    "DispatchResult",
    "DispatchSettings",
    "EventBusError",
    "EventChannel",
    "Handler",
    "HandlerFailure",
    "HandlerOutcome",
    "InvalidHandlerError",
    "InvocationPolicy",
    "NO_PAYLOAD",
    "SignalNotCancellableError",
    "SubscriberList",
    "Subscription",
    "dispatch",
    "event_channel",
    "get_dispatch_settings",
]
