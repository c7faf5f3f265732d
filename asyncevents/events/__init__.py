"""
asyncevents Events — Public API
==================================
Channels own subscribers. The dispatcher notifies them one by one.
"""

from asyncevents.events.cancellation import CancellationSignal
from asyncevents.events.errors import (
    DispatchCancelledError,
    EventBusError,
    HandlerFailure,
    InvalidHandlerError,
    SignalNotCancellableError,
)
from asyncevents.events.handlers import (
    NO_PAYLOAD,
    AsyncEventHandler,
    AsyncPayloadEventHandler,
    Handler,
)
from asyncevents.events.policy import InvocationPolicy
from asyncevents.events.results import DispatchResult, HandlerOutcome
from asyncevents.events.subscribers import SubscriberList, Subscription
from asyncevents.events.dispatcher import AsyncDispatcher, dispatch
from asyncevents.events.channel import EventChannel, event_channel

__all__ = [
    "AsyncDispatcher",
    "AsyncEventHandler",
    "AsyncPayloadEventHandler",
    "CancellationSignal",
    "DispatchCancelledError",
    "DispatchResult",
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
]
