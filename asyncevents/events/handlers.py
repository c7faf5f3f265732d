"""
asyncevents — Handler Types
==============================
Call signatures accepted by channels and the dispatcher.

Payload channel handler:     handler(sender, payload, cancellation)
Payload-less channel handler: handler(sender, cancellation)

A handler normally is an `async def`. Completing is success, raising an
Exception is failure. Plain callables are accepted too: their return value
is awaited only when it is awaitable.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, Union

from asyncevents.events.cancellation import CancellationSignal


class _NoPayload:
    """Marker for raises that carry no payload."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_PAYLOAD"

    def __bool__(self) -> bool:
        return False


NO_PAYLOAD = _NoPayload()

AsyncEventHandler = Callable[
    [Any, CancellationSignal], Union[Awaitable[None], None]
]
AsyncPayloadEventHandler = Callable[
    [Any, Any, CancellationSignal], Union[Awaitable[None], None]
]
Handler = Union[AsyncEventHandler, AsyncPayloadEventHandler]


def handler_name(handler: Callable) -> str:
    """Readable name for logs and failure reports."""
    return getattr(handler, "__qualname__", None) or repr(handler)
