"""
asyncevents — Subscriber List
================================
Ordered handler entries attached to one event channel.

Rules:
- Insertion order preserved
- Duplicates allowed (same handler attached twice runs twice)
- detach() of an unknown or already removed entry is a no-op
- snapshot() is an independent tuple; later attach/detach never
  reaches a dispatch that already holds one
- Thread-safe
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from threading import Lock
from typing import Callable

from asyncevents.events.errors import InvalidHandlerError
from asyncevents.events.handlers import handler_name

logger = logging.getLogger("asyncevents.events")

_subscription_ids = itertools.count(1)


@dataclass(frozen=True)
class Subscription:
    """
    Handle for exactly one attached entry.

    Two attachments of the same handler produce two distinct handles.
    """

    handler: Callable = field(compare=False)
    subscription_id: int = field(default_factory=lambda: next(_subscription_ids))

    @property
    def handler_name(self) -> str:
        return handler_name(self.handler)


class SubscriberList:
    """In-memory, ordered list of subscriptions for one channel."""

    def __init__(self, channel_name: str = "<anonymous>"):
        self._channel_name = channel_name
        self._entries: list[Subscription] = []
        self._lock = Lock()

    def attach(self, handler: Callable) -> Subscription:
        """
        Append a handler to the end of the list.

        Raises:
            InvalidHandlerError: handler is not callable
        """
        if not callable(handler):
            raise InvalidHandlerError(handler)

        subscription = Subscription(handler=handler)
        with self._lock:
            self._entries.append(subscription)

        logger.info(
            f"Subscriber attached: {subscription.handler_name} → "
            f"{self._channel_name} (subscription {subscription.subscription_id})"
        )
        return subscription

    def detach(self, subscription: Subscription) -> bool:
        """Remove that specific entry. Returns False if it was not present."""
        if not isinstance(subscription, Subscription):
            return False
        with self._lock:
            for position, entry in enumerate(self._entries):
                if entry.subscription_id == subscription.subscription_id:
                    del self._entries[position]
                    break
            else:
                return False

        logger.info(
            f"Subscriber detached: {subscription.handler_name} from "
            f"{self._channel_name} (subscription {subscription.subscription_id})"
        )
        return True

    def detach_handler(self, handler: Callable) -> bool:
        """Remove the most recently attached entry for `handler`."""
        with self._lock:
            for position in range(len(self._entries) - 1, -1, -1):
                if self._entries[position].handler is handler:
                    subscription = self._entries.pop(position)
                    break
            else:
                return False

        logger.info(
            f"Subscriber detached: {subscription.handler_name} from "
            f"{self._channel_name} (subscription {subscription.subscription_id})"
        )
        return True

    def snapshot(self) -> tuple[Callable, ...]:
        """Immutable copy of the current handlers, in attachment order."""
        with self._lock:
            return tuple(entry.handler for entry in self._entries)

    def subscriptions(self) -> tuple[Subscription, ...]:
        with self._lock:
            return tuple(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, subscription: object) -> bool:
        if not isinstance(subscription, Subscription):
            return False
        with self._lock:
            return any(
                entry.subscription_id == subscription.subscription_id
                for entry in self._entries
            )
