"""
asyncevents — Event Channel
==============================
The unit a publisher raises and subscribers attach to.

A channel owns one SubscriberList for its whole lifetime. Each raise
takes a snapshot and hands it to an AsyncDispatcher, so concurrent
raises and concurrent subscribe/unsubscribe never disturb a dispatch
already in flight.

Publishers usually declare channels on the class:

    class TaskRunner:
        counting = event_channel()
        finished = event_channel(carries_payload=False)

    runner = TaskRunner()
    runner.counting.subscribe(on_count)
    await runner.counting.raise_event(100)
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Optional, Union

from asyncevents.config import settings as dispatch_config
from asyncevents.events.cancellation import CancellationSignal
from asyncevents.events.dispatcher import AsyncDispatcher
from asyncevents.events.errors import HandlerFailure
from asyncevents.events.handlers import NO_PAYLOAD
from asyncevents.events.policy import InvocationPolicy
from asyncevents.events.results import DispatchResult
from asyncevents.events.subscribers import SubscriberList, Subscription
from asyncevents.time.delay import Sleeper, get_default_sleeper, validate_delay

logger = logging.getLogger("asyncevents.events")


class EventChannel:
    """
    Named event with its own ordered subscribers.

    Args:
        name:            Channel name used in logs and results.
        sender:          Identity passed to handlers as `sender`
                         (defaults to the channel itself).
        carries_payload: True → handler(sender, payload, cancellation)
                         False → handler(sender, cancellation)
        dispatcher:      Explicit dispatcher; by default one is built per
                         raise from the configured dispatch settings.
    """

    def __init__(
        self,
        name: str,
        *,
        sender: Any = None,
        carries_payload: bool = True,
        dispatcher: Optional[AsyncDispatcher] = None,
    ):
        if not name or not isinstance(name, str):
            raise ValueError("Channel name must be a non-empty string.")

        self._name = name
        self._sender = sender
        self._carries_payload = carries_payload
        self._dispatcher = dispatcher
        self._subscribers = SubscriberList(name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def sender(self) -> Any:
        return self if self._sender is None else self._sender

    @property
    def carries_payload(self) -> bool:
        return self._carries_payload

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def has_subscribers(self) -> bool:
        return len(self._subscribers) > 0

    # ── Subscription ──────────────────────────────────────────

    def subscribe(self, handler: Callable) -> Subscription:
        """Attach a handler at the end of the invocation order."""
        return self._subscribers.attach(handler)

    def unsubscribe(self, target: Union[Subscription, Callable]) -> bool:
        """
        Detach a subscription handle, or the latest entry of a handler.

        Never raises for unknown targets; returns whether anything was removed.
        """
        if isinstance(target, Subscription):
            return self._subscribers.detach(target)
        return self._subscribers.detach_handler(target)

    def subscriptions(self) -> tuple[Subscription, ...]:
        return self._subscribers.subscriptions()

    # ── Raising ───────────────────────────────────────────────

    async def raise_event(
        self,
        payload: Any = NO_PAYLOAD,
        *,
        policy: Optional[InvocationPolicy] = None,
        cancellation: Optional[CancellationSignal] = None,
    ) -> DispatchResult:
        """
        Notify every current subscriber, one after the other.

        Args:
            payload:      Event data (payload channels only).
            policy:       Failure policy; None uses the configured default.
            cancellation: Signal handed to every handler.

        Returns:
            DispatchResult of a successful dispatch.

        Raises:
            HandlerFailure: PROPAGATE_FIRST_FAILURE stopped at a failed
                            handler. Later handlers were not notified.
            TypeError:      payload does not match carries_payload.
        """
        self._check_payload(payload)

        config = dispatch_config.get_dispatch_settings()
        if policy is None:
            policy = config.default_policy
        dispatcher = self._dispatcher or AsyncDispatcher(
            swallowed_failure_log_level=config.swallowed_failure_log_level
        )

        result = await dispatcher.dispatch(
            self._subscribers.snapshot(),
            self.sender,
            payload,
            policy=policy,
            cancellation=cancellation,
            channel_name=self._name,
        )
        if not result.succeeded:
            raise HandlerFailure(result) from result.error
        return result

    def raise_after(
        self,
        delay: float,
        payload: Any = NO_PAYLOAD,
        *,
        policy: Optional[InvocationPolicy] = None,
        cancellation: Optional[CancellationSignal] = None,
        sleeper: Optional[Sleeper] = None,
    ) -> asyncio.Task:
        """
        Schedule a raise once `delay` seconds have elapsed.

        Must be called with a running event loop. The returned task
        resolves to the DispatchResult (or raises HandlerFailure).
        Cancelling it before the delay elapses skips the raise.
        """
        delay = validate_delay(delay)
        self._check_payload(payload)
        sleeper = sleeper or get_default_sleeper()

        async def deferred_raise() -> DispatchResult:
            await sleeper.sleep(delay)
            return await self.raise_event(
                payload, policy=policy, cancellation=cancellation
            )

        task = asyncio.get_running_loop().create_task(
            deferred_raise(), name=f"{self._name}:raise_after"
        )
        task.add_done_callback(self._log_deferred_outcome)
        logger.debug(f"Deferred raise scheduled: {self._name} in {delay}s")
        return task

    def _log_deferred_outcome(self, task: asyncio.Task) -> None:
        if task.cancelled():
            logger.info(f"Deferred raise cancelled: {self._name}")
        elif task.exception() is not None:
            logger.warning(
                f"Deferred raise failed: {self._name}: {task.exception()!r}"
            )

    def _check_payload(self, payload: Any) -> None:
        if self._carries_payload and payload is NO_PAYLOAD:
            raise TypeError(f"Channel '{self._name}' requires a payload.")
        if not self._carries_payload and payload is not NO_PAYLOAD:
            raise TypeError(f"Channel '{self._name}' does not carry a payload.")

    def __repr__(self) -> str:
        return (
            f"<EventChannel {self._name!r} "
            f"subscribers={self.subscriber_count}>"
        )


# ══════════════════════════════════════════════════════════════
# PUBLISHER DECLARATION
# ══════════════════════════════════════════════════════════════

class event_channel:
    """
    Class-level channel declaration.

    Each publisher instance lazily gets its own EventChannel, with the
    instance as sender. Accessed on the class, returns the descriptor.
    """

    def __init__(self, name: Optional[str] = None, *, carries_payload: bool = True):
        self._name = name
        self._attr: Optional[str] = None
        self._carries_payload = carries_payload

    def __set_name__(self, owner: type, attr: str) -> None:
        self._attr = attr
        if self._name is None:
            self._name = f"{owner.__name__}.{attr}"

    def __get__(self, instance: Any, owner: Optional[type] = None):
        if instance is None:
            return self
        channel = instance.__dict__.get(self._attr)
        if channel is None:
            channel = instance.__dict__.setdefault(
                self._attr,
                EventChannel(
                    self._name,
                    sender=instance,
                    carries_payload=self._carries_payload,
                ),
            )
        return channel

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def carries_payload(self) -> bool:
        return self._carries_payload
