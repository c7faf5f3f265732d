"""
asyncevents — Dispatcher
===========================
Runs a snapshot of handlers for one raise.

Dispatch behavior:
1. Empty snapshot → success, nothing awaited
2. Invoke handlers strictly in snapshot order
3. Await each handler to completion before starting the next
4. Turn every invocation into a HandlerOutcome
5. PROPAGATE_FIRST_FAILURE → stop at the first failed outcome
   CONTINUE_ON_FAILURE     → log the failure, discard it, continue
6. Never retry a handler

Start order, completion order and snapshot order are identical.

This module does NOT:
- Own subscribers (the channel does)
- Consult the cancellation signal (handlers do)
- Cancel or time out running handlers
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Iterable, Optional

from asyncevents.events.cancellation import CancellationSignal
from asyncevents.events.handlers import NO_PAYLOAD, handler_name
from asyncevents.events.policy import InvocationPolicy
from asyncevents.events.results import DispatchResult, HandlerOutcome

logger = logging.getLogger("asyncevents.events")


class AsyncDispatcher:
    """
    Sequential, one-awaits-the-other handler invocation.

    Args:
        swallowed_failure_log_level: Level used when a failure is
                                     discarded under CONTINUE_ON_FAILURE.
    """

    def __init__(self, swallowed_failure_log_level: int = logging.ERROR):
        self._swallowed_failure_log_level = swallowed_failure_log_level

    async def dispatch(
        self,
        handlers: Iterable[Callable],
        sender: Any,
        payload: Any = NO_PAYLOAD,
        *,
        policy: InvocationPolicy = InvocationPolicy.PROPAGATE_FIRST_FAILURE,
        cancellation: Optional[CancellationSignal] = None,
        channel_name: str = "<anonymous>",
    ) -> DispatchResult:
        """
        Invoke every handler of the snapshot in order.

        Returns:
            DispatchResult — succeeded, or failed_at/error set when the
            first-failure policy stopped the dispatch.

        Handler exceptions never escape this method. Task cancellation
        (asyncio.CancelledError) is not a handler failure and propagates.
        """
        handlers = tuple(handlers)
        policy = InvocationPolicy.parse(policy)
        if cancellation is None:
            cancellation = CancellationSignal.none()

        if not handlers:
            logger.debug(f"No subscribers for channel '{channel_name}'")
            return DispatchResult.all_succeeded(channel_name, 0)

        swallowed: list[HandlerOutcome] = []

        for index, handler in enumerate(handlers):
            outcome = await self._invoke(
                index, handler, sender, payload, cancellation
            )

            if not outcome.failed:
                logger.debug(
                    f"Dispatched {channel_name} → {outcome.handler_name} "
                    f"(index {index})"
                )
                continue

            if policy is InvocationPolicy.PROPAGATE_FIRST_FAILURE:
                logger.error(
                    f"Subscriber failed: {outcome.handler_name} (index {index}) "
                    f"for {channel_name}: {outcome.error!r} — "
                    f"{len(handlers) - index - 1} subscriber(s) not notified",
                    exc_info=outcome.error,
                )
                return DispatchResult.failed(channel_name, len(handlers), outcome)

            swallowed.append(outcome)
            logger.log(
                self._swallowed_failure_log_level,
                f"Subscriber failed: {outcome.handler_name} (index {index}) "
                f"for {channel_name}: {outcome.error!r} — continuing",
                exc_info=outcome.error,
            )

        logger.info(
            f"Dispatch complete: {channel_name} — "
            f"{len(handlers) - len(swallowed)} notified, "
            f"{len(swallowed)} failed"
        )
        return DispatchResult.all_succeeded(
            channel_name, len(handlers), tuple(swallowed)
        )

    @staticmethod
    async def _invoke(
        index: int,
        handler: Callable,
        sender: Any,
        payload: Any,
        cancellation: CancellationSignal,
    ) -> HandlerOutcome:
        name = handler_name(handler)
        try:
            if payload is NO_PAYLOAD:
                pending = handler(sender, cancellation)
            else:
                pending = handler(sender, payload, cancellation)
            if inspect.isawaitable(pending):
                await pending
        except Exception as exc:
            return HandlerOutcome(index=index, handler_name=name, error=exc)
        return HandlerOutcome(index=index, handler_name=name)


_default_dispatcher = AsyncDispatcher()


async def dispatch(
    handlers: Iterable[Callable],
    sender: Any,
    payload: Any = NO_PAYLOAD,
    *,
    policy: InvocationPolicy = InvocationPolicy.PROPAGATE_FIRST_FAILURE,
    cancellation: Optional[CancellationSignal] = None,
    channel_name: str = "<anonymous>",
) -> DispatchResult:
    """Dispatch through a shared default AsyncDispatcher."""
    return await _default_dispatcher.dispatch(
        handlers,
        sender,
        payload,
        policy=policy,
        cancellation=cancellation,
        channel_name=channel_name,
    )
