"""In-process event emitter supporting sync and async handlers."""

import asyncio
import inspect
import typing as t

from ..infrastructure.logging import get_logger
from .base import BaseEmitter
from .subscription import Subscription

if t.TYPE_CHECKING:
    import loguru

EventHandler = t.Callable[[t.Any], t.Any]


class EventEmitter(BaseEmitter):
    """Dispatches events to subscribed handlers.

    Handlers may be plain functions or coroutine functions. Sync handlers run
    in subscription order; coroutines are gathered afterwards. A failing
    handler is logged and never stops the others from running.

    Handlers subscribed with once() are dropped before they are invoked, so
    an emission triggered from inside the handler does not call it again.
    """

    def __init__(self, logger: t.Optional["loguru.Logger"] = None) -> None:
        self._logger = logger or get_logger(__name__)
        self._handlers: dict[str, list[EventHandler]] = {}
        self._once_handlers: dict[str, list[EventHandler]] = {}

    def on(self, event_type: str, handler: EventHandler) -> Subscription:
        self._handlers.setdefault(event_type, []).append(handler)
        return Subscription(self, event_type, handler)

    def once(self, event_type: str, handler: EventHandler) -> Subscription:
        self._handlers.setdefault(event_type, []).append(handler)
        self._once_handlers.setdefault(event_type, []).append(handler)
        return Subscription(self, event_type, handler)

    def off(self, event_type: str, handler: EventHandler) -> None:
        try:
            self._handlers[event_type].remove(handler)
        except (KeyError, ValueError):
            self._logger.warning(f"Handler {handler} not found for event {event_type}")
            return

        once = self._once_handlers.get(event_type)
        if once and handler in once:
            once.remove(handler)
        if not self._handlers[event_type]:
            del self._handlers[event_type]

    def listener_count(self, event_type: str) -> int:
        """Number of handlers currently subscribed to an event."""
        return len(self._handlers.get(event_type, []))

    async def emit(self, event_type: str, event_data: t.Any = None) -> None:
        handlers = list(self._handlers.get(event_type, []))
        if not handlers:
            return

        pending: list[t.Awaitable[t.Any]] = []
        for handler in handlers:
            self._consume_once(event_type, handler)
            try:
                result = handler(event_data)
            except Exception:
                self._logger.exception(
                    f"Handler {handler} failed for event {event_type}"
                )
                continue
            if inspect.isawaitable(result):
                pending.append(result)

        if not pending:
            return

        results = await asyncio.gather(*pending, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                self._logger.opt(exception=result).error(
                    f"Async handler failed for event {event_type}"
                )

    def _consume_once(self, event_type: str, handler: EventHandler) -> None:
        once = self._once_handlers.get(event_type)
        if not once or handler not in once:
            return
        once.remove(handler)
        self._handlers[event_type].remove(handler)
        if not self._handlers[event_type]:
            del self._handlers[event_type]
