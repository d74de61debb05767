"""Null object implementation of event emitter."""

from typing import Any, Callable

from .base import BaseEmitter
from .subscription import Subscription


class NullEmitter(BaseEmitter):
    """Null object implementation of emitter that does nothing."""

    def on(self, event_type: str, handler: Callable) -> Subscription:
        return Subscription(self, event_type, handler)

    def once(self, event_type: str, handler: Callable) -> Subscription:
        return Subscription(self, event_type, handler)

    def off(self, event_type: str, handler: Callable) -> None:
        pass

    async def emit(self, event_type: str, event_data: Any = None) -> None:
        pass
