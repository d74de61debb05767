"""Handle returned by emitter subscriptions."""

import typing as t

if t.TYPE_CHECKING:
    from .base import BaseEmitter


class Subscription:
    """A single handler subscribed to a single event type.

    unsubscribe() detaches the handler from its emitter and is idempotent.
    """

    def __init__(
        self,
        emitter: "BaseEmitter",
        event_type: str,
        handler: t.Callable[..., t.Any],
    ) -> None:
        self._emitter = emitter
        self._event_type = event_type
        self._handler = handler
        self._active = True

    @property
    def event_type(self) -> str:
        return self._event_type

    @property
    def handler(self) -> t.Callable[..., t.Any]:
        return self._handler

    @property
    def is_active(self) -> bool:
        """False once unsubscribe() has been called."""
        return self._active

    def unsubscribe(self) -> None:
        if not self._active:
            return
        self._emitter.off(self._event_type, self._handler)
        self._active = False
