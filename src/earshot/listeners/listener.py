"""The Listener: one event subscription plus the code run when it fires."""

import inspect
import threading
import types
import typing as t

from ..domain.exceptions import ListenerNotAttachedError
from ..domain.options import (
    DEFAULT_CATEGORY,
    DEFAULT_EMITTER,
    DEFAULT_EVENT_NAME,
    DEFAULT_TYPE,
    ListenerInfo,
    ListenerOptions,
)

if t.TYPE_CHECKING:
    from ..app import Client
    from .base import BaseListenerHandler

# Alias -> field name, e.g. "eventName" -> "event_name".
_ALIASES = {
    field.alias: name
    for name, field in ListenerOptions.model_fields.items()
    if field.alias
}


def _by_field_name(values: t.Mapping[str, t.Any]) -> dict[str, t.Any]:
    return {_ALIASES.get(key, key): value for key, value in values.items()}


def _merge_options(
    options: ListenerOptions | t.Mapping[str, t.Any] | None,
    overrides: dict[str, t.Any],
) -> ListenerOptions:
    if options is None:
        values: dict[str, t.Any] = {}
    elif isinstance(options, ListenerOptions):
        values = {name: getattr(options, name) for name in ListenerOptions.model_fields}
    else:
        values = _by_field_name(options)
    values.update(_by_field_name(overrides))
    return ListenerOptions(**values)


class Listener:
    """Describes one event subscription and the callback to run for it.

    A listener is built in two phases. The constructor takes the id, the
    callback and the options; a handler (or the loader acting for it) then
    calls attach() to set the filepath, client and handler references.
    reload(), remove(), enable() and disable() only forward to that handler.

    The callback is bound to the listener, so it receives the listener as its
    first argument followed by whatever the emitter passes:

        def greet(listener, event):
            print(f"{listener} saw {event}")

        Listener("greet", greet, event_name="message")

    Subclasses may override exec() instead of passing a callback:

        class Ready(Listener):
            def __init__(self):
                super().__init__("ready")

            def exec(self, client):
                ...

    Options left out, or given as a falsy value, fall back to the defaults:
    emitter "client", event_name "ready", type "on", category "default".
    Their values are not validated here; the handler checks them on
    registration. Unknown option names raise pydantic's ValidationError.

    The callback must be a plain function. A bound method already carries its
    own first argument and is rejected with TypeError.
    """

    def __init__(
        self,
        id: str,
        exec: t.Callable[..., t.Any] | None = None,
        options: ListenerOptions | t.Mapping[str, t.Any] | None = None,
        **overrides: t.Any,
    ) -> None:
        if inspect.ismethod(exec):
            raise TypeError(
                f"Listener '{id}' exec must be a plain function, not a bound "
                "method; subclass Listener and override exec() instead"
            )
        opts = _merge_options(options, overrides)

        self._id = id
        self.emitter: t.Any = opts.emitter or DEFAULT_EMITTER
        self.event_name: t.Any = opts.event_name or DEFAULT_EVENT_NAME
        self.type: t.Any = opts.type or DEFAULT_TYPE
        self.category: t.Any = opts.category or DEFAULT_CATEGORY

        if exec is not None:
            self.exec = types.MethodType(exec, self)

        self._enabled = True
        self._filepath: str | None = None
        self._client: "Client | None" = None
        self._listener_handler: "BaseListenerHandler | None" = None
        self._lock = threading.RLock()

    @property
    def id(self) -> str:
        return self._id

    @property
    def enabled(self) -> bool:
        """Whether the listener is subscribed to its emitter."""
        return self._enabled

    @property
    def filepath(self) -> str | None:
        """File the listener was loaded from, if any."""
        return self._filepath

    @property
    def client(self) -> "Client | None":
        return self._client

    @property
    def listener_handler(self) -> "BaseListenerHandler | None":
        return self._listener_handler

    def attach(
        self,
        listener_handler: "BaseListenerHandler",
        client: "Client | None" = None,
        filepath: str | None = None,
    ) -> None:
        """Set the back-references owned by the loading handler.

        The listener never owns its handler or client; it only points at them.
        """
        self._listener_handler = listener_handler
        self._client = client
        self._filepath = filepath

    def exec(self, *args: t.Any) -> t.Any:
        """Run when the event fires. Override, or pass a callback instead."""
        raise NotImplementedError(f"Listener '{self._id}' does not implement exec()")

    def reload(self) -> None:
        """Ask the handler to reload this listener from its file."""
        self._require_handler().reload(self._id)

    def remove(self) -> None:
        """Ask the handler to drop this listener. It can be added back later."""
        self._require_handler().remove(self._id)

    def enable(self) -> None:
        """Subscribe the listener again. Does nothing if already enabled.

        The flag flips once the handler returns. If the handler raises, the
        error propagates and the listener stays disabled.
        """
        with self._lock:
            if self._enabled:
                return
            self._require_handler().register(self._id)
            self._enabled = True

    def disable(self) -> None:
        """Unsubscribe the listener. Does nothing if already disabled."""
        with self._lock:
            if not self._enabled:
                return
            self._require_handler().deregister(self._id)
            self._enabled = False

    def info(self) -> ListenerInfo:
        emitter = (
            self.emitter
            if isinstance(self.emitter, str)
            else type(self.emitter).__name__
        )
        return ListenerInfo(
            id=self._id,
            emitter=emitter,
            event_name=str(self.event_name),
            type=str(getattr(self.type, "value", self.type)),
            category=str(self.category),
            enabled=self._enabled,
            filepath=self._filepath,
        )

    def _require_handler(self) -> "BaseListenerHandler":
        if self._listener_handler is None:
            raise ListenerNotAttachedError(self._id)
        return self._listener_handler

    def __str__(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, event_name={self.event_name!r}, "
            f"type={self.type!r}, enabled={self._enabled})"
        )
