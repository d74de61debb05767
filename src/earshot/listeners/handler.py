"""Registry that owns listeners and their emitter subscriptions."""

import typing as t
from pathlib import Path

from ..domain.exceptions import (
    DuplicateListenerError,
    EmitterNotFoundError,
    InvalidListenerTypeError,
    ListenerLoadError,
    ListenerNotFoundError,
    ListenerReloadError,
)
from ..domain.options import ListenerType
from ..events import BaseEmitter, Subscription
from ..infrastructure.logging import get_logger
from .base import BaseListenerHandler
from .listener import Listener
from .loader import collect_listeners, discover_listener_files, import_listener_file

if t.TYPE_CHECKING:
    import loguru

    from ..app import Client


class ListenerHandler(BaseListenerHandler):
    """Loads, stores and subscribes listeners.

    Listeners name their emitter either by key, looked up in the handler's
    emitters (the client is registered as "client"), or by passing the
    emitter object itself. Registration subscribes the listener's exec to
    that emitter with on() or once() depending on its type.

    Usage:
        handler = ListenerHandler(client=client, directory=Path("listeners"))
        handler.set_emitters(process=process_emitter)
        handler.load_all()

        handler.get("ready").disable()
        handler.reload("ready")
    """

    def __init__(
        self,
        client: "Client | None" = None,
        emitters: t.Mapping[str, BaseEmitter] | None = None,
        directory: Path | str | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        """Initialize an empty handler.

        Args:
            client: Owning client. Passed on to listeners and registered as
                   the "client" emitter.
            emitters: Extra named emitters listeners can refer to by key.
            directory: Default directory for load_all().
            logger: Logger instance. Defaults to a module-specific logger.
        """
        self._client = client
        self._directory = Path(directory) if directory is not None else None
        self._logger = logger or get_logger(__name__)
        self._listeners: dict[str, Listener] = {}
        self._categories: dict[str, set[str]] = {}
        self._subscriptions: dict[str, Subscription] = {}
        self._emitters: dict[str, BaseEmitter] = {}

        if client is not None:
            self.set_emitters(client=client)
        if emitters:
            self.set_emitters(**emitters)

    @property
    def client(self) -> "Client | None":
        return self._client

    @property
    def directory(self) -> Path | None:
        return self._directory

    @property
    def emitters(self) -> dict[str, BaseEmitter]:
        """Named emitters listeners can refer to (copy)."""
        return dict(self._emitters)

    @property
    def categories(self) -> dict[str, set[str]]:
        """Listener ids grouped by category (copy)."""
        return {name: set(ids) for name, ids in self._categories.items()}

    def set_emitters(self, **emitters: BaseEmitter) -> None:
        """Register emitters under the given keys.

        Raises:
            TypeError: If a value is not a BaseEmitter.
        """
        for key, emitter in emitters.items():
            if not isinstance(emitter, BaseEmitter):
                raise TypeError(
                    f"Emitter '{key}' must be a BaseEmitter, "
                    f"got {type(emitter).__name__}"
                )
            self._emitters[key] = emitter

    def get(self, listener_id: str) -> Listener | None:
        return self._listeners.get(listener_id)

    def find_category(self, name: str) -> set[str] | None:
        ids = self._categories.get(name)
        return set(ids) if ids is not None else None

    def is_registered(self, listener_id: str) -> bool:
        """Whether the listener currently holds an emitter subscription."""
        return listener_id in self._subscriptions

    def add(self, listener: Listener, filepath: str | None = None) -> Listener:
        """Take ownership of a listener and subscribe it if enabled.

        If subscribing fails the listener is dropped again and the error
        propagates.

        Raises:
            DuplicateListenerError: If the id is already registered.
        """
        if listener.id in self._listeners:
            raise DuplicateListenerError(listener.id)

        listener.attach(self, client=self._client, filepath=filepath)
        self._listeners[listener.id] = listener
        self._categories.setdefault(listener.category, set()).add(listener.id)

        if listener.enabled:
            try:
                self.register(listener.id)
            except Exception:
                self._forget(listener)
                raise

        self._logger.debug(
            f"Added listener {listener.id} "
            f"({listener.event_name}, category={listener.category})"
        )
        return listener

    def register(self, listener_id: str) -> None:
        listener = self._require(listener_id)
        if listener_id in self._subscriptions:
            return

        mode = self._resolve_type(listener)
        emitter = self._resolve_emitter(listener)
        if mode is ListenerType.ONCE:
            subscription = emitter.once(listener.event_name, listener.exec)
        else:
            subscription = emitter.on(listener.event_name, listener.exec)
        self._subscriptions[listener_id] = subscription

        self._logger.debug(
            f"Registered listener {listener_id} on '{listener.event_name}' "
            f"({mode.value})"
        )

    def deregister(self, listener_id: str) -> None:
        self._require(listener_id)
        subscription = self._subscriptions.pop(listener_id, None)
        if subscription is None:
            return
        subscription.unsubscribe()
        self._logger.debug(f"Deregistered listener {listener_id}")

    def remove(self, listener_id: str) -> Listener:
        """Deregister a listener and drop it from the registry.

        The listener object keeps working and can be passed to add() again.
        """
        listener = self._require(listener_id)
        self.deregister(listener_id)
        self._forget(listener)
        self._logger.debug(f"Removed listener {listener_id}")
        return listener

    def remove_all(self) -> list[Listener]:
        return [self.remove(listener_id) for listener_id in list(self._listeners)]

    def reload(self, listener_id: str) -> list[Listener]:
        """Reload a listener by importing its file again.

        Every listener loaded from the same file is replaced. If loading
        fails, the previous listeners are put back and the error propagates.

        Raises:
            ListenerReloadError: If the listener was not loaded from a file.
            ListenerLoadError: If the file no longer imports cleanly.
        """
        listener = self._require(listener_id)
        filepath = listener.filepath
        if filepath is None:
            raise ListenerReloadError(listener_id)

        siblings = [
            other for other in self._listeners.values() if other.filepath == filepath
        ]
        for other in siblings:
            self.remove(other.id)

        try:
            reloaded = self.load(filepath)
        except Exception:
            self._logger.warning(f"Reload of {filepath} failed, restoring listeners")
            for other in siblings:
                self.add(other, filepath)
            raise

        self._logger.info(f"Reloaded {len(reloaded)} listener(s) from {filepath}")
        return reloaded

    def reload_all(self) -> list[Listener]:
        reloaded: list[Listener] = []
        seen: set[str] = set()
        for listener in list(self._listeners.values()):
            if listener.filepath is None or listener.filepath in seen:
                continue
            seen.add(listener.filepath)
            reloaded.extend(self.reload(listener.id))
        return reloaded

    def load(self, path: Path | str) -> list[Listener]:
        """Import a listener file and add everything it defines.

        Raises:
            ListenerLoadError: If the file cannot be imported.
            DuplicateListenerError: If a listener id is already registered.
        """
        filepath = str(Path(path).resolve())
        module = import_listener_file(filepath)
        listeners = collect_listeners(module, filepath)

        added: list[Listener] = []
        try:
            for listener in listeners:
                added.append(self.add(listener, filepath))
        except Exception:
            for listener in added:
                self.remove(listener.id)
            raise

        self._logger.debug(f"Loaded {len(added)} listener(s) from {filepath}")
        return added

    def load_all(self, directory: Path | str | None = None) -> list[Listener]:
        """Load every listener file under a directory.

        Files and folders whose name starts with an underscore are skipped.

        Raises:
            ValueError: If no directory is given and none was configured.
            ListenerLoadError: If the directory does not exist.
        """
        target = Path(directory) if directory is not None else self._directory
        if target is None:
            raise ValueError("No listener directory given or configured")
        if not target.is_dir():
            raise ListenerLoadError(str(target), "not a directory")

        loaded: list[Listener] = []
        for filepath in discover_listener_files(target):
            loaded.extend(self.load(filepath))

        self._logger.info(f"Loaded {len(loaded)} listener(s) from {target}")
        return loaded

    def _require(self, listener_id: str) -> Listener:
        listener = self._listeners.get(listener_id)
        if listener is None:
            raise ListenerNotFoundError(listener_id)
        return listener

    def _forget(self, listener: Listener) -> None:
        self._listeners.pop(listener.id, None)
        ids = self._categories.get(listener.category)
        if ids is None:
            return
        ids.discard(listener.id)
        if not ids:
            del self._categories[listener.category]

    def _resolve_type(self, listener: Listener) -> ListenerType:
        try:
            return ListenerType(listener.type)
        except ValueError:
            raise InvalidListenerTypeError(listener.id, listener.type) from None

    def _resolve_emitter(self, listener: Listener) -> BaseEmitter:
        emitter = listener.emitter
        if isinstance(emitter, str):
            resolved = self._emitters.get(emitter)
            if resolved is None:
                raise EmitterNotFoundError(listener.id, emitter)
            return resolved
        if not isinstance(emitter, BaseEmitter):
            raise TypeError(
                f"Listener '{listener.id}' emitter must be a key or a BaseEmitter, "
                f"got {type(emitter).__name__}"
            )
        return emitter

    def __contains__(self, listener_id: object) -> bool:
        return listener_id in self._listeners

    def __len__(self) -> int:
        return len(self._listeners)

    def __iter__(self) -> t.Iterator[Listener]:
        return iter(list(self._listeners.values()))
