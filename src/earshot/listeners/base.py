"""Abstract base class for listener handlers."""

from abc import ABC, abstractmethod
from typing import Any


class BaseListenerHandler(ABC):
    """Registry contract a Listener delegates its lifecycle to.

    Every operation is keyed by listener id. Listeners call these
    synchronously and ignore the return value; errors (unknown id, missing
    emitter, failed reload) are raised by the handler.
    """

    @abstractmethod
    def register(self, listener_id: str) -> None:
        """Subscribe the listener to its emitter."""
        pass

    @abstractmethod
    def deregister(self, listener_id: str) -> None:
        """Unsubscribe the listener from its emitter."""
        pass

    @abstractmethod
    def reload(self, listener_id: str) -> Any:
        """Reload the listener from its source file."""
        pass

    @abstractmethod
    def remove(self, listener_id: str) -> Any:
        """Deregister the listener and drop it from the registry."""
        pass
