"""Abstract base class for event emitters."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from .subscription import Subscription


class BaseEmitter(ABC):
    """Abstract base class for event emitters."""

    @abstractmethod
    def on(self, event_type: str, handler: Callable) -> "Subscription":
        """Subscribe to every emission of an event."""
        pass

    @abstractmethod
    def once(self, event_type: str, handler: Callable) -> "Subscription":
        """Subscribe to the next emission of an event only."""
        pass

    @abstractmethod
    def off(self, event_type: str, handler: Callable) -> None:
        """Unsubscribe from events."""
        pass

    @abstractmethod
    async def emit(self, event_type: str, event_data: Any = None) -> None:
        """Emit an event."""
        pass
