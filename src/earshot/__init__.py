"""earshot - event listeners with a registry-managed lifecycle."""

from .app import Client, create_client
from .config import Environment, LogLevel, Settings
from .domain import (
    DuplicateListenerError,
    EarshotError,
    EmitterNotFoundError,
    InvalidListenerTypeError,
    ListenerError,
    ListenerLoadError,
    ListenerNotAttachedError,
    ListenerNotFoundError,
    ListenerOptions,
    ListenerReloadError,
    ListenerType,
)
from .events import BaseEmitter, EventEmitter, NullEmitter, Subscription
from .listeners import BaseListenerHandler, Listener, ListenerHandler

__all__ = [
    # Application
    "Client",
    "create_client",
    "Settings",
    "Environment",
    "LogLevel",
    # Listeners
    "Listener",
    "ListenerOptions",
    "ListenerType",
    "BaseListenerHandler",
    "ListenerHandler",
    # Events
    "BaseEmitter",
    "EventEmitter",
    "NullEmitter",
    "Subscription",
    # Exceptions
    "EarshotError",
    "ListenerError",
    "ListenerNotAttachedError",
    "ListenerNotFoundError",
    "DuplicateListenerError",
    "InvalidListenerTypeError",
    "ListenerLoadError",
    "ListenerReloadError",
    "EmitterNotFoundError",
]
