"""Domain models and exceptions."""

from .exceptions import (
    DuplicateListenerError,
    EarshotError,
    EmitterNotFoundError,
    InvalidListenerTypeError,
    ListenerError,
    ListenerLoadError,
    ListenerNotAttachedError,
    ListenerNotFoundError,
    ListenerReloadError,
)
from .options import (
    DEFAULT_CATEGORY,
    DEFAULT_EMITTER,
    DEFAULT_EVENT_NAME,
    DEFAULT_TYPE,
    ListenerInfo,
    ListenerOptions,
    ListenerType,
)

__all__ = [
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
    # Options
    "DEFAULT_CATEGORY",
    "DEFAULT_EMITTER",
    "DEFAULT_EVENT_NAME",
    "DEFAULT_TYPE",
    "ListenerInfo",
    "ListenerOptions",
    "ListenerType",
]
