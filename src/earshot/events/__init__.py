"""Event infrastructure - emitters and subscriptions."""

from .base import BaseEmitter
from .emitter import EventEmitter, EventHandler
from .null import NullEmitter
from .subscription import Subscription

__all__ = [
    "BaseEmitter",
    "EventEmitter",
    "EventHandler",
    "NullEmitter",
    "Subscription",
]
