"""Listeners - the subscription record and the registry that owns it."""

from .base import BaseListenerHandler
from .handler import ListenerHandler
from .listener import Listener

__all__ = [
    "BaseListenerHandler",
    "Listener",
    "ListenerHandler",
]
