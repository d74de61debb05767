"""CLI command implementations."""

from .listeners import emit_event, list_listeners

__all__ = ["emit_event", "list_listeners"]
