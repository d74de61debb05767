"""Custom exceptions for earshot."""


class EarshotError(Exception):
    """Base exception for earshot errors."""

    pass


class ListenerError(EarshotError):
    """Base exception for listener-related errors.

    Carries the id of the listener involved so callers can report it.
    """

    def __init__(self, listener_id: str, message: str) -> None:
        self.listener_id = listener_id
        super().__init__(message)


class ListenerNotAttachedError(ListenerError):
    """Raised when a listener delegates to its handler before being attached.

    Listeners are constructed first and attached to a handler afterwards;
    reload(), remove(), enable() and disable() need that second step.
    """

    def __init__(self, listener_id: str) -> None:
        super().__init__(
            listener_id, f"Listener '{listener_id}' is not attached to a handler"
        )


class ListenerNotFoundError(ListenerError):
    """Raised when a handler is asked about an id it does not hold."""

    def __init__(self, listener_id: str) -> None:
        super().__init__(listener_id, f"Listener '{listener_id}' does not exist")


class DuplicateListenerError(ListenerError):
    """Raised when adding a listener whose id is already registered."""

    def __init__(self, listener_id: str) -> None:
        super().__init__(listener_id, f"Listener '{listener_id}' already loaded")


class InvalidListenerTypeError(ListenerError):
    """Raised when a listener's type is neither 'on' nor 'once'."""

    def __init__(self, listener_id: str, listener_type: object) -> None:
        self.listener_type = listener_type
        super().__init__(
            listener_id,
            f"Listener '{listener_id}' has invalid type {listener_type!r} "
            "(expected 'on' or 'once')",
        )


class ListenerLoadError(EarshotError):
    """Raised when a listener file cannot be imported."""

    def __init__(self, filepath: str, reason: str) -> None:
        self.filepath = filepath
        super().__init__(f"Failed to load listeners from {filepath}: {reason}")


class ListenerReloadError(ListenerError):
    """Raised when a listener has no source file to reload from."""

    def __init__(self, listener_id: str) -> None:
        super().__init__(
            listener_id, f"Listener '{listener_id}' has no file to reload from"
        )


class EmitterNotFoundError(ListenerError):
    """Raised when a listener names an emitter key the handler does not know."""

    def __init__(self, listener_id: str, emitter_key: str) -> None:
        self.emitter_key = emitter_key
        super().__init__(
            listener_id,
            f"Emitter '{emitter_key}' for listener '{listener_id}' does not exist",
        )
