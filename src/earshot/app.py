"""Client wiring: the owning application object and its factory."""

import typing as t

from .config.settings import Settings
from .events import EventEmitter
from .infrastructure.logging import get_logger, setup_logging
from .listeners import ListenerHandler

if t.TYPE_CHECKING:
    import loguru


class Client(EventEmitter):
    """Application object that owns the listener handler.

    The client is itself an emitter and is registered with its handler as
    the "client" emitter, which is where listeners subscribe by default.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        logger: t.Optional["loguru.Logger"] = None,
    ) -> None:
        super().__init__(logger or get_logger(__name__))
        self.settings = settings or Settings()
        self.listener_handler = ListenerHandler(
            client=self,
            directory=self.settings.listener_dir,
            logger=self._logger,
        )

    async def start(self) -> None:
        """Announce readiness by emitting "ready" with the client as payload."""
        self._logger.info(f"Client ready with {len(self.listener_handler)} listener(s)")
        await self.emit("ready", self)


def create_client(settings: Settings | None = None) -> Client:
    """Create a `Client` with provided settings or defaults.

    Configures logging first so everything built afterwards logs through the
    configured sinks.
    """
    settings = settings or Settings()
    setup_logging(settings)
    return Client(settings=settings)
