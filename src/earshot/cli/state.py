"""CLI state container."""

import typing as t

from ..app import Client, create_client
from ..config.settings import Settings

ClientFactory = t.Callable[[Settings], Client]


class CLIState:
    """Application state container for CLI commands.

    Holds Settings and the factory used to build a Client, so tests can
    swap in a prepared client.
    """

    def __init__(
        self, settings: Settings, client_factory: ClientFactory | None = None
    ) -> None:
        self.settings = settings
        self._client_factory = client_factory or create_client

    def create_client(self) -> Client:
        return self._client_factory(self.settings)
