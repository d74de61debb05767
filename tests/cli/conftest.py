"""Shared fixtures for CLI tests."""

import pytest

from earshot.cli.app import create_cli_app
from earshot.cli.state import CLIState
from earshot.config.settings import Environment, LogLevel, Settings


@pytest.fixture
def listener_dir(tmp_path):
    directory = tmp_path / "listeners"
    directory.mkdir()
    return directory


@pytest.fixture
def cli_settings(listener_dir):
    """Provide test Settings pointing at an empty listener directory."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,
        listener_dir=listener_dir,
    )


@pytest.fixture
def test_app(cli_settings):
    """Provide CLI app with test settings injected."""
    return create_cli_app(settings=cli_settings)


@pytest.fixture
def mock_client(mocker):
    """Provide a mocked Client whose handler loads nothing."""
    client = mocker.Mock()
    client.listener_handler.load_all.return_value = []
    client.listener_count.return_value = 0
    client.emit = mocker.AsyncMock()
    return client


@pytest.fixture
def app_with_mock_client(cli_settings, mock_client):
    """CLI app whose state hands out the mocked client."""
    state = CLIState(cli_settings, client_factory=lambda settings: mock_client)
    return create_cli_app(state=state)
