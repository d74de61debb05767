"""Pytest configuration and fixtures for earshot tests."""

import textwrap
import typing as t
from pathlib import Path

import loguru
import pytest
from typer.testing import CliRunner

from earshot.app import create_client
from earshot.cli.app import create_cli_app
from earshot.config.settings import Environment, LogLevel, Settings
from earshot.events import BaseEmitter, EventEmitter
from earshot.infrastructure.logging import reset_logging
from earshot.listeners import BaseListenerHandler, Listener, ListenerHandler


@pytest.fixture
def test_settings(tmp_path):
    """Provide test-specific settings."""
    return Settings(
        environment=Environment.TESTING,
        log_level=LogLevel.CRITICAL,  # Minimal logging during tests
        listener_dir=tmp_path,
    )


@pytest.fixture
def test_client(test_settings):
    """Provide a test client with clean logging state."""
    reset_logging()
    client = create_client(settings=test_settings)
    yield client
    reset_logging()


@pytest.fixture(autouse=True)
def clean_logging_state():
    """Automatically reset logging before each test for isolation."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def mock_logger(mocker):
    """Provide a mock logger for testing that captures log calls."""
    logger = mocker.Mock(spec=loguru.logger)
    return logger


@pytest.fixture
def mock_emitter(mocker):
    """Provide a mock event emitter for testing subscription calls."""
    emitter = mocker.Mock(spec=BaseEmitter)
    return emitter


@pytest.fixture
def real_emitter(mock_logger):
    """Provide a real EventEmitter for tests that need events delivered."""
    return EventEmitter(mock_logger)


@pytest.fixture
def mock_handler(mocker):
    """Provide a mocked handler implementing the listener delegation contract."""
    return mocker.Mock(spec=BaseListenerHandler)


@pytest.fixture
def handler(real_emitter, mock_logger):
    """Provide a ListenerHandler whose "client" emitter is a real EventEmitter."""
    return ListenerHandler(emitters={"client": real_emitter}, logger=mock_logger)


@pytest.fixture
def noop_exec():
    def _exec(listener, *args):
        return None

    return _exec


@pytest.fixture
def make_listener(noop_exec):
    """Factory fixture to create Listener instances with sensible defaults.

    Examples:
        def test_something(make_listener):
            listener = make_listener()
            listener = make_listener("pong", event_name="message", type="once")
    """

    def _make_listener(
        listener_id: str = "ping",
        exec: t.Callable[..., t.Any] | None = None,
        **options: t.Any,
    ) -> Listener:
        return Listener(listener_id, exec or noop_exec, **options)

    return _make_listener


@pytest.fixture
def write_listener_file(tmp_path):
    """Factory fixture writing a listener source file under tmp_path.

    The source is dedented, so it can be written inline in the test.
    """

    def _write(name: str, source: str, directory: Path | None = None) -> Path:
        target_dir = directory or tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(textwrap.dedent(source))
        return path

    return _write


# CLI-specific fixtures (shared across all tests)


@pytest.fixture
def cli_runner():
    """Provide Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def default_app():
    """Provide CLI app with default settings."""
    return create_cli_app()
