import pytest

from earshot.app import Client, create_client
from earshot.config.settings import Environment, LogLevel, Settings
from earshot.infrastructure.logging import get_logger, is_configured
from earshot.listeners import Listener, ListenerHandler


def test_create_client_uses_default_settings():
    client = create_client()
    assert isinstance(client, Client)
    assert isinstance(client.settings, Settings)
    assert client.settings.environment == Environment.PRODUCTION
    assert client.settings.log_level == LogLevel.INFO


def test_create_client_with_custom_settings(test_settings):
    client = create_client(settings=test_settings)
    assert client.settings is test_settings
    assert client.settings.environment == Environment.TESTING
    assert client.settings.log_level == LogLevel.CRITICAL


def test_create_client_configures_logging():
    """Uses the autouse fixture for clean state."""
    assert is_configured() is False
    _ = create_client()
    assert is_configured() is True


def test_client_owns_listener_handler(test_client, test_settings):
    handler = test_client.listener_handler

    assert isinstance(handler, ListenerHandler)
    assert handler.client is test_client
    assert handler.emitters == {"client": test_client}
    assert handler.directory == test_settings.listener_dir


def test_listener_added_to_client_sees_client(test_client, noop_exec):
    listener = test_client.listener_handler.add(Listener("ping", noop_exec))

    assert listener.client is test_client
    assert listener.listener_handler is test_client.listener_handler


@pytest.mark.asyncio
async def test_start_emits_ready_to_default_listeners(test_client):
    seen = []
    test_client.listener_handler.add(
        Listener("ready", lambda listener, client: seen.append((listener.id, client)))
    )

    await test_client.start()

    assert seen == [("ready", test_client)]


def test_logger_configured_with_test_client(test_client):
    assert test_client is not None
    assert is_configured() is True

    logger = get_logger(__name__)
    logger.critical("Test critical message - should appear")
    logger.info("Test info message - should be filtered out")
