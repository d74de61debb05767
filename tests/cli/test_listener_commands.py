"""Tests for the list and emit commands."""

import json

PING_SOURCE = """
from earshot import Listener


def record(listener, event):
    pass


ping = Listener("ping", record, event_name="message", category="chat")
boot = Listener("boot", record, type="once")
"""

ECHO_SOURCE = """
import json
from pathlib import Path

from earshot import Listener

OUT = Path(__file__).with_name("out.json")


def record(listener, payload):
    OUT.write_text(json.dumps({"listener": listener.id, "payload": payload}))


echo = Listener("echo", record, event_name="message")
"""


class TestListCommand:
    def test_lists_listeners(self, cli_runner, test_app, write_listener_file, listener_dir):
        write_listener_file("ping.py", PING_SOURCE, directory=listener_dir)

        result = cli_runner.invoke(test_app, ["list"])

        assert result.exit_code == 0
        assert "ID" in result.output
        assert "ping" in result.output
        assert "message" in result.output
        assert "boot" in result.output
        assert "once" in result.output

    def test_empty_directory(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["list"])

        assert result.exit_code == 0
        assert "No listeners found" in result.output

    def test_missing_directory_exits_with_error(self, cli_runner, default_app, tmp_path):
        result = cli_runner.invoke(
            default_app, ["-d", str(tmp_path / "missing"), "list"]
        )

        assert result.exit_code == 1
        assert "not a directory" in result.output

    def test_broken_listener_file_exits_with_error(
        self, cli_runner, test_app, write_listener_file, listener_dir
    ):
        write_listener_file("bad.py", "raise ValueError('nope')\n", directory=listener_dir)

        result = cli_runner.invoke(test_app, ["list"])

        assert result.exit_code == 1
        assert "Failed to load listeners" in result.output


class TestEmitCommand:
    def test_emit_delivers_payload(
        self, cli_runner, test_app, write_listener_file, listener_dir
    ):
        write_listener_file("echo.py", ECHO_SOURCE, directory=listener_dir)

        result = cli_runner.invoke(
            test_app, ["emit", "message", "--data", '{"text": "hi"}']
        )

        assert result.exit_code == 0
        assert "Emitted 'message' to 1 listener(s)" in result.output
        written = json.loads((listener_dir / "out.json").read_text())
        assert written == {"listener": "echo", "payload": {"text": "hi"}}

    def test_emit_without_listeners(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["emit", "message"])

        assert result.exit_code == 0
        assert "to 0 listener(s)" in result.output

    def test_invalid_json_exits_with_error(self, cli_runner, test_app):
        result = cli_runner.invoke(test_app, ["emit", "message", "--data", "{oops"])

        assert result.exit_code == 1
        assert "Invalid JSON payload" in result.output

    def test_emit_uses_client_from_state(
        self, cli_runner, app_with_mock_client, mock_client
    ):
        mock_client.listener_count.return_value = 3

        result = cli_runner.invoke(
            app_with_mock_client, ["emit", "ready", "--data", "[1, 2]"]
        )

        assert result.exit_code == 0
        mock_client.listener_handler.load_all.assert_called_once_with()
        mock_client.emit.assert_awaited_once_with("ready", [1, 2])
        assert "to 3 listener(s)" in result.output
