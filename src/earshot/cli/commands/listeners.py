"""Listener commands: list what a directory defines, fire an event at it."""

import asyncio
import json
import typing as t
from typing import Optional

import typer

from ...app import Client
from ...domain.exceptions import EarshotError
from ..output.listing import display_emit_result, display_error, display_listeners
from ..state import CLIState


def load_client(state: CLIState) -> Client:
    """Build a client and load its listener directory.

    Raises:
        typer.Exit: If the directory or one of its files fails to load
    """
    client = state.create_client()
    try:
        client.listener_handler.load_all()
    except (EarshotError, ValueError) as e:
        display_error(str(e))
        raise typer.Exit(code=1)
    return client


def parse_payload(data: Optional[str]) -> t.Any:
    """Decode the --data option as JSON.

    Raises:
        typer.Exit: If the value is not valid JSON
    """
    if data is None:
        return None
    try:
        return json.loads(data)
    except json.JSONDecodeError as e:
        display_error(f"Invalid JSON payload: {e}")
        raise typer.Exit(code=1)


def list_listeners(ctx: typer.Context) -> None:
    """List the listeners defined in the listener directory.

    Examples:
        earshot list
        earshot -d ./bot/listeners list
    """
    state: CLIState = ctx.obj
    client = load_client(state)
    display_listeners([listener.info() for listener in client.listener_handler])


def emit_event(
    ctx: typer.Context,
    event: str = typer.Argument(..., help="Name of the event to emit"),
    data: Optional[str] = typer.Option(
        None, "--data", help="JSON payload passed to listeners"
    ),
) -> None:
    """Load listeners and emit an event on the client.

    Examples:
        earshot emit ready
        earshot emit message --data '{"text": "hi"}'
    """
    state: CLIState = ctx.obj
    payload = parse_payload(data)
    client = load_client(state)

    count = client.listener_count(event)
    try:
        asyncio.run(client.emit(event, payload))
    except Exception as e:
        display_error(f"Emit failed: {e}")
        raise typer.Exit(code=1)
    display_emit_result(event, count)
