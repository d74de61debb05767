"""CLI application factory."""

from pathlib import Path
from typing import Optional

import typer

from ..config.settings import LogLevel, Settings, build_settings
from .commands import emit_event, list_listeners
from .state import CLIState


def create_cli_app(
    settings: Settings | None = None, state: CLIState | None = None
) -> typer.Typer:
    """Create CLI application with optional settings or state override.

    Args:
        settings: Optional Settings override for testing
        state: Optional prepared CLIState, takes precedence over settings

    Returns:
        Configured Typer application with commands registered
    """
    app = typer.Typer(
        name="earshot",
        help="earshot - load event listeners and fire events at them",
        no_args_is_help=True,
    )

    @app.callback()
    def setup(
        ctx: typer.Context,
        listener_dir: Optional[Path] = typer.Option(
            None,
            "--listener-dir",
            "-d",
            help="Directory containing listener files",
        ),
        verbose: bool = typer.Option(
            False,
            "--verbose",
            "-v",
            help="Enable verbose output (DEBUG logging)",
        ),
    ) -> None:
        """Global options available to all commands."""
        if state is not None:
            ctx.obj = state
            return

        if settings is not None:
            resolved_settings = settings
        else:
            resolved_settings = build_settings(
                listener_dir=listener_dir,
                log_level=LogLevel.DEBUG if verbose else None,
            )
        ctx.obj = CLIState(resolved_settings)

    app.command("list")(list_listeners)
    app.command("emit")(emit_event)
    return app
