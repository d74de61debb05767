"""Terminal output helpers for listener commands."""

import typing as t

import typer

from ...domain.options import ListenerInfo

_COLUMNS = ("ID", "EMITTER", "EVENT", "TYPE", "CATEGORY", "ENABLED")


def _row(info: ListenerInfo) -> tuple[str, ...]:
    return (
        info.id,
        info.emitter,
        info.event_name,
        info.type,
        info.category,
        "yes" if info.enabled else "no",
    )


def display_listeners(infos: t.Sequence[ListenerInfo]) -> None:
    """Print listeners as an aligned table, sorted by category then id."""
    if not infos:
        typer.secho("No listeners found", fg=typer.colors.YELLOW)
        return

    rows = [_row(info) for info in sorted(infos, key=lambda i: (i.category, i.id))]
    widths = [
        max(len(column), *(len(row[index]) for row in rows))
        for index, column in enumerate(_COLUMNS)
    ]

    typer.secho(
        "  ".join(c.ljust(w) for c, w in zip(_COLUMNS, widths)).rstrip(), bold=True
    )
    for row in rows:
        typer.echo("  ".join(v.ljust(w) for v, w in zip(row, widths)).rstrip())


def display_emit_result(event_name: str, listener_count: int) -> None:
    colour = typer.colors.GREEN if listener_count else typer.colors.YELLOW
    typer.secho(
        f"✓ Emitted '{event_name}' to {listener_count} listener(s)", fg=colour
    )


def display_error(message: str) -> None:
    typer.secho(f"✗ {message}", fg=typer.colors.RED)
