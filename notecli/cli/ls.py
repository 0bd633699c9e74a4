"""List handler for the note CLI."""

from __future__ import annotations

import click

from ..storage import StorageError
from ._common import NoteCliError, get_app


def run(ctx: click.Context, tag: str | None) -> None:
    """List note names, optionally only those whose Tags line mentions TAG.

    Names come out in directory enumeration order, which depends on the
    filesystem.
    """

    app = get_app(ctx)

    try:
        if not app.store.note_names():
            click.secho("No notes found.", fg="yellow")
            return
        names = app.store.list_notes(tag=tag)
    except StorageError as exc:  # pragma: no cover - pass-through
        raise NoteCliError(str(exc)) from exc

    click.secho("\nYour Notes:", fg="cyan", bold=True)
    for name in names:
        click.echo(f"- {name}")
