"""Interactive picker handler, the default when no operation is given."""

from __future__ import annotations

import click

from ..picker import pick_note
from ..storage import StorageError
from . import edit
from ._common import NoteCliError, get_app


def run(ctx: click.Context) -> None:
    """Let the user fuzzy-select an existing note and open it."""

    app = get_app(ctx)

    try:
        titles = app.store.note_names()
    except StorageError as exc:  # pragma: no cover - pass-through
        raise NoteCliError(str(exc)) from exc

    if not titles:
        click.secho(
            'No notes found. Try creating one with "note -n title".', fg="yellow"
        )
        return

    selection = pick_note(titles)
    if selection:
        edit.run_open(ctx, selection)
