"""Preview handler for the note CLI."""

from __future__ import annotations

from typing import Sequence

import click

from ..storage import NoteNotFoundError, StorageError
from ._common import NoteCliError, get_app, warn


def run(ctx: click.Context, title_words: Sequence[str]) -> None:
    """Print the raw content of a note between banner lines."""

    app = get_app(ctx)
    ref = app.store.resolve_path(title_words)

    try:
        content = app.store.read(ref)
    except NoteNotFoundError as exc:
        warn(str(exc))
        return
    except StorageError as exc:
        raise NoteCliError(str(exc)) from exc

    click.secho(f"\n--- {ref.title} ---\n", fg="cyan", bold=True)
    click.echo(content)
    click.secho("\n--- End of Preview ---\n", fg="cyan", bold=True)
