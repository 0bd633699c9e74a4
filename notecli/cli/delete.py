"""Delete handler for the note CLI."""

from __future__ import annotations

from typing import Sequence

import click

from ..storage import NoteNotFoundError, StorageError
from ._common import NoteCliError, get_app, info, warn


def run(ctx: click.Context, title_words: Sequence[str], assume_yes: bool) -> None:
    """Delete a note after confirmation; declining is a silent no-op."""

    app = get_app(ctx)
    ref = app.store.resolve_path(title_words)

    if not app.store.exists(ref):
        warn(f'Note "{ref.title}" not found.')
        return

    if not assume_yes:
        confirm = click.confirm(
            f'Are you sure you want to delete "{ref.title}"?',
            default=False,
            show_default=True,
        )
        if not confirm:
            return

    try:
        app.store.remove(ref)
    except NoteNotFoundError as exc:
        warn(str(exc))
        return
    except StorageError as exc:
        raise NoteCliError(str(exc)) from exc

    info(f'Note "{ref.title}" deleted.')
