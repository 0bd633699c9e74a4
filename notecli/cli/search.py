"""Search handler for the note CLI."""

from __future__ import annotations

from typing import Sequence

import click

from ..storage import StorageError
from ._common import NoteCliError, get_app


def run(ctx: click.Context, query_words: Sequence[str]) -> None:
    """Search notes for a case-insensitive substring and show matching lines."""

    app = get_app(ctx)

    query = " ".join(query_words)
    if not query.strip():
        raise NoteCliError("Search query must not be empty.")

    click.secho(f'Searching for "{query}"...', fg="cyan")

    found = False
    try:
        for match in app.store.search(query):
            found = True
            click.secho(f"\nFound in {match.filename}:", fg="green")
            for line in match.lines:
                click.echo(f"  > {line}")
    except StorageError as exc:  # pragma: no cover - pass-through
        raise NoteCliError(str(exc)) from exc

    if not found:
        click.secho("No matches found.", fg="yellow")
