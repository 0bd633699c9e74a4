"""Create, edit and daily-note handlers for the note CLI."""

from __future__ import annotations

from typing import Sequence

import click

from ..editor import EditorError, open_editor
from ..services.notes import (
    NoteOutcome,
    create_note,
    daily_note,
    edit_note,
    open_note_file,
)
from ..storage import StorageError
from ..utils.tags import split_tags
from ._common import NoteCliError, get_app, info, warn


def run_new(
    ctx: click.Context,
    title_words: Sequence[str],
    tags: str | None,
    message: str | None,
) -> None:
    """Create a note, opening the editor unless MESSAGE supplied the body."""

    app = get_app(ctx)
    try:
        outcome = create_note(
            app,
            title_words,
            tags=split_tags(tags),
            initial_content=message,
            edit_fn=open_editor,
            warn=warn,
            info=info,
        )
    except (EditorError, StorageError) as exc:
        raise NoteCliError(str(exc)) from exc

    _report(outcome)


def run_edit(ctx: click.Context, title_words: Sequence[str]) -> None:
    """Open a note in the editor, creating it when missing."""

    app = get_app(ctx)
    try:
        outcome = edit_note(
            app, title_words, edit_fn=open_editor, warn=warn, info=info
        )
    except (EditorError, StorageError) as exc:
        raise NoteCliError(str(exc)) from exc

    _report(outcome)


def run_open(ctx: click.Context, name: str) -> None:
    """Open the note file named NAME, as listed in the notes directory."""

    app = get_app(ctx)
    try:
        outcome = open_note_file(app, name, edit_fn=open_editor, warn=warn, info=info)
    except (EditorError, StorageError) as exc:
        raise NoteCliError(str(exc)) from exc

    _report(outcome)


def run_daily(ctx: click.Context) -> None:
    """Open today's note."""

    app = get_app(ctx)
    try:
        outcome = daily_note(app, edit_fn=open_editor, warn=warn, info=info)
    except (EditorError, StorageError) as exc:
        raise NoteCliError(str(exc)) from exc

    _report(outcome)


def _report(outcome: NoteOutcome) -> None:
    if outcome.opened_editor:
        click.secho("Note saved." if outcome.created else "Note updated.", fg="blue")
    elif outcome.created:
        click.secho("Content added to note.", fg="blue")
