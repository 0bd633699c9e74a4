"""High-level note workflows used by the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Iterable, Sequence

from ..app import AppContext
from ..editor import open_editor as default_open_editor
from ..note_header import render_document
from ..storage import NoteExistsError, NoteRef
from ..utils.datetime_fmt import today_iso

WarnFunc = Callable[[str], None]
EditFunc = Callable[[str, Path], int]


@dataclass(slots=True)
class NoteOutcome:
    """What a create/edit workflow did to a note."""

    ref: NoteRef
    created: bool = False
    opened_editor: bool = False
    exit_code: int | None = None


def create_note(
    ctx: AppContext,
    title_words: Sequence[str],
    *,
    tags: Iterable[str] | None = None,
    initial_content: str | None = None,
    edit_fn: EditFunc = default_open_editor,
    warn: WarnFunc | None = None,
    info: WarnFunc | None = None,
) -> NoteOutcome:
    """Create a note with a generated header.

    An existing note is never overwritten; it is opened in the editor
    instead. The editor is launched on a new note only when no
    ``initial_content`` was supplied.
    """

    ref = ctx.store.resolve_path(title_words)
    if ctx.store.exists(ref):
        return _reopen_existing(ctx, ref, edit_fn=edit_fn, warn=warn)

    document = render_document(ref.title, tags, initial_content)
    try:
        ctx.store.write_new(ref, document)
    except NoteExistsError:
        # Someone else created it between the check and the write.
        return _reopen_existing(ctx, ref, edit_fn=edit_fn, warn=warn)

    _emit(info, f"Note created: {ref.path}")

    if initial_content:
        return NoteOutcome(ref=ref, created=True)

    outcome = _launch(ctx, ref, edit_fn=edit_fn, warn=warn)
    outcome.created = True
    return outcome


def edit_note(
    ctx: AppContext,
    title_words: Sequence[str],
    *,
    edit_fn: EditFunc = default_open_editor,
    warn: WarnFunc | None = None,
    info: WarnFunc | None = None,
) -> NoteOutcome:
    """Open a note in the editor, creating it first when it does not exist."""

    ref = ctx.store.resolve_path(title_words)
    if not ctx.store.exists(ref):
        _emit(warn, f'Note "{ref.title}" not found. Creating it...')
        return create_note(ctx, title_words, edit_fn=edit_fn, warn=warn, info=info)

    return _launch(ctx, ref, edit_fn=edit_fn, warn=warn)


def open_note_file(
    ctx: AppContext,
    name: str,
    *,
    edit_fn: EditFunc = default_open_editor,
    warn: WarnFunc | None = None,
    info: WarnFunc | None = None,
) -> NoteOutcome:
    """Open the note stored as ``<name>.md`` without re-deriving its slug.

    Used for names taken from the directory listing, which may belong to
    files created by hand (``My Note.md``).
    """

    ref = ctx.store.ref_for_name(name)
    if not ctx.store.exists(ref):
        return edit_note(ctx, [name], edit_fn=edit_fn, warn=warn, info=info)
    return _launch(ctx, ref, edit_fn=edit_fn, warn=warn)


def daily_note(
    ctx: AppContext,
    *,
    today: date | None = None,
    edit_fn: EditFunc = default_open_editor,
    warn: WarnFunc | None = None,
    info: WarnFunc | None = None,
) -> NoteOutcome:
    """Open (or create) the note titled with today's ISO date."""

    return edit_note(ctx, [today_iso(today)], edit_fn=edit_fn, warn=warn, info=info)


def _reopen_existing(
    ctx: AppContext,
    ref: NoteRef,
    *,
    edit_fn: EditFunc,
    warn: WarnFunc | None,
) -> NoteOutcome:
    _emit(warn, f'Note "{ref.title}" already exists. Opening for edit...')
    return _launch(ctx, ref, edit_fn=edit_fn, warn=warn)


def _launch(
    ctx: AppContext,
    ref: NoteRef,
    *,
    edit_fn: EditFunc,
    warn: WarnFunc | None,
) -> NoteOutcome:
    exit_code = edit_fn(ctx.settings.editor, ref.path)
    if exit_code != 0:
        _emit(warn, f"Editor exited with status {exit_code}.")
    return NoteOutcome(ref=ref, opened_editor=True, exit_code=exit_code)


def _emit(func: WarnFunc | None, message: str) -> None:
    if func is not None:
        func(message)
