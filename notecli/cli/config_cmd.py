"""Configuration view/update handler for the note CLI."""

from __future__ import annotations

from pathlib import Path

import click

from ..config import KEY_EDITOR, KEY_NOTES_DIR, ConfigError, SettingsStore
from ._common import NoteCliError, info


def run(
    ctx: click.Context,
    set_editor: str | None,
    set_dir: Path | None,
) -> None:
    """Show the current settings, or update the editor and notes directory."""

    store = SettingsStore(ctx.obj.get("config_path"))

    try:
        created = store.ensure_file()
        if set_editor is not None or set_dir is not None:
            changes: dict[str, str] = {}
            if set_editor is not None:
                changes[KEY_EDITOR] = set_editor
            if set_dir is not None:
                changes[KEY_NOTES_DIR] = str(set_dir.expanduser().resolve())
            store.set(**changes)
            info("Configuration updated.")
            return
        settings = store.get()
    except ConfigError as exc:
        raise NoteCliError(str(exc)) from exc

    if created:
        info(f"Created configuration at {store.path}")

    click.secho("\nCurrent Configuration:", fg="cyan")
    click.echo(f"Editor: {settings.editor}")
    click.echo(f"Notes Directory: {settings.notes_dir}")
    click.echo(f"Config File: {store.path}")
