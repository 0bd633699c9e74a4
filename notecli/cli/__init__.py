"""note-cli command-line interface."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import click

from . import config_cmd, delete, edit, ls, pick, preview, search
from ._common import CONTEXT_SETTINGS, NoteCliError, require_words

__all__ = ["cli", "main", "NoteCliError"]


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-n", "--new", "new", is_flag=True, help="Create a new note titled WORDS."
)
@click.option(
    "-e", "--edit", "edit_", is_flag=True, help="Edit the note titled WORDS."
)
@click.option(
    "-s", "--search", "search_", is_flag=True, help="Search notes for WORDS."
)
@click.option(
    "-l",
    "--list",
    "list_tag",
    is_flag=False,
    flag_value="",
    default=None,
    metavar="[TAG]",
    help="List all notes (optionally filter by tag).",
)
@click.option(
    "-t", "--tags", default=None, help="Comma-separated tags for the new note."
)
@click.option(
    "-m",
    "--message",
    default=None,
    help="Initial body for the new note (skips the editor).",
)
@click.option("-d", "--daily", is_flag=True, help="Open/create today's note.")
@click.option(
    "-p", "--preview", "preview_", is_flag=True, help="Quick preview of a note."
)
@click.option(
    "--rm", "remove", is_flag=True, help="Delete the note titled WORDS."
)
@click.option(
    "-y", "--yes", "assume_yes", is_flag=True, help="Skip delete confirmation."
)
@click.option(
    "-c",
    "--config",
    "show_config",
    is_flag=True,
    help="View current configuration.",
)
@click.option(
    "--set-editor", default=None, metavar="CMD", help="Update default editor."
)
@click.option(
    "--set-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Update notes directory.",
)
@click.option(
    "--config-file",
    "config_path_opt",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Path to the settings JSON file.",
)
@click.version_option(package_name="note-cli", prog_name="note")
@click.argument("words", nargs=-1)
@click.pass_context
def cli(
    ctx: click.Context,
    new: bool,
    edit_: bool,
    search_: bool,
    list_tag: str | None,
    tags: str | None,
    message: str | None,
    daily: bool,
    preview_: bool,
    remove: bool,
    assume_yes: bool,
    show_config: bool,
    set_editor: str | None,
    set_dir: Path | None,
    config_path_opt: Path | None,
    words: tuple[str, ...],
) -> None:
    """Take plain-text notes from the terminal.

    With no options, WORDS name a note to edit; with nothing at all, an
    interactive picker lists existing notes.
    """

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path_opt

    # Exactly one branch runs, in this order.
    if new:
        edit.run_new(ctx, require_words(ctx, words, "--new"), tags, message)
    elif edit_:
        edit.run_edit(ctx, require_words(ctx, words, "--edit"))
    elif daily:
        edit.run_daily(ctx)
    elif preview_:
        preview.run(ctx, require_words(ctx, words, "--preview"))
    elif remove:
        delete.run(ctx, require_words(ctx, words, "--rm"), assume_yes)
    elif search_:
        search.run(ctx, require_words(ctx, words, "--search"))
    elif list_tag is not None:
        ls.run(ctx, list_tag or None)
    elif show_config or set_editor is not None or set_dir is not None:
        config_cmd.run(ctx, set_editor, set_dir)
    elif words:
        edit.run_edit(ctx, words)
    else:
        pick.run(ctx)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(argv) if argv is not None else None
    try:
        return cli.main(args=args, prog_name="note", standalone_mode=False) or 0
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except SystemExit as exc:
        return int(exc.code or 0)
