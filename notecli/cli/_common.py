"""Shared helpers for note-cli commands."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence

import click

from ..app import AppContext, bootstrap
from ..config import ConfigError

CONTEXT_SETTINGS: dict[str, Any] = {"help_option_names": ["-h", "--help"]}


class NoteCliError(click.ClickException):
    """Shared Click exception wrapper for CLI failures."""


def get_app(ctx: click.Context) -> AppContext:
    """Return a cached AppContext for the current CLI invocation."""

    app: AppContext | None = ctx.obj.get("app")
    if app is not None:
        return app

    config_path_opt: Path | None = ctx.obj.get("config_path")

    try:
        app = bootstrap(config_path_opt)
    except ConfigError as exc:
        raise NoteCliError(str(exc)) from exc

    ctx.obj["app"] = app
    return app


def require_words(ctx: click.Context, words: Sequence[str], option: str) -> list[str]:
    """Return ``words`` or fail with a usage error naming ``option``."""

    if not words:
        raise click.UsageError(f"{option} needs a title or query.", ctx=ctx)
    return list(words)


def warn(message: str) -> None:
    click.secho(f"Error: {message}", fg="red")


def info(message: str) -> None:
    click.secho(message, fg="green")
