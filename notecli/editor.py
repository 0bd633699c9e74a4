"""Launch the configured external editor on a note file."""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path


class EditorError(RuntimeError):
    """Raised when the editor process cannot be started."""


def open_editor(editor_command: str, path: Path) -> int:
    """Run ``editor_command`` on ``path`` and wait for it to exit.

    The child inherits the terminal's stdin, stdout and stderr, so the user
    interacts with it exactly as if it had been started by hand. The command
    is split shell-style, which allows settings such as ``"code --wait"``.

    Returns the editor's exit code. There is no timeout.
    """

    try:
        args = shlex.split(editor_command)
    except ValueError as exc:
        raise EditorError(f"Invalid editor command '{editor_command}': {exc}") from exc
    if not args:
        raise EditorError("No editor configured. Use --set-editor to choose one.")

    try:
        with subprocess.Popen([*args, str(path)]) as process:
            return process.wait()
    except OSError as exc:
        raise EditorError(f"Failed to launch editor '{args[0]}': {exc}") from exc
