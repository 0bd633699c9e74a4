from __future__ import annotations

import shlex
import sys
from pathlib import Path

import pytest
from notecli.editor import EditorError, open_editor


def _python_command(code: str) -> str:
    return shlex.join([sys.executable, "-c", code])


def test_open_editor_passes_path_and_waits(tmp_path: Path) -> None:
    target = tmp_path / "note.md"
    target.write_text("", encoding="utf-8")
    command = _python_command(
        "import pathlib, sys; pathlib.Path(sys.argv[1]).write_text('edited')"
    )

    assert open_editor(command, target) == 0
    assert target.read_text(encoding="utf-8") == "edited"


def test_open_editor_returns_exit_code(tmp_path: Path) -> None:
    command = _python_command("raise SystemExit(3)")
    assert open_editor(command, tmp_path / "note.md") == 3


def test_open_editor_unknown_binary(tmp_path: Path) -> None:
    with pytest.raises(EditorError):
        open_editor("definitely-not-an-editor-binary", tmp_path / "note.md")


def test_open_editor_empty_command(tmp_path: Path) -> None:
    with pytest.raises(EditorError):
        open_editor("   ", tmp_path / "note.md")
