from __future__ import annotations

import json
from pathlib import Path

import pytest
from notecli.app import AppContext, bootstrap


def write_settings(base_dir: Path, **extra: object) -> Path:
    config_path = base_dir / "config" / "config.json"
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"notesDir": str(base_dir / "notes"), "editor": "fake-editor", **extra}
    config_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return config_path


class FakeEditor:
    """Stands in for ``open_editor``; records calls and optionally appends text."""

    def __init__(self, append: str = "", exit_code: int = 0) -> None:
        self.calls: list[tuple[str, Path]] = []
        self.append = append
        self.exit_code = exit_code

    def __call__(self, editor_command: str, path: Path) -> int:
        self.calls.append((editor_command, Path(path)))
        if self.append:
            with Path(path).open("a", encoding="utf-8") as fh:
                fh.write(self.append)
        return self.exit_code


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    return write_settings(tmp_path)


@pytest.fixture
def notes_dir(tmp_path: Path, config_path: Path) -> Path:
    path = tmp_path / "notes"
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def app(config_path: Path, notes_dir: Path) -> AppContext:
    return bootstrap(config_path)
