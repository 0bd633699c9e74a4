"""Application bootstrap and context container for note-cli."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import Settings, SettingsStore
from .storage import NoteStore


@dataclass(slots=True)
class AppContext:
    """Aggregates core services for the CLI lifecycle."""

    settings: Settings
    settings_store: SettingsStore
    store: NoteStore


def bootstrap(config_path: Path | None = None) -> AppContext:
    """Load (creating on first run) the settings and open the notes directory."""

    # Errors are mapped to user-facing messages by the CLI.
    settings_store = SettingsStore(config_path)
    settings = settings_store.ensure()
    return AppContext(
        settings=settings,
        settings_store=settings_store,
        store=NoteStore(settings.notes_dir),
    )
