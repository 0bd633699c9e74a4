"""Settings management for note-cli."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

DEFAULT_CONFIG_DIR = Path("~/.note-cli").expanduser()
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.json"
DEFAULT_NOTES_DIRNAME = "notes"
FALLBACK_EDITOR = "nano"

KEY_NOTES_DIR = "notesDir"
KEY_EDITOR = "editor"


class ConfigError(RuntimeError):
    """Base error for configuration related issues."""


class MissingConfigError(ConfigError):
    """Raised when the configuration file cannot be found."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Configuration file not found at {path}")
        self.path = path


class InvalidConfigError(ConfigError):
    """Raised when the configuration file is malformed."""


@dataclass(slots=True)
class Settings:
    """In-memory representation of the settings file."""

    notes_dir: Path
    editor: str
    extra: dict[str, Any] = field(default_factory=dict)
    source_path: Path | None = None


def default_settings(config_dir: Path) -> dict[str, Any]:
    """Return the raw JSON payload written on first run.

    ``EDITOR`` is consulted here and nowhere else.
    """

    return {
        KEY_NOTES_DIR: str(config_dir / DEFAULT_NOTES_DIRNAME),
        KEY_EDITOR: os.environ.get("EDITOR") or FALLBACK_EDITOR,
    }


class SettingsStore:
    """Read and write the JSON settings file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = (path or DEFAULT_CONFIG_PATH).expanduser()

    def ensure(self) -> Settings:
        """Create the settings file and notes directory when missing."""

        self.ensure_file()
        settings = self.get()
        try:
            settings.notes_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigError(
                f"Failed to create notes directory '{settings.notes_dir}': {exc}"
            ) from exc
        return settings

    def ensure_file(self) -> bool:
        """Write the default settings file if missing.

        Returns True when the file was created, False if it already existed.
        """

        if self.path.exists():
            return False
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._write_raw(default_settings(self.path.parent))
        except OSError as exc:
            raise ConfigError(f"Failed to create configuration: {exc}") from exc
        return True

    def get(self) -> Settings:
        """Load settings from disk.

        Raises
        ------
        MissingConfigError
            If the file does not exist.
        InvalidConfigError
            If the file is not a JSON object or a known key is malformed.
        """

        raw = self._read_raw()

        notes_dir_raw = raw.get(KEY_NOTES_DIR)
        if not isinstance(notes_dir_raw, str) or not notes_dir_raw.strip():
            raise InvalidConfigError(f"'{KEY_NOTES_DIR}' must be a non-empty string")

        editor = raw.get(KEY_EDITOR)
        if not isinstance(editor, str):
            raise InvalidConfigError(f"'{KEY_EDITOR}' must be a string")

        extra = {
            key: value
            for key, value in raw.items()
            if key not in (KEY_NOTES_DIR, KEY_EDITOR)
        }

        return Settings(
            notes_dir=Path(notes_dir_raw).expanduser(),
            editor=editor,
            extra=extra,
            source_path=self.path,
        )

    def set(self, **partial: Any) -> Settings:
        """Merge ``partial`` over the stored object and persist it.

        Unspecified keys, including ones this tool does not interpret, are
        kept as they are.
        """

        current = self._read_raw()
        current.update(partial)
        try:
            self._write_raw(current)
        except OSError as exc:
            raise ConfigError(f"Failed to write configuration: {exc}") from exc
        return self.get()

    def _read_raw(self) -> dict[str, Any]:
        if not self.path.exists():
            raise MissingConfigError(self.path)

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as exc:
            raise InvalidConfigError(f"Configuration is not valid JSON: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Failed to read configuration: {exc}") from exc

        if not isinstance(raw, dict):
            raise InvalidConfigError("Configuration root must be a JSON object")
        return raw

    def _write_raw(self, payload: dict[str, Any]) -> None:
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
