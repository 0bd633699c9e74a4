"""Flat-file persistence layer for notes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from .note_header import has_tag

NOTE_SUFFIX = ".md"

_WHITESPACE_RE = re.compile(r"\s+")


class StorageError(RuntimeError):
    """Raised when interacting with the notes directory fails."""


class NoteNotFoundError(StorageError):
    """Raised when a note file does not exist."""

    def __init__(self, title: str) -> None:
        super().__init__(f'Note "{title}" not found.')
        self.title = title


class NoteExistsError(StorageError):
    """Raised when creating a note whose file is already present."""

    def __init__(self, title: str) -> None:
        super().__init__(f'Note "{title}" already exists.')
        self.title = title


@dataclass(frozen=True, slots=True)
class NoteRef:
    """Display title of a note and the file that backs it."""

    title: str
    path: Path


@dataclass(frozen=True, slots=True)
class NoteMatch:
    """A note containing the search query and its matching lines."""

    filename: str
    lines: tuple[str, ...]


def slugify(title: str) -> str:
    """Lower-case ``title`` and collapse whitespace runs into hyphens.

    Titles that differ only by case or spacing share a slug, and therefore a
    file.
    """

    return _WHITESPACE_RE.sub("-", title.lower())


class NoteStore:
    """CRUD operations on the ``*.md`` files of the notes directory."""

    def __init__(self, notes_dir: Path | str) -> None:
        self.notes_dir = Path(notes_dir)

    def resolve_path(self, title_words: Sequence[str] | str) -> NoteRef:
        if isinstance(title_words, str):
            title = title_words
        else:
            title = " ".join(title_words)
        path = self.notes_dir / f"{slugify(title)}{NOTE_SUFFIX}"
        return NoteRef(title=title, path=path)

    def ref_for_name(self, name: str) -> NoteRef:
        """Reference an existing file by its name without the suffix."""

        return NoteRef(title=name, path=self.notes_dir / f"{name}{NOTE_SUFFIX}")

    def exists(self, ref: NoteRef) -> bool:
        return ref.path.is_file()

    def write_new(self, ref: NoteRef, content: str) -> None:
        try:
            with ref.path.open("x", encoding="utf-8", newline="") as fh:
                fh.write(content)
        except FileExistsError:
            raise NoteExistsError(ref.title) from None
        except OSError as exc:
            raise StorageError(f"Failed to write note '{ref.path}': {exc}") from exc

    def read(self, ref: NoteRef) -> str:
        try:
            return _read_raw(ref.path)
        except FileNotFoundError:
            raise NoteNotFoundError(ref.title) from None
        except OSError as exc:
            raise StorageError(f"Failed to read note '{ref.path}': {exc}") from exc

    def remove(self, ref: NoteRef) -> None:
        try:
            ref.path.unlink()
        except FileNotFoundError:
            raise NoteNotFoundError(ref.title) from None
        except OSError as exc:
            raise StorageError(f"Failed to delete note '{ref.path}': {exc}") from exc

    def note_files(self) -> list[Path]:
        """Return note files in directory enumeration order.

        The order is whatever the filesystem reports and is not sorted.
        """

        try:
            entries = list(self.notes_dir.iterdir())
        except OSError as exc:
            raise StorageError(
                f"Failed to list notes directory '{self.notes_dir}': {exc}"
            ) from exc
        return [
            entry
            for entry in entries
            if entry.name.endswith(NOTE_SUFFIX) and entry.is_file()
        ]

    def note_names(self) -> list[str]:
        return [path.name[: -len(NOTE_SUFFIX)] for path in self.note_files()]

    def list_notes(self, tag: str | None = None) -> list[str]:
        """Return note names, keeping only those tagged ``tag`` when given."""

        if not tag:
            return self.note_names()

        names: list[str] = []
        for path in self.note_files():
            if has_tag(self._read_path(path), tag):
                names.append(path.name[: -len(NOTE_SUFFIX)])
        return names

    def search(self, query: str) -> Iterator[NoteMatch]:
        """Yield notes whose content contains ``query`` (case-insensitive)."""

        needle = query.lower()
        if not needle:
            return
        for path in self.note_files():
            content = self._read_path(path)
            if needle not in content.lower():
                continue
            yield NoteMatch(filename=path.name, lines=_matching_lines(content, needle))

    def _read_path(self, path: Path) -> str:
        try:
            return _read_raw(path)
        except OSError as exc:
            raise StorageError(f"Failed to read note '{path}': {exc}") from exc


def _read_raw(path: Path) -> str:
    # newline="" keeps \r\n and lone \r exactly as stored.
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def _matching_lines(content: str, needle: str) -> tuple[str, ...]:
    return tuple(
        line.strip() for line in content.splitlines() if needle in line.lower()
    )
