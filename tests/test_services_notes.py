"""Tests for the create/edit/daily workflows."""

from __future__ import annotations

from datetime import date

from conftest import FakeEditor
from notecli.note_header import render_document
from notecli.services.notes import (
    create_note,
    daily_note,
    edit_note,
    open_note_file,
)


def test_create_writes_header_and_opens_editor(app) -> None:
    editor = FakeEditor(append="Body from editor.\n")
    infos: list[str] = []

    outcome = create_note(
        app, ["Project", "Plan"], tags=["work"], edit_fn=editor, info=infos.append
    )

    path = app.store.notes_dir / "project-plan.md"
    assert outcome.ref.path == path
    assert outcome.created and outcome.opened_editor
    assert editor.calls == [("fake-editor", path)]
    content = path.read_text(encoding="utf-8")
    assert content.startswith("# Project Plan\n\nCreated: ")
    assert "Tags: work\n" in content
    assert content.endswith("---\n\nBody from editor.\n")
    assert infos == [f"Note created: {path}"]


def test_create_with_content_skips_editor(app) -> None:
    editor = FakeEditor()

    outcome = create_note(app, ["Groceries"], initial_content="milk", edit_fn=editor)

    assert outcome.created and not outcome.opened_editor
    assert editor.calls == []
    assert app.store.read(outcome.ref).endswith("---\n\nmilk\n")


def test_create_existing_note_opens_it_untouched(app) -> None:
    ref = app.store.resolve_path("Plan")
    app.store.write_new(ref, "keep me\n")
    editor = FakeEditor()
    warnings: list[str] = []

    outcome = create_note(
        app, ["Plan"], initial_content="new", edit_fn=editor, warn=warnings.append
    )

    assert not outcome.created and outcome.opened_editor
    assert editor.calls == [("fake-editor", ref.path)]
    assert app.store.read(ref) == "keep me\n"
    assert warnings == ['Note "Plan" already exists. Opening for edit...']


def test_edit_missing_note_creates_it(app) -> None:
    editor = FakeEditor()
    warnings: list[str] = []

    outcome = edit_note(app, ["Fresh", "Idea"], edit_fn=editor, warn=warnings.append)

    assert outcome.created and outcome.opened_editor
    assert warnings == ['Note "Fresh Idea" not found. Creating it...']
    assert app.store.read(outcome.ref).startswith("# Fresh Idea\n")


def test_edit_warns_on_nonzero_editor_exit(app) -> None:
    ref = app.store.resolve_path("Plan")
    app.store.write_new(ref, "x")
    warnings: list[str] = []

    outcome = edit_note(app, ["Plan"], edit_fn=FakeEditor(exit_code=2), warn=warnings.append)

    assert outcome.exit_code == 2
    assert warnings == ["Editor exited with status 2."]


def test_daily_note_uses_iso_date_title(app) -> None:
    editor = FakeEditor()

    outcome = daily_note(app, today=date(2024, 3, 9), edit_fn=editor)

    assert outcome.ref.title == "2024-03-09"
    assert outcome.ref.path.name == "2024-03-09.md"
    assert app.store.read(outcome.ref).startswith("# 2024-03-09\n")


def test_create_then_read_returns_exact_written_text(app, monkeypatch) -> None:
    monkeypatch.setattr(
        "notecli.note_header.to_user_friendly_local", lambda dt=None: "2024-01-02 03:04:05"
    )
    body = "line one\r\nline two\rline three"

    outcome = create_note(app, ["Round", "Trip"], initial_content=body)

    expected = render_document("Round Trip", None, body)
    assert app.store.read(outcome.ref) == expected
    assert outcome.ref.path.read_bytes() == expected.encode("utf-8")


def test_open_note_file_uses_listed_name_verbatim(app) -> None:
    path = app.store.notes_dir / "My Note.md"
    path.write_text("hand made\n", encoding="utf-8")
    editor = FakeEditor()

    outcome = open_note_file(app, "My Note", edit_fn=editor)

    assert not outcome.created
    assert editor.calls == [("fake-editor", path)]
    assert not (app.store.notes_dir / "my-note.md").exists()
